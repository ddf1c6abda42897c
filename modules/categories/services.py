"""
Categories business logic services.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from django.db import transaction
from django.db.models import Count

from modules.products.store import ProductStore
from .exceptions import CategoryNotFoundError
from .models import CategoryModel
from .store import CategoryStore
from .validators import (
    compute_level,
    validate_create,
    validate_delete,
    validate_merge,
    validate_move,
    validate_rename,
)

logger = logging.getLogger(__name__)


@dataclass
class MergeResult:
    """What a merge moved."""
    source_id: int
    target_id: int
    products_moved: int = 0
    subcategories_moved: int = 0
    subcategories_merged: int = 0


class CategoryService:
    """Service for category operations."""

    def __init__(self, store: CategoryStore = None, product_store: ProductStore = None):
        self.store = store or CategoryStore()
        self.product_store = product_store or ProductStore()

    def get_category_by_id(self, category_id: int) -> Optional[CategoryModel]:
        """Get category by ID."""
        return self.store.get_by_id(category_id)

    def get_category(self, category_id: int) -> CategoryModel:
        """Get category by ID or raise CategoryNotFoundError."""
        category = self.store.get_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id=category_id)
        return category

    def list_categories(self, include_inactive: bool = False) -> List[CategoryModel]:
        """Get all categories with their product counts."""
        queryset = CategoryModel.objects.annotate(product_count=Count('products'))
        if not include_inactive:
            queryset = queryset.filter(is_active=True)
        return list(queryset.order_by('level', 'name'))

    def get_root_categories(self, include_inactive: bool = False) -> List[CategoryModel]:
        """Get main categories."""
        return self.store.list_roots(include_inactive=include_inactive)

    def get_subcategories(self, parent_id: int, include_inactive: bool = False) -> List[CategoryModel]:
        """Get direct children of a category."""
        self.get_category(parent_id)
        return self.store.list_children(parent_id, include_inactive=include_inactive)

    def get_category_tree(self, include_inactive: bool = False) -> List[Dict[str, Any]]:
        """Get main categories with their subcategories nested."""
        categories = self.list_categories(include_inactive=include_inactive)
        children: Dict[int, List[CategoryModel]] = {}
        for category in categories:
            if category.parent_id is not None:
                children.setdefault(category.parent_id, []).append(category)

        return [
            self._build_tree_node(category, children.get(category.id, []))
            for category in categories
            if category.parent_id is None
        ]

    def product_count(self, category_id: int) -> int:
        """Count products filed directly under a category."""
        return self.product_store.count_by_category_id(category_id)

    @transaction.atomic
    def create_category(
        self,
        name: str,
        parent_id: Optional[int] = None,
        description: Optional[str] = None,
    ) -> CategoryModel:
        """Create a new category."""
        validate_create(name, parent_id, self.store.snapshot())

        category = self.store.insert(
            name=name,
            parent_id=parent_id,
            level=compute_level(parent_id),
            description=description,
            is_active=True,
        )

        logger.info(f"Created category: {category.name} ({category.id}), level {category.level}")
        return category

    @transaction.atomic
    def rename_category(self, category_id: int, new_name: str) -> CategoryModel:
        """Rename a category."""
        validate_rename(category_id, new_name, self.store.snapshot())

        category = self.store.update(category_id, name=new_name)
        logger.info(f"Renamed category {category_id} to {new_name}")
        return category

    @transaction.atomic
    def update_category(
        self,
        category_id: int,
        name: Optional[str] = None,
        description: Optional[str] = None,
        is_active: Optional[bool] = None,
    ) -> CategoryModel:
        """Update name, description and active flag of a category."""
        category = self.get_category(category_id)

        if name is not None and name != category.name:
            category = self.rename_category(category_id, name)
        if description is not None:
            category = self.store.update(category_id, description=description)
        if is_active is not None and is_active != category.is_active:
            if is_active:
                category = self.activate_category(category_id)
            else:
                category = self.deactivate_category(category_id)

        return category

    def deactivate_category(self, category_id: int) -> CategoryModel:
        """Hide a category from listings; dependents are untouched."""
        category = self.store.update(category_id, is_active=False)
        logger.info(f"Deactivated category: {category.name} ({category_id})")
        return category

    def activate_category(self, category_id: int) -> CategoryModel:
        """Bring a deactivated category back."""
        category = self.store.update(category_id, is_active=True)
        logger.info(f"Activated category: {category.name} ({category_id})")
        return category

    @transaction.atomic
    def move_category(self, category_id: int, new_parent_id: Optional[int]) -> CategoryModel:
        """Reparent a category. None makes it a main category."""
        validate_move(category_id, new_parent_id, self.store.snapshot())

        category = self.store.update(
            category_id,
            parent_id=new_parent_id,
            level=compute_level(new_parent_id),
        )
        logger.info(f"Moved category {category_id} under {new_parent_id}")
        return category

    @transaction.atomic
    def delete_category(self, category_id: int) -> None:
        """Delete a category that has no products and no subcategories."""
        self.get_category(category_id)

        validate_delete(
            category_id,
            dependent_product_count=self.product_store.count_by_category_id(category_id),
            dependent_child_count=self.store.count_children(category_id),
        )

        self.store.remove(category_id)
        logger.info(f"Deleted category: {category_id}")

    @transaction.atomic
    def merge_categories(self, source_id: int, target_id: int) -> MergeResult:
        """
        Fold source into target and delete source.

        Subcategories of source move under target. When target already has a
        subcategory with the same name, the two are merged instead. Products
        follow their category. Every write happens in one transaction, so a
        failure at any step leaves the tree exactly as it was.
        """
        snapshot = self.store.snapshot()
        validate_merge(source_id, target_id, snapshot)

        result = MergeResult(source_id=source_id, target_id=target_id)
        target_children = {child.name: child.id for child in snapshot.children_of(target_id)}

        for child in snapshot.children_of(source_id):
            twin_id = target_children.get(child.name)
            if twin_id is None:
                continue
            result.products_moved += self.product_store.reassign_all(child.id, twin_id)
            self.store.remove(child.id)
            result.subcategories_merged += 1

        result.subcategories_moved = self.store.reparent_children(source_id, target_id)
        result.products_moved += self.product_store.reassign_all(source_id, target_id)
        self.store.remove(source_id)

        logger.info(
            f"Merged category {source_id} into {target_id}: "
            f"{result.products_moved} products, {result.subcategories_moved} subcategories moved, "
            f"{result.subcategories_merged} subcategories merged"
        )
        return result

    @transaction.atomic
    def repair_levels(self) -> int:
        """Rewrite levels that disagree with the parent link."""
        fixed = 0
        for node in self.store.snapshot().nodes.values():
            expected = compute_level(node.parent_id)
            if node.level != expected:
                self.store.update(node.id, level=expected)
                fixed += 1
        if fixed:
            logger.info(f"Repaired level of {fixed} categories")
        return fixed

    @transaction.atomic
    def remove_empty_categories(self, keep_names: Iterable[str] = ()) -> List[str]:
        """Delete categories with no products and no subcategories."""
        keep = set(keep_names)
        snapshot = self.store.snapshot()
        subcategories = [node for node in snapshot.nodes.values() if not node.is_root]
        removed = []

        for node in sorted(subcategories, key=lambda n: n.id) + snapshot.roots():
            if node.name in keep:
                continue
            if self.product_store.count_by_category_id(node.id) or self.store.count_children(node.id):
                continue
            self.store.remove(node.id)
            removed.append(node.name)
            logger.info(f"Removed empty category: {node.name} ({node.id})")

        return removed

    def _build_tree_node(
        self,
        category: CategoryModel,
        children: List[CategoryModel],
    ) -> Dict[str, Any]:
        """Build a tree node for category."""
        return {
            'id': category.id,
            'name': category.name,
            'description': category.description,
            'level': category.level,
            'is_active': category.is_active,
            'product_count': category.product_count,
            'children': [
                {
                    'id': child.id,
                    'name': child.name,
                    'description': child.description,
                    'level': child.level,
                    'is_active': child.is_active,
                    'product_count': child.product_count,
                    'children': [],
                }
                for child in children
            ],
        }
