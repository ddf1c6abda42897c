"""
Django ORM persistence for categories.
"""
from typing import List, Optional

from django.db import IntegrityError, transaction

from .exceptions import CategoryNotFoundError, DuplicateCategoryNameError
from .models import CategoryModel
from .snapshot import CategoryNode, CategoryTreeSnapshot


class CategoryStore:
    """Read/write primitives over the categories table. Never cascades."""

    def get_by_id(self, category_id: int) -> Optional[CategoryModel]:
        """Get category by ID."""
        try:
            return CategoryModel.objects.select_related('parent').get(id=category_id)
        except CategoryModel.DoesNotExist:
            return None

    def list_roots(self, include_inactive: bool = True) -> List[CategoryModel]:
        """Get main categories ordered by name."""
        queryset = CategoryModel.objects.filter(parent__isnull=True)
        if not include_inactive:
            queryset = queryset.filter(is_active=True)
        return list(queryset.order_by('name'))

    def list_children(self, parent_id: int, include_inactive: bool = True) -> List[CategoryModel]:
        """Get direct children of a category ordered by name."""
        queryset = CategoryModel.objects.filter(parent_id=parent_id)
        if not include_inactive:
            queryset = queryset.filter(is_active=True)
        return list(queryset.order_by('name'))

    def find_child_by_name(self, parent_id: Optional[int], name: str) -> Optional[CategoryModel]:
        """Find a sibling by exact name."""
        return CategoryModel.objects.filter(parent_id=parent_id, name=name).first()

    def count_children(self, category_id: int) -> int:
        """Count subcategories of a category, active or not."""
        return CategoryModel.objects.filter(parent_id=category_id).count()

    def insert(
        self,
        name: str,
        parent_id: Optional[int] = None,
        level: int = 0,
        description: Optional[str] = None,
        is_active: bool = True,
    ) -> CategoryModel:
        """Persist a new category and return it with its id."""
        if CategoryModel.objects.filter(name=name, parent_id=parent_id).exists():
            raise DuplicateCategoryNameError(name=name, parent_id=parent_id)
        try:
            with transaction.atomic():
                return CategoryModel.objects.create(
                    name=name,
                    parent_id=parent_id,
                    level=level,
                    description=description,
                    is_active=is_active,
                )
        except IntegrityError:
            raise DuplicateCategoryNameError(name=name, parent_id=parent_id)

    def update(self, category_id: int, **fields) -> CategoryModel:
        """Update the given fields of a category."""
        category = self.get_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id=category_id)
        if not fields:
            return category

        for key, value in fields.items():
            setattr(category, key, value)
        try:
            with transaction.atomic():
                category.save(update_fields=[*fields.keys(), 'updated_at'])
        except IntegrityError:
            raise DuplicateCategoryNameError(
                name=fields.get('name', category.name),
                parent_id=category.parent_id,
            )
        return category

    def remove(self, category_id: int) -> None:
        """Delete a category row."""
        deleted, _ = CategoryModel.objects.filter(id=category_id).delete()
        if not deleted:
            raise CategoryNotFoundError(category_id=category_id)

    def reparent_children(self, source_id: int, target_id: int) -> int:
        """Move every subcategory of source under target."""
        return CategoryModel.objects.filter(parent_id=source_id).update(
            parent_id=target_id,
            level=1,
        )

    def snapshot(self) -> CategoryTreeSnapshot:
        """Take an immutable copy of the whole tree."""
        rows = CategoryModel.objects.values_list('id', 'name', 'parent_id', 'level', 'is_active')
        return CategoryTreeSnapshot.from_nodes(
            CategoryNode(
                id=row_id,
                name=name,
                parent_id=parent_id,
                level=level,
                is_active=is_active,
            )
            for row_id, name, parent_id, level, is_active in rows
        )
