"""
Category tree validation.

Every check here is a pure function of its arguments and a
``CategoryTreeSnapshot``. They raise the categories domain exceptions and
return ``None`` when the proposed mutation keeps the tree well-formed:

- a subcategory's parent is always a main category (two levels at most),
- no category is its own ancestor,
- sibling names are unique (case-sensitive),
- a category with products or subcategories is never deleted.
"""
from typing import Optional

from shared.domain.exceptions import ValidationError

from .exceptions import (
    CategoryHasDependentsError,
    CategoryNotFoundError,
    DuplicateCategoryNameError,
    InvalidParentCategoryError,
)
from .snapshot import CategoryTreeSnapshot

ROOT_LEVEL = 0
SUBCATEGORY_LEVEL = 1


def compute_level(parent_id: Optional[int]) -> int:
    """Level of a category given its parent."""
    return ROOT_LEVEL if parent_id is None else SUBCATEGORY_LEVEL


def _require(category_id, snapshot: CategoryTreeSnapshot):
    node = snapshot.get(category_id)
    if node is None:
        raise CategoryNotFoundError(category_id=category_id)
    return node


def _validate_parent(parent_id, snapshot: CategoryTreeSnapshot) -> None:
    if parent_id is None:
        return
    parent = snapshot.get(parent_id)
    if parent is None:
        raise InvalidParentCategoryError(
            f"Parent category '{parent_id}' does not exist",
            parent_id=parent_id,
        )
    if not parent.is_root:
        raise InvalidParentCategoryError(
            f"Category '{parent.name}' is already a subcategory; "
            f"categories can only be nested two levels deep",
            parent_id=parent_id,
        )


def validate_create(name: str, parent_id: Optional[int], snapshot: CategoryTreeSnapshot) -> None:
    """Check that a new category may be created under parent_id."""
    if not name or not name.strip():
        raise ValidationError("Category name is required", field="name")
    _validate_parent(parent_id, snapshot)
    if snapshot.has_sibling_named(name, parent_id):
        raise DuplicateCategoryNameError(name=name, parent_id=parent_id)


def validate_rename(category_id, new_name: str, snapshot: CategoryTreeSnapshot) -> None:
    """Check that a category may take new_name."""
    node = _require(category_id, snapshot)
    if not new_name or not new_name.strip():
        raise ValidationError("Category name is required", field="name")
    if new_name == node.name:
        return
    if snapshot.has_sibling_named(new_name, node.parent_id, exclude_id=category_id):
        raise DuplicateCategoryNameError(name=new_name, parent_id=node.parent_id)


def validate_delete(category_id, dependent_product_count: int, dependent_child_count: int) -> None:
    """Check that nothing depends on the category."""
    if dependent_product_count > 0 or dependent_child_count > 0:
        raise CategoryHasDependentsError(
            category_id=category_id,
            product_count=dependent_product_count,
            child_count=dependent_child_count,
        )


def validate_move(category_id, new_parent_id: Optional[int], snapshot: CategoryTreeSnapshot) -> None:
    """Check that a category may be reparented under new_parent_id."""
    node = _require(category_id, snapshot)
    if new_parent_id == category_id:
        raise InvalidParentCategoryError(
            "A category cannot be its own parent",
            parent_id=new_parent_id,
        )
    if new_parent_id is not None and snapshot.creates_cycle(category_id, new_parent_id):
        raise InvalidParentCategoryError(
            f"Moving category '{node.name}' under '{new_parent_id}' would create a cycle",
            parent_id=new_parent_id,
        )
    _validate_parent(new_parent_id, snapshot)
    if new_parent_id is not None and snapshot.children_of(category_id):
        raise InvalidParentCategoryError(
            f"Category '{node.name}' has subcategories and cannot become a subcategory itself",
            parent_id=new_parent_id,
        )
    if new_parent_id != node.parent_id and snapshot.has_sibling_named(
        node.name, new_parent_id, exclude_id=category_id
    ):
        raise DuplicateCategoryNameError(name=node.name, parent_id=new_parent_id)


def validate_merge(source_id, target_id, snapshot: CategoryTreeSnapshot) -> None:
    """Check that source can be folded into target."""
    source = _require(source_id, snapshot)
    target = _require(target_id, snapshot)
    if source_id == target_id:
        raise InvalidParentCategoryError(
            "A category cannot be merged into itself",
            parent_id=target_id,
        )
    if target.parent_id == source_id:
        raise InvalidParentCategoryError(
            f"Cannot merge '{source.name}' into its own subcategory '{target.name}'",
            parent_id=target_id,
        )
    if not target.is_root and snapshot.children_of(source_id):
        raise InvalidParentCategoryError(
            f"Cannot move the subcategories of '{source.name}' under "
            f"subcategory '{target.name}'",
            parent_id=target_id,
        )
