"""
Categories module exceptions.
"""
from shared.domain.exceptions import (
    BusinessRuleViolationError,
    ConflictError,
    EntityNotFoundError,
    ValidationError,
)


class CategoryNotFoundError(EntityNotFoundError):
    """Raised when a category does not exist or cannot be used."""

    def __init__(self, category_id, reason: str = "missing"):
        if reason == "inactive":
            message = f"Category '{category_id}' is inactive"
        else:
            message = f"Category '{category_id}' not found"
        super().__init__(
            entity_name="Category",
            entity_id=category_id,
            code="CATEGORY_NOT_FOUND",
            message=message,
        )
        self.category_id = category_id
        self.reason = reason


class DuplicateCategoryNameError(ConflictError):
    """Raised when a sibling with the same name already exists."""

    def __init__(self, name: str, parent_id=None):
        if parent_id is None:
            message = f"A main category named '{name}' already exists"
        else:
            message = f"A subcategory named '{name}' already exists under category '{parent_id}'"
        super().__init__(
            message=message,
            code="DUPLICATE_CATEGORY_NAME",
            details={'name': name, 'parent_id': parent_id},
        )
        self.name = name
        self.parent_id = parent_id


class InvalidParentCategoryError(ValidationError):
    """Raised when a parent would break the two-level hierarchy."""

    def __init__(self, message: str, parent_id=None):
        super().__init__(message=message, field="parent_id", code="INVALID_PARENT_CATEGORY")
        self.parent_id = parent_id


class CategoryHasDependentsError(ConflictError):
    """Raised when a category still has products or subcategories."""

    def __init__(self, category_id, product_count: int, child_count: int):
        super().__init__(
            message=(
                f"Category '{category_id}' cannot be deleted: "
                f"{product_count} product(s) and {child_count} subcategory(ies) depend on it"
            ),
            code="CATEGORY_HAS_DEPENDENTS",
            details={
                'category_id': category_id,
                'product_count': product_count,
                'child_count': child_count,
            },
        )
        self.category_id = category_id
        self.product_count = product_count
        self.child_count = child_count


class NoBrandMatchError(BusinessRuleViolationError):
    """Raised when no brand keyword matches a free-text model name."""

    def __init__(self, text: str):
        super().__init__(
            message=f"No known brand found in '{text}'",
            rule="brand_inference",
            code="NO_BRAND_MATCH",
        )
        self.text = text
