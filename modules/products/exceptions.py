"""
Products module exceptions.
"""
from shared.domain.exceptions import EntityNotFoundError


class ProductNotFoundError(EntityNotFoundError):
    """Raised when a product is not found."""

    def __init__(self, product_id):
        super().__init__(
            entity_name="Product",
            entity_id=product_id,
            code="PRODUCT_NOT_FOUND",
            message=f"Product '{product_id}' not found",
        )
        self.product_id = product_id
