"""
Product persistence used by the category subsystem.
"""
from typing import List, Optional

from .exceptions import ProductNotFoundError
from .models import ProductModel


class ProductStore:
    """Product rows as seen by category management."""

    def get_by_id(self, product_id: int) -> Optional[ProductModel]:
        """Get product by ID."""
        try:
            return ProductModel.objects.select_related('category').get(id=product_id)
        except ProductModel.DoesNotExist:
            return None

    def count_by_category_id(self, category_id: int) -> int:
        """Count products filed directly under a category."""
        return ProductModel.objects.filter(category_id=category_id).count()

    def list_by_category_id(self, category_id: int) -> List[ProductModel]:
        """Get products filed directly under a category."""
        return list(ProductModel.objects.filter(category_id=category_id))

    def list_uncategorized(self) -> List[ProductModel]:
        """Get products without a category."""
        return list(ProductModel.objects.filter(category__isnull=True).order_by('id'))

    def reassign_category(self, product_id: int, new_category_id: Optional[int]) -> None:
        """Point a single product at another category."""
        updated = ProductModel.objects.filter(id=product_id).update(category_id=new_category_id)
        if not updated:
            raise ProductNotFoundError(product_id=product_id)

    def reassign_all(self, source_category_id: int, target_category_id: int) -> int:
        """Move every product of one category to another."""
        return ProductModel.objects.filter(category_id=source_category_id).update(
            category_id=target_category_id
        )
