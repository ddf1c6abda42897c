"""
Products module service layer.
"""
import logging
from decimal import Decimal
from typing import List, Optional

from django.db import transaction

from .categorizer import ProductCategorizer
from .exceptions import ProductNotFoundError
from .models import ProductModel
from .store import ProductStore

logger = logging.getLogger(__name__)


class ProductService:
    """
    Product business logic service.
    """

    def __init__(self, product_store: ProductStore = None, categorizer: ProductCategorizer = None):
        self.product_store = product_store or ProductStore()
        self.categorizer = categorizer or ProductCategorizer(product_store=self.product_store)

    def get_product_by_id(self, product_id: int) -> Optional[ProductModel]:
        """Get product by ID."""
        return self.product_store.get_by_id(product_id)

    def get_product(self, product_id: int) -> ProductModel:
        """Get product by ID or raise ProductNotFoundError."""
        product = self.product_store.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id=product_id)
        return product

    def get_all_products(
        self,
        category_id: int = None,
        offset: int = 0,
        limit: int = 20,
    ) -> List[ProductModel]:
        """Get active products, optionally restricted to one category."""
        queryset = ProductModel.objects.select_related('category').filter(is_active=True)
        if category_id:
            queryset = queryset.filter(category_id=category_id)
        return list(queryset.order_by('-created_at')[offset:offset + limit])

    @transaction.atomic
    def create_product(
        self,
        name: str,
        price: Decimal,
        model: str = '',
        brand: str = '',
        description: str = '',
        stock: int = 0,
        condition: str = ProductModel.CONDITION_NEW,
        category_id: int = None,
        main_category_id: int = None,
    ) -> ProductModel:
        """
        Create a new product.

        An explicit category_id wins. Otherwise, when main_category_id is
        given, the product is filed under the brand subcategory inferred from
        its model name (or under the main category when no brand is found).
        """
        product = ProductModel.objects.create(
            name=name,
            price=price,
            model=model or '',
            brand=brand or '',
            description=description or '',
            stock=stock,
            condition=condition,
        )

        if category_id:
            self.categorizer.assign(product.id, category_id)
        elif main_category_id:
            self.categorizer.categorize_product(product.id, main_category_id)

        logger.info(f"Created product: {product.name} ({product.id})")
        return self.get_product(product.id)

    def set_category(self, product_id: int, category_id: int) -> ProductModel:
        """Manually file a product under a category."""
        self.categorizer.assign(product_id, category_id)
        return self.get_product(product_id)
