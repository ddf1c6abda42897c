"""
Product categorization and brand inference.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from django.db import transaction

from modules.categories.exceptions import (
    CategoryNotFoundError,
    InvalidParentCategoryError,
    NoBrandMatchError,
)
from modules.categories.models import CategoryModel
from modules.categories.services import CategoryService
from shared.domain.exceptions import DomainException
from .exceptions import ProductNotFoundError
from .store import ProductStore

logger = logging.getLogger(__name__)


# Checked top to bottom; the first brand with a matching keyword wins.
BRAND_KEYWORDS: List[Tuple[str, Tuple[str, ...]]] = [
    ('Apple', ('iphone', 'ipad', 'macbook', 'airpods', 'apple')),
    ('Samsung', ('galaxy', 'samsung')),
    ('Honor', ('honor',)),
    ('Huawei', ('huawei',)),
    ('Google', ('pixel', 'google')),
    ('OnePlus', ('oneplus', 'one plus')),
    ('Poco', ('poco',)),
    ('Xiaomi', ('xiaomi', 'redmi')),
    ('Oppo', ('oppo',)),
    ('Asus', ('asus', 'vivobook', 'zenbook')),
    ('Vivo', ('vivo',)),
    ('Realme', ('realme',)),
    ('Infinix', ('infinix',)),
    ('Itel', ('itel ',)),
    ('Dell', ('dell',)),
    ('HP', ('hewlett', 'hp ')),
    ('Acer', ('acer',)),
    ('Lenovo', ('lenovo',)),
]


def match_brand(text: Optional[str]) -> Optional[str]:
    """Return the first brand whose keyword occurs in text, ignoring case."""
    # Trailing space lets word keywords such as "hp " and "itel " match at the end of the text.
    haystack = f"{(text or '').lower()} "
    for brand, keywords in BRAND_KEYWORDS:
        if any(keyword in haystack for keyword in keywords):
            return brand
    return None


@dataclass
class CategorizationResult:
    """Outcome of a bulk categorization run."""
    main_category_id: int
    categorized: int = 0
    skipped: List[int] = field(default_factory=list)


class ProductCategorizer:
    """Files products under categories. Category rows are only read here."""

    def __init__(self, category_service: CategoryService = None, product_store: ProductStore = None):
        self.product_store = product_store or ProductStore()
        self.category_service = category_service or CategoryService(product_store=self.product_store)

    def assign(self, product_id: int, category_id: int) -> None:
        """Point a product at an existing, active category."""
        category = self.category_service.get_category_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id=category_id)
        if not category.is_active:
            raise CategoryNotFoundError(category_id=category_id, reason="inactive")

        self.product_store.reassign_category(product_id, category.id)
        logger.info(f"Assigned product {product_id} to category {category.name} ({category.id})")

    def infer_brand(self, free_text_model: str) -> str:
        """Guess the brand of a free-text model name."""
        brand = match_brand(free_text_model)
        if brand is None:
            raise NoBrandMatchError(free_text_model or '')
        return brand

    def infer_brand_subcategory(self, free_text_model: str, main_category_id: int) -> CategoryModel:
        """
        Find or create the brand subcategory for a model name.

        The result is a suggestion: callers decide whether to use it and must
        let an administrator override it.

        Args:
            free_text_model: Model name as typed, e.g. "iPhone 15 Pro Max"
            main_category_id: Main category the brand belongs under

        Returns:
            The existing or newly created brand subcategory

        Raises:
            NoBrandMatchError: No brand keyword found in the text
            CategoryNotFoundError: The main category does not exist
            InvalidParentCategoryError: The main category is itself a subcategory
        """
        brand = self.infer_brand(free_text_model)

        main_category = self.category_service.get_category(main_category_id)
        if not main_category.is_root:
            raise InvalidParentCategoryError(
                f"Category '{main_category.name}' is not a main category",
                parent_id=main_category_id,
            )

        existing = self.category_service.store.find_child_by_name(main_category_id, brand)
        if existing is not None:
            return existing

        category = self.category_service.create_category(
            name=brand,
            parent_id=main_category_id,
            description=f"{brand} products",
        )
        logger.info(f"Created brand subcategory {brand} under {main_category.name}")
        return category

    def categorize_product(self, product_id: int, main_category_id: int) -> CategoryModel:
        """
        File a product under its brand subcategory.

        Falls back to the main category when the brand cannot be inferred or
        its subcategory has been deactivated.
        """
        product = self.product_store.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id=product_id)

        category = None
        for text in (product.model, product.name):
            try:
                category = self.infer_brand_subcategory(text, main_category_id)
                break
            except NoBrandMatchError:
                continue

        if category is not None and not category.is_active:
            logger.info(
                f"Brand subcategory {category.name} ({category.id}) is inactive, "
                f"using main category for product {product_id}"
            )
            category = None

        if category is None:
            logger.info(f"No usable brand found for product {product_id}, using main category")
            category = self.category_service.get_category(main_category_id)

        self.assign(product_id, category.id)
        return category

    def categorize_uncategorized(self, main_category_id: int) -> CategorizationResult:
        """
        File every product without a category under main_category_id.

        The main category is checked once up front. After that each product is
        filed in its own savepoint: a product that cannot be filed is rolled
        back, reported in ``skipped`` and the run carries on.
        """
        main_category = self.category_service.get_category(main_category_id)
        if not main_category.is_active:
            raise CategoryNotFoundError(category_id=main_category_id, reason="inactive")
        if not main_category.is_root:
            raise InvalidParentCategoryError(
                f"Category '{main_category.name}' is not a main category",
                parent_id=main_category_id,
            )

        result = CategorizationResult(main_category_id=main_category_id)
        for product in self.product_store.list_uncategorized():
            try:
                with transaction.atomic():
                    self.categorize_product(product.id, main_category_id)
            except DomainException as e:
                logger.warning(f"Skipped product {product.id} ({product.name}): {e.message}")
                result.skipped.append(product.id)
                continue
            result.categorized += 1

        logger.info(
            f"Categorized {result.categorized} products under category {main_category_id}, "
            f"skipped {len(result.skipped)}"
        )
        return result
