"""
Tests for ProductCategorizer.
"""
import pytest

from modules.categories.exceptions import (
    CategoryNotFoundError,
    InvalidParentCategoryError,
    NoBrandMatchError,
)
from modules.categories.models import CategoryModel
from modules.products.categorizer import match_brand
from modules.products.exceptions import ProductNotFoundError
from modules.products.models import ProductModel


class TestMatchBrand:

    @pytest.mark.parametrize('text,brand', [
        ('iPhone 15 Pro Max', 'Apple'),
        ('IPAD AIR 5', 'Apple'),
        ('MacBook Pro M3', 'Apple'),
        ('Galaxy S24 Ultra', 'Samsung'),
        ('Honor Magic 6 Pro', 'Honor'),
        ('Huawei P60 Pro', 'Huawei'),
        ('Pixel 8', 'Google'),
        ('Redmi Note 13', 'Xiaomi'),
        ('Poco X6 Pro', 'Poco'),
        ('Xiaomi Poco F5', 'Poco'),
        ('Itel A70', 'Itel'),
        ('Smartphone itel', 'Itel'),
        ('Asus Vivobook 15', 'Asus'),
        ('Vivo X100', 'Vivo'),
        ('HP EliteBook 840', 'HP'),
        ('Lenovo ThinkPad', 'Lenovo'),
    ])
    def test_known_brands(self, text, brand):
        assert match_brand(text) == brand

    def test_first_match_wins(self):
        assert match_brand('iPhone case for Samsung fans') == 'Apple'

    def test_no_match(self):
        assert match_brand('Nokia 3310') is None
        assert match_brand('') is None
        assert match_brand(None) is None


@pytest.mark.django_db
class TestInferBrandSubcategory:

    def test_creates_brand_subcategory(self, category_service, categorizer):
        phones = category_service.create_category('Smartphones')

        apple = categorizer.infer_brand_subcategory('iPhone 15 Pro Max', phones.id)

        assert apple.name == 'Apple'
        assert apple.parent_id == phones.id
        assert apple.level == 1
        assert apple.description == 'Apple products'

    def test_reuses_existing_subcategory(self, category_service, categorizer):
        phones = category_service.create_category('Smartphones')
        existing = category_service.create_category('Apple', parent_id=phones.id)

        apple = categorizer.infer_brand_subcategory('iphone 13 mini', phones.id)

        assert apple.id == existing.id
        assert CategoryModel.objects.filter(name='Apple').count() == 1

    def test_no_match_creates_nothing(self, category_service, categorizer):
        phones = category_service.create_category('Smartphones')

        with pytest.raises(NoBrandMatchError):
            categorizer.infer_brand_subcategory('Nokia 3310', phones.id)
        assert CategoryModel.objects.count() == 1

    def test_main_category_must_be_root(self, category_service, categorizer):
        phones = category_service.create_category('Smartphones')
        apple = category_service.create_category('Apple', parent_id=phones.id)

        with pytest.raises(InvalidParentCategoryError):
            categorizer.infer_brand_subcategory('Galaxy S24', apple.id)

    def test_main_category_must_exist(self, categorizer):
        with pytest.raises(CategoryNotFoundError):
            categorizer.infer_brand_subcategory('Galaxy S24', 999)


@pytest.mark.django_db
class TestAssign:

    def test_assign(self, category_service, categorizer, make_product):
        tablets = category_service.create_category('Tablets')
        product = make_product()

        categorizer.assign(product.id, tablets.id)

        assert ProductModel.objects.get(id=product.id).category_id == tablets.id

    def test_assign_to_missing_category(self, categorizer, make_product):
        product = make_product()
        with pytest.raises(CategoryNotFoundError):
            categorizer.assign(product.id, 999)

    def test_assign_to_inactive_category(self, category_service, categorizer, make_product):
        tablets = category_service.create_category('Tablets')
        category_service.deactivate_category(tablets.id)
        product = make_product()

        with pytest.raises(CategoryNotFoundError) as exc_info:
            categorizer.assign(product.id, tablets.id)
        assert exc_info.value.reason == 'inactive'
        assert ProductModel.objects.get(id=product.id).category_id is None

    def test_assign_missing_product(self, category_service, categorizer):
        tablets = category_service.create_category('Tablets')
        with pytest.raises(ProductNotFoundError):
            categorizer.assign(999, tablets.id)


@pytest.mark.django_db
class TestCategorizeProduct:

    def test_uses_model_name(self, category_service, categorizer, make_product):
        phones = category_service.create_category('Smartphones')
        product = make_product(name='Used phone', model='Galaxy A54')

        category = categorizer.categorize_product(product.id, phones.id)

        assert category.name == 'Samsung'
        assert ProductModel.objects.get(id=product.id).category_id == category.id

    def test_falls_back_to_product_name(self, category_service, categorizer, make_product):
        phones = category_service.create_category('Smartphones')
        product = make_product(name='Xiaomi 14', model='14 Ultra')

        assert categorizer.categorize_product(product.id, phones.id).name == 'Xiaomi'

    def test_falls_back_to_main_category(self, category_service, categorizer, make_product):
        phones = category_service.create_category('Smartphones')
        product = make_product(name='Nokia 3310')

        category = categorizer.categorize_product(product.id, phones.id)

        assert category.id == phones.id
        assert ProductModel.objects.get(id=product.id).category_id == phones.id

    def test_categorize_uncategorized(self, category_service, categorizer, make_product):
        phones = category_service.create_category('Smartphones')
        tablets = category_service.create_category('Tablets')
        make_product(name='iPhone 12')
        make_product(name='Pixel 7')
        make_product(name='Galaxy Tab S9', category=tablets)

        result = categorizer.categorize_uncategorized(phones.id)

        assert result.categorized == 2
        assert result.skipped == []
        assert sorted(
            CategoryModel.objects.filter(parent=phones).values_list('name', flat=True)
        ) == ['Apple', 'Google']
        assert not ProductModel.objects.filter(category__isnull=True).exists()

    def test_inactive_brand_subcategory_falls_back_to_main(self, category_service, categorizer, make_product):
        phones = category_service.create_category('Smartphones')
        samsung = category_service.create_category('Samsung', parent_id=phones.id)
        category_service.deactivate_category(samsung.id)
        product = make_product(name='Galaxy S24')

        category = categorizer.categorize_product(product.id, phones.id)

        assert category.id == phones.id
        assert ProductModel.objects.get(id=product.id).category_id == phones.id

    def test_bulk_run_files_every_product_despite_inactive_brand(
        self, category_service, categorizer, make_product
    ):
        phones = category_service.create_category('Smartphones')
        samsung = category_service.create_category('Samsung', parent_id=phones.id)
        category_service.deactivate_category(samsung.id)
        iphone = make_product(name='iPhone 15')
        galaxy = make_product(name='Galaxy S24')

        result = categorizer.categorize_uncategorized(phones.id)

        assert result.categorized == 2
        assert result.skipped == []
        assert ProductModel.objects.get(id=iphone.id).category.name == 'Apple'
        assert ProductModel.objects.get(id=galaxy.id).category_id == phones.id

    def test_bulk_run_skips_failing_product_and_continues(
        self, category_service, categorizer, make_product, monkeypatch
    ):
        phones = category_service.create_category('Smartphones')
        broken = make_product(name='iPhone 15')
        pixel = make_product(name='Pixel 8')
        original = categorizer.categorize_product

        def categorize_product(product_id, main_category_id):
            if product_id == broken.id:
                original(product_id, main_category_id)
                raise ProductNotFoundError(product_id=product_id)
            return original(product_id, main_category_id)

        monkeypatch.setattr(categorizer, 'categorize_product', categorize_product)

        result = categorizer.categorize_uncategorized(phones.id)

        assert result.categorized == 1
        assert result.skipped == [broken.id]
        assert ProductModel.objects.get(id=broken.id).category_id is None
        assert not CategoryModel.objects.filter(name='Apple').exists()
        assert ProductModel.objects.get(id=pixel.id).category.name == 'Google'

    def test_bulk_run_rejects_inactive_main_category(self, category_service, categorizer, make_product):
        phones = category_service.create_category('Smartphones')
        category_service.deactivate_category(phones.id)
        product = make_product(name='iPhone 15')

        with pytest.raises(CategoryNotFoundError):
            categorizer.categorize_uncategorized(phones.id)
        assert ProductModel.objects.get(id=product.id).category_id is None
        assert not CategoryModel.objects.filter(name='Apple').exists()
