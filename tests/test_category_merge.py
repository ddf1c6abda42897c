"""
Tests for merging duplicate categories.
"""
import pytest

from modules.categories.exceptions import CategoryNotFoundError, InvalidParentCategoryError
from modules.categories.models import CategoryModel
from modules.categories.services import CategoryService
from modules.categories.store import CategoryStore
from modules.products.models import ProductModel

pytestmark = pytest.mark.django_db


class StoreFailingOnRemove(CategoryStore):
    """Category store whose delete step always fails."""

    def remove(self, category_id: int) -> None:
        raise RuntimeError('connection lost')


def test_merge_laptop_into_laptops(category_service, make_product):
    laptop = category_service.create_category('Laptop')
    laptops = category_service.create_category('Laptops')
    first = make_product(name='Dell XPS 13', category=laptop)
    second = make_product(name='HP EliteBook', category=laptop)

    result = category_service.merge_categories(laptop.id, laptops.id)

    assert not CategoryModel.objects.filter(id=laptop.id).exists()
    assert set(ProductModel.objects.filter(category=laptops).values_list('id', flat=True)) == {
        first.id,
        second.id,
    }
    assert not ProductModel.objects.filter(category__isnull=True).exists()
    assert result.products_moved == 2


def test_merge_moves_subcategories(category_service, make_product):
    accessoires = category_service.create_category('Accessoires')
    accessories = category_service.create_category('Accessories')
    chargers = category_service.create_category('Chargeurs', parent_id=accessoires.id)
    make_product(name='20W charger', category=chargers)

    result = category_service.merge_categories(accessoires.id, accessories.id)

    chargers.refresh_from_db()
    assert chargers.parent_id == accessories.id
    assert chargers.level == 1
    assert not CategoryModel.objects.filter(parent_id=accessoires.id).exists()
    assert result.subcategories_moved == 1


def test_merge_folds_same_named_subcategories(category_service, make_product):
    laptop = category_service.create_category('Laptop')
    laptops = category_service.create_category('Laptops')
    old_apple = category_service.create_category('Apple', parent_id=laptop.id)
    apple = category_service.create_category('Apple', parent_id=laptops.id)
    make_product(name='MacBook Air', category=old_apple)
    make_product(name='MacBook Pro', category=apple)

    result = category_service.merge_categories(laptop.id, laptops.id)

    assert list(CategoryModel.objects.filter(name='Apple').values_list('id', flat=True)) == [apple.id]
    assert ProductModel.objects.filter(category_id=apple.id).count() == 2
    assert result.subcategories_merged == 1
    assert result.subcategories_moved == 0


def test_merge_subcategory_into_root(category_service, make_product):
    phones = category_service.create_category('Smartphones')
    airpods = category_service.create_category('Airpods', parent_id=phones.id)
    accessories = category_service.create_category('Accessories')
    make_product(name='AirPods Pro', category=airpods)

    category_service.merge_categories(airpods.id, accessories.id)

    assert ProductModel.objects.filter(category=accessories).count() == 1
    assert not CategoryModel.objects.filter(id=airpods.id).exists()


def test_merge_is_atomic(category_service, make_product):
    laptop = category_service.create_category('Laptop')
    laptops = category_service.create_category('Laptops')
    sub = category_service.create_category('Dell', parent_id=laptop.id)
    make_product(category=laptop)
    make_product(category=laptop)

    failing = CategoryService(store=StoreFailingOnRemove())
    with pytest.raises(RuntimeError):
        failing.merge_categories(laptop.id, laptops.id)

    assert CategoryModel.objects.filter(id=laptop.id).exists()
    assert ProductModel.objects.filter(category_id=laptop.id).count() == 2
    assert CategoryModel.objects.get(id=sub.id).parent_id == laptop.id

    category_service.merge_categories(laptop.id, laptops.id)

    assert not CategoryModel.objects.filter(id=laptop.id).exists()
    assert ProductModel.objects.filter(category_id=laptops.id).count() == 2
    assert CategoryModel.objects.get(id=sub.id).parent_id == laptops.id


def test_merge_into_itself_rejected(category_service):
    laptops = category_service.create_category('Laptops')
    with pytest.raises(InvalidParentCategoryError):
        category_service.merge_categories(laptops.id, laptops.id)


def test_merge_into_own_subcategory_rejected(category_service):
    phones = category_service.create_category('Smartphones')
    apple = category_service.create_category('Apple', parent_id=phones.id)
    with pytest.raises(InvalidParentCategoryError):
        category_service.merge_categories(phones.id, apple.id)


def test_merge_missing_target(category_service):
    laptop = category_service.create_category('Laptop')
    with pytest.raises(CategoryNotFoundError):
        category_service.merge_categories(laptop.id, 999)
    assert CategoryModel.objects.filter(id=laptop.id).exists()
