"""
Tests for the domain exception to HTTP response mapping.
"""
import pytest

from modules.categories.exceptions import (
    CategoryHasDependentsError,
    CategoryNotFoundError,
    DuplicateCategoryNameError,
    InvalidParentCategoryError,
    NoBrandMatchError,
)
from modules.products.exceptions import ProductNotFoundError
from shared.domain.exceptions import DomainException
from shared.interfaces.exception_handlers import custom_exception_handler


@pytest.mark.parametrize('exc,status_code,code', [
    (CategoryNotFoundError(7), 404, 'CATEGORY_NOT_FOUND'),
    (ProductNotFoundError(7), 404, 'PRODUCT_NOT_FOUND'),
    (InvalidParentCategoryError('Category 7 is a subcategory', parent_id=7), 400, 'INVALID_PARENT_CATEGORY'),
    (DuplicateCategoryNameError('Apple', parent_id=1), 409, 'DUPLICATE_CATEGORY_NAME'),
    (CategoryHasDependentsError(1, product_count=2, child_count=0), 409, 'CATEGORY_HAS_DEPENDENTS'),
    (NoBrandMatchError('Nokia 3310'), 422, 'NO_BRAND_MATCH'),
    (DomainException('Something went wrong'), 400, 'DomainException'),
])
def test_domain_errors_map_to_status(exc, status_code, code):
    response = custom_exception_handler(exc, {})

    assert response.status_code == status_code
    assert response.data['code'] == code
    assert response.data['error'] == exc.message


def test_conflict_details_in_body():
    response = custom_exception_handler(CategoryHasDependentsError(1, product_count=2, child_count=3), {})

    assert response.data['product_count'] == 2
    assert response.data['child_count'] == 3


def test_unrelated_exception_is_left_to_django():
    assert custom_exception_handler(RuntimeError('boom'), {}) is None
