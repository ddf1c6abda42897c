"""
Pytest configuration and fixtures.
"""
from decimal import Decimal

import pytest


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def authenticated_client(api_client, django_user_model):
    """Create an API client authenticated as a regular customer."""
    user = django_user_model.objects.create_user(
        username='customer',
        email='customer@example.com',
        password='testpass123',
    )
    api_client.force_authenticate(user=user)
    return api_client


@pytest.fixture
def admin_api_client(api_client, django_user_model):
    """Create an API client authenticated as a store administrator."""
    admin = django_user_model.objects.create_superuser(
        username='admin',
        email='admin@example.com',
        password='adminpass123',
    )
    api_client.force_authenticate(user=admin)
    return api_client


@pytest.fixture
def category_service():
    from modules.categories.services import CategoryService
    return CategoryService()


@pytest.fixture
def categorizer(category_service):
    from modules.products.categorizer import ProductCategorizer
    return ProductCategorizer(category_service=category_service)


@pytest.fixture
def make_product():
    """Factory for product rows."""
    from modules.products.models import ProductModel

    def _make(name='Test phone', category=None, model='', price='100.00'):
        return ProductModel.objects.create(
            name=name,
            model=model,
            price=Decimal(price),
            category=category,
        )

    return _make
