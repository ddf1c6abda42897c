"""
Products URL configuration.
"""
from django.urls import path

from .views import (
    ProductCategoryView,
    ProductDetailView,
    ProductListCreateView,
)

app_name = 'products'

urlpatterns = [
    path('', ProductListCreateView.as_view(), name='product-list-create'),
    path('<int:product_id>/', ProductDetailView.as_view(), name='product-detail'),
    path('<int:product_id>/category/', ProductCategoryView.as_view(), name='product-category'),
]
