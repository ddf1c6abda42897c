"""
Categories URL configuration.
"""
from django.urls import path

from .views import (
    BrandInferenceView,
    CategoryListCreateView,
    CategoryDetailView,
    CategoryMergeView,
    CategoryMoveView,
    CategoryTreeView,
    CategorySubcategoriesView,
)

app_name = 'categories'

urlpatterns = [
    path('', CategoryListCreateView.as_view(), name='category-list-create'),
    path('tree/', CategoryTreeView.as_view(), name='category-tree'),
    path('infer-brand/', BrandInferenceView.as_view(), name='infer-brand'),
    path('<int:category_id>/', CategoryDetailView.as_view(), name='category-detail'),
    path('<int:category_id>/subcategories/', CategorySubcategoriesView.as_view(), name='subcategories'),
    path('<int:category_id>/move/', CategoryMoveView.as_view(), name='category-move'),
    path('<int:category_id>/merge/', CategoryMergeView.as_view(), name='category-merge'),
]
