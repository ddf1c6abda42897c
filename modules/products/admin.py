"""
Products module admin configuration.
"""
from django.contrib import admin

from .models import ProductModel


@admin.register(ProductModel)
class ProductAdmin(admin.ModelAdmin):
    """Admin configuration for Product model."""
    list_display = ('id', 'name', 'model', 'brand', 'price', 'stock', 'category', 'is_active')
    list_filter = ('condition', 'is_active', 'category')
    search_fields = ('name', 'model', 'brand')
    ordering = ('-created_at',)
    readonly_fields = ('created_at', 'updated_at')
