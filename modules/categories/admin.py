"""
Categories module admin configuration.
"""
from django.contrib import admin

from .models import CategoryModel


class SubcategoryInline(admin.TabularInline):
    """Inline admin for subcategories."""
    model = CategoryModel
    fk_name = 'parent'
    extra = 0
    fields = ('name', 'description', 'is_active')
    show_change_link = True


@admin.register(CategoryModel)
class CategoryAdmin(admin.ModelAdmin):
    """Admin configuration for Category model."""
    list_display = ('id', 'name', 'parent', 'level', 'is_active', 'created_at')
    list_filter = ('level', 'is_active')
    search_fields = ('name', 'parent__name')
    ordering = ('level', 'name')
    readonly_fields = ('level', 'created_at', 'updated_at')
    inlines = [SubcategoryInline]
