"""
Categories module configuration.
Main category / brand subcategory hierarchy.
"""
from django.apps import AppConfig


class CategoriesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'modules.categories'
    verbose_name = 'Categories'
