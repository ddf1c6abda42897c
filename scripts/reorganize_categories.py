#!/usr/bin/env python
"""Clean up the category tree: merge duplicates, fix levels, file uncategorized products."""
import argparse
import os
import sys

import django

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.local')
django.setup()

import logging
logging.disable(logging.DEBUG)

from modules.categories.models import CategoryModel
from modules.categories.services import CategoryService
from modules.products.categorizer import ProductCategorizer


# (duplicate, canonical) main categories left behind by earlier imports
DUPLICATE_CATEGORIES = [
    ('Laptop', 'Laptops'),
    ('Accessoires', 'Accessories'),
]

# Structural main categories that stay even when empty
KEEP_CATEGORIES = [
    'Smartphones',
    'Tablets',
    'Laptops',
    'Smartwatches',
    'Accessories',
    'Affaire du jour',
    "Brother's Packs",
    'Livraison Gratuite',
    'Occasions',
]


def find_root(name):
    return CategoryModel.objects.filter(name=name, parent__isnull=True).first()


def merge_duplicates(service):
    merged = 0
    for duplicate_name, canonical_name in DUPLICATE_CATEGORIES:
        duplicate = find_root(duplicate_name)
        canonical = find_root(canonical_name)
        if not duplicate or not canonical:
            continue
        result = service.merge_categories(duplicate.id, canonical.id)
        print(
            f'  {duplicate_name} -> {canonical_name}: '
            f'{result.products_moved} products, {result.subcategories_moved} subcategories'
        )
        merged += 1
    return merged


def print_tree(service):
    print('\n' + '=' * 60)
    print('Category tree')
    print('=' * 60)

    for root in service.get_category_tree(include_inactive=True):
        flag = '' if root['is_active'] else ' [inactive]'
        total = root['product_count'] + sum(child['product_count'] for child in root['children'])
        print(f"\n[{root['name']}] ({total}){flag}")
        if not root['children']:
            print('  (no subcategories)')
        for child in root['children']:
            flag = '' if child['is_active'] else ' [inactive]'
            print(f"  - {child['name']}: {child['product_count']}{flag}")


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        '--main-category',
        default='Smartphones',
        help='Main category used to file uncategorized products by brand',
    )
    parser.add_argument(
        '--remove-empty',
        action='store_true',
        help='Delete empty categories that are not structural',
    )
    args = parser.parse_args()

    service = CategoryService()
    categorizer = ProductCategorizer(category_service=service)

    print('Merging duplicate categories...')
    merged = merge_duplicates(service)
    print(f'Merged categories: {merged}')

    fixed = service.repair_levels()
    print(f'Levels repaired: {fixed}')

    main_category = find_root(args.main_category)
    if main_category:
        result = categorizer.categorize_uncategorized(main_category.id)
        print(f'Categorized products: {result.categorized}')
        if result.skipped:
            print(f'Skipped products: {result.skipped}')
    else:
        print(f'Main category "{args.main_category}" not found, skipping product categorization')

    if args.remove_empty:
        removed = service.remove_empty_categories(keep_names=KEEP_CATEGORIES)
        print(f'Removed empty categories: {len(removed)}')
        for name in removed:
            print(f'  - {name}')

    print_tree(service)


if __name__ == '__main__':
    main()
