"""
Categories module serializers.
"""
from rest_framework import serializers

from .models import CategoryModel


class CategorySerializer(serializers.ModelSerializer):
    """Serializer for category output."""
    parent_id = serializers.IntegerField(read_only=True, allow_null=True)
    parent_name = serializers.CharField(source='parent.name', read_only=True, allow_null=True)
    product_count = serializers.IntegerField(read_only=True, required=False)

    class Meta:
        model = CategoryModel
        fields = [
            'id',
            'name',
            'description',
            'parent_id',
            'parent_name',
            'level',
            'is_active',
            'product_count',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class CategoryTreeSerializer(serializers.Serializer):
    """Serializer for a main category with nested subcategories."""
    id = serializers.IntegerField()
    name = serializers.CharField()
    description = serializers.CharField(allow_null=True)
    level = serializers.IntegerField()
    is_active = serializers.BooleanField()
    product_count = serializers.IntegerField()
    children = serializers.ListField(child=serializers.DictField())


class CategoryCreateSerializer(serializers.Serializer):
    """Serializer for category creation."""
    name = serializers.CharField(max_length=100)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    parent_id = serializers.IntegerField(required=False, allow_null=True)


class CategoryUpdateSerializer(serializers.Serializer):
    """Serializer for category update."""
    name = serializers.CharField(max_length=100, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    is_active = serializers.BooleanField(required=False)


class CategoryMoveSerializer(serializers.Serializer):
    """Serializer for moving a category under another parent."""
    parent_id = serializers.IntegerField(allow_null=True)


class CategoryMergeSerializer(serializers.Serializer):
    """Serializer for merging one category into another."""
    target_id = serializers.IntegerField()


class CategoryMergeResultSerializer(serializers.Serializer):
    """Serializer for merge output."""
    source_id = serializers.IntegerField()
    target_id = serializers.IntegerField()
    products_moved = serializers.IntegerField()
    subcategories_moved = serializers.IntegerField()
    subcategories_merged = serializers.IntegerField()


class BrandInferenceSerializer(serializers.Serializer):
    """Serializer for brand subcategory inference."""
    model = serializers.CharField(max_length=200)
    main_category_id = serializers.IntegerField()
