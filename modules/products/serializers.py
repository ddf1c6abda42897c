"""
Products module serializers.
"""
from rest_framework import serializers

from .models import ProductModel


class ProductSerializer(serializers.ModelSerializer):
    """Serializer for product output."""
    category_name = serializers.CharField(source='category.name', read_only=True, allow_null=True)

    class Meta:
        model = ProductModel
        fields = [
            'id',
            'name',
            'model',
            'brand',
            'description',
            'price',
            'stock',
            'condition',
            'is_active',
            'category',
            'category_name',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'category', 'created_at', 'updated_at']


class ProductListSerializer(serializers.ModelSerializer):
    """Simplified serializer for product list."""
    category_name = serializers.CharField(source='category.name', read_only=True, allow_null=True)

    class Meta:
        model = ProductModel
        fields = [
            'id',
            'name',
            'model',
            'brand',
            'price',
            'condition',
            'category',
            'category_name',
        ]
        read_only_fields = fields


class ProductCreateSerializer(serializers.Serializer):
    """Serializer for product creation."""
    name = serializers.CharField(max_length=200)
    model = serializers.CharField(max_length=200, required=False, allow_blank=True, default='')
    brand = serializers.CharField(max_length=50, required=False, allow_blank=True, default='')
    description = serializers.CharField(required=False, allow_blank=True, default='')
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    stock = serializers.IntegerField(min_value=0, required=False, default=0)
    condition = serializers.ChoiceField(
        choices=ProductModel.CONDITION_CHOICES,
        required=False,
        default=ProductModel.CONDITION_NEW,
    )
    category_id = serializers.IntegerField(required=False, allow_null=True)
    main_category_id = serializers.IntegerField(
        required=False,
        allow_null=True,
        help_text='File the product under the brand subcategory inferred from its model',
    )


class ProductCategorySerializer(serializers.Serializer):
    """Serializer for manual recategorization."""
    category_id = serializers.IntegerField()


class ProductListQuerySerializer(serializers.Serializer):
    """Query parameters of the product list."""
    category_id = serializers.IntegerField(required=False, min_value=1)
    limit = serializers.IntegerField(required=False, default=20, min_value=1, max_value=100)
    offset = serializers.IntegerField(required=False, default=0, min_value=0)
