"""
Products module Django ORM models.
"""
from django.db import models


class ProductModel(models.Model):
    """Phone / tablet / laptop listing."""

    CONDITION_NEW = 'new'
    CONDITION_USED = 'used'
    CONDITION_REFURBISHED = 'refurbished'
    CONDITION_CHOICES = [
        (CONDITION_NEW, 'New'),
        (CONDITION_USED, 'Used'),
        (CONDITION_REFURBISHED, 'Refurbished'),
    ]

    name = models.CharField(
        max_length=200,
        db_index=True,
        verbose_name='Name'
    )
    model = models.CharField(
        max_length=200,
        blank=True,
        default='',
        verbose_name='Model',
        help_text='Free-text model name, e.g. "iPhone 15 Pro Max"'
    )
    brand = models.CharField(
        max_length=50,
        blank=True,
        default='',
        verbose_name='Brand'
    )
    description = models.TextField(
        blank=True,
        default='',
        verbose_name='Description'
    )
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        verbose_name='Price'
    )
    stock = models.PositiveIntegerField(
        default=0,
        verbose_name='Stock'
    )
    condition = models.CharField(
        max_length=20,
        choices=CONDITION_CHOICES,
        default=CONDITION_NEW,
        verbose_name='Condition'
    )
    is_active = models.BooleanField(
        default=True,
        verbose_name='Active'
    )
    category = models.ForeignKey(
        'categories.CategoryModel',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='products',
        verbose_name='Category'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Created at'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Updated at'
    )

    class Meta:
        db_table = 'products'
        verbose_name = 'Product'
        verbose_name_plural = 'Products'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['category'], name='products_categor_idx'),
            models.Index(fields=['brand'], name='products_brand_idx'),
        ]

    def __str__(self):
        return self.name
