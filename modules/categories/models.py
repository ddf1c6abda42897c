"""
Categories models.
"""
from django.db import models
from django.db.models import Q


class CategoryModel(models.Model):
    """Product category with a two-level (main / sub) hierarchy."""

    name = models.CharField(
        max_length=100,
        db_index=True,
        verbose_name='Name'
    )
    description = models.TextField(
        null=True,
        blank=True,
        verbose_name='Description'
    )
    parent = models.ForeignKey(
        'self',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='children',
        verbose_name='Parent category',
        help_text='Empty for a main category'
    )
    level = models.PositiveSmallIntegerField(
        default=0,
        verbose_name='Level',
        help_text='0 = main category, 1 = subcategory'
    )
    is_active = models.BooleanField(
        default=True,
        verbose_name='Active'
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
        db_table = 'categories'
        verbose_name = 'Category'
        verbose_name_plural = 'Categories'
        ordering = ['name']
        constraints = [
            models.UniqueConstraint(
                fields=['name', 'parent'],
                name='uniq_category_name_per_parent',
            ),
            models.UniqueConstraint(
                fields=['name'],
                condition=Q(parent__isnull=True),
                name='uniq_main_category_name',
            ),
        ]

    def __str__(self):
        if self.parent_id:
            return f"{self.parent.name} > {self.name}"
        return self.name

    @property
    def is_root(self) -> bool:
        """Check if this is a main category."""
        return self.parent_id is None

    @property
    def full_path(self) -> str:
        """Get full category path."""
        if self.parent_id:
            return f"{self.parent.name} > {self.name}"
        return self.name
