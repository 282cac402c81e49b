"""
Catalog admin configuration.
"""
from django.contrib import admin

from ..infrastructure.models.product_model import ProductModel


@admin.register(ProductModel)
class ProductAdmin(admin.ModelAdmin):
    """Admin configuration for Product model."""
    list_display = ('name', 'id', 'regular_price', 'sale_price', 'in_stock', 'updated_at')
    list_filter = ('in_stock', 'created_at')
    search_fields = ('name', 'slug', 'id')
    prepopulated_fields = {'slug': ('name',)}
    ordering = ('-created_at',)
    readonly_fields = ('id', 'created_at', 'updated_at')
