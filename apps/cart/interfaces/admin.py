"""
Cart admin configuration.
"""
from django.contrib import admin

from ..infrastructure.models.cart_model import CartModel, CartItemModel


class CartItemInline(admin.TabularInline):
    """Inline for cart items."""
    model = CartItemModel
    extra = 0
    readonly_fields = ('id', 'product_id', 'quantity', 'unit_price', 'total_price', 'added_at')
    can_delete = False


@admin.register(CartModel)
class CartAdmin(admin.ModelAdmin):
    """Admin configuration for Cart model. Totals are read-only: only the cart code computes them."""
    list_display = ('id', 'customer_id', 'session_id', 'total', 'currency', 'updated_at')
    search_fields = ('customer_id', 'session_id')
    ordering = ('-updated_at',)
    readonly_fields = (
        'id', 'customer_id', 'session_id', 'currency',
        'subtotal', 'tax', 'shipping', 'total',
        'created_at', 'updated_at',
    )
    inlines = [CartItemInline]
