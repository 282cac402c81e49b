"""
Cart Django ORM models.
"""
import uuid
from decimal import Decimal

from django.db import models
from django.db.models import Q


class CartModel(models.Model):
    """Cart model, owned by a customer or by an anonymous session."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    customer_id = models.CharField(max_length=64, null=True, blank=True, unique=True)
    session_id = models.CharField(max_length=64, null=True, blank=True, unique=True)
    currency = models.CharField(max_length=3, default='USD')

    subtotal = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))
    tax = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))
    shipping = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))
    total = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'carts'
        constraints = [
            models.CheckConstraint(
                condition=(
                    Q(customer_id__isnull=False, session_id__isnull=True)
                    | Q(customer_id__isnull=True, session_id__isnull=False)
                ),
                name='cart_single_owner',
            ),
        ]

    def __str__(self):
        if self.customer_id:
            return f"Cart for customer {self.customer_id}"
        return f"Cart for session {self.session_id}"


class CartItemModel(models.Model):
    """Cart item model with the price captured at the last mutation."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    cart = models.ForeignKey(CartModel, on_delete=models.CASCADE, related_name='items')
    product_id = models.CharField(max_length=64)
    quantity = models.PositiveIntegerField(default=1)
    unit_price = models.DecimalField(max_digits=12, decimal_places=2)
    total_price = models.DecimalField(max_digits=12, decimal_places=2)
    added_at = models.DateTimeField()

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'cart_items'
        ordering = ['added_at']
        constraints = [
            models.UniqueConstraint(fields=['cart', 'product_id'], name='cart_item_unique_product'),
            models.CheckConstraint(condition=Q(quantity__gte=1), name='cart_item_positive_quantity'),
        ]

    def __str__(self):
        return f"{self.product_id} x {self.quantity}"
