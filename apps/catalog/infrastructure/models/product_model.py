"""
Product Django ORM model.
"""
import uuid

from django.db import models


def generate_product_id() -> str:
    return uuid.uuid4().hex


class ProductModel(models.Model):
    """Catalog product with the price and stock fields the cart reads."""

    id = models.CharField(primary_key=True, max_length=64, default=generate_product_id, editable=False)
    name = models.CharField(max_length=255, db_index=True)
    slug = models.SlugField(max_length=255, unique=True)
    regular_price = models.DecimalField(max_digits=12, decimal_places=2)
    sale_price = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    in_stock = models.BooleanField(default=True, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'products'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} ({self.id})"
