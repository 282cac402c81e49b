# Serializers
from .cart_serializer import (
    CartActionSerializer,
    CartItemSerializer,
    CartSerializer,
    CartTotalsSerializer,
)

__all__ = [
    'CartActionSerializer',
    'CartItemSerializer',
    'CartSerializer',
    'CartTotalsSerializer',
]
