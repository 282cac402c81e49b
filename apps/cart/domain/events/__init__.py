# Domain events
from .cart_events import (
    CartCleared,
    CartItemAdded,
    CartItemQuantityChanged,
    CartItemRemoved,
    CartsMerged,
)

__all__ = [
    'CartCleared',
    'CartItemAdded',
    'CartItemQuantityChanged',
    'CartItemRemoved',
    'CartsMerged',
]
