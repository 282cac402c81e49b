"""
Cart domain events.
"""
from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from shared.domain import DomainEvent


@dataclass(frozen=True)
class CartItemAdded(DomainEvent):
    """Event raised when a quantity of a product is added to a cart."""
    cart_id: UUID
    product_id: str
    quantity_added: int
    new_quantity: int
    unit_price: Decimal


@dataclass(frozen=True)
class CartItemQuantityChanged(DomainEvent):
    """Event raised when a line quantity is set to a new absolute value."""
    cart_id: UUID
    product_id: str
    old_quantity: int
    new_quantity: int


@dataclass(frozen=True)
class CartItemRemoved(DomainEvent):
    """Event raised when a line is removed from a cart."""
    cart_id: UUID
    product_id: str


@dataclass(frozen=True)
class CartCleared(DomainEvent):
    """Event raised when all lines are removed from a cart."""
    cart_id: UUID
    removed_items: int


@dataclass(frozen=True)
class CartsMerged(DomainEvent):
    """Event raised when an anonymous cart is folded into a customer cart."""
    source_cart_id: UUID
    target_cart_id: UUID
    merged_products: int
