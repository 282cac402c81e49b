"""
Cart DTOs.
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from shared.domain import utcnow
from ...domain.entities.cart import Cart
from ...domain.value_objects.cart_identity import CartIdentity
from ...domain.value_objects.cart_totals import CartTotals, ZERO


class CartAction(str, Enum):
    """Mutations accepted by ``POST /cart``."""
    ADD = "add"
    REMOVE = "remove"
    UPDATE = "update"


@dataclass
class CartActionDTO:
    """DTO for a cart mutation request."""
    identity: CartIdentity
    action: CartAction
    product_id: str
    quantity: Optional[int] = None


@dataclass
class CartItemDTO:
    """DTO for one cart line."""
    product_id: str
    quantity: int
    unit_price: Decimal
    total_price: Decimal
    added_at: datetime


@dataclass
class CartTotalsDTO:
    """DTO for cart money figures."""
    subtotal: Decimal = ZERO
    tax: Decimal = ZERO
    shipping: Decimal = ZERO
    total: Decimal = ZERO

    @classmethod
    def from_totals(cls, totals: CartTotals) -> 'CartTotalsDTO':
        return cls(
            subtotal=totals.subtotal,
            tax=totals.tax,
            shipping=totals.shipping,
            total=totals.total,
        )


@dataclass
class CartDTO:
    """DTO for cart responses. id is empty for a cart that was never stored."""
    id: str
    items: List[CartItemDTO] = field(default_factory=list)
    totals: CartTotalsDTO = field(default_factory=CartTotalsDTO)
    currency: str = "USD"
    updated_at: datetime = field(default_factory=utcnow)

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    @classmethod
    def from_entity(cls, cart: Cart) -> 'CartDTO':
        return cls(
            id=str(cart.id),
            items=[
                CartItemDTO(
                    product_id=item.product_id,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                    total_price=item.total_price,
                    added_at=item.added_at,
                )
                for item in cart.line_items
            ],
            totals=CartTotalsDTO.from_totals(cart.totals),
            currency=cart.currency,
            updated_at=cart.updated_at,
        )

    @classmethod
    def empty(cls, currency: str = "USD") -> 'CartDTO':
        """Zero-total cart for a caller without any identity."""
        return cls(id="", currency=currency)
