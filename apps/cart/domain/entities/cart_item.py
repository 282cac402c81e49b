"""
Cart item entity.
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from shared.domain import BaseEntity, utcnow


@dataclass(eq=False)
class CartItem(BaseEntity):
    """
    One product line of a cart.

    unit_price is the denormalised price captured by the last recompute.
    """
    product_id: str
    quantity: int
    unit_price: Decimal = Decimal("0.00")
    added_at: datetime = field(default_factory=utcnow)

    @property
    def total_price(self) -> Decimal:
        """Calculate the line total."""
        return self.unit_price * self.quantity
