"""
Client side cart state.
"""
from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Dict, List, Optional

ZERO = Decimal("0.00")


def to_decimal(value) -> Decimal:
    if value is None or value == "":
        return ZERO
    return Decimal(str(value))


@dataclass(frozen=True)
class ClientTotals:
    subtotal: Decimal = ZERO
    tax: Decimal = ZERO
    shipping: Decimal = ZERO
    total: Decimal = ZERO

    @classmethod
    def from_payload(cls, data: Optional[dict]) -> 'ClientTotals':
        data = data or {}
        return cls(
            subtotal=to_decimal(data.get('subtotal')),
            tax=to_decimal(data.get('tax')),
            shipping=to_decimal(data.get('shipping')),
            total=to_decimal(data.get('total')),
        )

    def to_payload(self) -> dict:
        return {
            'subtotal': str(self.subtotal),
            'tax': str(self.tax),
            'shipping': str(self.shipping),
            'total': str(self.total),
        }


@dataclass
class CartLine:
    product_id: str
    quantity: int
    unit_price: Decimal = ZERO
    added_at: Optional[str] = None

    @property
    def total_price(self) -> Decimal:
        return self.unit_price * self.quantity

    @classmethod
    def from_payload(cls, data: dict) -> 'CartLine':
        return cls(
            product_id=data['product_id'],
            quantity=int(data['quantity']),
            unit_price=to_decimal(data.get('unit_price')),
            added_at=data.get('added_at'),
        )

    def to_payload(self) -> dict:
        return {
            'product_id': self.product_id,
            'quantity': self.quantity,
            'unit_price': str(self.unit_price),
            'total_price': str(self.total_price),
            'added_at': self.added_at,
        }


@dataclass
class CartState:
    """
    What the UI renders.

    ``totals`` are the last totals the server computed and are the only ones
    to show as final. ``provisional_totals`` is a local estimate made after
    an optimistic change; it is set only while ``pending`` is true.
    """
    cart_id: str = ""
    items: Dict[str, CartLine] = field(default_factory=dict)
    totals: ClientTotals = field(default_factory=ClientTotals)
    provisional_totals: Optional[ClientTotals] = None
    currency: str = "USD"
    updated_at: Optional[str] = None
    pending: bool = False
    errors: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_server(cls, data: dict) -> 'CartState':
        """Full replacement from a server cart payload."""
        return cls(
            cart_id=data.get('id') or "",
            items={
                line.product_id: line
                for line in (CartLine.from_payload(item) for item in data.get('items', []))
            },
            totals=ClientTotals.from_payload(data.get('totals')),
            currency=data.get('currency') or "USD",
            updated_at=data.get('updated_at'),
        )

    def copy(self) -> 'CartState':
        return replace(
            self,
            items={pid: replace(line) for pid, line in self.items.items()},
            errors=dict(self.errors),
        )

    @property
    def lines(self) -> List[CartLine]:
        return list(self.items.values())

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.items.values())

    @property
    def is_empty(self) -> bool:
        return not self.items

    def estimate_totals(self) -> ClientTotals:
        """
        Local estimate from known unit prices. Tax and shipping are left at
        zero: only the server knows them.
        """
        subtotal = sum((line.total_price for line in self.items.values()), ZERO)
        return ClientTotals(subtotal=subtotal, total=subtotal)
