"""
Cart totals value object.
"""
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

from shared.domain import ValueObject

MINOR_UNIT = Decimal("0.01")
ZERO = Decimal("0.00")


def quantize_money(amount) -> Decimal:
    """Round an amount to the currency minor unit."""
    if not isinstance(amount, Decimal):
        amount = Decimal(str(amount))
    return amount.quantize(MINOR_UNIT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True, eq=False)
class CartTotals(ValueObject):
    """Server computed cart money figures. total is always subtotal + tax + shipping."""
    subtotal: Decimal = ZERO
    tax: Decimal = ZERO
    shipping: Decimal = ZERO
    total: Decimal = ZERO
    currency: str = "USD"

    def __post_init__(self):
        for name in ('subtotal', 'tax', 'shipping', 'total'):
            value = quantize_money(getattr(self, name))
            if value < 0:
                raise ValueError(f"{name} cannot be negative")
            object.__setattr__(self, name, value)
        if self.total != self.subtotal + self.tax + self.shipping:
            raise ValueError("total must equal subtotal + tax + shipping")

    @classmethod
    def zero(cls, currency: str = "USD") -> 'CartTotals':
        return cls(currency=currency)

    @property
    def is_zero(self) -> bool:
        return self.total == ZERO
