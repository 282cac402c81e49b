"""
Tax calculators.
"""
from abc import ABC, abstractmethod
from decimal import Decimal

from ..value_objects.cart_totals import quantize_money


class TaxCalculator(ABC):
    """Turns a subtotal into a tax amount."""

    @abstractmethod
    def calculate(self, subtotal: Decimal) -> Decimal:
        """Return the tax owed on subtotal, in currency minor units."""
        pass


class FlatRateTaxCalculator(TaxCalculator):
    """Single rate applied to the whole subtotal."""

    def __init__(self, rate: Decimal):
        if rate < 0:
            raise ValueError("Tax rate must be non-negative")
        self.rate = rate

    def calculate(self, subtotal: Decimal) -> Decimal:
        return quantize_money(subtotal * self.rate)
