"""
Catalog product projection.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from shared.domain import ValueObject


@dataclass(frozen=True, eq=False)
class CatalogProduct(ValueObject):
    """The slice of a catalog product that pricing needs."""
    id: str
    regular_price: Decimal
    sale_price: Optional[Decimal] = None
    in_stock: bool = True
    name: str = ""

    def __post_init__(self):
        if not isinstance(self.regular_price, Decimal):
            object.__setattr__(self, 'regular_price', Decimal(str(self.regular_price)))
        if self.sale_price is not None and not isinstance(self.sale_price, Decimal):
            object.__setattr__(self, 'sale_price', Decimal(str(self.sale_price)))
        if self.regular_price < 0:
            raise ValueError("Regular price must be non-negative")

    @property
    def on_sale(self) -> bool:
        """Sale price applies only when it undercuts the regular price."""
        return (
            self.sale_price is not None
            and Decimal('0') < self.sale_price < self.regular_price
        )
