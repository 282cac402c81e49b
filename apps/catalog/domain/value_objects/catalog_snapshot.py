"""
Catalog snapshot value object.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from shared.domain import ValueObject
from ..entities.catalog_product import CatalogProduct


@dataclass(frozen=True, eq=False)
class CatalogSnapshot(ValueObject):
    """
    Point-in-time read of catalog data.

    One snapshot prices a whole cart recompute, so every line of a cart is
    priced against the same catalog state.
    """
    products: Mapping[str, CatalogProduct] = field(default_factory=dict)
    taken_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        object.__setattr__(self, 'products', MappingProxyType(dict(self.products)))

    @classmethod
    def of(cls, products: Iterable[CatalogProduct]) -> 'CatalogSnapshot':
        """Build a snapshot from a list of products."""
        return cls(products={product.id: product for product in products})

    def get(self, product_id: str) -> Optional[CatalogProduct]:
        """Return the product with this id, or None if the catalog lacks it."""
        return self.products.get(product_id)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self.products

    def __len__(self) -> int:
        return len(self.products)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CatalogSnapshot):
            return False
        return dict(self.products) == dict(other.products)

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.products)))
