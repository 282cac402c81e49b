"""
Catalog lookup interface.
"""
from abc import ABC, abstractmethod
from typing import Iterable, Optional

from ..entities.catalog_product import CatalogProduct
from ..value_objects.catalog_snapshot import CatalogSnapshot


class CatalogLookup(ABC):
    """Read-only access to product price and stock data."""

    @abstractmethod
    def find_by_id(self, product_id: str) -> Optional[CatalogProduct]:
        """Find a product by ID."""
        pass

    @abstractmethod
    def snapshot(self, product_ids: Iterable[str]) -> CatalogSnapshot:
        """Read the given products in one consistent query."""
        pass
