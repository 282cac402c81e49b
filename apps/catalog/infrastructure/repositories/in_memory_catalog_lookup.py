"""
In-memory CatalogLookup, for tests and local tooling.
"""
from typing import Dict, Iterable, Optional

from ...domain.entities.catalog_product import CatalogProduct
from ...domain.repositories.catalog_lookup import CatalogLookup
from ...domain.value_objects.catalog_snapshot import CatalogSnapshot


class InMemoryCatalogLookup(CatalogLookup):
    """Dictionary backed catalog."""

    def __init__(self, products: Iterable[CatalogProduct] = ()):
        self._products: Dict[str, CatalogProduct] = {p.id: p for p in products}
        self.snapshot_calls = 0

    def put(self, product: CatalogProduct) -> None:
        """Insert or replace a product."""
        self._products[product.id] = product

    def remove(self, product_id: str) -> None:
        self._products.pop(product_id, None)

    def find_by_id(self, product_id: str) -> Optional[CatalogProduct]:
        return self._products.get(product_id)

    def snapshot(self, product_ids: Iterable[str]) -> CatalogSnapshot:
        self.snapshot_calls += 1
        return CatalogSnapshot.of(
            self._products[product_id]
            for product_id in set(product_ids)
            if product_id in self._products
        )
