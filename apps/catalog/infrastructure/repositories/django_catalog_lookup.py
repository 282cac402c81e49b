"""
Django ORM implementation of CatalogLookup.
"""
from decimal import Decimal
from typing import Iterable, Optional

from ...domain.entities.catalog_product import CatalogProduct
from ...domain.repositories.catalog_lookup import CatalogLookup
from ...domain.value_objects.catalog_snapshot import CatalogSnapshot
from ..models.product_model import ProductModel


class DjangoCatalogLookup(CatalogLookup):
    """Django ORM based catalog lookup."""

    def find_by_id(self, product_id: str) -> Optional[CatalogProduct]:
        """Find a product by ID."""
        try:
            model = ProductModel.objects.get(id=product_id)
            return self._to_entity(model)
        except ProductModel.DoesNotExist:
            return None

    def snapshot(self, product_ids: Iterable[str]) -> CatalogSnapshot:
        """Read all requested products with a single query."""
        ids = {str(product_id) for product_id in product_ids}
        if not ids:
            return CatalogSnapshot()
        models = ProductModel.objects.filter(id__in=ids).only(
            'id', 'name', 'regular_price', 'sale_price', 'in_stock',
        )
        return CatalogSnapshot.of(self._to_entity(model) for model in models)

    def _to_entity(self, model: ProductModel) -> CatalogProduct:
        """Convert Django model to catalog projection."""
        return CatalogProduct(
            id=model.id,
            name=model.name,
            regular_price=Decimal(str(model.regular_price)),
            sale_price=Decimal(str(model.sale_price)) if model.sale_price is not None else None,
            in_stock=model.in_stock,
        )
