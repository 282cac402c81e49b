# Domain entities
from .catalog_product import CatalogProduct

__all__ = ['CatalogProduct']
