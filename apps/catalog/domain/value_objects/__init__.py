# Value objects
from .catalog_snapshot import CatalogSnapshot

__all__ = ['CatalogSnapshot']
