# Repository implementations
from .django_catalog_lookup import DjangoCatalogLookup
from .in_memory_catalog_lookup import InMemoryCatalogLookup

__all__ = ['DjangoCatalogLookup', 'InMemoryCatalogLookup']
