"""
Catalog app configuration.
"""
from django.apps import AppConfig


class CatalogConfig(AppConfig):
    """Product catalog projection used by the cart."""
    name = 'apps.catalog'
    label = 'catalog'
    verbose_name = 'Catalog'
    default_auto_field = 'django.db.models.BigAutoField'

    def ready(self):
        from .interfaces import admin  # noqa: F401
