"""
Cart app configuration.
"""
from django.apps import AppConfig


class CartConfig(AppConfig):
    """Cart pricing, persistence and identity transitions."""
    name = 'apps.cart'
    label = 'cart'
    verbose_name = 'Cart'
    default_auto_field = 'django.db.models.BigAutoField'

    def ready(self):
        from . import signals  # noqa: F401
        from .interfaces import admin  # noqa: F401
