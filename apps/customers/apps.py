"""
Customers app configuration.
"""
from django.apps import AppConfig


class CustomersConfig(AppConfig):
    """Session login and logout for customers of the storefront."""
    name = 'apps.customers'
    label = 'customers'
    verbose_name = 'Customers'
    default_auto_field = 'django.db.models.BigAutoField'
