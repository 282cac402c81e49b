"""
Pytest configuration and fixtures.
"""
from decimal import Decimal

import pytest

from apps.cart.domain.services.pricing_engine import PricingEngine
from apps.cart.domain.value_objects.cart_policy import CartPolicy
from apps.cart.infrastructure.repositories.in_memory_cart_repository import InMemoryCartRepository
from apps.catalog.domain.entities import CatalogProduct
from apps.catalog.infrastructure.repositories.in_memory_catalog_lookup import InMemoryCatalogLookup


@pytest.fixture
def policy():
    """Cart policy matching the test settings."""
    return CartPolicy(
        currency="USD",
        tax_rate=Decimal("0.08"),
        flat_shipping_fee=Decimal("9.99"),
        free_shipping_threshold=Decimal("50.00"),
        max_item_quantity=100,
    )


@pytest.fixture
def pricing(policy):
    return PricingEngine(policy)


@pytest.fixture
def catalog_products():
    """A plain product, a product on sale, and one out of stock."""
    return {
        'mug': CatalogProduct(id='mug', regular_price=Decimal('10.00'), name='Mug'),
        'lamp': CatalogProduct(
            id='lamp',
            regular_price=Decimal('25.00'),
            sale_price=Decimal('20.00'),
            name='Lamp',
        ),
        'chair': CatalogProduct(id='chair', regular_price=Decimal('5.00'), in_stock=False, name='Chair'),
    }


@pytest.fixture
def catalog(catalog_products):
    return InMemoryCatalogLookup(catalog_products.values())


@pytest.fixture
def cart_repository(catalog, pricing):
    """In-memory cart repository."""
    return InMemoryCartRepository(catalog=catalog, pricing=pricing)


@pytest.fixture
def product_factory(db):
    """Create catalog products in the database."""
    from apps.catalog.infrastructure.models import ProductModel

    def create(product_id, regular_price, sale_price=None, in_stock=True, name=None):
        return ProductModel.objects.create(
            id=product_id,
            name=name or product_id.title(),
            slug=product_id,
            regular_price=Decimal(regular_price),
            sale_price=Decimal(sale_price) if sale_price is not None else None,
            in_stock=in_stock,
        )

    return create


@pytest.fixture
def db_products(product_factory):
    """Database twins of ``catalog_products``."""
    return {
        'mug': product_factory('mug', '10.00'),
        'lamp': product_factory('lamp', '25.00', sale_price='20.00'),
        'chair': product_factory('chair', '5.00', in_stock=False),
    }


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def customer(django_user_model):
    return django_user_model.objects.create_user(
        username='testuser',
        email='test@example.com',
        password='testpass123',
    )


@pytest.fixture
def authenticated_client(api_client, customer):
    """Create a client logged in through the session."""
    api_client.force_login(customer)
    return api_client
