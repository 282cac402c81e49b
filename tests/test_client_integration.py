"""
Client sync layer against the in-process API.
"""
from decimal import Decimal

import pytest
from rest_framework.test import RequestsClient

from apps.cart.client import CartApiClient, CartApiError, CartStore, CustomerSession

pytestmark = pytest.mark.django_db


@pytest.fixture
def client_session(db_products, customer):
    api = CartApiClient('http://testserver', session=RequestsClient(), timeout=2)
    return CustomerSession(api, CartStore(api))


def test_anonymous_shopping_then_login_and_logout(client_session):
    store = client_session.store

    state = client_session.start()
    assert state.cart_id == ''
    assert state.totals.total == Decimal('0.00')

    state = store.add_to_cart('mug', 2, unit_price='10.00')
    assert state.errors == {}
    assert state.totals.total == Decimal('31.59')
    assert state.pending is False

    state = store.add_to_cart('chair', 1)
    assert state.errors['add'] == 'Product not available'
    assert 'chair' not in state.items

    client_session.login('testuser', 'testpass123')
    assert client_session.is_authenticated
    assert store.state.is_empty
    assert store.state.cart_id != ''

    state = store.add_to_cart('lamp', 1, unit_price='20.00')
    assert state.totals.total == Decimal('31.59')

    state = client_session.logout()
    assert state.errors == {}
    assert state.is_empty
    assert state.cart_id == ''


def test_rejected_login_surfaces_api_error(client_session):
    client_session.start()

    with pytest.raises(CartApiError) as exc_info:
        client_session.login('testuser', 'wrong')

    assert exc_info.value.status == 401
    assert exc_info.value.code == 'UNAUTHORIZED'


def test_rehydrated_cart_is_pending_until_synced(client_session):
    store = client_session.store
    client_session.start()
    store.add_to_cart('mug', 1)
    saved = store.dehydrate()

    state = store.rehydrate(saved)
    assert state.pending is True
    assert state.totals.total == Decimal('0.00')

    state = store.sync_cart()
    assert state.pending is False
    assert state.totals.total == Decimal('20.79')
