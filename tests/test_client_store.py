"""
Client cart store tests with a mocked transport.
"""
from decimal import Decimal
from unittest import mock

import pytest

from apps.cart.client import (
    CartApiClient,
    CartApiError,
    CartStore,
    CartSyncError,
    ClientTotals,
    CustomerSession,
)


def server_cart(items=(), total='0.00', cart_id='c-1', **totals):
    return {
        'id': cart_id,
        'items': [
            {
                'product_id': product_id,
                'quantity': quantity,
                'unit_price': price,
                'total_price': str(Decimal(price) * quantity),
                'added_at': '2026-01-01T00:00:00Z',
            }
            for product_id, quantity, price in items
        ],
        'totals': {
            'subtotal': totals.get('subtotal', total),
            'tax': totals.get('tax', '0.00'),
            'shipping': totals.get('shipping', '0.00'),
            'total': total,
        },
        'currency': 'USD',
        'item_count': sum(quantity for _, quantity, _ in items),
        'updated_at': '2026-01-01T00:00:00Z',
    }


@pytest.fixture
def api():
    return mock.create_autospec(CartApiClient, instance=True)


@pytest.fixture
def store(api):
    api.get_cart.return_value = server_cart([('mug', 1, '10.00')], subtotal='10.00', tax='0.80',
                                            shipping='9.99', total='20.79')
    store = CartStore(api)
    store.load_cart()
    return store


class TestLoad:
    def test_load_replaces_state(self, store, api):
        store.state.items['stale'] = store.state.items['mug']
        api.get_cart.return_value = server_cart([('lamp', 2, '20.00')], total='40.00')

        state = store.load_cart()

        assert list(state.items) == ['lamp']
        assert state.totals.total == Decimal('40.00')
        assert state.pending is False

    def test_load_failure_is_recorded(self, store, api):
        api.get_cart.side_effect = CartSyncError('timed out')

        state = store.load_cart(timeout=0.5)

        api.get_cart.assert_called_with(timeout=0.5)
        assert state.errors == {'load': 'timed out'}
        assert state.totals.total == Decimal('20.79')


class TestOptimisticMutations:
    def test_add_is_applied_before_the_server_answers(self, store, api):
        seen = {}

        def modify(action, product_id, quantity=None, timeout=None):
            seen['quantity'] = store.state.items['mug'].quantity
            seen['pending'] = store.state.pending
            seen['provisional'] = store.state.provisional_totals
            seen['authoritative'] = store.state.totals.total
            return server_cart([('mug', 3, '10.00')], subtotal='30.00', tax='2.40',
                               shipping='9.99', total='42.39')

        api.modify_cart.side_effect = modify

        state = store.add_to_cart('mug', 2, unit_price='10.00')

        assert seen == {
            'quantity': 3,
            'pending': True,
            'provisional': ClientTotals(subtotal=Decimal('30.00'), total=Decimal('30.00')),
            'authoritative': Decimal('20.79'),
        }
        assert state.pending is False
        assert state.provisional_totals is None
        assert state.totals.total == Decimal('42.39')
        api.modify_cart.assert_called_once_with('add', 'mug', 2, timeout=None)

    def test_sync_failure_keeps_optimistic_state(self, store, api):
        api.modify_cart.side_effect = CartSyncError('connection refused')

        state = store.add_to_cart('lamp', 1, unit_price='20.00')

        assert state.items['lamp'].quantity == 1
        assert state.pending is True
        assert state.totals.total == Decimal('20.79')
        assert state.errors['add'] == 'connection refused'

    def test_sync_failure_with_rollback(self, api):
        api.get_cart.return_value = server_cart([('mug', 1, '10.00')], total='10.00')
        store = CartStore(api, rollback_on_failure=True)
        store.load_cart()
        api.clear_cart.side_effect = CartSyncError('connection refused')

        state = store.clear_cart()

        assert list(state.items) == ['mug']
        assert state.pending is False
        assert state.errors['clear'] == 'connection refused'

    def test_server_rejection_restores_previous_state(self, store, api):
        api.modify_cart.side_effect = CartApiError('PRODUCT_UNAVAILABLE', 'Product not available', 400)

        state = store.add_to_cart('chair', 1)

        assert 'chair' not in state.items
        assert state.pending is False
        assert state.errors['add'] == 'Product not available'

    def test_update_to_zero_removes_locally(self, store, api):
        api.modify_cart.return_value = server_cart([], cart_id='c-1')

        state = store.update_quantity('mug', 0)

        assert state.is_empty
        api.modify_cart.assert_called_once_with('update', 'mug', 0, timeout=None)

    def test_remove(self, store, api):
        api.modify_cart.return_value = server_cart([])

        store.remove_from_cart('mug')

        api.modify_cart.assert_called_once_with('remove', 'mug', timeout=None)
        assert store.state.is_empty

    def test_successful_answer_clears_errors(self, store, api):
        api.modify_cart.side_effect = [
            CartSyncError('connection refused'),
            server_cart([('mug', 2, '10.00')], total='20.00'),
        ]
        store.add_to_cart('mug', 1)

        state = store.add_to_cart('mug', 1)

        assert state.errors == {}
        assert state.items['mug'].quantity == 2


class TestPersistence:
    def test_rehydrate_never_trusts_stored_totals(self, store, api):
        saved = store.dehydrate()
        assert saved['totals']['total'] == '20.79'

        restored = CartStore(api)
        state = restored.rehydrate(saved)

        assert state.items['mug'].quantity == 1
        assert state.totals == ClientTotals()
        assert state.pending is True

    def test_teardown(self, store):
        store.teardown()

        assert store.state.is_empty
        assert store.state.cart_id == ''
        assert store.state.totals.total == Decimal('0.00')

    def test_subscribers_see_changes(self, store, api):
        seen = []
        unsubscribe = store.subscribe(lambda state: seen.append(state.item_count))
        api.get_cart.return_value = server_cart([('mug', 4, '10.00')], total='40.00')

        store.load_cart()
        unsubscribe()
        store.teardown()

        assert seen == [4]


class TestCustomerSession:
    def test_login_replaces_local_cart(self, store, api):
        api.login.return_value = {'customer': {'id': '7', 'username': 'testuser'}, 'cart': {}}
        api.get_cart.return_value = server_cart([('lamp', 1, '20.00')], cart_id='c-7', total='31.59')
        session = CustomerSession(api, store)

        session.login('testuser', 'secret')

        assert session.is_authenticated
        assert store.state.cart_id == 'c-7'
        assert list(store.state.items) == ['lamp']

    def test_login_rejected(self, store, api):
        api.login.side_effect = CartApiError('UNAUTHORIZED', 'Invalid username or password', 401)
        session = CustomerSession(api, store)

        with pytest.raises(CartApiError):
            session.login('testuser', 'wrong')

        assert not session.is_authenticated
        assert list(store.state.items) == ['mug']

    def test_logout_starts_over_even_if_server_is_down(self, store, api):
        api.logout.side_effect = CartSyncError('connection refused')
        api.get_cart.return_value = server_cart([], cart_id='')
        session = CustomerSession(api, store)
        session.customer = {'id': '7'}

        state = session.logout()

        api.reset_session.assert_called_once_with()
        assert not session.is_authenticated
        assert state.is_empty
        assert state.cart_id == ''
