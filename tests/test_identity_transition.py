"""
Login and logout cart transition tests.
"""
import pytest

from apps.cart.application.services.identity_transition import CartIdentityTransitionHandler
from apps.cart.domain.value_objects import LoginMergePolicy
from apps.cart.infrastructure.factories import build_cart_repository
from apps.cart.infrastructure.models import CartModel

CART_URL = '/api/v1/cart/'
LOGIN_URL = '/api/v1/customers/login/'
LOGOUT_URL = '/api/v1/customers/logout/'
ME_URL = '/api/v1/customers/me/'


@pytest.fixture
def shopper(api_client, db_products):
    """Anonymous visitor with two mugs and a lamp in the cart."""
    api_client.get(CART_URL)
    api_client.post(CART_URL, {'action': 'add', 'product_id': 'mug', 'quantity': 2}, format='json')
    api_client.post(CART_URL, {'action': 'add', 'product_id': 'lamp', 'quantity': 1}, format='json')
    return api_client


def login(client):
    return client.post(LOGIN_URL, {'username': 'testuser', 'password': 'testpass123'}, format='json')


def quantities(cart_data):
    return {item['product_id']: item['quantity'] for item in cart_data['items']}


@pytest.mark.django_db
class TestLogin:
    def test_discard_policy_loads_customer_cart(self, shopper, customer):
        anonymous_id = shopper.session['cart_session_id']

        response = login(shopper)

        assert response.status_code == 200
        data = response.json()['data']
        assert data['customer']['username'] == 'testuser'
        assert data['cart']['id'] == str(CartModel.objects.get(customer_id=str(customer.pk)).id)
        assert data['cart']['items'] == []
        anonymous_cart = CartModel.objects.get(session_id=anonymous_id)
        assert anonymous_cart.items.count() == 0
        assert anonymous_cart.total == 0
        assert 'cart_session_id' not in shopper.session

    def test_session_key_comes_from_settings(self, api_client, db_products, customer, settings):
        settings.CART = {**settings.CART, 'SESSION_KEY': 'basket_id'}
        api_client.get(CART_URL)
        api_client.post(CART_URL, {'action': 'add', 'product_id': 'mug', 'quantity': 1}, format='json')
        anonymous_id = api_client.session['basket_id']
        assert 'cart_session_id' not in api_client.session
        assert CartModel.objects.get(session_id=anonymous_id).items.count() == 1

        login(api_client)

        assert 'basket_id' not in api_client.session
        assert CartModel.objects.get(session_id=anonymous_id).items.count() == 0

    def test_cart_reads_follow_the_customer(self, shopper, customer):
        repository = build_cart_repository()
        customer_cart = repository.get_or_create(customer_id=str(customer.pk))
        repository.add_to_cart(customer_cart.id, 'lamp', 4)

        login(shopper)
        data = shopper.get(CART_URL).json()['data']

        assert data['id'] == str(customer_cart.id)
        assert quantities(data) == {'lamp': 4}

    def test_merge_policy_folds_anonymous_lines(self, shopper, customer, settings):
        settings.CART = {**settings.CART, 'LOGIN_MERGE_POLICY': 'merge'}
        repository = build_cart_repository()
        customer_cart = repository.get_or_create(customer_id=str(customer.pk))
        repository.add_to_cart(customer_cart.id, 'mug', 1)
        anonymous_id = shopper.session['cart_session_id']

        shopper.login(username='testuser', password='testpass123')

        data = shopper.get(CART_URL).json()['data']
        assert quantities(data) == {'mug': 3, 'lamp': 1}
        assert data['totals'] == {
            'subtotal': '50.00', 'tax': '4.00', 'shipping': '0.00', 'total': '54.00',
        }
        assert CartModel.objects.get(session_id=anonymous_id).items.count() == 0

    def test_wrong_password(self, shopper, customer):
        response = shopper.post(LOGIN_URL, {'username': 'testuser', 'password': 'nope'}, format='json')

        assert response.status_code == 401
        assert response.json()['error']['code'] == 'UNAUTHORIZED'
        assert 'cart_session_id' in shopper.session

    def test_cart_failure_does_not_block_login(self, shopper, customer, monkeypatch):
        import apps.cart.signals as cart_signals

        def broken():
            raise RuntimeError('cart store down')

        monkeypatch.setattr(cart_signals, 'build_identity_transition_handler', broken)

        assert login(shopper).status_code == 200


@pytest.mark.django_db
class TestLogout:
    def test_logout_falls_back_to_fresh_anonymous_cart(self, shopper, customer):
        login(shopper)
        shopper.post(CART_URL, {'action': 'add', 'product_id': 'mug', 'quantity': 1}, format='json')

        response = shopper.post(LOGOUT_URL)

        assert response.status_code == 200
        data = response.json()['data']
        assert data['customer'] is None
        assert data['cart']['id'] == ''
        assert data['cart']['totals']['total'] == '0.00'

        after = shopper.get(CART_URL).json()['data']
        assert after['id'] == ''
        assert after['items'] == []
        assert CartModel.objects.get(customer_id=str(customer.pk)).items.count() == 1

    def test_logout_cart_comes_from_transition_handler(self, shopper, customer, monkeypatch):
        import apps.cart.signals as cart_signals

        calls = []
        on_logout = CartIdentityTransitionHandler.on_logout

        def recording_on_logout(self, customer_id=None):
            calls.append(customer_id)
            return on_logout(self, customer_id)

        def broken():
            raise RuntimeError('logout must not build a cart handler')

        login(shopper)
        monkeypatch.setattr(CartIdentityTransitionHandler, 'on_logout', recording_on_logout)
        monkeypatch.setattr(cart_signals, 'build_identity_transition_handler', broken)

        response = shopper.post(LOGOUT_URL)

        assert response.status_code == 200
        assert calls == [str(customer.pk)]
        assert response.json()['data']['cart']['items'] == []

    def test_me(self, api_client, customer):
        assert api_client.get(ME_URL).status_code == 401

        api_client.force_login(customer)
        response = api_client.get(ME_URL)

        assert response.status_code == 200
        assert response.json()['data']['username'] == 'testuser'


class TestTransitionHandler:
    def make_handler(self, cart_repository, policy):
        return CartIdentityTransitionHandler(cart_repository, merge_policy=policy)

    def test_login_without_anonymous_cart(self, cart_repository):
        handler = self.make_handler(cart_repository, LoginMergePolicy.MERGE)

        result = handler.on_login('7', anonymous_session_id=None)

        assert result.cart.id == str(cart_repository.find_by_customer_id('7').id)
        assert result.anonymous_cart_id is None
        assert result.merged_lines == 0

    def test_discard(self, cart_repository):
        anonymous = cart_repository.get_or_create(session_id='s')
        cart_repository.add_to_cart(anonymous.id, 'mug', 2)
        handler = self.make_handler(cart_repository, LoginMergePolicy.DISCARD)

        result = handler.on_login('7', anonymous_session_id='s')

        assert result.cart.items == []
        assert result.policy is LoginMergePolicy.DISCARD
        assert cart_repository.find_by_session_id('s').is_empty

    def test_merge(self, cart_repository):
        anonymous = cart_repository.get_or_create(session_id='s')
        cart_repository.add_to_cart(anonymous.id, 'mug', 2)
        cart_repository.add_to_cart(anonymous.id, 'lamp', 1)
        handler = self.make_handler(cart_repository, 'merge')

        result = handler.on_login('7', anonymous_session_id='s')

        assert result.merged_lines == 2
        assert result.cart.item_count == 3
        assert cart_repository.find_by_session_id('s').is_empty

    def test_logout_returns_empty_cart(self, cart_repository):
        handler = self.make_handler(cart_repository, LoginMergePolicy.DISCARD)

        cart = handler.on_logout('7')

        assert cart.id == ''
        assert cart.items == []
        assert cart.totals.total == 0
