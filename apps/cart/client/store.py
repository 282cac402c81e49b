"""
Client cart store: optimistic local changes reconciled with the server.
"""
import logging
from typing import Callable, List, Optional

from .api_client import CartApiClient
from .exceptions import CartApiError, CartClientError
from .state import CartLine, CartState, ClientTotals, to_decimal

logger = logging.getLogger(__name__)

Listener = Callable[[CartState], None]


class CartStore:
    """
    Holds the cart of one client session.

    A store is created when a session starts and torn down when it ends; it
    is passed to whatever renders the cart rather than reached globally.

    Every mutation is applied locally first, marked ``pending``, and sent to
    the server. The server answer replaces the local state wholesale. When
    the server rejects the change the previous state comes back, since
    nothing changed on its side. When the server cannot be reached the
    optimistic state is kept unless ``rollback_on_failure`` is set. In
    both cases the failure lands in ``state.errors`` instead of being
    raised.
    """

    def __init__(self, api: CartApiClient, rollback_on_failure: bool = False):
        self.api = api
        self.rollback_on_failure = rollback_on_failure
        self._state = CartState()
        self._listeners: List[Listener] = []

    @property
    def state(self) -> CartState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call listener on every state change. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # Server reads

    def load_cart(self, timeout: Optional[float] = None) -> CartState:
        """Replace local state with the server cart. Never merges."""
        try:
            data = self.api.get_cart(timeout=timeout)
        except CartClientError as e:
            logger.error(f"Loading cart failed: {e}")
            self._record_error('load', e)
            return self._state
        self._apply_server(data)
        return self._state

    def sync_cart(self, timeout: Optional[float] = None) -> CartState:
        """Re-fetch the authoritative cart after local changes."""
        return self.load_cart(timeout=timeout)

    # Optimistic mutations

    def add_to_cart(
        self,
        product_id: str,
        quantity: int = 1,
        unit_price=None,
        timeout: Optional[float] = None,
    ) -> CartState:
        """
        Add quantity of a product. ``unit_price`` is the price the UI shows
        and only feeds the provisional estimate.
        """
        previous = self._state.copy()
        line = self._state.items.get(product_id)
        if line:
            line.quantity += quantity
        else:
            self._state.items[product_id] = CartLine(
                product_id=product_id,
                quantity=quantity,
                unit_price=to_decimal(unit_price),
            )
        self._mark_pending()
        return self._push(
            'add',
            lambda: self.api.modify_cart('add', product_id, quantity, timeout=timeout),
            previous,
        )

    def remove_from_cart(self, product_id: str, timeout: Optional[float] = None) -> CartState:
        previous = self._state.copy()
        self._state.items.pop(product_id, None)
        self._mark_pending()
        return self._push(
            'remove',
            lambda: self.api.modify_cart('remove', product_id, timeout=timeout),
            previous,
        )

    def update_quantity(
        self,
        product_id: str,
        quantity: int,
        timeout: Optional[float] = None,
    ) -> CartState:
        """Set an absolute quantity; zero removes the line."""
        previous = self._state.copy()
        if quantity <= 0:
            self._state.items.pop(product_id, None)
        elif product_id in self._state.items:
            self._state.items[product_id].quantity = quantity
        self._mark_pending()
        return self._push(
            'update',
            lambda: self.api.modify_cart('update', product_id, max(quantity, 0), timeout=timeout),
            previous,
        )

    def clear_cart(self, timeout: Optional[float] = None) -> CartState:
        previous = self._state.copy()
        self._state.items = {}
        self._mark_pending()
        return self._push('clear', lambda: self.api.clear_cart(timeout=timeout), previous)

    # Persistence across reloads

    def dehydrate(self) -> dict:
        """JSON ready snapshot of the local cart, e.g. for browser storage."""
        return {
            'cart_id': self._state.cart_id,
            'currency': self._state.currency,
            'items': [line.to_payload() for line in self._state.lines],
            'totals': self._state.totals.to_payload(),
            'updated_at': self._state.updated_at,
        }

    def rehydrate(self, data: dict) -> CartState:
        """
        Restore a dehydrated cart. Stored totals are never trusted: they come
        back as zero and the state stays pending until the next server
        answer.
        """
        self._state = CartState(
            cart_id=data.get('cart_id') or "",
            items={
                line.product_id: line
                for line in (CartLine.from_payload(item) for item in data.get('items', []))
            },
            totals=ClientTotals(),
            currency=data.get('currency') or "USD",
            updated_at=data.get('updated_at'),
            pending=True,
        )
        self._notify()
        return self._state

    def teardown(self) -> None:
        """Drop all local state. Listeners stay subscribed."""
        logger.debug(f"Tearing down cart store for cart {self._state.cart_id or 'anonymous'}")
        self._state = CartState(currency=self._state.currency)
        self._notify()

    # Internals

    def _push(self, action: str, call: Callable[[], dict], previous: CartState) -> CartState:
        try:
            data = call()
        except CartApiError as e:
            logger.warning(f"Cart {action} rejected by server: {e}")
            self._restore(previous)
            self._record_error(action, e)
            return self._state
        except CartClientError as e:
            logger.warning(f"Cart {action} could not be synced: {e}")
            if self.rollback_on_failure:
                self._restore(previous)
            self._record_error(action, e)
            return self._state

        self._apply_server(data)
        return self._state

    def _apply_server(self, data: dict) -> None:
        self._state = CartState.from_server(data or {})
        self._notify()

    def _mark_pending(self) -> None:
        self._state.pending = True
        self._state.provisional_totals = self._state.estimate_totals()
        self._notify()

    def _restore(self, previous: CartState) -> None:
        errors = self._state.errors
        self._state = previous
        self._state.errors = errors

    def _record_error(self, key: str, error: CartClientError) -> None:
        self._state.errors[key] = error.message
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._state)
