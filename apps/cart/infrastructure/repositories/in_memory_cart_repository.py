"""
In-memory CartRepository, for tests and local tooling.
"""
import copy
import logging
import threading
from contextlib import contextmanager
from typing import Dict, Optional
from uuid import UUID

from ...domain.entities.cart import Cart
from ...domain.exceptions import CartNotFoundError
from ...domain.repositories.cart_repository import CartRepository
from ...domain.value_objects.cart_identity import CartIdentity

logger = logging.getLogger(__name__)


class InMemoryCartRepository(CartRepository):
    """
    Dictionary backed cart storage.

    Callers always get copies, and a failing ``atomic()`` block restores the
    previous contents, so it behaves like a transactional store.
    """

    def __init__(self, catalog, pricing):
        super().__init__(catalog, pricing)
        self._carts: Dict[UUID, Cart] = {}
        self._lock = threading.RLock()

    def get_or_create(
        self,
        customer_id: Optional[str] = None,
        session_id: Optional[str] = None,
    ) -> Cart:
        identity = CartIdentity.resolve(customer_id, session_id).require()
        with self._lock:
            existing = self._find(identity)
            if existing is not None:
                return copy.deepcopy(existing)
            cart = Cart.create(identity, currency=self.pricing.policy.currency)
            self._carts[cart.id] = copy.deepcopy(cart)
            logger.info(f"Created cart {cart.id} for {identity}")
            return cart

    def find_by_id(self, cart_id: UUID) -> Optional[Cart]:
        with self._lock:
            cart = self._carts.get(cart_id)
            return copy.deepcopy(cart) if cart else None

    def find_by_identity(self, identity: CartIdentity) -> Optional[Cart]:
        with self._lock:
            cart = self._find(identity) if identity.is_present else None
            return copy.deepcopy(cart) if cart else None

    @contextmanager
    def atomic(self):
        with self._lock:
            saved = copy.deepcopy(self._carts)
            try:
                yield
            except Exception:
                self._carts = saved
                raise

    def load_for_update(self, cart_id: UUID) -> Cart:
        cart = self.find_by_id(cart_id)
        if cart is None:
            raise CartNotFoundError(str(cart_id))
        return cart

    def persist(self, cart: Cart) -> Cart:
        with self._lock:
            stored = copy.deepcopy(cart)
            stored.clear_domain_events()
            self._carts[cart.id] = stored
        return cart

    def count(self) -> int:
        return len(self._carts)

    def _find(self, identity: CartIdentity) -> Optional[Cart]:
        for cart in self._carts.values():
            if cart.identity == identity:
                return cart
        return None
