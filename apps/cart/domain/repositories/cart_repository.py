"""
Cart repository interface.
"""
import logging
from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Callable, Iterable, Optional
from uuid import UUID

from apps.catalog.domain.repositories import CatalogLookup
from apps.catalog.domain.value_objects import CatalogSnapshot
from ..entities.cart import Cart
from ..exceptions import CartNotFoundError
from ..services.pricing_engine import PricingEngine
from ..value_objects.cart_identity import CartIdentity

logger = logging.getLogger(__name__)

CartMutation = Callable[[Cart, CatalogSnapshot], None]


class CartRepository(ABC):
    """
    Abstract repository for the Cart aggregate.

    Implementations provide storage primitives; the mutation operations are
    defined here once so that every backend runs them the same way: inside one
    transaction, re-read the cart under a write lock, price it against one
    catalog snapshot, then persist items and totals together.
    """

    def __init__(self, catalog: CatalogLookup, pricing: PricingEngine):
        self.catalog = catalog
        self.pricing = pricing

    # Storage primitives

    @abstractmethod
    def get_or_create(
        self,
        customer_id: Optional[str] = None,
        session_id: Optional[str] = None,
    ) -> Cart:
        """Find the cart for an identity, creating an empty one if none exists."""
        pass

    @abstractmethod
    def find_by_id(self, cart_id: UUID) -> Optional[Cart]:
        """Find a cart by ID."""
        pass

    @abstractmethod
    def find_by_identity(self, identity: CartIdentity) -> Optional[Cart]:
        """Find a cart by its owner."""
        pass

    @abstractmethod
    def atomic(self) -> AbstractContextManager:
        """Transaction boundary for a read-modify-write of one or more carts."""
        pass

    @abstractmethod
    def load_for_update(self, cart_id: UUID) -> Cart:
        """
        Re-read a cart and hold it against concurrent writers until the
        enclosing ``atomic()`` block ends.

        Raises:
            CartNotFoundError: no cart with this ID.
        """
        pass

    @abstractmethod
    def persist(self, cart: Cart) -> Cart:
        """Write items and totals of a cart."""
        pass

    # Lookups

    def find_by_customer_id(self, customer_id: str) -> Optional[Cart]:
        """Find a cart by customer ID."""
        return self.find_by_identity(CartIdentity.for_customer(customer_id))

    def find_by_session_id(self, session_id: str) -> Optional[Cart]:
        """Find a cart by anonymous session ID."""
        return self.find_by_identity(CartIdentity.for_session(session_id))

    # Mutations

    def add_to_cart(self, cart_id: UUID, product_id: str, quantity: int) -> Cart:
        """Add quantity of a product to a cart and persist the new totals."""
        return self._mutate(
            cart_id,
            lambda cart, snapshot: cart.add_item(product_id, quantity, snapshot, self.pricing),
            extra_product_ids=[product_id],
        )

    def remove_from_cart(self, cart_id: UUID, product_id: str) -> Cart:
        """Remove a product line; removing an absent product is a no-op."""
        return self._mutate(
            cart_id,
            lambda cart, snapshot: cart.remove_item(product_id, snapshot, self.pricing),
        )

    def update_cart_item_quantity(self, cart_id: UUID, product_id: str, quantity: int) -> Cart:
        """Set the absolute quantity of a line; zero removes it."""
        return self._mutate(
            cart_id,
            lambda cart, snapshot: cart.update_item_quantity(product_id, quantity, snapshot, self.pricing),
            extra_product_ids=[product_id],
        )

    def clear_cart(self, cart_id: UUID) -> Cart:
        """Empty a cart. The cart row itself is kept for reuse."""
        return self._mutate(cart_id, lambda cart, snapshot: cart.clear(), needs_snapshot=False)

    def merge_into(self, source_cart_id: UUID, target_cart_id: UUID) -> Cart:
        """Fold the source cart into the target cart and empty the source."""
        if source_cart_id == target_cart_id:
            return self.load_cart(target_cart_id)

        with self.atomic():
            # Lock in a stable order so two merges cannot deadlock.
            first, second = sorted([source_cart_id, target_cart_id], key=str)
            locked = {first: self.load_for_update(first), second: self.load_for_update(second)}
            source, target = locked[source_cart_id], locked[target_cart_id]

            snapshot = self.catalog.snapshot(set(source.product_ids) | set(target.product_ids))
            merged = target.absorb(source, snapshot, self.pricing)
            self.persist(source)
            self.persist(target)

        logger.info(f"Merged {merged} line(s) from cart {source.id} into cart {target.id}")
        self._drain_events(source)
        self._drain_events(target)
        return target

    def load_cart(self, cart_id: UUID) -> Cart:
        """Load a cart by ID or fail."""
        cart = self.find_by_id(cart_id)
        if cart is None:
            raise CartNotFoundError(str(cart_id))
        return cart

    def _mutate(
        self,
        cart_id: UUID,
        mutation: CartMutation,
        extra_product_ids: Iterable[str] = (),
        needs_snapshot: bool = True,
    ) -> Cart:
        with self.atomic():
            cart = self.load_for_update(cart_id)
            if needs_snapshot:
                snapshot = self.catalog.snapshot(set(cart.product_ids) | set(extra_product_ids))
            else:
                snapshot = CatalogSnapshot()
            mutation(cart, snapshot)
            self.persist(cart)

        self._drain_events(cart)
        return cart

    def _drain_events(self, cart: Cart) -> None:
        for event in cart.clear_domain_events():
            logger.info(f"{event.event_type} on cart {cart.id} ({cart.identity}): {event.payload()}")
