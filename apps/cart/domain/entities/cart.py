"""
Cart entity (Aggregate Root).
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING, Dict, List, Optional

from apps.catalog.domain.value_objects import CatalogSnapshot
from shared.domain import AggregateRoot
from ..events.cart_events import (
    CartCleared,
    CartItemAdded,
    CartItemQuantityChanged,
    CartItemRemoved,
    CartsMerged,
)
from ..exceptions import InvalidQuantityError, QuantityLimitExceededError
from ..value_objects.cart_identity import CartIdentity
from ..value_objects.cart_totals import CartTotals
from .cart_item import CartItem

if TYPE_CHECKING:
    from ..services.pricing_engine import PricingEngine


def _check_quantity(quantity, minimum: int) -> int:
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < minimum:
        raise InvalidQuantityError(quantity, minimum=minimum)
    return quantity


@dataclass(eq=False)
class Cart(AggregateRoot):
    """
    Shopping cart owned by one customer or one anonymous session.

    Line items are keyed by product id, so a product appears at most once.
    Every mutation validates first, changes items, then recomputes totals
    through the pricing engine; totals have no other writer.
    """
    identity: CartIdentity
    items: Dict[str, CartItem] = field(default_factory=dict)
    totals: CartTotals = field(default_factory=CartTotals.zero)
    currency: str = "USD"

    @classmethod
    def create(cls, identity: CartIdentity, currency: str = "USD") -> 'Cart':
        """Create a new empty cart for an identity."""
        return cls(
            identity=identity.require(),
            totals=CartTotals.zero(currency),
            currency=currency,
        )

    def add_item(
        self,
        product_id: str,
        quantity: int,
        snapshot: CatalogSnapshot,
        pricing: 'PricingEngine',
    ) -> CartItem:
        """
        Add quantity of a product, merging into an existing line.

        Raises:
            InvalidQuantityError: quantity is not an integer >= 1.
            ProductUnavailableError: the catalog has no in-stock product.
            QuantityLimitExceededError: the merged line would pass the cap.
        """
        _check_quantity(quantity, minimum=1)
        unit_price = pricing.unit_price(snapshot.get(product_id), product_id)

        existing = self._find_item(product_id)
        new_quantity = quantity + (existing.quantity if existing else 0)
        self._check_limit(product_id, new_quantity, pricing)

        if existing:
            existing.quantity = new_quantity
            existing.unit_price = unit_price
            existing.touch()
            item = existing
        else:
            item = CartItem(product_id=product_id, quantity=quantity, unit_price=unit_price)
            self.items[product_id] = item

        self._recalculate(snapshot, pricing)
        self.add_domain_event(
            CartItemAdded(
                cart_id=self.id,
                product_id=product_id,
                quantity_added=quantity,
                new_quantity=new_quantity,
                unit_price=unit_price,
            )
        )
        return item

    def update_item_quantity(
        self,
        product_id: str,
        quantity: int,
        snapshot: CatalogSnapshot,
        pricing: 'PricingEngine',
    ) -> Optional[CartItem]:
        """
        Set the absolute quantity of a line. Zero or less removes the line.

        A positive quantity needs an available product, whether or not it is
        in the cart. Updating an available product that is not in the cart
        changes nothing.

        Raises:
            ProductUnavailableError: the catalog has no in-stock product.
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise InvalidQuantityError(quantity, minimum=0)
        if quantity <= 0:
            self.remove_item(product_id, snapshot, pricing)
            return None

        unit_price = pricing.unit_price(snapshot.get(product_id), product_id)
        item = self._find_item(product_id)
        if item is None:
            return None

        self._check_limit(product_id, quantity, pricing)

        old_quantity = item.quantity
        item.quantity = quantity
        item.unit_price = unit_price
        item.touch()

        self._recalculate(snapshot, pricing)
        self.add_domain_event(
            CartItemQuantityChanged(
                cart_id=self.id,
                product_id=product_id,
                old_quantity=old_quantity,
                new_quantity=quantity,
            )
        )
        return item

    def remove_item(
        self,
        product_id: str,
        snapshot: CatalogSnapshot,
        pricing: 'PricingEngine',
    ) -> bool:
        """Remove a line. Removing an absent product is a no-op."""
        if self.items.pop(product_id, None) is None:
            return False
        self._recalculate(snapshot, pricing)
        self.add_domain_event(CartItemRemoved(cart_id=self.id, product_id=product_id))
        return True

    def clear(self) -> None:
        """Empty the cart and zero its totals."""
        removed = len(self.items)
        self.items = {}
        self.totals = CartTotals.zero(self.currency)
        self.touch()
        if removed:
            self.add_domain_event(CartCleared(cart_id=self.id, removed_items=removed))

    def absorb(
        self,
        other: 'Cart',
        snapshot: CatalogSnapshot,
        pricing: 'PricingEngine',
    ) -> int:
        """
        Fold the lines of another cart into this one with add semantics.

        Lines whose product is unavailable are skipped and merged quantities
        are capped at the per-item limit. The other cart is cleared. Returns
        the number of lines taken over.
        """
        limit = pricing.policy.max_item_quantity
        merged = 0
        for source in other.line_items:
            product = snapshot.get(source.product_id)
            if product is None or not product.in_stock:
                continue
            unit_price = pricing.unit_price(product)
            existing = self._find_item(source.product_id)
            if existing:
                existing.quantity = min(existing.quantity + source.quantity, limit)
                existing.unit_price = unit_price
                existing.touch()
            else:
                self.items[source.product_id] = CartItem(
                    product_id=source.product_id,
                    quantity=min(source.quantity, limit),
                    unit_price=unit_price,
                    added_at=source.added_at,
                )
            merged += 1

        self._recalculate(snapshot, pricing)
        other.clear()
        self.add_domain_event(
            CartsMerged(source_cart_id=other.id, target_cart_id=self.id, merged_products=merged)
        )
        return merged

    def recalculate(self, snapshot: CatalogSnapshot, pricing: 'PricingEngine') -> CartTotals:
        """Refresh line prices and totals without changing quantities."""
        self._recalculate(snapshot, pricing)
        return self.totals

    def _recalculate(self, snapshot: CatalogSnapshot, pricing: 'PricingEngine') -> None:
        for item in self.items.values():
            item.unit_price = pricing.effective_unit_price(item, snapshot)
        self.totals = pricing.compute_totals(self.items.values(), snapshot)
        self.touch()

    def _check_limit(self, product_id: str, quantity: int, pricing: 'PricingEngine') -> None:
        limit = pricing.policy.max_item_quantity
        if quantity > limit:
            raise QuantityLimitExceededError(product_id, requested=quantity, limit=limit)

    def _find_item(self, product_id: str) -> Optional[CartItem]:
        """Find an item in the cart by product ID."""
        return self.items.get(product_id)

    def get_item(self, product_id: str) -> Optional[CartItem]:
        return self._find_item(product_id)

    @property
    def line_items(self) -> List[CartItem]:
        """Items in the order they were first added."""
        return sorted(self.items.values(), key=lambda item: item.added_at)

    @property
    def product_ids(self) -> List[str]:
        return list(self.items)

    @property
    def item_count(self) -> int:
        """Get the total number of units."""
        return sum(item.quantity for item in self.items.values())

    @property
    def is_empty(self) -> bool:
        """Check if the cart is empty."""
        return len(self.items) == 0

    @property
    def subtotal(self) -> Decimal:
        return self.totals.subtotal
