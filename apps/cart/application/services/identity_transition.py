"""
Cart identity transitions at login and logout.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from ...domain.entities.cart import Cart
from ...domain.repositories.cart_repository import CartRepository
from ...domain.value_objects.cart_policy import LoginMergePolicy
from ..dtos.cart_dto import CartDTO

logger = logging.getLogger(__name__)


@dataclass
class LoginTransitionResult:
    """Outcome of moving a caller from an anonymous to a customer cart."""
    cart: CartDTO
    policy: LoginMergePolicy
    anonymous_cart_id: Optional[str] = None
    merged_lines: int = 0


class CartIdentityTransitionHandler:
    """
    Reconciles cart ownership when a caller logs in or out.

    On login the customer's own cart becomes the caller's cart. What happens
    to the lines of the anonymous session cart is an explicit policy:
    ``DISCARD`` empties it, ``MERGE`` folds its lines into the customer cart.
    """

    def __init__(self, cart_repository: CartRepository, merge_policy: LoginMergePolicy):
        self.cart_repository = cart_repository
        self.merge_policy = LoginMergePolicy(merge_policy)

    def on_login(
        self,
        customer_id: str,
        anonymous_session_id: Optional[str] = None,
    ) -> LoginTransitionResult:
        """Load the customer cart and apply the merge policy to the session cart."""
        customer_cart = self.cart_repository.get_or_create(customer_id=customer_id)
        anonymous_cart = None
        if anonymous_session_id:
            anonymous_cart = self.cart_repository.find_by_session_id(anonymous_session_id)

        merged = 0
        if anonymous_cart is not None and not anonymous_cart.is_empty:
            if self.merge_policy is LoginMergePolicy.MERGE:
                customer_cart, merged = self.merge_anonymous_cart(anonymous_cart, customer_cart)
            else:
                self.discard_anonymous_cart(anonymous_cart)

        logger.info(
            f"Customer {customer_id} logged in; cart {customer_cart.id} loaded "
            f"(policy={self.merge_policy.value}, merged={merged})"
        )
        return LoginTransitionResult(
            cart=CartDTO.from_entity(customer_cart),
            policy=self.merge_policy,
            anonymous_cart_id=str(anonymous_cart.id) if anonymous_cart else None,
            merged_lines=merged,
        )

    def merge_anonymous_cart(self, anonymous_cart: Cart, customer_cart: Cart):
        """Fold anonymous lines into the customer cart with add semantics."""
        merged_cart = self.cart_repository.merge_into(anonymous_cart.id, customer_cart.id)
        merged = sum(1 for product_id in anonymous_cart.product_ids if product_id in merged_cart.items)
        return merged_cart, merged

    def discard_anonymous_cart(self, anonymous_cart: Cart) -> Cart:
        """Empty the anonymous cart; its row stays for reuse."""
        logger.info(
            f"Discarding {len(anonymous_cart.items)} anonymous line(s) of cart {anonymous_cart.id}"
        )
        return self.cart_repository.clear_cart(anonymous_cart.id)

    def on_logout(self, customer_id: Optional[str] = None) -> CartDTO:
        """
        The caller goes back to being anonymous.

        The customer cart is kept server side for the next login; the caller
        starts over with an empty, not yet stored, session cart.
        """
        logger.debug(f"Customer {customer_id} logged out; falling back to an anonymous cart")
        return CartDTO.empty(self.cart_repository.pricing.policy.currency)
