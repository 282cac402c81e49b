"""
Wiring of cart collaborators from Django settings.
"""
from django.conf import settings

from apps.catalog.infrastructure.repositories import DjangoCatalogLookup
from ..application.services.identity_transition import CartIdentityTransitionHandler
from ..domain.services.pricing_engine import PricingEngine
from ..domain.value_objects.cart_policy import CartPolicy
from .repositories.django_cart_repository import DjangoCartRepository


def get_cart_policy() -> CartPolicy:
    """Cart policy from the ``CART`` settings dict."""
    return CartPolicy.from_settings(getattr(settings, 'CART', {}))


def cart_session_key() -> str:
    """Session key holding the anonymous cart id."""
    return getattr(settings, 'CART', {}).get('SESSION_KEY', 'cart_session_id')


def build_pricing_engine() -> PricingEngine:
    return PricingEngine(get_cart_policy())


def build_cart_repository() -> DjangoCartRepository:
    """Database backed cart repository priced against the Django catalog."""
    return DjangoCartRepository(catalog=DjangoCatalogLookup(), pricing=build_pricing_engine())


def build_identity_transition_handler() -> CartIdentityTransitionHandler:
    repository = build_cart_repository()
    return CartIdentityTransitionHandler(
        cart_repository=repository,
        merge_policy=repository.pricing.policy.login_merge_policy,
    )
