"""
Django ORM implementation of CartRepository.
"""
import logging
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import transaction

from ...domain.entities.cart import Cart
from ...domain.entities.cart_item import CartItem
from ...domain.exceptions import CartNotFoundError
from ...domain.repositories.cart_repository import CartRepository
from ...domain.value_objects.cart_identity import CartIdentity
from ...domain.value_objects.cart_totals import CartTotals
from ..models.cart_model import CartModel, CartItemModel

logger = logging.getLogger(__name__)


class DjangoCartRepository(CartRepository):
    """Django ORM based cart repository implementation."""

    def get_or_create(
        self,
        customer_id: Optional[str] = None,
        session_id: Optional[str] = None,
    ) -> Cart:
        """
        Find or create the cart of one identity.

        The unique identity columns make a concurrent duplicate insert fail;
        Django's get_or_create then re-reads the row the other writer created.
        """
        identity = CartIdentity.resolve(customer_id, session_id).require()
        model, created = CartModel.objects.get_or_create(
            customer_id=identity.customer_id,
            session_id=identity.session_id,
            defaults={'currency': self.pricing.policy.currency},
        )
        if created:
            logger.info(f"Created cart {model.id} for {identity}")
        return self._to_entity(model)

    def find_by_id(self, cart_id: UUID) -> Optional[Cart]:
        """Find a cart by ID."""
        try:
            model = CartModel.objects.get(id=cart_id)
            return self._to_entity(model)
        except CartModel.DoesNotExist:
            return None

    def find_by_identity(self, identity: CartIdentity) -> Optional[Cart]:
        """Find a cart by its owner."""
        if not identity.is_present:
            return None
        model = CartModel.objects.filter(
            customer_id=identity.customer_id,
            session_id=identity.session_id,
        ).first()
        return self._to_entity(model) if model else None

    def atomic(self):
        return transaction.atomic()

    def load_for_update(self, cart_id: UUID) -> Cart:
        """Re-read a cart row under SELECT ... FOR UPDATE."""
        try:
            model = CartModel.objects.select_for_update().get(id=cart_id)
        except CartModel.DoesNotExist:
            raise CartNotFoundError(str(cart_id))
        return self._to_entity(model)

    def persist(self, cart: Cart) -> Cart:
        """Write line items and totals of a cart in the current transaction."""
        with transaction.atomic():
            CartModel.objects.filter(id=cart.id).update(
                subtotal=cart.totals.subtotal,
                tax=cart.totals.tax,
                shipping=cart.totals.shipping,
                total=cart.totals.total,
                currency=cart.currency,
                updated_at=cart.updated_at,
            )
            CartItemModel.objects.filter(cart_id=cart.id).exclude(
                product_id__in=list(cart.items),
            ).delete()
            for item in cart.items.values():
                values = {
                    'quantity': item.quantity,
                    'unit_price': item.unit_price,
                    'total_price': item.total_price,
                    'added_at': item.added_at,
                }
                CartItemModel.objects.update_or_create(
                    cart_id=cart.id,
                    product_id=item.product_id,
                    defaults=values,
                    create_defaults={'id': item.id, **values},
                )
        return cart

    def _to_entity(self, model: CartModel) -> Cart:
        """Convert Django models to the cart aggregate; stored prices are not re-derived."""
        items = {}
        for item_model in model.items.all().order_by('added_at'):
            items[item_model.product_id] = CartItem(
                id=item_model.id,
                product_id=item_model.product_id,
                quantity=item_model.quantity,
                unit_price=Decimal(str(item_model.unit_price)),
                added_at=item_model.added_at,
                created_at=item_model.created_at,
                updated_at=item_model.updated_at,
            )
        return Cart(
            id=model.id,
            identity=CartIdentity(customer_id=model.customer_id, session_id=model.session_id),
            items=items,
            totals=CartTotals(
                subtotal=model.subtotal,
                tax=model.tax,
                shipping=model.shipping,
                total=model.total,
                currency=model.currency,
            ),
            currency=model.currency,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
