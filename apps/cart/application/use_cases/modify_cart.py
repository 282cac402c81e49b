"""
Modify cart use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from shared.domain.exceptions import ValidationError
from ...domain.exceptions import InvalidQuantityError, ProductUnavailableError
from ...domain.repositories.cart_repository import CartRepository
from ..dtos.cart_dto import CartAction, CartActionDTO, CartDTO

logger = logging.getLogger(__name__)


@dataclass
class ModifyCartUseCase(UseCase[CartActionDTO, CartDTO]):
    """Use case for add / remove / update on the caller's cart."""

    cart_repository: CartRepository

    def execute(self, input_dto: CartActionDTO) -> UseCaseResult[CartDTO]:
        identity = input_dto.identity.require()
        action = self._validate(input_dto)

        cart = self.cart_repository.get_or_create(
            customer_id=identity.customer_id,
            session_id=identity.session_id,
        )

        try:
            if action is CartAction.ADD:
                cart = self.cart_repository.add_to_cart(cart.id, input_dto.product_id, input_dto.quantity)
            elif action is CartAction.REMOVE:
                cart = self.cart_repository.remove_from_cart(cart.id, input_dto.product_id)
            elif input_dto.quantity == 0:
                cart = self.cart_repository.remove_from_cart(cart.id, input_dto.product_id)
            else:
                cart = self.cart_repository.update_cart_item_quantity(
                    cart.id, input_dto.product_id, input_dto.quantity,
                )
        except ProductUnavailableError as e:
            logger.warning(
                f"Rejected {action.value} of product {e.product_id} ({e.reason}) for {identity}"
            )
            raise

        return UseCaseResult.ok(CartDTO.from_entity(cart))

    def _validate(self, input_dto: CartActionDTO) -> CartAction:
        if not input_dto.product_id:
            raise ValidationError("Action and product_id are required", field="product_id")
        try:
            action = CartAction(input_dto.action)
        except ValueError:
            raise ValidationError(
                "Invalid action. Must be add, remove, or update",
                field="action",
            )

        quantity = input_dto.quantity
        if action is CartAction.ADD and not self._is_int_at_least(quantity, 1):
            raise InvalidQuantityError(quantity, minimum=1)
        if action is CartAction.UPDATE and not self._is_int_at_least(quantity, 0):
            raise InvalidQuantityError(quantity, minimum=0)
        return action

    @staticmethod
    def _is_int_at_least(value, minimum: int) -> bool:
        return isinstance(value, int) and not isinstance(value, bool) and value >= minimum
