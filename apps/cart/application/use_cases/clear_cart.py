"""
Clear cart use case.
"""
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.repositories.cart_repository import CartRepository
from ...domain.value_objects.cart_identity import CartIdentity
from ..dtos.cart_dto import CartDTO


@dataclass
class ClearCartUseCase(UseCase[CartIdentity, CartDTO]):
    """Use case for emptying the caller's cart."""

    cart_repository: CartRepository

    def execute(self, input_dto: CartIdentity) -> UseCaseResult[CartDTO]:
        identity = input_dto.require()
        cart = self.cart_repository.get_or_create(
            customer_id=identity.customer_id,
            session_id=identity.session_id,
        )
        cart = self.cart_repository.clear_cart(cart.id)
        return UseCaseResult.ok(CartDTO.from_entity(cart))
