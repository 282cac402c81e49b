"""
Get cart use case.
"""
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.repositories.cart_repository import CartRepository
from ...domain.value_objects.cart_identity import CartIdentity
from ..dtos.cart_dto import CartDTO


@dataclass
class GetCartUseCase(UseCase[CartIdentity, CartDTO]):
    """Use case for reading the caller's cart."""

    cart_repository: CartRepository

    def execute(self, input_dto: CartIdentity) -> UseCaseResult[CartDTO]:
        if not input_dto.is_present:
            return UseCaseResult.ok(CartDTO.empty(self.cart_repository.pricing.policy.currency))

        cart = self.cart_repository.get_or_create(
            customer_id=input_dto.customer_id,
            session_id=input_dto.session_id,
        )
        return UseCaseResult.ok(CartDTO.from_entity(cart))
