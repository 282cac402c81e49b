# DTOs
from .cart_dto import CartDTO, CartItemDTO, CartTotalsDTO, CartActionDTO, CartAction

__all__ = ['CartDTO', 'CartItemDTO', 'CartTotalsDTO', 'CartActionDTO', 'CartAction']
