# Use cases
from .get_cart import GetCartUseCase
from .modify_cart import ModifyCartUseCase
from .clear_cart import ClearCartUseCase

__all__ = ['GetCartUseCase', 'ModifyCartUseCase', 'ClearCartUseCase']
