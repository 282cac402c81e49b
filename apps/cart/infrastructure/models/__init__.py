# Django models
from .cart_model import CartModel, CartItemModel

__all__ = ['CartModel', 'CartItemModel']
