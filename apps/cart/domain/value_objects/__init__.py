# Value objects
from .cart_identity import CartIdentity
from .cart_policy import CartPolicy, LoginMergePolicy
from .cart_totals import CartTotals, quantize_money

__all__ = ['CartIdentity', 'CartPolicy', 'LoginMergePolicy', 'CartTotals', 'quantize_money']
