"""
Client cache and sync layer for the cart API.
"""
from .api_client import CartApiClient
from .exceptions import CartApiError, CartClientError, CartSyncError
from .session import CustomerSession
from .state import CartLine, CartState, ClientTotals
from .store import CartStore

__all__ = [
    'CartApiClient',
    'CartApiError',
    'CartClientError',
    'CartSyncError',
    'CartLine',
    'CartState',
    'ClientTotals',
    'CartStore',
    'CustomerSession',
]
