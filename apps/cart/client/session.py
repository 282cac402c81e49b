"""
Client side identity transitions.
"""
import logging
from typing import Optional

from .api_client import CartApiClient
from .exceptions import CartClientError
from .store import CartStore

logger = logging.getLogger(__name__)


class CustomerSession:
    """
    Owns a CartStore for the lifetime of one client identity.

    Logging in throws the local cart away and loads the customer's cart from
    the server. Logging out tears the store down and starts over as an
    anonymous visitor.
    """

    def __init__(self, api: CartApiClient, store: Optional[CartStore] = None):
        self.api = api
        self.store = store or CartStore(api)
        self.customer: Optional[dict] = None

    @property
    def is_authenticated(self) -> bool:
        return self.customer is not None

    def start(self):
        """Initialize the store for a new visit."""
        return self.store.load_cart()

    def login(self, username: str, password: str) -> dict:
        """
        Raises:
            CartApiError: the credentials were rejected.
            CartSyncError: the server could not be reached.
        """
        data = self.api.login(username, password)
        self.customer = data.get('customer')
        # Local lines belonged to the anonymous cart; the server decides.
        self.store.teardown()
        self.store.load_cart()
        logger.info(f"Customer {self.customer.get('id') if self.customer else '?'} logged in")
        return self.customer

    def logout(self):
        try:
            self.api.logout()
        except CartClientError as e:
            logger.warning(f"Logout request failed, dropping local session anyway: {e}")
        self.customer = None
        self.api.reset_session()
        self.store.teardown()
        return self.store.load_cart()
