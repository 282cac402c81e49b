"""
Client sync layer exceptions.
"""
from typing import Optional


class CartClientError(Exception):
    """Base class for failures seen by the cart client."""

    def __init__(self, message: str, code: str = "CLIENT_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class CartApiError(CartClientError):
    """The server answered with an error envelope. Nothing changed server side."""

    def __init__(self, code: str, message: str, status: Optional[int] = None):
        super().__init__(message=message, code=code)
        self.status = status

    def __str__(self):
        return f"{self.code} ({self.status}): {self.message}"


class CartSyncError(CartClientError):
    """The server could not be reached or gave an unreadable answer."""

    def __init__(self, message: str):
        super().__init__(message=message, code="SYNC_FAILED")
