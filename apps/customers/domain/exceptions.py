"""
Customer domain exceptions.
"""
from shared.domain.exceptions import UnauthorizedError


class InvalidCredentialsError(UnauthorizedError):
    """Raised when a login attempt does not match an active customer."""

    def __init__(self):
        super().__init__(message="Invalid username or password")


class NotLoggedInError(UnauthorizedError):
    """Raised when a customer-only endpoint is called without a session login."""

    def __init__(self):
        super().__init__(message="Login required")
