"""
Cart domain exceptions.
"""
from shared.domain.exceptions import (
    EntityNotFoundError,
    ResourceUnavailableError,
    UnauthorizedError,
    ValidationError,
)


class ProductUnavailableError(ResourceUnavailableError):
    """Raised when a product is missing from the catalog or out of stock."""

    def __init__(self, product_id: str, reason: str = "unavailable"):
        super().__init__(
            message="Product not available",
            code="PRODUCT_UNAVAILABLE",
        )
        self.product_id = product_id
        self.reason = reason


class CartIdentityError(UnauthorizedError):
    """Raised when a cart operation cannot be tied to exactly one identity."""

    def __init__(self, message: str = "Session required"):
        super().__init__(message=message)


class InvalidQuantityError(ValidationError):
    """Raised when a quantity is not a usable integer for the operation."""

    def __init__(self, quantity, minimum: int = 1):
        super().__init__(
            message=f"Quantity must be an integer of at least {minimum}, got {quantity!r}",
            field="quantity",
        )
        self.quantity = quantity
        self.minimum = minimum


class QuantityLimitExceededError(ValidationError):
    """Raised when a line would exceed the per-item quantity cap."""

    def __init__(self, product_id: str, requested: int, limit: int):
        super().__init__(
            message=f"Quantity cannot exceed {limit} (requested {requested})",
            field="quantity",
        )
        self.product_id = product_id
        self.requested = requested
        self.limit = limit


class CartNotFoundError(EntityNotFoundError):
    """Raised when a cart is not found."""

    def __init__(self, identifier: str):
        super().__init__(entity_name="Cart", entity_id=identifier)
