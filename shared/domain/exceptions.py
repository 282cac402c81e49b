"""
Domain exceptions.
"""


class DomainException(Exception):
    """Base exception for domain layer."""

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class EntityNotFoundError(DomainException):
    """Raised when an entity is not found."""

    def __init__(self, entity_name: str, entity_id: str):
        super().__init__(
            message=f"{entity_name} with id '{entity_id}' not found",
            code="ENTITY_NOT_FOUND"
        )
        self.entity_name = entity_name
        self.entity_id = entity_id


class ValidationError(DomainException):
    """Raised when validation fails."""

    def __init__(self, message: str, field: str = None):
        super().__init__(message=message, code="VALIDATION_ERROR")
        self.field = field


class UnauthorizedError(DomainException):
    """Raised when an operation needs a caller identity that is missing."""

    def __init__(self, message: str = "Session required"):
        super().__init__(message=message, code="UNAUTHORIZED")


class ResourceUnavailableError(DomainException):
    """Raised when a referenced resource exists but cannot be used right now."""

    def __init__(self, message: str, code: str = "RESOURCE_UNAVAILABLE"):
        super().__init__(message=message, code=code)
