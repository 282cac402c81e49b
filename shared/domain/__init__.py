# Shared domain module
from .base_entity import BaseEntity, AggregateRoot, utcnow
from .base_value_object import ValueObject
from .domain_event import DomainEvent
from .exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
    UnauthorizedError,
    ResourceUnavailableError,
)

__all__ = [
    'BaseEntity',
    'AggregateRoot',
    'utcnow',
    'ValueObject',
    'DomainEvent',
    'DomainException',
    'EntityNotFoundError',
    'ValidationError',
    'UnauthorizedError',
    'ResourceUnavailableError',
]
