"""Base domain layer - shared kernel for all bounded contexts."""

from .entity import Entity
from .exceptions import (
    ConfigurationError,
    DomainException,
    DuplicateEntityError,
    EntityNotFoundError,
    MalformedInputError,
    ValidationError,
)

__all__ = [
    # Entities
    "Entity",
    # Exceptions
    "DomainException",
    "ValidationError",
    "MalformedInputError",
    "EntityNotFoundError",
    "DuplicateEntityError",
    "ConfigurationError",
]
