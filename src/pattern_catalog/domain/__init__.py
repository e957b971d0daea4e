"""
Domain Layer

Organized by bounded context:
- base/: Shared kernel with the entity base class and domain exceptions
- user/: User aggregate, input values and the repository contract
"""

from .base import (
    ConfigurationError,
    DomainException,
    DuplicateEntityError,
    Entity,
    EntityNotFoundError,
    MalformedInputError,
    ValidationError,
)
from .user import User, UserCreate, UserPatch, UserRepository

__all__ = [
    # Base primitives
    "Entity",
    "DomainException",
    "ValidationError",
    "MalformedInputError",
    "EntityNotFoundError",
    "DuplicateEntityError",
    "ConfigurationError",
    # User context
    "User",
    "UserCreate",
    "UserPatch",
    "UserRepository",
]
