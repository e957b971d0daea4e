"""User bounded context."""

from .aggregate import User
from .repository import UserRepository
from .value_objects import UserCreate, UserPatch

__all__ = ["User", "UserRepository", "UserCreate", "UserPatch"]
