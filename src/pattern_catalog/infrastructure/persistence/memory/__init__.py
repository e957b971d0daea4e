"""In-memory persistence."""

from .user_repository import InMemoryUserRepository

__all__ = ["InMemoryUserRepository"]
