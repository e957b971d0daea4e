"""Persistence infrastructure package."""

from .memory import InMemoryUserRepository

__all__ = ["InMemoryUserRepository"]
