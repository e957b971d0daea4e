"""Application DTOs."""

from .base import BaseDTO

__all__ = ["BaseDTO"]
