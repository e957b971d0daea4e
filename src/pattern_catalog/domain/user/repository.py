"""User repository contract - collection-like access to users."""

from typing import List, Optional, Protocol, runtime_checkable

from .aggregate import User
from .value_objects import UserCreate, UserPatch


@runtime_checkable
class UserRepository(Protocol):
    """Capability contract for user storage.

    Implementations hide the physical storage. ``find_*`` return ``None``
    when nothing matches; ``update`` and ``delete`` raise
    ``EntityNotFoundError`` for unknown ids.
    """

    def create(self, data: UserCreate) -> User:
        """Store a new user under a freshly assigned id."""
        ...

    def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by id."""
        ...

    def find_by_email(self, email: str) -> Optional[User]:
        """Find the first user with the given email."""
        ...

    def find_all(self) -> List[User]:
        """Return all users in insertion order."""
        ...

    def update(self, user_id: str, patch: UserPatch) -> User:
        """Replace the stored user with one carrying the patched fields."""
        ...

    def delete(self, user_id: str) -> None:
        """Remove the user."""
        ...
