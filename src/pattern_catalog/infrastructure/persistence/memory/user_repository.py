"""In-memory user repository implementation."""

import threading
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from pattern_catalog.domain.base.exceptions import EntityNotFoundError
from pattern_catalog.domain.user.aggregate import User
from pattern_catalog.domain.user.value_objects import UserCreate, UserPatch
from pattern_catalog.infrastructure.logging.logger import get_logger


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryUserRepository:
    """
    User repository backed by a dictionary.

    Provides:
    - Create with monotonically increasing, string encoded ids
    - Lookup by id and by email
    - Snapshot listing in insertion order
    - Update and delete with not-found errors

    Email uniqueness is not enforced here; that rule belongs to
    ``UserApplicationService``.
    """

    def __init__(self, id_start: int = 1, clock: Callable[[], datetime] = utc_now):
        """
        Initialize an empty repository.

        Args:
            id_start: First identifier handed out by ``create``
            clock: Source of creation timestamps
        """
        self._users: Dict[str, User] = {}
        self._next_id = id_start
        self._clock = clock
        self._lock = threading.RLock()
        self.logger = get_logger(__name__)

    def create(self, data: UserCreate) -> User:
        """
        Store a new user under the next identifier.

        Args:
            data: Name and email of the new user

        Returns:
            The stored user
        """
        with self._lock:
            user = User(
                id=str(self._next_id),
                name=data.name,
                email=data.email,
                created_at=self._clock(),
            )
            self._next_id += 1
            self._users[user.id] = user
        self.logger.debug("Created user", user_id=user.id)
        return user

    def find_by_id(self, user_id: str) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        """Return the first user with ``email`` in insertion order, if any."""
        with self._lock:
            for user in self._users.values():
                if user.email == email:
                    return user
            return None

    def find_all(self) -> List[User]:
        """Return a snapshot of all users in insertion order."""
        with self._lock:
            return list(self._users.values())

    def update(self, user_id: str, patch: UserPatch) -> User:
        """
        Replace the stored user with a copy carrying the patched fields.

        The identifier and creation timestamp are never changed.

        Raises:
            EntityNotFoundError: If no user has ``user_id``
        """
        with self._lock:
            existing = self._users.get(user_id)
            if existing is None:
                raise EntityNotFoundError("User", user_id)
            updated = existing.with_changes(patch.changes())
            self._users[user_id] = updated
        self.logger.debug("Updated user", user_id=user_id, fields=sorted(patch.changes()))
        return updated

    def delete(self, user_id: str) -> None:
        """
        Remove a user.

        Raises:
            EntityNotFoundError: If no user has ``user_id``
        """
        with self._lock:
            if user_id not in self._users:
                raise EntityNotFoundError("User", user_id)
            del self._users[user_id]
        self.logger.debug("Deleted user", user_id=user_id)

    def exists(self, user_id: str) -> bool:
        with self._lock:
            return user_id in self._users

    def count(self) -> int:
        with self._lock:
            return len(self._users)

    def __len__(self) -> int:
        return self.count()
