# src/pattern_catalog/application/user/service.py
import threading
from typing import List, Optional

from pattern_catalog.domain.base.exceptions import DuplicateEntityError
from pattern_catalog.domain.user.aggregate import User
from pattern_catalog.domain.user.repository import UserRepository
from pattern_catalog.domain.user.value_objects import UserCreate, UserPatch
from pattern_catalog.infrastructure.logging.logger import get_logger


class UserApplicationService:
    """Application service for user operations.

    Works against the ``UserRepository`` contract only and enforces the
    rules that span several repository calls, such as email uniqueness.
    """

    def __init__(self, user_repository: UserRepository):
        self._repository = user_repository
        self._register_lock = threading.Lock()
        self._logger = get_logger(__name__)

    def register_user(self, name: str, email: str) -> User:
        """Register a new user.

        The duplicate check and the insert are serialized per service
        instance. Writers that go around this service can still race.

        Raises:
            DuplicateEntityError: If a user with ``email`` already exists
        """
        with self._register_lock:
            if self._repository.find_by_email(email) is not None:
                self._logger.info("Rejected duplicate registration", email=email)
                raise DuplicateEntityError("User", "email", email)
            user = self._repository.create(UserCreate(name=name, email=email))
        self._logger.info("Registered user", user_id=user.id)
        return user

    def get_user_profile(self, user_id: str) -> Optional[User]:
        return self._repository.find_by_id(user_id)

    def update_user_name(self, user_id: str, name: str) -> User:
        """Rename a user; raises EntityNotFoundError for unknown ids."""
        return self._repository.update(user_id, UserPatch(name=name))

    def remove_user(self, user_id: str) -> None:
        """Remove a user; raises EntityNotFoundError for unknown ids."""
        self._repository.delete(user_id)
        self._logger.info("Removed user", user_id=user_id)

    def list_users(self) -> List[User]:
        return self._repository.find_all()
