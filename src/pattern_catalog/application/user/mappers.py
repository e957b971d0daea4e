"""User mappers for converting between persistence, domain and API shapes."""
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Sequence

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from pattern_catalog.application.mapping import MappedSequence
from pattern_catalog.application.user.dto import UserPayloadDTO, UserResponseDTO
from pattern_catalog.domain.base.exceptions import MalformedInputError
from pattern_catalog.domain.user.aggregate import User
from pattern_catalog.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


class UserRecord(BaseModel):
    """Raw user row as read from the database."""
    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")

    user_id: str
    user_name: str
    user_email: str
    created_at: str


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO-8601 timestamp, accepting a trailing ``Z`` for UTC.

    Naive timestamps are taken to be UTC.

    Raises:
        ValueError: If the string is not a valid ISO-8601 timestamp
    """
    text = value.strip()
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_member_since(value: datetime) -> str:
    """Format a date the way API clients display it, e.g. ``June 15, 2024``."""
    return f"{MONTH_NAMES[value.month - 1]} {value.day}, {value.year}"


class UserMapper:
    """Maps database rows to ``User`` and ``User`` to API responses."""

    @staticmethod
    def to_entity(row: Any) -> User:
        """Convert a database row to a User.

        Args:
            row: Mapping with ``user_id``, ``user_name``, ``user_email`` and
                ``created_at`` (ISO-8601 string)

        Returns:
            User domain value

        Raises:
            MalformedInputError: If a field is missing, has the wrong type or
                the timestamp cannot be parsed
        """
        if not isinstance(row, Mapping):
            raise MalformedInputError(
                f"User record must be a mapping, got {type(row).__name__}"
            )

        try:
            record = UserRecord.model_validate(dict(row))
        except PydanticValidationError as e:
            logger.warning("Malformed user record", errors=e.error_count())
            raise MalformedInputError("Malformed user record", e.errors()) from e

        try:
            created_at = parse_timestamp(record.created_at)
        except ValueError as e:
            logger.warning("Unparseable user timestamp", user_id=record.user_id)
            raise MalformedInputError(
                f"Invalid created_at for user {record.user_id}: {record.created_at!r}",
                {"created_at": record.created_at},
            ) from e

        return User(
            id=record.user_id,
            name=record.user_name,
            email=record.user_email,
            created_at=created_at,
        )

    @staticmethod
    def to_dto(user: User) -> UserResponseDTO:
        """Convert a User to the API response shape."""
        return UserResponseDTO(
            id=user.id,
            name=user.name,
            email=user.email,
            member_since=format_member_since(user.created_at),
        )

    @classmethod
    def record_to_dto(cls, row: Any) -> UserResponseDTO:
        return cls.to_dto(cls.to_entity(row))

    @classmethod
    def to_dtos(cls, rows: Sequence[Any]) -> MappedSequence[Any, UserResponseDTO]:
        """Lazily map a sequence of database rows to API responses, preserving order."""
        return MappedSequence(rows, cls.record_to_dto)


class PayloadMapper:
    """Extracts the claims needed for authentication tokens."""

    @staticmethod
    def user_entity_to_payload(user: User) -> UserPayloadDTO:
        return UserPayloadDTO(user_id=user.id, email=user.email)
