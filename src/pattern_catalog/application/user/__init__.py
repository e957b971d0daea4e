"""User application services, DTOs and mappers."""

from .dto import UserPayloadDTO, UserResponseDTO
from .mappers import PayloadMapper, UserMapper, UserRecord
from .service import UserApplicationService

__all__ = [
    "UserApplicationService",
    "UserMapper",
    "PayloadMapper",
    "UserRecord",
    "UserResponseDTO",
    "UserPayloadDTO",
]
