"""User DTOs - shapes leaving the application layer."""

from pattern_catalog.application.dto.base import BaseDTO


class UserResponseDTO(BaseDTO):
    """User as returned to API clients."""

    id: str
    name: str
    email: str
    member_since: str


class UserPayloadDTO(BaseDTO):
    """Minimal user claims carried in an authentication token."""

    user_id: str
    email: str
