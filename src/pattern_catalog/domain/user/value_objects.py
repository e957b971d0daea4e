# src/pattern_catalog/domain/user/value_objects.py
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class UserCreate(BaseModel):
    """Input accepted by the repository when creating a user."""
    model_config = ConfigDict(frozen=True)

    name: str
    email: str


class UserPatch(BaseModel):
    """Partial update for a user; only explicitly set fields are applied."""
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    email: Optional[str] = None

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True, exclude_none=True)
