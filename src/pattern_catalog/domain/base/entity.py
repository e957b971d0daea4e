"""Base domain entities - foundation for all domain objects."""
from typing import Any, Dict, Optional, TypeVar
from datetime import datetime
from pydantic import BaseModel, ConfigDict

T = TypeVar('T', bound='Entity')


class Entity(BaseModel):
    """Base class for all domain entities.

    Entities are immutable values: changes produce a new instance through
    ``with_changes`` and the identifier and creation timestamp are carried
    over unchanged.
    """
    model_config = ConfigDict(
        frozen=True,
        validate_assignment=True,
        arbitrary_types_allowed=True
    )

    id: Optional[str] = None
    created_at: Optional[datetime] = None

    def with_changes(self: T, changes: Dict[str, Any]) -> T:
        """Return a new entity with ``changes`` merged over the current fields."""
        data = self.model_dump()
        data.update(changes)
        data['id'] = self.id
        data['created_at'] = self.created_at
        return self.__class__.model_validate(data)
