"""Base DTO class with a stable serialization API."""
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseDTO(BaseModel):
    """
    Base class for all DTOs.

    Fields are snake_case in Python; ``to_dict()`` produces the camelCase
    shape handed to the presentation boundary, and ``from_dict()`` accepts
    either form.
    """
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_dict(self) -> Dict[str, Any]:
        """Return a camelCase dictionary."""
        return self.model_dump(by_alias=True)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BaseDTO':
        return cls.model_validate(data)
