"""User aggregate - the canonical in-process representation of a user."""
from datetime import datetime

from pattern_catalog.domain.base.entity import Entity


class User(Entity):
    """User domain value.

    Created by the repository on insert or by converting a persistence
    record. Never mutated in place; use ``with_changes`` to derive an
    updated copy.
    """

    id: str
    name: str
    email: str
    created_at: datetime

    @property
    def display_name(self) -> str:
        """Name and email formatted for display, e.g. ``Alice <alice@example.com>``."""
        return f"{self.name} <{self.email}>"
