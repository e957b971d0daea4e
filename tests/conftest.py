import logging
import pytest
from datetime import datetime, timedelta, timezone

from pattern_catalog.application.user.service import UserApplicationService
from pattern_catalog.infrastructure.persistence.memory.user_repository import InMemoryUserRepository

FIXED_NOW = datetime(2024, 6, 15, 10, 30, tzinfo=timezone.utc)


class TickingClock:
    """Clock that advances one second on every call."""

    def __init__(self, start: datetime = FIXED_NOW):
        self._current = start

    def __call__(self) -> datetime:
        value = self._current
        self._current += timedelta(seconds=1)
        return value


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def user_repository(clock):
    return InMemoryUserRepository(clock=clock)


@pytest.fixture
def user_service(user_repository):
    return UserApplicationService(user_repository)


@pytest.fixture
def user_row():
    return {
        "user_id": "usr_42",
        "user_name": "Alice Johnson",
        "user_email": "alice@example.com",
        "created_at": "2024-06-15T10:30:00Z",
    }


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def restore_root_logger():
    """Undo handler and level changes made by setup_logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)
