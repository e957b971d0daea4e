import pytest
from datetime import datetime, timezone
from pydantic import ValidationError as PydanticValidationError

from pattern_catalog.domain.user.aggregate import User
from pattern_catalog.domain.user.value_objects import UserCreate, UserPatch


@pytest.fixture
def sample_user():
    return User(
        id="1",
        name="Alice",
        email="alice@example.com",
        created_at=datetime(2024, 6, 15, 10, 30, tzinfo=timezone.utc),
    )


def test_display_name(sample_user):
    assert sample_user.display_name == "Alice <alice@example.com>"


def test_user_is_immutable(sample_user):
    with pytest.raises(PydanticValidationError):
        sample_user.name = "Mallory"
    assert sample_user.name == "Alice"


def test_with_changes_returns_new_value(sample_user):
    # Act
    renamed = sample_user.with_changes({"name": "Alice Smith"})

    # Assert
    assert renamed is not sample_user
    assert renamed.name == "Alice Smith"
    assert renamed.email == sample_user.email
    assert sample_user.name == "Alice"


def test_with_changes_keeps_id_and_created_at(sample_user):
    changed = sample_user.with_changes({
        "id": "999",
        "created_at": datetime(2000, 1, 1, tzinfo=timezone.utc),
        "email": "new@example.com",
    })

    assert changed.id == "1"
    assert changed.created_at == sample_user.created_at
    assert changed.email == "new@example.com"


def test_users_with_equal_fields_are_equal(sample_user):
    copy = User(**sample_user.model_dump())
    assert copy == sample_user


def test_user_requires_all_fields():
    with pytest.raises(PydanticValidationError):
        User(id="1", name="Alice")


class TestUserPatch:
    """Test partial update values."""

    def test_only_set_fields_are_changes(self):
        assert UserPatch(name="Bob").changes() == {"name": "Bob"}

    def test_empty_patch_has_no_changes(self):
        assert UserPatch().changes() == {}

    def test_explicit_none_is_ignored(self):
        assert UserPatch(name=None, email="b@x.com").changes() == {"email": "b@x.com"}

    def test_create_input_is_frozen(self):
        data = UserCreate(name="Alice", email="alice@example.com")
        with pytest.raises(PydanticValidationError):
            data.name = "Bob"
