"""Tests for update user command."""

import pytest

from application.user.commands.update_user import UpdateUserCommand
from domain.user.core.entities.user import User
from domain.user.core.events.user_updated import (
    UserEmailUpdated,
    UserNameUpdated,
    UserStatusUpdated,
)
from domain.user.core.exceptions.user_errors import (
    IllegalStateError,
    UserAlreadyExistsError,
    UserNotFoundError,
    ValidationError,
)
from domain.user.core.value_objects.user_id import UserId
from domain.user.core.value_objects.user_status import UserStatus


@pytest.fixture
def update_command(repository, event_bus):
    """Create update command."""
    return UpdateUserCommand(repository, event_bus)


@pytest.mark.asyncio
async def test_update_all_fields(update_command, repository, sample_user, published):
    """Test updating email, name and status at once."""
    await repository.save(sample_user)

    user = await update_command.execute(
        str(sample_user.user_id),
        email="anna@example.com",
        name="Anna Rossi",
        status="suspended",
    )

    assert user.email.value == "anna@example.com"
    assert user.name == "Anna Rossi"
    assert user.status is UserStatus.SUSPENDED

    stored = await repository.get_by_id(sample_user.user_id)
    assert stored.email.value == "anna@example.com"
    assert await repository.find_by_email("ana.rossi@example.com") is None

    assert [type(e) for e in published] == [UserEmailUpdated, UserNameUpdated, UserStatusUpdated]


@pytest.mark.asyncio
async def test_update_with_no_fields_is_a_no_op(update_command, repository, sample_user, published):
    """Test that nothing is saved or published without changes."""
    await repository.save(sample_user)

    user = await update_command.execute(str(sample_user.user_id))

    assert user == sample_user
    assert user.updated_at == sample_user.updated_at
    assert published == []


@pytest.mark.asyncio
async def test_update_nonexistent_user_raises_error(update_command):
    """Test that updating unknown user raises error."""
    user_id = str(UserId.generate())

    with pytest.raises(UserNotFoundError) as exc_info:
        await update_command.execute(user_id, name="Anna")

    assert user_id in str(exc_info.value)


@pytest.mark.asyncio
async def test_update_with_malformed_id_raises_validation_error(update_command):
    """Test identifier parsing."""
    with pytest.raises(ValidationError):
        await update_command.execute("not-a-uuid", name="Anna")


@pytest.mark.asyncio
async def test_failing_field_leaves_stored_user_unchanged(update_command, repository, sample_user, published):
    """Test that a later invalid field discards earlier changes."""
    await repository.save(sample_user)

    with pytest.raises(ValidationError):
        await update_command.execute(str(sample_user.user_id), name="Anna", status="ENABLED")

    stored = await repository.get_by_id(sample_user.user_id)
    assert stored.name == "Ana Rossi"
    assert stored.status is UserStatus.PENDING
    assert published == []


@pytest.mark.asyncio
async def test_update_email_to_taken_address_raises_error(update_command, repository, sample_user):
    """Test email uniqueness on update."""
    await repository.save(sample_user)
    other = User.create("bob@example.com", "Bob", "secret1")
    await repository.save(other)

    with pytest.raises(UserAlreadyExistsError):
        await update_command.execute(str(other.user_id), email="Ana.Rossi@example.com")

    stored = await repository.get_by_id(other.user_id)
    assert stored.email.value == "bob@example.com"


@pytest.mark.asyncio
async def test_update_email_to_same_address_is_allowed(update_command, repository, sample_user):
    """Test that re-saving a user's own email is not a conflict."""
    await repository.save(sample_user)

    user = await update_command.execute(str(sample_user.user_id), email="ANA.ROSSI@example.com")

    assert user.email.value == "ana.rossi@example.com"


@pytest.mark.asyncio
async def test_update_deleted_user_raises_illegal_state(update_command, repository, sample_user):
    """Test that deleted users cannot be updated."""
    sample_user.delete()
    await repository.save(sample_user)

    with pytest.raises(IllegalStateError):
        await update_command.execute(str(sample_user.user_id), name="Anna")
