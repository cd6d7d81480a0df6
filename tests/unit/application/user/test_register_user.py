"""Tests for register user command."""

import pytest

from application.user.commands.register_user import RegisterUserCommand
from domain.user.core.events.user_created import UserCreated
from domain.user.core.exceptions.user_errors import UserAlreadyExistsError, ValidationError
from domain.user.core.value_objects.user_status import UserStatus


@pytest.fixture
def register_command(repository, event_bus):
    """Create register command publishing to the event bus."""
    return RegisterUserCommand(repository, event_bus)


@pytest.mark.asyncio
async def test_register_user_success(register_command, repository):
    """Test successful registration stores a PENDING user."""
    user = await register_command.execute("Ana@Example.com", "Ana", "secret1")

    assert user.status is UserStatus.PENDING
    assert user.email.value == "ana@example.com"

    stored = await repository.find_by_id(user.user_id)
    assert stored is not None
    assert stored.name == "Ana"
    assert stored.verify_password("secret1") is True


@pytest.mark.asyncio
async def test_register_publishes_user_created(register_command, published):
    """Test that UserCreated is published after the save."""
    user = await register_command.execute("ana@example.com", "Ana", "secret1")

    assert len(published) == 1
    assert isinstance(published[0], UserCreated)
    assert published[0].user_id == user.user_id
    assert user.pending_events == ()


@pytest.mark.asyncio
async def test_register_with_active_initial_status(repository):
    """Test configurable creation status."""
    command = RegisterUserCommand(repository, initial_status=UserStatus.ACTIVE)

    user = await command.execute("ana@example.com", "Ana", "secret1")

    assert user.status is UserStatus.ACTIVE


@pytest.mark.asyncio
async def test_register_duplicate_email_raises_error(register_command, repository, published):
    """Test that a taken email is rejected and nothing is published."""
    await register_command.execute("ana@example.com", "Ana", "secret1")

    with pytest.raises(UserAlreadyExistsError) as exc_info:
        await register_command.execute("ANA@example.com", "Other", "secret2")

    assert "ana@example.com" in str(exc_info.value)
    assert await repository.count() == 1
    assert len(published) == 1


@pytest.mark.asyncio
async def test_register_duplicate_email_allowed_when_not_unique(repository):
    """Test that uniqueness can be switched off."""
    command = RegisterUserCommand(repository, unique_email=False)

    await command.execute("ana@example.com", "Ana", "secret1")
    await command.execute("ana@example.com", "Other", "secret2")

    assert await repository.count() == 2


@pytest.mark.asyncio
async def test_register_invalid_input_stores_nothing(register_command, repository):
    """Test that validation errors leave the store empty."""
    with pytest.raises(ValidationError):
        await register_command.execute("not-an-email", "Ana", "secret1")

    assert await repository.count() == 0


@pytest.mark.asyncio
async def test_register_without_bus_keeps_events(repository):
    """Test that events stay buffered when no bus is configured."""
    command = RegisterUserCommand(repository)

    user = await command.execute("ana@example.com", "Ana", "secret1")

    (event,) = user.drain_events()
    assert isinstance(event, UserCreated)
