"""Tests for user event handlers."""

import pytest
from unittest.mock import patch

from application.user.handlers.registry import register_user_event_handlers
from application.user.handlers.user_created_handler import UserCreatedHandler
from application.user.handlers.user_lifecycle_handler import UserLifecycleHandler
from application.user.handlers.user_updated_handler import UserUpdatedHandler
from domain.user.core.events.user_created import UserCreated
from domain.user.core.events.user_lifecycle import UserActivated, UserDeleted
from domain.user.core.events.user_updated import UserNameUpdated, UserStatusUpdated
from domain.user.core.value_objects.email_address import EmailAddress
from domain.user.core.value_objects.user_id import UserId
from domain.user.core.value_objects.user_status import UserStatus
from infrastructure.events.in_memory_bus import InMemoryEventBus

USER_ID = UserId("550e8400-e29b-41d4-a716-446655440000")


@pytest.mark.asyncio
async def test_user_created_handler_logs_event():
    """Test that UserCreatedHandler logs the event."""
    event = UserCreated.create(USER_ID, EmailAddress("ana@example.com"), "Ana", UserStatus.PENDING)

    with patch("application.user.handlers.user_created_handler.logger") as mock_logger:
        await UserCreatedHandler().handle(event)

        mock_logger.info.assert_called_once()
        call_args = mock_logger.info.call_args
        assert "User created" in call_args[0]
        assert call_args[1]["extra"]["user_id"] == str(USER_ID)
        assert call_args[1]["extra"]["email_domain"] == "example.com"
        assert call_args[1]["extra"]["status"] == "PENDING"


@pytest.mark.asyncio
async def test_user_updated_handler_logs_status_change():
    """Test that status updates log old and new status."""
    event = UserStatusUpdated.create(USER_ID, UserStatus.ACTIVE, UserStatus.SUSPENDED)

    with patch("application.user.handlers.user_updated_handler.logger") as mock_logger:
        await UserUpdatedHandler().handle(event)

        extra = mock_logger.info.call_args[1]["extra"]
        assert extra["event_type"] == "UserStatusUpdated"
        assert extra["old_status"] == "ACTIVE"
        assert extra["new_status"] == "SUSPENDED"


@pytest.mark.asyncio
async def test_user_updated_handler_does_not_log_personal_data():
    """Test that name values are not logged."""
    event = UserNameUpdated.create(USER_ID, "Ana", "Anna")

    with patch("application.user.handlers.user_updated_handler.logger") as mock_logger:
        await UserUpdatedHandler().handle(event)

        extra = mock_logger.info.call_args[1]["extra"]
        assert "Anna" not in extra.values()
        assert extra["event_type"] == "UserNameUpdated"


@pytest.mark.asyncio
async def test_user_lifecycle_handler_logs_event():
    """Test that lifecycle transitions log the previous status."""
    event = UserActivated.create(USER_ID, UserStatus.PENDING)

    with patch("application.user.handlers.user_lifecycle_handler.logger") as mock_logger:
        await UserLifecycleHandler().handle(event)

        mock_logger.info.assert_called_once()
        extra = mock_logger.info.call_args[1]["extra"]
        assert extra["event_type"] == "UserActivated"
        assert extra["previous_status"] == "PENDING"


def test_register_user_event_handlers_subscribes_every_event():
    """Test handler registration on the bus."""
    bus = InMemoryEventBus()

    register_user_event_handlers(bus)

    assert bus.get_handler_count(UserCreated) == 1
    assert bus.get_handler_count(UserNameUpdated) == 1
    assert bus.get_handler_count(UserDeleted) == 1


@pytest.mark.asyncio
async def test_registered_handler_receives_published_event():
    """Test that a published event reaches the logging handler."""
    bus = InMemoryEventBus()
    register_user_event_handlers(bus)

    with patch("application.user.handlers.user_lifecycle_handler.logger") as mock_logger:
        await bus.publish(UserDeleted.create(USER_ID, UserStatus.ACTIVE))

        mock_logger.info.assert_called_once()
