"""Fixtures for user application tests."""

import pytest

from domain.user.core.events.user_created import UserCreated
from domain.user.core.events.user_lifecycle import UserActivated, UserDeactivated, UserDeleted
from domain.user.core.events.user_updated import (
    UserEmailUpdated,
    UserNameUpdated,
    UserPasswordChanged,
    UserStatusUpdated,
)

ALL_USER_EVENTS = (
    UserCreated,
    UserEmailUpdated,
    UserNameUpdated,
    UserStatusUpdated,
    UserPasswordChanged,
    UserActivated,
    UserDeactivated,
    UserDeleted,
)


@pytest.fixture
def published(event_bus):
    """Record every user event published on the bus, in order."""
    received = []

    async def record(event):
        received.append(event)

    for event_type in ALL_USER_EVENTS:
        event_bus.subscribe(event_type, record)
    return received
