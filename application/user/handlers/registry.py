"""Subscription of the user event handlers."""

from domain.shared.ports.event_bus import IEventBus
from domain.user.core.events.user_created import UserCreated
from domain.user.core.events.user_lifecycle import UserActivated, UserDeactivated, UserDeleted
from domain.user.core.events.user_updated import (
    UserEmailUpdated,
    UserNameUpdated,
    UserPasswordChanged,
    UserStatusUpdated,
)
from application.user.handlers.user_created_handler import UserCreatedHandler
from application.user.handlers.user_lifecycle_handler import UserLifecycleHandler
from application.user.handlers.user_updated_handler import UserUpdatedHandler


def register_user_event_handlers(event_bus: IEventBus) -> None:
    """Subscribe the logging handlers to every user event type."""
    created = UserCreatedHandler()
    updated = UserUpdatedHandler()
    lifecycle = UserLifecycleHandler()

    event_bus.subscribe(UserCreated, created.handle)
    for event_type in (UserEmailUpdated, UserNameUpdated, UserStatusUpdated, UserPasswordChanged):
        event_bus.subscribe(event_type, updated.handle)
    for event_type in (UserActivated, UserDeactivated, UserDeleted):
        event_bus.subscribe(event_type, lifecycle.handle)
