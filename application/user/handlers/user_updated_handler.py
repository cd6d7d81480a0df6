"""User updated event handler."""

from dataclasses import dataclass
import logging
from typing import Union

from domain.user.core.events.user_updated import (
    UserEmailUpdated,
    UserNameUpdated,
    UserPasswordChanged,
    UserStatusUpdated,
)

logger = logging.getLogger(__name__)

UserUpdateEvent = Union[UserEmailUpdated, UserNameUpdated, UserStatusUpdated, UserPasswordChanged]


@dataclass
class UserUpdatedHandler:
    """Handler for the user update events.

    Logs which attribute changed. Email and name values are personal
    data, so only status transitions are logged with their values.
    """

    async def handle(self, event: UserUpdateEvent) -> None:
        """Handle a user update event."""
        extra = {
            "event_id": str(event.event_id),
            "event_type": event.event_type,
            "user_id": str(event.user_id),
            "occurred_at": event.occurred_at.isoformat(),
        }
        if isinstance(event, UserStatusUpdated):
            extra["old_status"] = event.old_status.value
            extra["new_status"] = event.new_status.value

        logger.info("User updated", extra=extra)
