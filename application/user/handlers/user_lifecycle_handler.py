"""User lifecycle event handler."""

from dataclasses import dataclass
import logging
from typing import Union

from domain.user.core.events.user_lifecycle import UserActivated, UserDeactivated, UserDeleted

logger = logging.getLogger(__name__)


@dataclass
class UserLifecycleHandler:
    """Handler for UserActivated, UserDeactivated and UserDeleted events."""

    async def handle(self, event: Union[UserActivated, UserDeactivated, UserDeleted]) -> None:
        """Handle a lifecycle event."""
        logger.info(
            "User status transition",
            extra={
                "event_id": str(event.event_id),
                "event_type": event.event_type,
                "user_id": str(event.user_id),
                "previous_status": event.previous_status.value,
                "occurred_at": event.occurred_at.isoformat(),
            },
        )
