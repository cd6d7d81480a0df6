"""User created event handler."""

from dataclasses import dataclass
import logging

from domain.user.core.events.user_created import UserCreated

logger = logging.getLogger(__name__)


@dataclass
class UserCreatedHandler:
    """Handler for UserCreated domain event.

    Writes the audit log line for every new user.

    Examples:
        >>> handler = UserCreatedHandler()
        >>> await handler.handle(UserCreated.create(...))
    """

    async def handle(self, event: UserCreated) -> None:
        """Handle UserCreated event."""
        logger.info(
            "User created",
            extra={
                "event_id": str(event.event_id),
                "user_id": str(event.user_id),
                "email_domain": event.email.domain,
                "status": event.status.value,
                "occurred_at": event.occurred_at.isoformat(),
            },
        )
