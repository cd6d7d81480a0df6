"""Activate user command."""

from dataclasses import dataclass
import logging
from typing import Optional

from application.user.event_publisher import publish_user_events
from domain.shared.ports.event_bus import IEventBus
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass
class ActivateUserCommand:
    """Command to activate a user account.

    Examples:
        >>> command = ActivateUserCommand(repository)
        >>> user = await command.execute(user_id)
        >>> user.is_active
        True
    """

    repository: IUserRepository
    event_bus: Optional[IEventBus] = None

    async def execute(self, user_id: str) -> User:
        """Execute activate user command.

        Raises:
            UserNotFoundError: If user doesn't exist
            IllegalStateError: If user is already active or deleted
        """
        user = await self.repository.get_by_id(UserId.parse(user_id))

        user.activate()
        await self.repository.save(user)

        logger.info("User activated", extra={"user_id": str(user.user_id)})

        await publish_user_events(user, self.event_bus)
        return user
