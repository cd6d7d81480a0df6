"""Change password command."""

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
class ChangePasswordCommand:
    """Command to replace a user's password."""

    repository: IUserRepository
    event_bus: Optional[IEventBus] = None

    async def execute(self, user_id: str, new_password: str) -> User:
        """Execute change password command.

        Raises:
            ValidationError: If the password is too short
            UserNotFoundError: If user doesn't exist
            IllegalStateError: If user is deleted
        """
        user = await self.repository.get_by_id(UserId.parse(user_id))

        user.change_password(new_password)
        await self.repository.save(user)

        logger.info("User password changed", extra={"user_id": str(user.user_id)})

        await publish_user_events(user, self.event_bus)
        return user
