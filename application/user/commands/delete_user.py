"""Delete (soft) and remove (hard) user commands."""

from dataclasses import dataclass
import logging
from typing import Optional

from application.user.event_publisher import publish_user_events
from domain.shared.ports.event_bus import IEventBus
from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import UserNotFoundError
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass
class DeleteUserCommand:
    """Command to soft-delete a user.

    The user stays in the repository with status DELETED and can still be
    found by id and listed with the DELETED status filter.

    Examples:
        >>> command = DeleteUserCommand(repository)
        >>> user = await command.execute(user_id)
        >>> user.status
        <UserStatus.DELETED: 'DELETED'>
    """

    repository: IUserRepository
    event_bus: Optional[IEventBus] = None

    async def execute(self, user_id: str) -> User:
        """Execute delete user command.

        Raises:
            UserNotFoundError: If user doesn't exist
            IllegalStateError: If user is already deleted
        """
        user = await self.repository.get_by_id(UserId.parse(user_id))

        user.delete()
        await self.repository.save(user)

        logger.info("User deleted", extra={"user_id": str(user.user_id)})

        await publish_user_events(user, self.event_bus)
        return user


@dataclass
class RemoveUserCommand:
    """Operator command to physically remove a user from the store.

    No domain event is emitted: the aggregate no longer exists.
    """

    repository: IUserRepository

    async def execute(self, user_id: str) -> None:
        """Execute remove user command.

        Raises:
            UserNotFoundError: If user doesn't exist
        """
        identifier = UserId.parse(user_id)

        if not await self.repository.delete(identifier):
            raise UserNotFoundError(str(identifier))

        logger.warning("User removed", extra={"user_id": str(identifier)})
