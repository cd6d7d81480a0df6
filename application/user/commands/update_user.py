"""Update user command."""

from dataclasses import dataclass
import logging
from typing import List, Optional

from application.user.event_publisher import publish_user_events
from domain.shared.ports.event_bus import IEventBus
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass
class UpdateUserCommand:
    """Command to update email, name and/or status of a user.

    Fields left as None are not touched. Changes are applied to a copy
    loaded from the repository and saved together, so a failing field
    leaves the stored user unchanged.

    Examples:
        >>> command = UpdateUserCommand(repository)
        >>> user = await command.execute(user_id, name="Ana Maria", status="SUSPENDED")
    """

    repository: IUserRepository
    event_bus: Optional[IEventBus] = None
    unique_email: bool = True

    async def execute(
        self,
        user_id: str,
        email: Optional[str] = None,
        name: Optional[str] = None,
        status: Optional[str] = None,
    ) -> User:
        """Execute update user command.

        Returns:
            Updated user entity

        Raises:
            ValidationError: If the id or any new value is invalid
            UserNotFoundError: If user doesn't exist
            IllegalStateError: If the user is deleted
            UserAlreadyExistsError: If the new email belongs to another user
        """
        user = await self.repository.get_by_id(UserId.parse(user_id))

        changed: List[str] = []
        if email is not None:
            user.update_email(email)
            changed.append("email")
        if name is not None:
            user.update_name(name)
            changed.append("name")
        if status is not None:
            user.update_status(status)
            changed.append("status")

        if not changed:
            return user

        if self.unique_email and "email" in changed:
            await self.repository.save_unique(user)
        else:
            await self.repository.save(user)

        logger.info(
            "User updated",
            extra={"user_id": str(user.user_id), "fields": changed},
        )

        await publish_user_events(user, self.event_bus)
        return user
