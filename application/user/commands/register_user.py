"""Register user command."""

from dataclasses import dataclass
import logging
from typing import Optional

from application.user.event_publisher import publish_user_events
from domain.shared.ports.event_bus import IEventBus
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.user_status import UserStatus

logger = logging.getLogger(__name__)


@dataclass
class RegisterUserCommand:
    """Command to register a new user.

    Creates the User aggregate, stores it and publishes UserCreated.
    With unique_email enabled the store rejects an email that already
    belongs to someone else, atomically.

    Examples:
        >>> command = RegisterUserCommand(repository, event_bus)
        >>> user = await command.execute("ana@example.com", "Ana", "secret1")
        >>> user.status
        <UserStatus.PENDING: 'PENDING'>
    """

    repository: IUserRepository
    event_bus: Optional[IEventBus] = None
    initial_status: UserStatus = UserStatus.PENDING
    unique_email: bool = True

    async def execute(self, email: str, name: str, password: str) -> User:
        """Execute register user command.

        Args:
            email: Raw email address
            name: Display name
            password: Plain password

        Returns:
            Registered user entity

        Raises:
            ValidationError: If any field is invalid
            UserAlreadyExistsError: If unique_email is on and the email is taken
        """
        user = User.create(email, name, password, initial_status=self.initial_status)

        if self.unique_email:
            await self.repository.save_unique(user)
        else:
            await self.repository.save(user)

        logger.info(
            "User registered",
            extra={"user_id": str(user.user_id), "status": user.status.value},
        )

        await publish_user_events(user, self.event_bus)
        return user
