"""UserCreated domain event."""

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4

from domain.shared.events.base import DomainEvent
from domain.user.core.value_objects.email_address import EmailAddress
from domain.user.core.value_objects.user_id import UserId
from domain.user.core.value_objects.user_status import UserStatus


@dataclass(frozen=True)
class UserCreated(DomainEvent):
    """Domain event: User was created.

    Emitted once by User.create() for every new user.

    Attributes:
        user_id: Identifier of the new user
        email: Normalized email address
        name: Trimmed display name
        status: Initial status

    Examples:
        >>> event = UserCreated.create(
        ...     user_id=UserId.generate(),
        ...     email=EmailAddress("ana@example.com"),
        ...     name="Ana",
        ...     status=UserStatus.PENDING,
        ... )
        >>> event.event_type
        'UserCreated'
    """

    user_id: UserId
    email: EmailAddress
    name: str
    status: UserStatus

    @classmethod
    def create(
        cls,
        user_id: UserId,
        email: EmailAddress,
        name: str,
        status: UserStatus,
    ) -> "UserCreated":
        """Create new UserCreated event with generated event_id and current timestamp."""
        return cls(
            event_id=uuid4(),
            occurred_at=datetime.now(timezone.utc),
            user_id=user_id,
            email=email,
            name=name,
            status=status,
        )
