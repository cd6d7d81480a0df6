"""User lifecycle domain events.

Raised by the dedicated status transitions of the User aggregate:
activate(), deactivate() and delete().
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4

from domain.shared.events.base import DomainEvent
from domain.user.core.value_objects.user_id import UserId
from domain.user.core.value_objects.user_status import UserStatus


@dataclass(frozen=True)
class _UserTransition(DomainEvent):
    """Common payload of lifecycle events."""

    user_id: UserId
    previous_status: UserStatus

    @classmethod
    def create(cls, user_id: UserId, previous_status: UserStatus):
        return cls(
            event_id=uuid4(),
            occurred_at=datetime.now(timezone.utc),
            user_id=user_id,
            previous_status=previous_status,
        )


@dataclass(frozen=True)
class UserActivated(_UserTransition):
    """Domain event: User account became ACTIVE."""


@dataclass(frozen=True)
class UserDeactivated(_UserTransition):
    """Domain event: User account became INACTIVE."""


@dataclass(frozen=True)
class UserDeleted(_UserTransition):
    """Domain event: User was soft-deleted.

    The record stays in the repository with status DELETED; physical
    removal is a separate repository operation.
    """
