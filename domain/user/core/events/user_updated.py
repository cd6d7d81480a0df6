"""User update domain events.

Raised when a mutable attribute of the User aggregate changes.
Each event carries both old and new values for audit purposes.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4

from domain.shared.events.base import DomainEvent
from domain.user.core.value_objects.email_address import EmailAddress
from domain.user.core.value_objects.user_id import UserId
from domain.user.core.value_objects.user_status import UserStatus


@dataclass(frozen=True)
class UserEmailUpdated(DomainEvent):
    """Domain event: User email address was replaced.

    Attributes:
        user_id: Identifier of the user
        old_email: Previous address
        new_email: New address
    """

    user_id: UserId
    old_email: EmailAddress
    new_email: EmailAddress

    @classmethod
    def create(
        cls, user_id: UserId, old_email: EmailAddress, new_email: EmailAddress
    ) -> "UserEmailUpdated":
        return cls(
            event_id=uuid4(),
            occurred_at=datetime.now(timezone.utc),
            user_id=user_id,
            old_email=old_email,
            new_email=new_email,
        )


@dataclass(frozen=True)
class UserNameUpdated(DomainEvent):
    """Domain event: User display name was replaced."""

    user_id: UserId
    old_name: str
    new_name: str

    @classmethod
    def create(cls, user_id: UserId, old_name: str, new_name: str) -> "UserNameUpdated":
        return cls(
            event_id=uuid4(),
            occurred_at=datetime.now(timezone.utc),
            user_id=user_id,
            old_name=old_name,
            new_name=new_name,
        )


@dataclass(frozen=True)
class UserStatusUpdated(DomainEvent):
    """Domain event: User status was reassigned through update_status().

    Dedicated transitions (activate, deactivate, delete) raise their own
    events instead.
    """

    user_id: UserId
    old_status: UserStatus
    new_status: UserStatus

    @classmethod
    def create(
        cls, user_id: UserId, old_status: UserStatus, new_status: UserStatus
    ) -> "UserStatusUpdated":
        return cls(
            event_id=uuid4(),
            occurred_at=datetime.now(timezone.utc),
            user_id=user_id,
            old_status=old_status,
            new_status=new_status,
        )


@dataclass(frozen=True)
class UserPasswordChanged(DomainEvent):
    """Domain event: User password was changed.

    Carries no credential material.
    """

    user_id: UserId

    @classmethod
    def create(cls, user_id: UserId) -> "UserPasswordChanged":
        return cls(
            event_id=uuid4(),
            occurred_at=datetime.now(timezone.utc),
            user_id=user_id,
        )
