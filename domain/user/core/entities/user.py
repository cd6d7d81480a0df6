"""User entity - aggregate root."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
import hashlib
import hmac
from typing import Tuple, Union

from domain.shared.events.base import DomainEvent
from domain.user.core.events.user_created import UserCreated
from domain.user.core.events.user_lifecycle import UserActivated, UserDeactivated, UserDeleted
from domain.user.core.events.user_updated import (
    UserEmailUpdated,
    UserNameUpdated,
    UserPasswordChanged,
    UserStatusUpdated,
)
from domain.user.core.exceptions.user_errors import IllegalStateError, ValidationError
from domain.user.core.value_objects.email_address import EmailAddress
from domain.user.core.value_objects.user_id import UserId
from domain.user.core.value_objects.user_status import UserStatus

MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 100
MIN_PASSWORD_LENGTH = 6

# Statuses a user may be created with
CREATION_STATUSES = (UserStatus.PENDING, UserStatus.ACTIVE)


def _validate_name(name: object) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("name", "cannot be empty")
    trimmed = name.strip()
    if len(trimmed) < MIN_NAME_LENGTH:
        raise ValidationError("name", f"must be at least {MIN_NAME_LENGTH} characters")
    if len(trimmed) > MAX_NAME_LENGTH:
        raise ValidationError("name", f"cannot exceed {MAX_NAME_LENGTH} characters")
    return trimmed


def _digest_password(raw_password: object) -> str:
    """Derive the stored password digest.

    Unsalted SHA-256: a placeholder, not suitable for production credentials.
    """
    if not isinstance(raw_password, str) or not raw_password.strip():
        raise ValidationError("password", "cannot be empty")
    if len(raw_password) < MIN_PASSWORD_LENGTH:
        raise ValidationError("password", f"must be at least {MIN_PASSWORD_LENGTH} characters")
    return hashlib.sha256(raw_password.encode("utf-8")).hexdigest()


def _as_email(value: Union[EmailAddress, str]) -> EmailAddress:
    return value if isinstance(value, EmailAddress) else EmailAddress(value)


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class User:
    """User aggregate root.

    Invariants:
    - user_id is generated at creation and immutable
    - once status is DELETED the aggregate is terminal: email, name,
      password and status can no longer change
    - updated_at is refreshed by every successful mutation and never
      precedes created_at
    - the password digest never leaves the aggregate (see verify_password)

    Mutating methods validate first and only then change state, so a
    failed call leaves the aggregate untouched. Every mutation buffers a
    domain event; the caller collects them with drain_events() after
    persisting the aggregate.

    Examples:
        >>> user = User.create("ana@example.com", "Ana", "secret1")
        >>> user.status
        <UserStatus.PENDING: 'PENDING'>
        >>> user.activate()
        >>> [e.event_type for e in user.drain_events()]
        ['UserCreated', 'UserActivated']
        >>> user.drain_events()
        ()
    """

    user_id: UserId
    email: EmailAddress
    name: str
    status: UserStatus
    created_at: datetime
    updated_at: datetime
    _password_digest: str = field(repr=False)
    _events: Tuple[DomainEvent, ...] = field(default=(), init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.created_at.tzinfo is None or self.updated_at.tzinfo is None:
            raise ValueError("created_at and updated_at must be timezone-aware (use UTC)")
        if self.updated_at < self.created_at:
            raise ValueError(
                f"updated_at cannot be before created_at: {self.updated_at} < {self.created_at}"
            )
        if not self._password_digest:
            raise ValueError("password digest cannot be empty")

    @staticmethod
    def create(
        email: Union[EmailAddress, str],
        name: str,
        raw_password: str,
        initial_status: UserStatus = UserStatus.PENDING,
    ) -> "User":
        """Factory method to create a new user.

        Args:
            email: Email address (validated and normalized)
            name: Display name, 2-100 characters after trimming
            raw_password: Plain password, at least 6 characters
            initial_status: PENDING (default) or ACTIVE

        Returns:
            New User instance with a buffered UserCreated event

        Raises:
            ValidationError: If any field is invalid
        """
        email_address = _as_email(email)
        display_name = _validate_name(name)
        digest = _digest_password(raw_password)
        status = UserStatus.from_token(initial_status)
        if status not in CREATION_STATUSES:
            raise ValidationError(
                "initial_status", f"users can only be created PENDING or ACTIVE, not {status.value}"
            )

        now = _now()
        user = User(
            user_id=UserId.generate(),
            email=email_address,
            name=display_name,
            status=status,
            created_at=now,
            updated_at=now,
            _password_digest=digest,
        )
        user._record(UserCreated.create(user.user_id, email_address, display_name, status))
        return user

    @property
    def is_active(self) -> bool:
        return self.status is UserStatus.ACTIVE

    @property
    def can_login(self) -> bool:
        return self.status.can_login

    @property
    def pending_events(self) -> Tuple[DomainEvent, ...]:
        """Buffered events, without clearing them."""
        return self._events

    def update_email(self, new_email: Union[EmailAddress, str]) -> None:
        """Replace the email address.

        Raises:
            IllegalStateError: If the user is deleted
            ValidationError: If the address is malformed
        """
        self._ensure_mutable("update email of")
        email_address = _as_email(new_email)

        old_email = self.email
        self.email = email_address
        self._touch()
        self._record(UserEmailUpdated.create(self.user_id, old_email, email_address))

    def update_name(self, new_name: str) -> None:
        """Replace the display name.

        Raises:
            IllegalStateError: If the user is deleted
            ValidationError: If the name is blank or outside 2-100 characters
        """
        self._ensure_mutable("update name of")
        display_name = _validate_name(new_name)

        old_name = self.name
        self.name = display_name
        self._touch()
        self._record(UserNameUpdated.create(self.user_id, old_name, display_name))

    def update_status(self, new_status: Union[UserStatus, str]) -> None:
        """Reassign the status.

        Any status may be assigned while the user is not deleted; the
        dedicated activate/deactivate/delete methods add stricter guards.

        Raises:
            IllegalStateError: If the user is deleted
            ValidationError: If new_status is not a known token
        """
        self._ensure_mutable("update status of")
        status = UserStatus.from_token(new_status)

        old_status = self.status
        self.status = status
        self._touch()
        self._record(UserStatusUpdated.create(self.user_id, old_status, status))

    def change_password(self, raw_password: str) -> None:
        """Replace the password digest.

        Raises:
            IllegalStateError: If the user is deleted
            ValidationError: If the password is too short
        """
        self._ensure_mutable("change password of")
        self._password_digest = _digest_password(raw_password)
        self._touch()
        self._record(UserPasswordChanged.create(self.user_id))

    def verify_password(self, raw_password: str) -> bool:
        """Check a plain password against the stored digest."""
        if not isinstance(raw_password, str):
            return False
        candidate = hashlib.sha256(raw_password.encode("utf-8")).hexdigest()
        return hmac.compare_digest(candidate, self._password_digest)

    def activate(self) -> None:
        """Move the user to ACTIVE.

        Raises:
            IllegalStateError: If already active or deleted
        """
        if self.status is UserStatus.ACTIVE:
            raise IllegalStateError("activate", self.status.value, str(self.user_id))
        self._ensure_mutable("activate")
        self._transition(UserStatus.ACTIVE, UserActivated)

    def deactivate(self) -> None:
        """Move the user to INACTIVE.

        Raises:
            IllegalStateError: If already inactive or deleted
        """
        if self.status is UserStatus.INACTIVE:
            raise IllegalStateError("deactivate", self.status.value, str(self.user_id))
        self._ensure_mutable("deactivate")
        self._transition(UserStatus.INACTIVE, UserDeactivated)

    def delete(self) -> None:
        """Soft-delete the user. DELETED is terminal.

        Raises:
            IllegalStateError: If already deleted
        """
        self._ensure_mutable("delete")
        self._transition(UserStatus.DELETED, UserDeleted)

    def drain_events(self) -> Tuple[DomainEvent, ...]:
        """Hand over buffered events in emission order and clear the buffer.

        Returns:
            Tuple of domain events; empty if nothing happened since the
            previous drain
        """
        events, self._events = self._events, ()
        return events

    def _transition(self, target: UserStatus, event_type) -> None:
        previous = self.status
        self.status = target
        self._touch()
        self._record(event_type.create(self.user_id, previous))

    def _ensure_mutable(self, operation: str) -> None:
        if not self.status.can_update:
            raise IllegalStateError(operation, self.status.value, str(self.user_id))

    def _touch(self) -> None:
        self.updated_at = max(_now(), self.created_at)

    def _record(self, event: DomainEvent) -> None:
        self._events = self._events + (event,)

    def __eq__(self, other: object) -> bool:
        """Equality based on user_id (aggregate identity)."""
        if not isinstance(other, User):
            return False
        return self.user_id == other.user_id

    def __hash__(self) -> int:
        """Hash based on user_id (aggregate identity)."""
        return hash(self.user_id)
