"""UserStatus value object."""

from enum import Enum

from domain.user.core.exceptions.user_errors import ValidationError


class UserStatus(str, Enum):
    """Account status of a user.

    Values are the literal tokens exchanged with callers.

    Lifecycle:
        PENDING -> ACTIVE <-> INACTIVE <-> SUSPENDED
        any status other than DELETED -> DELETED (terminal)
    """

    PENDING = "PENDING"
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    SUSPENDED = "SUSPENDED"
    DELETED = "DELETED"

    @property
    def can_login(self) -> bool:
        """Only active users may log in."""
        return self is UserStatus.ACTIVE

    @property
    def can_update(self) -> bool:
        """Deleted users are terminal and cannot be modified."""
        return self is not UserStatus.DELETED

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @classmethod
    def from_token(cls, raw: object) -> "UserStatus":
        """Parse a status token supplied by a caller.

        Args:
            raw: Token such as "ACTIVE" (case and surrounding spaces ignored)
                or a UserStatus member

        Returns:
            Matching UserStatus

        Raises:
            ValidationError: If the token is not a known status

        Examples:
            >>> UserStatus.from_token(" active ")
            <UserStatus.ACTIVE: 'ACTIVE'>
        """
        if isinstance(raw, UserStatus):
            return raw
        if not isinstance(raw, str) or not raw.strip():
            raise ValidationError("status", "cannot be empty")
        try:
            return cls(raw.strip().upper())
        except ValueError as e:
            allowed = ", ".join(member.value for member in cls)
            raise ValidationError("status", f"unknown status {raw!r} (expected one of {allowed})") from e

    def __str__(self) -> str:
        return self.value


_DESCRIPTIONS = {
    UserStatus.PENDING: "Pending activation",
    UserStatus.ACTIVE: "Active user",
    UserStatus.INACTIVE: "Inactive user",
    UserStatus.SUSPENDED: "Temporarily suspended",
    UserStatus.DELETED: "Deleted user",
}
