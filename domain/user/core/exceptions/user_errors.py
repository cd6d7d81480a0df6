"""User domain exceptions."""

from typing import Optional


class UserDomainError(Exception):
    """Base exception for User domain errors."""

    pass


class ValidationError(UserDomainError, ValueError):
    """Input does not satisfy a value object or aggregate field contract.

    Recoverable by the caller by supplying corrected input.
    Also a ValueError, so generic callers can catch it as such.
    """

    def __init__(self, field: str, reason: str):
        """Initialize with the offending field and reason.

        Args:
            field: Name of the field that failed validation
            reason: Human-readable reason
        """
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason}")


class IllegalStateError(UserDomainError):
    """Operation is not allowed in the aggregate's current status."""

    def __init__(self, operation: str, status: str, user_id: Optional[str] = None):
        """Initialize with attempted operation and current status.

        Args:
            operation: Name of the rejected operation (e.g. "activate")
            status: Current status token of the user
            user_id: Identifier of the user, when known
        """
        self.operation = operation
        self.status = status
        self.user_id = user_id
        target = f" user {user_id}" if user_id else " user"
        super().__init__(f"Cannot {operation}{target} in status {status}")


class UserNotFoundError(UserDomainError):
    """User was not found in the repository."""

    def __init__(self, identifier: str):
        """Initialize with user identifier.

        Args:
            identifier: User ID or email that was not found
        """
        self.identifier = identifier
        super().__init__(f"User not found: {identifier}")


class UserAlreadyExistsError(UserDomainError):
    """Another user already holds the given email."""

    def __init__(self, identifier: str):
        """Initialize with the conflicting identifier.

        Args:
            identifier: Email address already in use
        """
        self.identifier = identifier
        super().__init__(f"User already exists: {identifier}")
