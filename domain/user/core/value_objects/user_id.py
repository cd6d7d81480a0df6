"""UserId value object."""

from dataclasses import dataclass
import uuid

from domain.user.core.exceptions.user_errors import ValidationError


@dataclass(frozen=True)
class UserId:
    """User identifier value object.

    Wraps a UUID in its canonical string form (lower-case, hyphenated).
    Immutable, compared and hashed by value.

    Examples:
        >>> user_id = UserId.generate()
        >>> len(str(user_id))
        36

        >>> UserId.parse("E4B8C9D0-1234-5678-9ABC-DEF012345678").value
        'e4b8c9d0-1234-5678-9abc-def012345678'
    """

    value: str

    def __post_init__(self) -> None:
        """Validate and canonicalize the UUID string."""
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError("user_id", "must be a non-empty string")
        try:
            canonical = str(uuid.UUID(self.value.strip()))
        except ValueError as e:
            raise ValidationError("user_id", f"invalid UUID format: {self.value!r}") from e
        object.__setattr__(self, "value", canonical)

    @staticmethod
    def generate() -> "UserId":
        """Generate a new random UserId.

        Returns:
            New UserId with random UUID v4
        """
        return UserId(str(uuid.uuid4()))

    @staticmethod
    def parse(raw: object) -> "UserId":
        """Parse an identifier supplied by a caller.

        Args:
            raw: Candidate identifier (string, UUID or UserId)

        Returns:
            UserId in canonical form

        Raises:
            ValidationError: If raw is not a valid UUID
        """
        if isinstance(raw, UserId):
            return raw
        if isinstance(raw, uuid.UUID):
            return UserId(str(raw))
        if not isinstance(raw, str):
            raise ValidationError("user_id", f"expected a string, got {type(raw).__name__}")
        return UserId(raw)

    def __str__(self) -> str:
        """String representation returns the UUID value."""
        return self.value

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"UserId('{self.value}')"
