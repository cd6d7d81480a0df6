"""EmailAddress value object."""

from dataclasses import dataclass
import re

from domain.user.core.exceptions.user_errors import ValidationError

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.%-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")
MAX_EMAIL_LENGTH = 254

COMMON_PROVIDERS = frozenset({"gmail.com", "yahoo.com", "hotmail.com", "outlook.com"})


@dataclass(frozen=True)
class EmailAddress:
    """Email address value object.

    The address is trimmed and lower-cased on construction, so two inputs
    differing only by case or surrounding whitespace are equal.

    Examples:
        >>> email = EmailAddress("  Ana.Rossi@Example.COM ")
        >>> email.value
        'ana.rossi@example.com'
        >>> email.domain
        'example.com'
    """

    value: str

    def __post_init__(self) -> None:
        """Validate format and length, then normalize."""
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError("email", "cannot be empty")

        normalized = self.value.strip().lower()

        if len(normalized) > MAX_EMAIL_LENGTH:
            raise ValidationError(
                "email", f"cannot exceed {MAX_EMAIL_LENGTH} characters (got {len(normalized)})"
            )
        if not EMAIL_PATTERN.match(normalized):
            raise ValidationError("email", f"invalid format: {self.value!r}")

        object.__setattr__(self, "value", normalized)

    @property
    def local_part(self) -> str:
        """Part before the '@'."""
        return self.value.split("@", 1)[0]

    @property
    def domain(self) -> str:
        """Part after the '@'."""
        return self.value.split("@", 1)[1]

    def is_common_provider(self) -> bool:
        """Check whether the address belongs to a large public mail provider."""
        return self.domain in COMMON_PROVIDERS

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"EmailAddress('{self.value}')"
