"""Get user query."""

from dataclasses import dataclass
from typing import Optional

from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import EmailLike, IUserRepository
from domain.user.core.value_objects.user_id import UserId


@dataclass
class GetUserQuery:
    """Query to get user by identifier or email.

    Read-only operation that retrieves user from repository.

    Examples:
        >>> query = GetUserQuery(repository)
        >>> user = await query.by_id("e4b8c9d0-1234-5678-9abc-def012345678")
        >>> user = await query.by_email("ana@example.com")
    """

    repository: IUserRepository

    async def by_id(self, user_id: str) -> User:
        """Get user by identifier.

        Args:
            user_id: User identifier as supplied by the caller

        Returns:
            User entity

        Raises:
            ValidationError: If user_id is not a valid identifier
            UserNotFoundError: If no user has this identifier
        """
        return await self.repository.get_by_id(UserId.parse(user_id))

    async def by_email(self, email: EmailLike) -> Optional[User]:
        """Get user by email.

        Returns:
            User entity or None if not found
        """
        return await self.repository.find_by_email(email)

    async def email_exists(self, email: EmailLike) -> bool:
        """Check if email is already used by some user."""
        return await self.repository.exists_by_email(email)
