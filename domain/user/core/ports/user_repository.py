"""User repository port (interface)."""

from abc import ABC, abstractmethod
from typing import List, Optional, Union

from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import UserNotFoundError
from domain.user.core.value_objects.email_address import EmailAddress
from domain.user.core.value_objects.user_id import UserId
from domain.user.core.value_objects.user_status import UserStatus

EmailLike = Union[EmailAddress, str]
StatusFilter = Optional[Union[UserStatus, str]]


class IUserRepository(ABC):
    """Repository interface for User aggregate.

    Defines contract for user persistence operations, keyed by the user
    identifier. Implementations must be safe for concurrent callers: each
    call is atomic on its own, but a sequence of calls (e.g.
    exists_by_email followed by save) is not. Use save_unique when an
    email must not be shared.

    Examples:
        >>> repository: IUserRepository = InMemoryUserRepository()
        >>> await repository.save(User.create("ana@example.com", "Ana", "secret1"))
    """

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save user (create or update).

        Last writer wins; no optimistic concurrency check.

        Args:
            user: User entity to persist

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def save_unique(self, user: User) -> User:
        """Save user only if no other user holds the same email.

        The check and the write happen in one atomic step.

        Args:
            user: User entity to persist

        Returns:
            The saved user

        Raises:
            UserAlreadyExistsError: If a different user has the same email
        """
        pass

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find user by identifier.

        Returns:
            User entity if found, None otherwise
        """
        pass

    async def get_by_id(self, user_id: UserId) -> User:
        """Load user by identifier or fail.

        Raises:
            UserNotFoundError: If no user has this identifier
        """
        user = await self.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))
        return user

    @abstractmethod
    async def find_by_email(self, email: EmailLike) -> Optional[User]:
        """Find first user with the given email.

        Note:
            Raw strings are compared after trimming and lower-casing and
            are never validated: a malformed address simply matches nothing.
        """
        pass

    @abstractmethod
    async def exists_by_email(self, email: EmailLike) -> bool:
        """Check if any user has the given email."""
        pass

    @abstractmethod
    async def find_all(
        self,
        page: int,
        size: int,
        status: StatusFilter = None,
        search: Optional[str] = None,
    ) -> List[User]:
        """List users matching the filters, one page at a time.

        Filters are applied in order: status equality (when given and not
        blank), then a case-insensitive substring match on name OR email
        (when search is given and not blank). The first page*size matches
        are skipped and at most size users are returned.

        Args:
            page: Zero-based page number (validated by the caller)
            size: Page size (validated by the caller)
            status: Optional status or status token
            search: Optional search term

        Returns:
            Users of the requested page, possibly empty
        """
        pass

    @abstractmethod
    async def count(self, status: StatusFilter = None, search: Optional[str] = None) -> int:
        """Count users matching the same filters as find_all, without paging."""
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> bool:
        """Physically remove a user.

        Distinct from User.delete(), which only marks the user DELETED.

        Returns:
            True if user was removed, False if not found
        """
        pass
