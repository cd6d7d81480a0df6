"""List users query."""

from dataclasses import dataclass
from typing import List, Optional

from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import ValidationError
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.user_status import UserStatus


@dataclass(frozen=True)
class UserPage:
    """One page of users plus the total number of matches."""

    items: List[User]
    total: int
    page: int
    size: int

    @property
    def total_pages(self) -> int:
        return (self.total + self.size - 1) // self.size

    @property
    def has_next(self) -> bool:
        return (self.page + 1) * self.size < self.total


@dataclass
class ListUsersQuery:
    """Query to list users with paging, status filter and free-text search.

    Validates paging arguments and the status token before reaching the
    repository, which performs no bounds checking itself.

    Examples:
        >>> query = ListUsersQuery(repository)
        >>> page = await query.execute(page=0, size=10, status="ACTIVE", search="ana")
        >>> page.total
        1
    """

    repository: IUserRepository
    default_page_size: int = 20
    max_page_size: int = 100

    async def execute(
        self,
        page: int = 0,
        size: Optional[int] = None,
        status: Optional[str] = None,
        search: Optional[str] = None,
    ) -> UserPage:
        """Execute list users query.

        Args:
            page: Zero-based page number
            size: Page size (defaults to default_page_size)
            status: Optional status token
            search: Optional case-insensitive term matched on name or email

        Returns:
            UserPage with the page items and the total match count

        Raises:
            ValidationError: If page, size or status is invalid
        """
        size = self.default_page_size if size is None else size
        if page < 0:
            raise ValidationError("page", "must be zero or greater")
        if not 1 <= size <= self.max_page_size:
            raise ValidationError("size", f"must be between 1 and {self.max_page_size}")

        status_filter = UserStatus.from_token(status) if status and status.strip() else None

        items = await self.repository.find_all(page, size, status_filter, search)
        total = await self.repository.count(status_filter, search)
        return UserPage(items=items, total=total, page=page, size=size)
