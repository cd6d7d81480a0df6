"""In-memory User Repository."""

from copy import deepcopy
import logging
import threading
from typing import Dict, Iterator, List, Optional, Set

from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import UserAlreadyExistsError
from domain.user.core.ports.user_repository import EmailLike, IUserRepository, StatusFilter
from domain.user.core.value_objects.user_id import UserId
from domain.user.core.value_objects.user_status import UserStatus

logger = logging.getLogger(__name__)


class InMemoryUserRepository(IUserRepository):
    """In-memory implementation of User repository.

    Stores users in a dict keyed by user_id, plus an index from
    normalized email to the ids holding it.

    Thread safety: every operation runs under one re-entrant lock, so the
    store can be shared by threads and by concurrent asyncio tasks.
    Isolation: stores and returns deep copies; pending domain events are
    never stored, they stay with the caller's instance.
    Persistence: data lost on process restart (in-memory only)

    Examples:
        >>> repo = InMemoryUserRepository()
        >>> user = User.create("ana@example.com", "Ana", "secret1")
        >>> await repo.save(user)
        >>> found = await repo.find_by_email("ANA@example.com")
    """

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._users: Dict[str, User] = {}
        self._ids_by_email: Dict[str, Set[str]] = {}
        self._lock = threading.RLock()

    async def save(self, user: User) -> User:
        """Save or update user in memory."""
        with self._lock:
            self._store(user)
        return user

    async def save_unique(self, user: User) -> User:
        """Save user unless another user already holds its email.

        Raises:
            UserAlreadyExistsError: If the email belongs to a different user
        """
        key = str(user.user_id)
        with self._lock:
            holders = self._ids_by_email.get(user.email.value, set())
            if holders - {key}:
                logger.info(
                    "Email already in use",
                    extra={"user_id": key, "email_domain": user.email.domain},
                )
                raise UserAlreadyExistsError(user.email.value)
            self._store(user)
        return user

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        with self._lock:
            user = self._users.get(str(user_id))
            return self._detach(user) if user is not None else None

    async def find_by_email(self, email: EmailLike) -> Optional[User]:
        key = _email_key(email)
        with self._lock:
            holders = self._ids_by_email.get(key)
            if not holders:
                return None
            first = next(user_key for user_key in self._users if user_key in holders)
            return self._detach(self._users[first])

    async def exists_by_email(self, email: EmailLike) -> bool:
        with self._lock:
            return bool(self._ids_by_email.get(_email_key(email)))

    async def find_all(
        self,
        page: int,
        size: int,
        status: StatusFilter = None,
        search: Optional[str] = None,
    ) -> List[User]:
        """List one page of users matching the filters.

        Note:
            Order follows first insertion while the store is not modified
            concurrently; it is not part of the repository contract.
        """
        start = page * size
        with self._lock:
            matches = list(self._matching(status, search))
            return [self._detach(user) for user in matches[start:start + size]]

    async def count(self, status: StatusFilter = None, search: Optional[str] = None) -> int:
        with self._lock:
            return sum(1 for _ in self._matching(status, search))

    async def delete(self, user_id: UserId) -> bool:
        """Physically remove user.

        Returns:
            True if user was removed, False if it was not stored
        """
        key = str(user_id)
        with self._lock:
            user = self._users.pop(key, None)
            if user is None:
                return False
            self._unindex(key, user.email.value)

        logger.debug("User removed from store", extra={"user_id": key})
        return True

    def clear(self) -> None:
        """Clear all users from memory.

        Useful for test cleanup.
        """
        with self._lock:
            self._users.clear()
            self._ids_by_email.clear()

    def _store(self, user: User) -> None:
        key = str(user.user_id)
        previous = self._users.get(key)
        if previous is not None and previous.email != user.email:
            self._unindex(key, previous.email.value)

        self._users[key] = self._detach(user)
        self._ids_by_email.setdefault(user.email.value, set()).add(key)

        logger.debug(
            "User saved",
            extra={"user_id": key, "status": user.status.value, "is_new": previous is None},
        )

    def _unindex(self, key: str, email: str) -> None:
        holders = self._ids_by_email.get(email)
        if holders is None:
            return
        holders.discard(key)
        if not holders:
            del self._ids_by_email[email]

    def _matching(self, status: StatusFilter, search: Optional[str]) -> Iterator[User]:
        status_token = _status_token(status)
        term = search.lower() if search and search.strip() else None

        for user in self._users.values():
            if status_token is not None and user.status.value != status_token:
                continue
            if term is not None and term not in user.name.lower() and term not in user.email.value:
                continue
            yield user

    @staticmethod
    def _detach(user: User) -> User:
        clone = deepcopy(user)
        clone.drain_events()
        return clone


def _email_key(email: EmailLike) -> str:
    return str(email).strip().lower()


def _status_token(status: StatusFilter) -> Optional[str]:
    if status is None:
        return None
    if isinstance(status, UserStatus):
        return status.value
    return status.strip() or None
