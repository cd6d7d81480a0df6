"""User repository factory for settings-based selection.

The repository implementation is chosen by the USER_REPOSITORY setting:
- "inmemory": InMemoryUserRepository

Default: inmemory. The factory returns a new instance on every call; the
composition root owns it.
"""

from typing import Optional

from domain.user.core.ports.user_repository import IUserRepository
from infrastructure.config import UserServiceSettings
from infrastructure.user.in_memory_user_repository import InMemoryUserRepository


def create_user_repository(settings: Optional[UserServiceSettings] = None) -> IUserRepository:
    """Create user repository based on configuration.

    Args:
        settings: Service settings (defaults to UserServiceSettings())

    Returns:
        IUserRepository: The configured repository implementation

    Raises:
        ValueError: If the configured backend is not supported
    """
    settings = settings or UserServiceSettings()
    repo_type = settings.repository_backend

    if repo_type == "inmemory":
        return InMemoryUserRepository()

    raise ValueError(f"Invalid USER_REPOSITORY value: {repo_type}. Expected 'inmemory'")
