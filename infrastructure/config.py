"""Configuration utilities for infrastructure layer.

Settings are read from environment variables. A .env file, when present,
is loaded first with python-dotenv (existing variables win).

Example .env:
    USER_REPOSITORY=inmemory
    USER_INITIAL_STATUS=PENDING
    USER_UNIQUE_EMAIL=true
    USER_DEFAULT_PAGE_SIZE=20
    USER_MAX_PAGE_SIZE=100
    LOG_LEVEL=INFO
"""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Mapping, Optional, Union

from dotenv import load_dotenv

from domain.user.core.entities.user import CREATION_STATUSES
from domain.user.core.value_objects.user_status import UserStatus

REPOSITORY_BACKENDS = ("inmemory",)

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class UserServiceSettings:
    """Runtime settings of the user service.

    Attributes:
        repository_backend: Repository implementation ("inmemory")
        initial_status: Status given to newly registered users
        unique_email: Reject writes that would share an email between users
        default_page_size: Page size used when the caller gives none
        max_page_size: Largest page size accepted by list queries
        log_level: Root logging level name
    """

    repository_backend: str = "inmemory"
    initial_status: UserStatus = UserStatus.PENDING
    unique_email: bool = True
    default_page_size: int = 20
    max_page_size: int = 100
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        """Validate settings."""
        if self.repository_backend not in REPOSITORY_BACKENDS:
            raise ValueError(
                f"Invalid USER_REPOSITORY value: {self.repository_backend}. "
                f"Expected one of {', '.join(REPOSITORY_BACKENDS)}"
            )
        if self.initial_status not in CREATION_STATUSES:
            raise ValueError(
                f"Invalid USER_INITIAL_STATUS value: {self.initial_status}. "
                "Expected PENDING or ACTIVE"
            )
        if self.max_page_size < 1:
            raise ValueError("USER_MAX_PAGE_SIZE must be at least 1")
        if not 1 <= self.default_page_size <= self.max_page_size:
            raise ValueError(
                f"USER_DEFAULT_PAGE_SIZE must be between 1 and {self.max_page_size}, "
                f"got {self.default_page_size}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "UserServiceSettings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Raises:
            ValueError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ

        status_token = env.get("USER_INITIAL_STATUS", "PENDING").strip().upper()
        try:
            initial_status = UserStatus(status_token)
        except ValueError as e:
            raise ValueError(f"Invalid USER_INITIAL_STATUS value: {status_token}") from e

        return cls(
            repository_backend=env.get("USER_REPOSITORY", "inmemory").strip().lower(),
            initial_status=initial_status,
            unique_email=_get_bool(env, "USER_UNIQUE_EMAIL", True),
            default_page_size=_get_int(env, "USER_DEFAULT_PAGE_SIZE", 20),
            max_page_size=_get_int(env, "USER_MAX_PAGE_SIZE", 100),
            log_level=env.get("LOG_LEVEL", "INFO").strip().upper(),
        )


def load_settings(env_file: Optional[Union[str, Path]] = None) -> UserServiceSettings:
    """Load .env (if any) and read settings from the environment.

    Args:
        env_file: Explicit .env path; defaults to ./.env

    Returns:
        Validated settings
    """
    path = Path(env_file) if env_file is not None else Path.cwd() / ".env"
    if path.exists():
        load_dotenv(path)
    return UserServiceSettings.from_env()


def _get_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"Invalid {name} value: {raw}. Expected true or false")


def _get_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as e:
        raise ValueError(f"Invalid {name} value: {raw}. Expected an integer") from e
