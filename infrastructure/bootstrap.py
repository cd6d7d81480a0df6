"""Composition root of the user service.

Builds the repository, the event bus and every use case from settings.
Each call returns an independent set of services; nothing is cached at
module level.

Example:
    >>> services = build_user_services()
    >>> user = await services.register.execute("ana@example.com", "Ana", "secret1")
    >>> await services.activate.execute(str(user.user_id))
"""

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Optional, Union

from application.user.commands.activate_user import ActivateUserCommand
from application.user.commands.change_password import ChangePasswordCommand
from application.user.commands.deactivate_user import DeactivateUserCommand
from application.user.commands.delete_user import DeleteUserCommand, RemoveUserCommand
from application.user.commands.register_user import RegisterUserCommand
from application.user.commands.update_user import UpdateUserCommand
from application.user.handlers.registry import register_user_event_handlers
from application.user.queries.get_user import GetUserQuery
from application.user.queries.list_users import ListUsersQuery
from domain.user.core.ports.user_repository import IUserRepository
from infrastructure.config import UserServiceSettings, load_settings
from infrastructure.events.in_memory_bus import InMemoryEventBus
from infrastructure.log_config import configure_logging
from infrastructure.user.repository_factory import create_user_repository

logger = logging.getLogger(__name__)


@dataclass
class UserServices:
    """Wired use cases sharing one repository and one event bus."""

    settings: UserServiceSettings
    repository: IUserRepository
    event_bus: InMemoryEventBus
    register: RegisterUserCommand
    update: UpdateUserCommand
    activate: ActivateUserCommand
    deactivate: DeactivateUserCommand
    delete: DeleteUserCommand
    remove: RemoveUserCommand
    change_password: ChangePasswordCommand
    get: GetUserQuery
    list_users: ListUsersQuery


def build_user_services(
    settings: Optional[UserServiceSettings] = None,
    repository: Optional[IUserRepository] = None,
) -> UserServices:
    """Wire the user service.

    Args:
        settings: Service settings (defaults to UserServiceSettings())
        repository: Repository to use instead of the configured one

    Returns:
        UserServices ready to use
    """
    settings = settings or UserServiceSettings()
    repository = repository if repository is not None else create_user_repository(settings)

    event_bus = InMemoryEventBus()
    register_user_event_handlers(event_bus)

    logger.info(
        "User service wired",
        extra={
            "repository": type(repository).__name__,
            "initial_status": settings.initial_status.value,
            "unique_email": settings.unique_email,
        },
    )

    return UserServices(
        settings=settings,
        repository=repository,
        event_bus=event_bus,
        register=RegisterUserCommand(
            repository,
            event_bus,
            initial_status=settings.initial_status,
            unique_email=settings.unique_email,
        ),
        update=UpdateUserCommand(repository, event_bus, unique_email=settings.unique_email),
        activate=ActivateUserCommand(repository, event_bus),
        deactivate=DeactivateUserCommand(repository, event_bus),
        delete=DeleteUserCommand(repository, event_bus),
        remove=RemoveUserCommand(repository),
        change_password=ChangePasswordCommand(repository, event_bus),
        get=GetUserQuery(repository),
        list_users=ListUsersQuery(
            repository,
            default_page_size=settings.default_page_size,
            max_page_size=settings.max_page_size,
        ),
    )


def bootstrap_from_env(env_file: Optional[Union[str, Path]] = None) -> UserServices:
    """Load settings from the environment, configure logging and wire the service.

    Args:
        env_file: Optional .env file to load first

    Returns:
        UserServices built from the loaded settings
    """
    settings = load_settings(env_file)
    configure_logging(settings.log_level)
    return build_user_services(settings)
