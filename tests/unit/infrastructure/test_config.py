"""Tests for settings loading."""

import pytest

from domain.user.core.value_objects.user_status import UserStatus
from infrastructure.config import UserServiceSettings, load_settings


def test_defaults():
    """Test default settings."""
    settings = UserServiceSettings.from_env({})

    assert settings.repository_backend == "inmemory"
    assert settings.initial_status is UserStatus.PENDING
    assert settings.unique_email is True
    assert settings.default_page_size == 20
    assert settings.max_page_size == 100
    assert settings.log_level == "INFO"


def test_values_are_read_and_normalized():
    """Test parsing of every variable."""
    settings = UserServiceSettings.from_env(
        {
            "USER_REPOSITORY": " InMemory ",
            "USER_INITIAL_STATUS": "active",
            "USER_UNIQUE_EMAIL": "no",
            "USER_DEFAULT_PAGE_SIZE": "5",
            "USER_MAX_PAGE_SIZE": "50",
            "LOG_LEVEL": "debug",
        }
    )

    assert settings.repository_backend == "inmemory"
    assert settings.initial_status is UserStatus.ACTIVE
    assert settings.unique_email is False
    assert settings.default_page_size == 5
    assert settings.max_page_size == 50
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "env, message",
    [
        ({"USER_REPOSITORY": "mongodb"}, "USER_REPOSITORY"),
        ({"USER_INITIAL_STATUS": "ENABLED"}, "USER_INITIAL_STATUS"),
        ({"USER_INITIAL_STATUS": "SUSPENDED"}, "USER_INITIAL_STATUS"),
        ({"USER_UNIQUE_EMAIL": "maybe"}, "USER_UNIQUE_EMAIL"),
        ({"USER_DEFAULT_PAGE_SIZE": "ten"}, "USER_DEFAULT_PAGE_SIZE"),
        ({"USER_DEFAULT_PAGE_SIZE": "500"}, "USER_DEFAULT_PAGE_SIZE"),
        ({"USER_MAX_PAGE_SIZE": "0"}, "USER_MAX_PAGE_SIZE"),
    ],
)
def test_invalid_values_raise(env, message):
    """Test that invalid values fail fast."""
    with pytest.raises(ValueError, match=message):
        UserServiceSettings.from_env(env)


def test_blank_values_fall_back_to_defaults():
    """Test that empty variables are treated as unset."""
    settings = UserServiceSettings.from_env({"USER_UNIQUE_EMAIL": " ", "USER_MAX_PAGE_SIZE": ""})

    assert settings.unique_email is True
    assert settings.max_page_size == 100


def test_load_settings_reads_env_file(clean_env, tmp_path):
    """Test that load_settings loads a .env file."""
    env_file = tmp_path / ".env"
    env_file.write_text("USER_INITIAL_STATUS=ACTIVE\nUSER_DEFAULT_PAGE_SIZE=7\n")

    settings = load_settings(env_file)

    assert settings.initial_status is UserStatus.ACTIVE
    assert settings.default_page_size == 7


def test_load_settings_existing_variables_win(clean_env, tmp_path):
    """Test that the process environment overrides the .env file."""
    env_file = tmp_path / ".env"
    env_file.write_text("USER_DEFAULT_PAGE_SIZE=7\n")
    clean_env["USER_DEFAULT_PAGE_SIZE"] = "9"

    settings = load_settings(env_file)

    assert settings.default_page_size == 9


def test_load_settings_without_env_file(clean_env, tmp_path):
    """Test that a missing .env file is ignored."""
    settings = load_settings(tmp_path / "missing.env")

    assert settings == UserServiceSettings()
