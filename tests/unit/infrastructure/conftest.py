"""Fixtures for infrastructure tests."""

import os

import pytest

SERVICE_ENV_VARS = (
    "USER_REPOSITORY",
    "USER_INITIAL_STATUS",
    "USER_UNIQUE_EMAIL",
    "USER_DEFAULT_PAGE_SIZE",
    "USER_MAX_PAGE_SIZE",
    "LOG_LEVEL",
)


@pytest.fixture
def clean_env():
    """Unset service variables and restore the environment afterwards.

    load_dotenv writes to os.environ directly, so the whole mapping is
    snapshotted instead of relying on monkeypatch.
    """
    saved = dict(os.environ)
    for name in SERVICE_ENV_VARS:
        os.environ.pop(name, None)
    yield os.environ
    os.environ.clear()
    os.environ.update(saved)
