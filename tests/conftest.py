"""Shared test fixtures.

Loads .env.test (if present) so tests never depend on the developer's
own environment, and provides fresh in-memory collaborators per test.
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from domain.user.core.entities.user import User
from infrastructure.events.in_memory_bus import InMemoryEventBus
from infrastructure.user.in_memory_user_repository import InMemoryUserRepository

env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)


@pytest.fixture
def repository():
    """Create fresh repository for each test."""
    return InMemoryUserRepository()


@pytest.fixture
def event_bus():
    """Create fresh event bus for each test."""
    return InMemoryEventBus()


@pytest.fixture
def sample_user():
    """Create sample user with its creation event already drained."""
    user = User.create("ana.rossi@example.com", "Ana Rossi", "secret1")
    user.drain_events()
    return user
