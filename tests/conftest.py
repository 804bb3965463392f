"""Root conftest - shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Collections are built through build_registry, the same wiring production uses

Design Decisions:
    - SQLite in-memory with StaticPool: one shared connection, so every store call
      in a test sees the same database
"""

import os

import pytest
from sqlalchemy.pool import StaticPool

# Ensure tests never reach a real database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from vocabulary.infrastructure.database import DatabaseSessionManager  # noqa: E402
from vocabulary.services.registry import build_registry  # noqa: E402


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager(
        "sqlite+aiosqlite:///:memory:", poolclass=StaticPool,
    )
    await manager.create_all()
    yield manager
    await manager.dispose()


@pytest.fixture
async def registry(db_manager):
    return build_registry(db_manager)


@pytest.fixture
async def interests(registry):
    return registry.interests


@pytest.fixture
async def favorites(registry):
    return registry.favorites


@pytest.fixture
async def profiles(registry):
    return registry.profiles


@pytest.fixture
async def seeded(registry):
    """Two interests, two favorites, one profile referencing some of them."""
    await registry.interests.define(
        name="Databases", description="Storage systems",
    )
    await registry.interests.define(
        name="Software Engineering",
        description="Methods for group development of large software systems",
    )
    await registry.favorites.define(name="Hiking", description="Trails")
    await registry.favorites.define(name="Surfing")
    await registry.profiles.define(
        "johnson",
        first_name="Philip",
        last_name="Johnson",
        interests=["Databases"],
        favorites=["Surfing"],
    )
    return registry
