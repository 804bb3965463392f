"""Startup - init_registry() from settings."""

import json
import logging

import pytest

from vocabulary.config import Settings
from vocabulary.services.startup import init_registry


@pytest.fixture(autouse=True)
def restore_root_logger():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    for handler in logging.root.handlers:
        if handler not in handlers:
            logging.root.removeHandler(handler)
    logging.root.setLevel(level)


def _settings(**overrides) -> Settings:
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        log_format="text",
        **overrides,
    )


async def test_init_registry_creates_schema():
    runtime = await init_registry(_settings(create_schema_on_startup=True))
    try:
        assert await runtime.manager.health_check() is True
        assert await runtime.registry.interests.count() == 0
    finally:
        await runtime.manager.dispose()


async def test_init_registry_seeds_from_file(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text(json.dumps({
        "interests": [{"name": "Databases"}],
        "profiles": [{"username": "johnson", "interests": ["Databases"]}],
    }), encoding="utf-8")
    runtime = await init_registry(_settings(
        create_schema_on_startup=True, seed_file=str(path), seed_on_startup=True,
    ))
    try:
        assert await runtime.registry.interests.find_names(
            [await runtime.registry.interests.find_id("Databases")],
        ) == ["Databases"]
        assert await runtime.registry.profiles.count() == 1
    finally:
        await runtime.manager.dispose()


async def test_seed_file_ignored_without_flag(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text(json.dumps({"interests": [{"name": "Databases"}]}))
    runtime = await init_registry(_settings(
        create_schema_on_startup=True, seed_file=str(path),
    ))
    try:
        assert await runtime.registry.interests.count() == 0
    finally:
        await runtime.manager.dispose()
