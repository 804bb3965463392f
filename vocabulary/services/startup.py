"""Startup - build a ready-to-use registry from settings.

Invariants:
    - Logging is configured before anything else logs
    - Tables are created only when create_schema_on_startup is set (migrations own production)
    - Seeding runs only when seed_on_startup is set and a seed_file is configured
"""

import logging
from dataclasses import dataclass

from vocabulary.config import Settings, get_settings
from vocabulary.infrastructure.database import (
    DatabaseSessionManager, create_db_manager,
)
from vocabulary.infrastructure.observability import setup_logging
from vocabulary.services.registry import Registry, build_registry
from vocabulary.services.seed_loader import SeedLoader

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Runtime:
    manager: DatabaseSessionManager
    registry: Registry


async def init_registry(settings: Settings | None = None) -> Runtime:
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = create_db_manager(settings)
    if settings.create_schema_on_startup:
        await manager.create_all()
    registry = build_registry(manager)
    if settings.seed_on_startup and settings.seed_file:
        result = await SeedLoader(registry).load_file(settings.seed_file)
        logger.info(f"Seed result: {result['status']}")
    logger.info("Vocabulary registry started")
    return Runtime(manager=manager, registry=registry)
