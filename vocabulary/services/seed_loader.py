"""Seed Loader - loads define()-ready fixtures into an empty registry.

Invariants:
    - Vocabularies load before profiles (profiles reference them by name)
    - A collection that already holds documents is skipped, never merged into
    - Each entry is checked against the collection schema before define(); unknown
      keys or a non-object entry fail as VALIDATION_ERROR
    - The first failing definition stops the load; the result reports it together
      with the counts loaded so far
    - load() never raises VocabularyError; it returns a tagged result dict

Fixture shape (also the output of dump_registry):
    {"interests": [{"name": ..., "description": ...}, ...],
     "favorites": [...],
     "profiles": [{"username": ..., "interests": [...], ...}, ...]}
"""

import json
import logging
from pathlib import Path

from vocabulary.core.domain_types import LOAD_ORDER
from vocabulary.core.errors import ValidationError, VocabularyError
from vocabulary.services.registry import Registry

logger = logging.getLogger(__name__)


class SeedLoader:
    """Loads fixture data through each collection's define()."""

    def __init__(self, registry: Registry):
        self.registry = registry

    async def load(self, data: dict) -> dict:
        loaded: dict[str, int] = {}
        skipped: list[str] = []
        for collection_type in LOAD_ORDER:
            key = collection_type.key
            definitions = data.get(key) or []
            collection = self.registry.get(collection_type)
            loaded[key] = 0
            if not definitions:
                continue
            if await collection.count() > 0:
                logger.info(
                    f"Skipping seed for non-empty {collection.type_name}",
                    extra={"collection": collection.type_name},
                )
                skipped.append(key)
                continue
            for definition in definitions:
                try:
                    await self._define(collection, definition)
                except VocabularyError as e:
                    logger.error(
                        f"Seed failed for {collection.type_name}: {e.message}",
                        extra={
                            "collection": collection.type_name,
                            "error_code": e.code,
                        },
                    )
                    return {**e.to_result(), "loaded": loaded, "skipped": skipped}
                loaded[key] += 1
        logger.info("Seed complete", extra={"count": sum(loaded.values())})
        return {"status": "ok", "loaded": loaded, "skipped": skipped}

    @staticmethod
    async def _define(collection, definition: object) -> None:
        """Check the fixture entry's shape, then hand it to define()."""
        violations = collection.get_schema().validate(definition)
        if violations:
            raise ValidationError(collection.type_name, violations)
        await collection.define(**definition)

    async def load_file(self, path: str | Path) -> dict:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        return await self.load(data)
