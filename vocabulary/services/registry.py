"""Registry - explicit wiring of one collection per entity type.

Invariants:
    - build_registry() is the only place collections are constructed
    - Profiles receive the same Interests / Favorites instances the registry exposes
    - remove_all_entities() removes referencing collections before vocabularies
"""

import logging
from dataclasses import dataclass

from vocabulary.core.domain_types import (
    CollectionType, LOAD_ORDER, REMOVAL_ORDER,
)
from vocabulary.entities.base_collection import BaseCollection
from vocabulary.entities.favorite_collection import FavoriteCollection
from vocabulary.entities.interest_collection import InterestCollection
from vocabulary.entities.profile_collection import ProfileCollection
from vocabulary.infrastructure.database import DatabaseSessionManager
from vocabulary.infrastructure.document_store import SqlDocumentStore
from vocabulary.models import Interest, Favorite, Profile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Registry:
    """The collections a caller may be handed."""
    interests: InterestCollection
    favorites: FavoriteCollection
    profiles: ProfileCollection

    def get(self, collection_type: CollectionType) -> BaseCollection:
        return {
            CollectionType.INTERESTS: self.interests,
            CollectionType.FAVORITES: self.favorites,
            CollectionType.PROFILES: self.profiles,
        }[collection_type]


def build_registry(manager: DatabaseSessionManager) -> Registry:
    interests = InterestCollection(SqlDocumentStore(manager, Interest))
    favorites = FavoriteCollection(SqlDocumentStore(manager, Favorite))
    profiles = ProfileCollection(
        SqlDocumentStore(manager, Profile), interests, favorites,
    )
    return Registry(interests=interests, favorites=favorites, profiles=profiles)


async def remove_all_entities(registry: Registry) -> dict[str, int]:
    """Empty every collection. Test and reset use only."""
    removed = {}
    for collection_type in REMOVAL_ORDER:
        removed[collection_type.key] = await registry.get(collection_type).remove_all()
    logger.info(
        "Removed all entities",
        extra={"count": sum(removed.values())},
    )
    return removed


async def dump_registry(registry: Registry) -> dict[str, list[dict]]:
    """Export every collection as define()-ready dicts, keyed for SeedLoader."""
    dump = {}
    for collection_type in LOAD_ORDER:
        exported = await registry.get(collection_type).dump_all()
        dump[collection_type.key] = exported["contents"]
    return dump
