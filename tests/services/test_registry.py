"""Registry - collection wiring, bulk removal and export.

Tests cover:
    - build_registry() hands profiles the same vocabulary instances it exposes
    - remove_all_entities() empties everything, profiles first
    - dump_registry() keys match what SeedLoader reads
"""

from vocabulary.core.domain_types import CollectionType
from vocabulary.services.registry import dump_registry, remove_all_entities


async def test_profiles_share_vocabulary_instances(registry):
    assert registry.profiles._interests is registry.interests
    assert registry.profiles._favorites is registry.favorites


async def test_get_by_collection_type(registry):
    assert registry.get(CollectionType.INTERESTS) is registry.interests
    assert registry.get(CollectionType.FAVORITES) is registry.favorites
    assert registry.get(CollectionType.PROFILES) is registry.profiles


async def test_remove_all_entities(seeded):
    removed = await remove_all_entities(seeded)
    assert removed == {"profiles": 1, "interests": 2, "favorites": 2}
    assert list(removed) == ["profiles", "interests", "favorites"]
    for collection_type in CollectionType:
        assert await seeded.get(collection_type).count() == 0


async def test_remove_all_entities_on_empty_registry(registry):
    assert await remove_all_entities(registry) == {
        "profiles": 0, "interests": 0, "favorites": 0,
    }


async def test_dump_registry(seeded):
    dump = await dump_registry(seeded)
    assert list(dump) == ["interests", "favorites", "profiles"]
    assert {"name": "Hiking", "description": "Trails"} in dump["favorites"]
    assert {"name": "Surfing", "description": None} in dump["favorites"]
    [profile] = dump["profiles"]
    assert profile["username"] == "johnson"
    assert profile["interests"] == ["Databases"]
    assert "id" not in profile
