"""Domain Types - identity wrapper and collection enum.

Tests cover:
    - DocId wraps UUID
    - CollectionType values and keys
    - Load order puts vocabularies before profiles; removal order is the reverse idea
"""

from uuid import uuid4

from vocabulary.core.domain_types import (
    DocId, CollectionType, LOAD_ORDER, REMOVAL_ORDER,
)


def test_doc_id_wraps_uuid():
    uid = uuid4()
    assert DocId(uid) == uid


def test_collection_type_has_three_members():
    assert {c.value for c in CollectionType} == {"Interests", "Favorites", "Profiles"}


def test_collection_type_key_is_lowercase():
    assert CollectionType.INTERESTS.key == "interests"
    assert CollectionType.PROFILES.key == "profiles"


def test_profiles_load_last():
    assert LOAD_ORDER[-1] == CollectionType.PROFILES


def test_profiles_removed_first():
    assert REMOVAL_ORDER[0] == CollectionType.PROFILES
    assert set(REMOVAL_ORDER) == set(LOAD_ORDER)
