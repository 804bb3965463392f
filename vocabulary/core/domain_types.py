"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - DocId wraps a UUID - never pass bare strings as identifiers in domain logic
    - Every collection type is an Enum member - no raw string matching on collection names

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# --- Identity Types ----------------------------------------------------------

DocId = NewType("DocId", UUID)


# --- Enums -------------------------------------------------------------------

class CollectionType(str, Enum):
    """Every collection the registry owns. Value is the display/type name."""
    INTERESTS = "Interests"
    FAVORITES = "Favorites"
    PROFILES = "Profiles"

    @property
    def key(self) -> str:
        """Lowercase key used in seed fixtures and dumps."""
        return self.value.lower()


# Load order for fixtures: vocabulary first, referencing collections last.
LOAD_ORDER = (
    CollectionType.INTERESTS,
    CollectionType.FAVORITES,
    CollectionType.PROFILES,
)

# Removal order: referencing collections first.
REMOVAL_ORDER = (
    CollectionType.PROFILES,
    CollectionType.INTERESTS,
    CollectionType.FAVORITES,
)
