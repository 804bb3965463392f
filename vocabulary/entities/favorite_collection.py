"""Favorites - the vocabulary of favorites a profile can list."""

from vocabulary.core.domain_types import CollectionType
from vocabulary.core.repository_protocols import DocumentStore
from vocabulary.entities.named_collection import NamedEntityCollection


class FavoriteCollection(NamedEntityCollection):
    """Represents a specific favorite, such as "Hiking"."""

    def __init__(self, store: DocumentStore):
        super().__init__(CollectionType.FAVORITES.value, store)
