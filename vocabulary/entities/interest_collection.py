"""Interests - the vocabulary of topics a profile can list, e.g. "Software Engineering"."""

from vocabulary.core.domain_types import CollectionType
from vocabulary.core.repository_protocols import DocumentStore
from vocabulary.entities.named_collection import NamedEntityCollection


class InterestCollection(NamedEntityCollection):
    """Represents a specific interest, such as "Software Engineering"."""

    def __init__(self, store: DocumentStore):
        super().__init__(CollectionType.INTERESTS.value, store)
