"""Profile Collection - user profiles holding name references into the vocabularies.

Invariants:
    - username is unique; a duplicate define() raises DuplicateNameError
    - username is immutable after define(); update() rejects it
    - Every interest / favorite name is asserted against the injected collections
      before any write (define and update); the first undefined name raises
      NotFoundError and nothing is written
    - References are stored as names, in caller order; ids are never persisted

Design Decisions:
    - Vocabulary collections injected through the constructor, not imported
"""

import logging

from vocabulary.core.document_schema import DocumentSchema, FieldViolation
from vocabulary.core.domain_types import CollectionType, DocId
from vocabulary.core.errors import (
    DuplicateNameError, IntegrityViolationError, ValidationError,
)
from vocabulary.core.repository_protocols import DocumentStore
from vocabulary.entities.base_collection import BaseCollection
from vocabulary.entities.named_collection import NamedEntityCollection
from vocabulary.schemas.profile import ProfileDefinition, ProfileDoc

logger = logging.getLogger(__name__)


class ProfileCollection(BaseCollection[ProfileDoc]):
    """Profiles, each listing interests and favorites by name."""

    def __init__(
        self,
        store: DocumentStore,
        interests: NamedEntityCollection,
        favorites: NamedEntityCollection,
    ):
        super().__init__(
            CollectionType.PROFILES.value, store,
            DocumentSchema(ProfileDefinition), ProfileDoc,
        )
        self._interests = interests
        self._favorites = favorites

    async def define(
        self,
        username: str,
        *,
        first_name: str | None = None,
        last_name: str | None = None,
        title: str | None = None,
        picture: str | None = None,
        github: str | None = None,
        facebook: str | None = None,
        instagram: str | None = None,
        bio: str | None = None,
        interests: list[str] | None = None,
        favorites: list[str] | None = None,
    ) -> DocId:
        """Define a profile. Referenced names must already be defined."""
        definition = {
            "username": username,
            "first_name": first_name,
            "last_name": last_name,
            "title": title,
            "picture": picture,
            "github": github,
            "facebook": facebook,
            "instagram": instagram,
            "bio": bio,
            "interests": list(interests or []),
            "favorites": list(favorites or []),
        }
        self._check(definition)
        if await self._store.count({"username": username}) > 0:
            raise DuplicateNameError(self._type, username)
        await self._check_references(definition)
        try:
            doc_id = await self._insert(definition)
        except IntegrityViolationError:
            raise DuplicateNameError(self._type, username)
        logger.info(
            f"Defined profile '{username}'",
            extra={
                "collection": self._type, "entity_name": username,
                "doc_id": str(doc_id),
            },
        )
        return doc_id

    async def update(self, doc_id: object, patch: dict) -> int:
        if "username" in patch:
            raise ValidationError(self._type, [
                FieldViolation(
                    "username", "immutable", "username cannot change after definition",
                ),
            ])
        return await super().update(doc_id, patch)

    async def _check_references(self, doc: dict) -> None:
        if "interests" in doc:
            await self._interests.assert_names(doc["interests"])
        if "favorites" in doc:
            await self._favorites.assert_names(doc["favorites"])

    async def find_by_username(self, username: str) -> ProfileDoc:
        return await self.find_doc({"username": username})

    def _dump(self, doc: ProfileDoc) -> dict:
        return doc.model_dump(exclude={"id"})
