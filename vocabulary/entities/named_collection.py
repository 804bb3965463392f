"""Named Entity Collection - unique names with id <-> name resolution.

Invariants:
    - At most one entity per name; a duplicate define() raises DuplicateNameError
      and writes nothing
    - name is immutable after define(); only description may be updated
    - find_names / find_ids / assert_names preserve input order and stop on the
      first failure (no partial results)
    - find_ids(None) and find_ids([]) return []

Design Decisions:
    - define() checks for the name first, then inserts. The two calls are not atomic;
      the store's unique index on name rejects the losing insert of a concurrent pair,
      which is reported as DuplicateNameError
    - define() validates but does not clean: the stored name is exactly the given name,
      so dump_one(define(...)) round-trips
"""

import logging

from vocabulary.core.document_schema import DocumentSchema, FieldViolation
from vocabulary.core.domain_types import DocId
from vocabulary.core.errors import (
    DuplicateNameError, IntegrityViolationError, ValidationError,
)
from vocabulary.core.repository_protocols import DocumentStore
from vocabulary.entities.base_collection import BaseCollection
from vocabulary.schemas.entity import NamedEntityDefinition, NamedEntityDoc

logger = logging.getLogger(__name__)


class NamedEntityCollection(BaseCollection[NamedEntityDoc]):
    """A controlled vocabulary whose external identity is a unique name."""

    def __init__(self, type_name: str, store: DocumentStore):
        super().__init__(
            type_name, store,
            DocumentSchema(NamedEntityDefinition), NamedEntityDoc,
        )

    async def define(self, name: str, description: str | None = None) -> DocId:
        """Define a new entry and return its id.

        Example:
            await interests.define(
                name="Software Engineering",
                description="Methods for group development of large software systems",
            )
        """
        definition = {"name": name, "description": description}
        self._check(definition)
        if await self._store.count({"name": name}) > 0:
            logger.warning(
                f"{name} is already defined in {self._type}",
                extra={
                    "collection": self._type, "entity_name": name,
                    "error_code": "DUPLICATE_NAME",
                },
            )
            raise DuplicateNameError(self._type, name)
        try:
            doc_id = await self._insert(definition)
        except IntegrityViolationError:
            logger.warning(
                f"{name} lost a concurrent define in {self._type}",
                extra={
                    "collection": self._type, "entity_name": name,
                    "error_code": "DUPLICATE_NAME",
                },
            )
            raise DuplicateNameError(self._type, name)
        logger.info(
            f"Defined {self._type} '{name}'",
            extra={
                "collection": self._type, "entity_name": name,
                "doc_id": str(doc_id),
            },
        )
        return doc_id

    async def update(self, doc_id: object, patch: dict) -> int:
        if "name" in patch:
            raise ValidationError(self._type, [
                FieldViolation(
                    "name", "immutable", "name cannot change after definition",
                ),
            ])
        return await super().update(doc_id, patch)

    # --- Resolution ----------------------------------------------------------

    async def find_name(self, doc_id: object) -> str:
        """Return the name of the entry with this id."""
        return (await self.find_doc(doc_id)).name

    async def find_names(self, doc_ids: list) -> list[str]:
        return [await self.find_name(doc_id) for doc_id in doc_ids]

    async def find_id(self, name: str) -> DocId:
        """Return the id of the entry with this name, or raise NotFoundError."""
        return DocId((await self.find_doc({"name": name})).id)

    async def find_ids(self, names: list[str] | None = None) -> list[DocId]:
        """Ids for a list of names. Nothing passed means no references: []."""
        if not names:
            return []
        return [await self.find_id(name) for name in names]

    async def assert_name(self, name: str) -> None:
        await self.find_id(name)

    async def assert_names(self, names: list[str] | None) -> None:
        """Raise NotFoundError for the first name that is not defined."""
        for name in names or []:
            await self.assert_name(name)

    # --- Export --------------------------------------------------------------

    def _dump(self, doc: NamedEntityDoc) -> dict:
        return {"name": doc.name, "description": doc.description}
