"""Base Collection - schema-checked facade over one slice of the document store.

Invariants:
    - find_doc() returns exactly one document or raises NotFoundError (zero or many)
    - Any id that cannot be parsed raises InvalidIdentifierError before the store is queried
    - Every write is cleaned and validated against the bound DocumentSchema first;
      a rejected document raises ValidationError and nothing is written
    - find() / find_all() are lazy and restartable: iterating a Cursor re-runs the query
    - The collection holds no document state; the store is the only source of truth

Design Decisions:
    - Collections raise typed errors; services translate them into tagged result dicts
    - Subclasses own define() and the dump shape (_dump); the base owns lookup and teardown
"""

import logging
from abc import ABC, abstractmethod
from typing import AsyncIterator, Generic, TypeVar

from pydantic import BaseModel

from vocabulary.core.document_schema import DocumentSchema
from vocabulary.core.domain_types import DocId
from vocabulary.core.errors import NotFoundError, ValidationError, ErrorContext
from vocabulary.core.repository_protocols import DocumentStore
from vocabulary.core.selectors import (
    parse_doc_id, normalize_selector, describe_selector,
)

logger = logging.getLogger(__name__)

DocT = TypeVar("DocT", bound=BaseModel)


class Cursor(Generic[DocT]):
    """Lazy view over the documents matching a selector.

    Nothing runs until the cursor is iterated, fetched or counted.
    """

    def __init__(self, collection: "BaseCollection[DocT]", selector: dict):
        self._collection = collection
        self._selector = selector

    def __aiter__(self) -> AsyncIterator[DocT]:
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[DocT]:
        for doc in await self.fetch():
            yield doc

    async def fetch(self) -> list[DocT]:
        rows = await self._collection._store.find(self._selector)
        return [self._collection._to_doc(row) for row in rows]

    async def count(self) -> int:
        return await self._collection._store.count(self._selector)


class BaseCollection(ABC, Generic[DocT]):
    """Baseline operations shared by every collection."""

    def __init__(
        self,
        type_name: str,
        store: DocumentStore,
        schema: DocumentSchema,
        doc_model: type[DocT],
    ):
        self._type = type_name
        self._store = store
        self._schema = schema
        self._doc_model = doc_model

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._type!r})"

    @property
    def type_name(self) -> str:
        return self._type

    def get_schema(self) -> DocumentSchema:
        return self._schema

    def _to_doc(self, row: dict) -> DocT:
        return self._doc_model.model_validate(row)

    def _check(self, doc: dict, modifier: bool = False) -> None:
        """Raise ValidationError if the schema reports any violation."""
        violations = self._schema.validate(doc, modifier=modifier)
        if violations:
            logger.warning(
                f"Rejected {self._type} document",
                extra={"collection": self._type, "error_code": "VALIDATION_ERROR"},
            )
            raise ValidationError(self._type, violations)

    # --- Reads ---------------------------------------------------------------

    def find(self, selector: dict | None = None) -> Cursor[DocT]:
        return Cursor(self, normalize_selector(selector or {}))

    def find_all(self) -> Cursor[DocT]:
        return self.find({})

    async def find_doc(self, id_or_selector: object) -> DocT:
        """Return the single document matching an id or selector."""
        selector = normalize_selector(id_or_selector)
        docs = await self.find(selector).fetch()
        if len(docs) != 1:
            key = describe_selector(selector)
            raise NotFoundError(
                self._type, key, matches=len(docs),
                context=ErrorContext(
                    doc_id=str(selector["id"]) if "id" in selector else None,
                ),
            )
        return docs[0]

    async def count(self) -> int:
        return await self._store.count({})

    async def is_defined(self, doc_id: object) -> bool:
        return await self._store.count({"id": parse_doc_id(doc_id)}) == 1

    async def assert_defined(self, doc_id: object) -> None:
        """Raise NotFoundError if no document has this id."""
        if not await self.is_defined(doc_id):
            raise NotFoundError(
                self._type, str(doc_id),
                context=ErrorContext(doc_id=str(doc_id)),
            )

    # --- Writes --------------------------------------------------------------

    async def _check_references(self, doc: dict) -> None:
        """Hook for collections whose documents point into other collections."""
        return None

    async def update(self, doc_id: object, patch: dict) -> int:
        """Clean, validate (update shape) and apply a partial change."""
        doc_id = parse_doc_id(doc_id)
        await self.assert_defined(doc_id)
        cleaned = self._schema.clean(patch, modifier=True)
        self._check(cleaned, modifier=True)
        await self._check_references(cleaned)
        updated = await self._store.update(doc_id, cleaned)
        logger.info(
            f"Updated {self._type} document",
            extra={"collection": self._type, "doc_id": str(doc_id)},
        )
        return updated

    async def remove_all(self) -> int:
        """Delete every document. Intended for tests and resets only."""
        removed = await self._store.remove({})
        logger.info(
            f"Removed {removed} document(s) from {self._type}",
            extra={"collection": self._type, "count": removed},
        )
        return removed

    # --- Export --------------------------------------------------------------

    @abstractmethod
    def _dump(self, doc: DocT) -> dict:
        """Shape one document as keyword arguments for define()."""

    async def dump_one(self, doc_id: object) -> dict:
        """Return a dict accepted by this collection's define()."""
        return self._dump(await self.find_doc(doc_id))

    async def dump_all(self) -> dict:
        docs = await self.find_all().fetch()
        return {
            "name": self._type,
            "contents": [self._dump(doc) for doc in docs],
        }

    async def _insert(self, doc: dict) -> DocId:
        return DocId(await self._store.insert(doc))
