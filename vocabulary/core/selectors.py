"""Selectors - turn an id or selector dict into the store's query shape.

Invariants:
    - All functions are PURE: no IO, no async, no DB
    - Every "id" leaving this module is a parsed UUID (DocId)
    - A value that cannot be parsed as a UUID raises InvalidIdentifierError,
      never NotFoundError, so malformed input stays distinguishable from absence
"""

from uuid import UUID

from vocabulary.core.domain_types import DocId
from vocabulary.core.errors import InvalidIdentifierError


def parse_doc_id(value: object) -> DocId:
    """Parse a UUID or its string form into a DocId."""
    if isinstance(value, UUID):
        return DocId(value)
    if isinstance(value, str):
        try:
            return DocId(UUID(value))
        except ValueError:
            pass
    raise InvalidIdentifierError(value)


def normalize_selector(id_or_selector: object) -> dict:
    """Accept a bare id or a {field: value} dict; return a selector dict."""
    if isinstance(id_or_selector, dict):
        selector = dict(id_or_selector)
        if "id" in selector:
            selector["id"] = parse_doc_id(selector["id"])
        return selector
    return {"id": parse_doc_id(id_or_selector)}


def describe_selector(selector: dict) -> str:
    """Short human-readable key for error messages."""
    if len(selector) == 1:
        return str(next(iter(selector.values())))
    return ", ".join(f"{k}={v}" for k, v in selector.items()) or "*"
