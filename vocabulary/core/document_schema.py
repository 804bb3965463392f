"""Document Schema - clean-then-validate contract over a typed pydantic record.

Invariants:
    - All functions are PURE: no IO, no async, no DB
    - clean() never raises; it only normalizes (drops unknown keys, trims strings,
      removes empty optional strings, wraps a scalar into a list field)
    - validate() never raises; it returns a list of FieldViolation (empty == valid)
    - modifier=True validates an update shape: only the keys present are checked,
      missing required fields are not reported

Design Decisions:
    - Wraps a pydantic model instead of a hand-written rule table: field types,
      optionality and extra-key rejection come from the model definition
    - ValidationContext mirrors a named form context: reset / validate / is_valid
"""

from dataclasses import dataclass, asdict
from typing import Any, get_origin

from pydantic import BaseModel, ValidationError as PydanticValidationError
from pydantic.fields import FieldInfo


@dataclass(frozen=True)
class FieldViolation:
    """A single field-level schema violation."""
    field: str
    type: str
    message: str

    def to_dict(self) -> dict:
        return asdict(self)


def _is_list_field(field: FieldInfo) -> bool:
    return get_origin(field.annotation) is list


class DocumentSchema:
    """Validator bound to one collection's definition model."""

    def __init__(self, model: type[BaseModel]):
        self.model = model

    @property
    def field_names(self) -> list[str]:
        return list(self.model.model_fields)

    def clean(self, doc: dict, modifier: bool = False) -> dict:
        """Normalize a document so it reflects what would be written.

        In modifier mode an empty optional string becomes None (clears the field);
        otherwise it is dropped so the model default applies.
        """
        fields = self.model.model_fields
        cleaned: dict[str, Any] = {}
        for key, value in doc.items():
            field = fields.get(key)
            if field is None:
                continue
            if isinstance(value, str):
                value = value.strip()
                if _is_list_field(field):
                    value = [value] if value else []
                elif value == "" and not field.is_required():
                    if not modifier:
                        continue
                    value = None
            elif isinstance(value, (list, tuple)):
                value = [
                    item.strip() if isinstance(item, str) else item
                    for item in value
                ]
            cleaned[key] = value
        return cleaned

    def validate(self, doc: dict, modifier: bool = False) -> list[FieldViolation]:
        """Check a document against the model. Returns violations, never raises."""
        try:
            self.model.model_validate(doc)
        except PydanticValidationError as exc:
            violations = [
                FieldViolation(
                    field=".".join(str(loc) for loc in error["loc"]),
                    type=error["type"],
                    message=error["msg"],
                )
                for error in exc.errors()
            ]
        else:
            return []
        if modifier:
            violations = [
                v for v in violations if v.field.split(".", 1)[0] in doc
            ]
        return violations

    def named_context(self, name: str) -> "ValidationContext":
        """Create a fresh validation context for one form or flow."""
        return ValidationContext(self, name)


class ValidationContext:
    """Holds the outcome of the last validate() call for a named flow."""

    def __init__(self, schema: DocumentSchema, name: str):
        self.schema = schema
        self.name = name
        self._violations: list[FieldViolation] = []

    def reset(self) -> None:
        self._violations = []

    def validate(self, doc: dict, modifier: bool = False) -> bool:
        self._violations = self.schema.validate(doc, modifier=modifier)
        return self.is_valid()

    def is_valid(self) -> bool:
        return not self._violations

    def validation_errors(self) -> list[FieldViolation]:
        return list(self._violations)
