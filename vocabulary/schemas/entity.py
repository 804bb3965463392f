"""Named Entity Schemas - definition and read shapes for vocabulary entries.

Invariants:
    - name: non-empty, not whitespace-only, stored exactly as given
    - description: optional string
    - Unknown keys are rejected (extra="forbid")
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NamedEntityDefinition(BaseModel):
    """Input accepted by define() and produced by dump_one()."""
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1, max_length=200)
    description: str | None = None

    @field_validator("name")
    @classmethod
    def reject_blank_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name cannot be empty or whitespace")
        return v


class NamedEntityDoc(BaseModel):
    """A stored vocabulary entry."""
    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    description: str | None = None
