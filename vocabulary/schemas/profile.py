"""Profile Schemas - definition and read shapes for user profiles.

Invariants:
    - username: non-empty, not whitespace-only
    - interests / favorites: ordered lists of entity names (default empty)
    - Unknown keys are rejected (extra="forbid")
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProfileDefinition(BaseModel):
    """Input accepted by ProfileCollection.define() and produced by dump_one()."""
    model_config = ConfigDict(extra="forbid")

    username: str = Field(min_length=1, max_length=100)
    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    title: str | None = Field(None, max_length=200)
    picture: str | None = Field(None, max_length=500)
    github: str | None = Field(None, max_length=500)
    facebook: str | None = Field(None, max_length=500)
    instagram: str | None = Field(None, max_length=500)
    bio: str | None = None
    interests: list[str] = Field(default_factory=list)
    favorites: list[str] = Field(default_factory=list)

    @field_validator("username")
    @classmethod
    def reject_blank_username(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("username cannot be empty or whitespace")
        return v


class ProfileDoc(BaseModel):
    """A stored profile."""
    model_config = ConfigDict(frozen=True)

    id: UUID
    username: str
    first_name: str | None = None
    last_name: str | None = None
    title: str | None = None
    picture: str | None = None
    github: str | None = None
    facebook: str | None = None
    instagram: str | None = None
    bio: str | None = None
    interests: list[str] = []
    favorites: list[str] = []
