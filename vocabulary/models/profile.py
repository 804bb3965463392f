"""Profile ORM - a user profile holding weak references into the vocabularies.

Invariants:
    - username is non-nullable and unique
    - interests / favorites store entity NAMES (not ids), in caller order
    - No foreign keys to interests/favorites: references are resolved on demand

Design Decisions:
    - JSON list columns: references are ordered and small, never joined on
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, JSON, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from vocabulary.db.base import Base


class Profile(Base):
    """Profile entity - the referencing side of the vocabulary pattern."""
    __tablename__ = "profiles"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    username: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True,
    )
    first_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    title: Mapped[str | None] = mapped_column(String(200), nullable=True)
    picture: Mapped[str | None] = mapped_column(String(500), nullable=True)
    github: Mapped[str | None] = mapped_column(String(500), nullable=True)
    facebook: Mapped[str | None] = mapped_column(String(500), nullable=True)
    instagram: Mapped[str | None] = mapped_column(String(500), nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Weak references by name
    interests: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    favorites: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
