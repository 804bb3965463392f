"""Interest ORM - a controlled-vocabulary entry such as "Software Engineering".

Invariants:
    - name is non-nullable and unique (store-level guard for concurrent define())
    - description is optional free text
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from vocabulary.db.base import Base


class Interest(Base):
    """Interest entity - referenced by name from profiles."""
    __tablename__ = "interests"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
