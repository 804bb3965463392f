"""ORM Models - SQLAlchemy declarative models, one table per collection.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every model has a UUID primary key named `id` and a `created_at` timestamp
    - Attribute names equal column names (the document store maps rows to dicts by column)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all / autogenerate
"""

from vocabulary.models.interest import Interest  # noqa: F401
from vocabulary.models.favorite import Favorite  # noqa: F401
from vocabulary.models.profile import Profile  # noqa: F401
