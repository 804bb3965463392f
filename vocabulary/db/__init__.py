"""Database Definitions - SQLAlchemy declarative Base.

Invariants:
    - All ORM models share one metadata object (db/base.py)
"""
