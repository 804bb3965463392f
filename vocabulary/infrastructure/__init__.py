"""Infrastructure Layer - database sessions, document store, structured logging.

Invariants:
    - SQLAlchemy exceptions never escape this layer unmapped (core/errors.py)
    - No module here holds process-wide state; managers are constructed and injected
"""
