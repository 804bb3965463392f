"""Services Layer - registry wiring, seeding, and profile handlers.

Invariants:
    - Collections are received by injection (Registry), never imported as singletons
    - Handlers return tagged result dicts: {"status": "ok" | "error", ...}
"""
