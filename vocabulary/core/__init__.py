"""Core Layer - pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from entities/, services/, infrastructure/, or db/
    - All functions are pure and deterministic
"""
