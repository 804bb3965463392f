"""Pydantic Schemas - typed document records and definition shapes.

Invariants:
    - *Definition models are the validation shape used by DocumentSchema (extra keys forbidden)
    - *Doc models are the read shape returned by collections (include the store id)
"""
