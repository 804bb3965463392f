"""Entity Collections - schema-checked facades over the document store.

Invariants:
    - Every collection is constructed explicitly with its store (no module singletons)
    - NamedEntityCollection is the one pattern behind every controlled vocabulary
"""
