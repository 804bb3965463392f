"""Selection Options - label/selected pairs for a multi-select over a vocabulary.

Invariants:
    - All functions are PURE: no IO, no async, no DB
    - Output order follows the vocabulary order, not the selection order
    - Selected names that are not in the vocabulary are ignored
"""


def build_selection_options(
    names: list[str], selected: list[str] | None,
) -> list[dict]:
    """One {"label", "selected"} entry per vocabulary name."""
    chosen = set(selected or [])
    return [{"label": name, "selected": name in chosen} for name in names]
