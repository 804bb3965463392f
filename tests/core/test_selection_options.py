"""Selection Options - label/selected pairs for vocabulary multi-selects."""

from vocabulary.core.selection_options import build_selection_options


def test_flags_selected_names():
    options = build_selection_options(["Databases", "Networks"], ["Networks"])
    assert options == [
        {"label": "Databases", "selected": False},
        {"label": "Networks", "selected": True},
    ]


def test_vocabulary_order_wins():
    options = build_selection_options(["b", "a"], ["a", "b"])
    assert [o["label"] for o in options] == ["b", "a"]


def test_unknown_selected_names_ignored():
    options = build_selection_options(["a"], ["missing"])
    assert options == [{"label": "a", "selected": False}]


def test_no_selection():
    assert build_selection_options(["a"], None) == [{"label": "a", "selected": False}]
