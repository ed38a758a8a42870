from __future__ import annotations

from compose_tutorial.viewmodels.layout_samples import (
    HELLO,
    TUTORIAL,
    box_layout,
    column_layout,
    flat_text,
    row_layout,
)
from compose_tutorial.viewmodels.ui_models import LayoutKind


def test_flat_text() -> None:
    assert flat_text().text == HELLO


def test_layouts_hold_both_texts_in_order() -> None:
    for model, kind in (
        (row_layout(), LayoutKind.ROW),
        (column_layout(), LayoutKind.COLUMN),
        (box_layout(), LayoutKind.BOX),
    ):
        assert model.kind is kind
        assert [child.text for child in model.children] == [HELLO, TUTORIAL]


def test_only_row_and_column_fill() -> None:
    assert row_layout().fill
    assert column_layout().fill
    assert not box_layout().fill
