"""Stateless layout snippets: single text, row, column and box.

None of these hold state, so they are plain functions returning models.
"""
from __future__ import annotations

from .ui_models import LayoutKind, LayoutModel, TextModel

HELLO = "Hello - "
TUTORIAL = "Jetpack Compose Tutorial"


def flat_text() -> TextModel:
    return TextModel(HELLO)


def _two_texts(kind: LayoutKind, *, fill: bool) -> LayoutModel:
    return LayoutModel(kind=kind, children=(TextModel(HELLO), TextModel(TUTORIAL)), fill=fill)


def row_layout() -> LayoutModel:
    """Both texts side by side, filling the available space."""
    return _two_texts(LayoutKind.ROW, fill=True)


def column_layout() -> LayoutModel:
    """Both texts stacked vertically, filling the available space."""
    return _two_texts(LayoutKind.COLUMN, fill=True)


def box_layout() -> LayoutModel:
    """Both texts drawn on top of each other at the box origin."""
    return _two_texts(LayoutKind.BOX, fill=False)


__all__ = ["HELLO", "TUTORIAL", "box_layout", "column_layout", "flat_text", "row_layout"]
