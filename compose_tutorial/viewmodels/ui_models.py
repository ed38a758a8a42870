"""Immutable UI models handed from view-models to Tk views.

Models carry the value snapshot plus the event callbacks a view must invoke.
Callbacks are excluded from equality so two renders of the same state compare
equal even though each composition creates fresh closures.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Tuple

OnClick = Callable[[], None]
OnValueChange = Callable[[str], None]


@dataclass(frozen=True)
class TextModel:
    text: str


class LayoutKind(str, Enum):
    COLUMN = "column"  # vertical stack
    ROW = "row"  # horizontal stack
    BOX = "box"  # overlay stack


@dataclass(frozen=True)
class LayoutModel:
    kind: LayoutKind
    children: Tuple[TextModel, ...]
    fill: bool = False


@dataclass(frozen=True)
class ButtonModel:
    label: str
    on_click: OnClick = field(compare=False, repr=False)


@dataclass(frozen=True)
class TextFieldModel:
    """Labeled text input. ``on_value_change`` receives the full new text."""

    value: str
    label: str
    on_value_change: OnValueChange = field(compare=False, repr=False)


@dataclass(frozen=True)
class IconButtonModel:
    icon: str
    content_description: str
    on_click: OnClick = field(compare=False, repr=False)


@dataclass(frozen=True)
class CardModel:
    """Card with a title, an optional body and exactly one icon control."""

    title: str
    body: Optional[str]
    control: IconButtonModel

    @property
    def expanded(self) -> bool:
        return self.body is not None


__all__ = [
    "ButtonModel",
    "CardModel",
    "IconButtonModel",
    "LayoutKind",
    "LayoutModel",
    "OnClick",
    "OnValueChange",
    "TextFieldModel",
    "TextModel",
]
