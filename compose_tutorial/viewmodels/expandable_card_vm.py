"""Expandable card: a title that reveals its body on demand.

The card owns a ``CardPhase`` state. Each phase composes exactly one icon
control, so the only reachable transitions are collapsed -> expanded via
"Expand" and expanded -> collapsed via "Collapse".
"""
from __future__ import annotations

from typing import Optional

from ..domain.models import CardPhase
from .host import RenderSink, StatefulHost
from .ui_models import CardModel, IconButtonModel

ICON_EXPAND_MORE = "expand_more"
ICON_EXPAND_LESS = "expand_less"


class ExpandableCardVM(StatefulHost[CardModel]):
    def __init__(self, title: str, body: str, on_render: Optional[RenderSink] = None) -> None:
        super().__init__(on_render)
        self.title = title
        self.body = body

    def on_enter(self) -> None:
        self.phase_state = self.remember(CardPhase.COLLAPSED, name="phase")

    def compose(self) -> CardModel:
        if self.phase_state.value.expanded:
            return CardModel(
                title=self.title,
                body=self.body,
                control=IconButtonModel(ICON_EXPAND_LESS, "Collapse", self.collapse),
            )
        return CardModel(
            title=self.title,
            body=None,
            control=IconButtonModel(ICON_EXPAND_MORE, "Expand", self.expand),
        )

    def expand(self) -> None:
        self.phase_state.update(CardPhase.expand)

    def collapse(self) -> None:
        self.phase_state.update(CardPhase.collapse)

    @property
    def phase(self) -> CardPhase:
        return self.phase_state.value


__all__ = ["ExpandableCardVM", "ICON_EXPAND_LESS", "ICON_EXPAND_MORE"]
