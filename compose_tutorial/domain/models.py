from __future__ import annotations

from enum import Enum


class ToggleState:
    """Two-state flip-flop driven by button clicks. Starts at False."""

    INITIAL = False

    @staticmethod
    def flip(value: bool) -> bool:
        return not value


class CardPhase(str, Enum):
    """Expand/collapse state of a card; each phase renders one control."""

    COLLAPSED = "collapsed"
    EXPANDED = "expanded"

    @property
    def expanded(self) -> bool:
        return self is CardPhase.EXPANDED

    def expand(self) -> "CardPhase":
        return CardPhase.EXPANDED

    def collapse(self) -> "CardPhase":
        return CardPhase.COLLAPSED


__all__ = ["CardPhase", "ToggleState"]
