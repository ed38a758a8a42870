from __future__ import annotations

from ..domain.models import ToggleState
from .host import StatefulHost
from .ui_models import ButtonModel


class ToggleButtonVM(StatefulHost[ButtonModel]):
    """Button that shows its own boolean state and flips it on every click."""

    def on_enter(self) -> None:
        self.toggled = self.remember(ToggleState.INITIAL, name="toggled")

    def compose(self) -> ButtonModel:
        return ButtonModel(label=str(self.toggled.value).lower(), on_click=self.on_click)

    def on_click(self) -> None:
        self.toggled.update(ToggleState.flip)

    @property
    def value(self) -> bool:
        return self.toggled.value


__all__ = ["ToggleButtonVM"]
