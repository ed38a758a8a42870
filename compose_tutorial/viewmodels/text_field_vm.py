"""Text field screens, from inline state to a hoisted view-model.

Three variants of the same "Name" input:

- ``PlainTextFieldVM`` keeps its state and builds the field inline.
- ``FirstScreenVM`` hoists the state out of ``screen_content``, which becomes
  a stateless function of ``(name, on_name_change)``.
- ``SharedFirstScreenVM`` reads the name from a ``NameVM`` channel and sends
  edits back to it, so the value survives the screen being recreated.
"""
from __future__ import annotations

from typing import Optional

from .host import RenderSink, StatefulHost
from .name_vm import NameVM
from .ui_models import OnValueChange, TextFieldModel

NAME_LABEL = "Name"


def screen_content(name: str, on_name_change: OnValueChange) -> TextFieldModel:
    """Stateless name field: shows ``name`` and forwards every edit."""
    return TextFieldModel(value=name, label=NAME_LABEL, on_value_change=on_name_change)


class PlainTextFieldVM(StatefulHost[TextFieldModel]):
    def on_enter(self) -> None:
        self.name = self.remember("", name="name")

    def compose(self) -> TextFieldModel:
        return TextFieldModel(value=self.name.value, label=NAME_LABEL, on_value_change=self._on_value_change)

    def _on_value_change(self, value: str) -> None:
        self.name.set(value)


class FirstScreenVM(StatefulHost[TextFieldModel]):
    """Stateful host for ``screen_content``."""

    def on_enter(self) -> None:
        self.name = self.remember("", name="name")

    def compose(self) -> TextFieldModel:
        return screen_content(self.name.value, self.on_name_change)

    def on_name_change(self, value: str) -> None:
        self.name.set(value)


class SharedFirstScreenVM(StatefulHost[TextFieldModel]):
    """``screen_content`` bound to an external ``NameVM``."""

    def __init__(self, name_vm: NameVM, on_render: Optional[RenderSink] = None) -> None:
        super().__init__(on_render)
        self.name_vm = name_vm

    def on_enter(self) -> None:
        self.name = self.observe_as_state(self.name_vm.name, name="name")

    def compose(self) -> TextFieldModel:
        return screen_content(self.name.value, self.name_vm.on_name_changed)


__all__ = [
    "FirstScreenVM",
    "NAME_LABEL",
    "PlainTextFieldVM",
    "SharedFirstScreenVM",
    "screen_content",
]
