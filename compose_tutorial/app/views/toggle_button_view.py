from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from ...viewmodels.ui_models import ButtonModel
from .view_utils import safe_call


class ToggleButtonView(ttk.Frame):
    """Button whose caption is supplied by the model; clicks go to ``on_click``."""

    def __init__(
        self,
        parent: tk.Widget,
        *,
        on_error: Optional[Callable[[Exception], None]] = None,
        **kwargs,
    ) -> None:
        super().__init__(parent, **kwargs)
        self._on_error = on_error
        self._model: Optional[ButtonModel] = None
        self.button = ttk.Button(self, text="", command=self._on_click_button)
        self.button.pack(side=tk.LEFT)

    def render(self, model: ButtonModel) -> None:
        self._model = model
        self.button.configure(text=model.label)

    def _on_click_button(self) -> None:
        if self._model is None:
            return
        safe_call(self._model.on_click, on_error=self._on_error)


__all__ = ["ToggleButtonView"]
