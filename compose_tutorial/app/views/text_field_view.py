"""
TextFieldView
-------------
Labeled single-line text input driven entirely by ``TextFieldModel``.

The entry shows ``model.value``. Each edit is forwarded once to
``model.on_value_change``; if the owner does not answer with a new render,
the entry is reset to the last rendered value, so what is displayed always
matches the owner's state.
"""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from ...viewmodels.ui_models import TextFieldModel
from .view_utils import safe_call


class TextFieldView(ttk.Frame):
    def __init__(
        self,
        parent: tk.Widget,
        *,
        on_error: Optional[Callable[[Exception], None]] = None,
        **kwargs,
    ) -> None:
        super().__init__(parent, **kwargs)
        self._on_error = on_error
        self._model: Optional[TextFieldModel] = None
        self._rendering = False

        self.caption = ttk.Label(self, text="", style="Caption.TLabel")
        self.caption.pack(side=tk.TOP, anchor="w")

        self.var = tk.StringVar(master=self, value="")
        self.entry = ttk.Entry(self, textvariable=self.var, width=32)
        self.entry.pack(side=tk.TOP, fill=tk.X)
        self.var.trace_add("write", self._on_var_write)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def render(self, model: TextFieldModel) -> None:
        self._model = model
        self.caption.configure(text=model.label)
        self._show(model.value)

    @property
    def text(self) -> str:
        return self.var.get()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _show(self, value: str) -> None:
        if self.var.get() == value:
            return
        self._rendering = True
        try:
            self.var.set(value)
        finally:
            self._rendering = False

    def _on_var_write(self, *_args) -> None:
        if self._rendering or self._model is None:
            return
        safe_call(self._model.on_value_change, self.var.get(), on_error=self._on_error)
        # Owner rejected or ignored the edit: fall back to its current value.
        self._show(self._model.value)


__all__ = ["TextFieldView"]
