"""
Text and layout views
---------------------
Read-only views for the stateless snippets: a single text label and the
row/column/box containers holding two labels. ``render`` rebuilds the
children from the model every time; there is no diffing.
"""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import List, Optional

from ...viewmodels.ui_models import LayoutKind, LayoutModel, TextModel


class TextView(ttk.Label):
    """Single text display."""

    def render(self, model: TextModel) -> None:
        self.configure(text=model.text)


class LayoutView(ttk.Frame):
    """Vertical stack, horizontal stack, or overlay stack of texts."""

    def __init__(self, parent: tk.Widget, **kwargs) -> None:
        super().__init__(parent, **kwargs)
        self.labels: List[ttk.Label] = []
        self.model: Optional[LayoutModel] = None

    def render(self, model: LayoutModel) -> None:
        for label in self.labels:
            label.destroy()
        self.labels = []
        self.model = model

        for child in model.children:
            label = ttk.Label(self, text=child.text)
            if model.kind is LayoutKind.COLUMN:
                label.pack(side=tk.TOP, anchor="w")
            elif model.kind is LayoutKind.ROW:
                label.pack(side=tk.LEFT, anchor="n")
            else:
                # Overlay: every child sits at the box origin, last one on top.
                label.place(x=0, y=0)
            self.labels.append(label)

        if model.kind is LayoutKind.BOX:
            self._size_to_children()
        if model.fill and self.winfo_manager() == "pack":
            self.pack_configure(fill=tk.BOTH, expand=True)

    def _size_to_children(self) -> None:
        # Placed children do not propagate their size to the frame.
        self.update_idletasks()
        width = max((label.winfo_reqwidth() for label in self.labels), default=0)
        height = max((label.winfo_reqheight() for label in self.labels), default=0)
        self.configure(width=width, height=height)


__all__ = ["LayoutView", "TextView"]
