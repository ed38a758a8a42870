"""Card container view for ``CardModel``.

The card always shows the title. The body label and the single icon control
are rebuilt on each render, so the collapsed and expanded branches never
share widgets.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from ...viewmodels.ui_models import CardModel
from .view_utils import icon_glyph, safe_call


class ExpandableCardView(ttk.Frame):
    def __init__(
        self,
        parent: tk.Widget,
        *,
        wraplength: int = 360,
        on_error: Optional[Callable[[Exception], None]] = None,
        **kwargs,
    ) -> None:
        """Build the card shell; content appears on the first ``render``.

        Args:
            parent: Container widget.
            wraplength: Pixel width at which the body text wraps.
            on_error: Optional hook for failures raised by control callbacks.
            **kwargs: Additional frame options forwarded to ``ttk.Frame``.
        """
        kwargs.setdefault("style", "Card.TFrame")
        kwargs.setdefault("padding", 12)
        super().__init__(parent, **kwargs)
        self._wraplength = wraplength
        self._on_error = on_error
        self._model: Optional[CardModel] = None

        self.title_label = ttk.Label(self, text="", style="CardTitle.TLabel")
        self.title_label.pack(side=tk.TOP, anchor="w")
        self.body_label: Optional[ttk.Label] = None
        self.control_button: Optional[ttk.Button] = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def render(self, model: CardModel) -> None:
        """Show title, then either body + collapse control or expand control."""
        self._model = model
        self.title_label.configure(text=model.title)

        for widget in (self.body_label, self.control_button):
            if widget is not None:
                widget.destroy()
        self.body_label = None

        if model.body is not None:
            self.body_label = ttk.Label(
                self,
                text=model.body,
                style="Card.TLabel",
                wraplength=self._wraplength,
                justify=tk.LEFT,
            )
            self.body_label.pack(side=tk.TOP, anchor="w", pady=(6, 0))

        self.control_button = ttk.Button(
            self,
            text=icon_glyph(model.control.icon),
            style="Icon.TButton",
            width=2,
            command=self._on_control_click,
        )
        self.control_button.pack(side=tk.TOP, anchor="w", pady=(4, 0))

    @property
    def control_description(self) -> Optional[str]:
        """Accessible name of the rendered control (``Expand``/``Collapse``)."""
        if self._model is None:
            return None
        return self._model.control.content_description

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _on_control_click(self) -> None:
        if self._model is None:
            return
        safe_call(self._model.control.on_click, on_error=self._on_error)


__all__ = ["ExpandableCardView"]
