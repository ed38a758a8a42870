"""
MainWindowView
--------------
Top-level Tk window. It only provides the content host frame the composition
root renders into and forwards the window-close event. No state lives here.
"""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional


class MainWindowView(tk.Tk):
    OnVoid = Optional[Callable[[], None]]

    def __init__(
        self,
        *,
        title: str,
        geometry: str,
        on_close: OnVoid = None,
    ) -> None:
        super().__init__()
        self.title(title)
        self.geometry(geometry)
        self.minsize(320, 200)

        self._on_close = on_close
        self.protocol("WM_DELETE_WINDOW", self._handle_close)

        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)

        self.content_host = ttk.Frame(self, padding=16)
        self.content_host.grid(row=0, column=0, sticky="nsew")

    def _handle_close(self) -> None:
        if self._on_close:
            self._on_close()
        else:
            self.destroy()


__all__ = ["MainWindowView"]
