"""Shared visual theme for the tutorial views.

Centralizes ttk style tokens (card container, title text, icon buttons) so
individual views only reference style names.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk


def apply_modern_theme(root: tk.Misc) -> None:
    """Apply a cohesive ttk + tk visual theme to the full application.

    Args:
        root: Root Tk object or any widget tied to the app Tcl interpreter.
    """
    style = ttk.Style(root)
    if "clam" in style.theme_names():
        style.theme_use("clam")

    bg = "#f3f5f9"
    card_bg = "#ffffff"
    border = "#d9dfeb"
    text = "#1f2937"
    muted = "#64748b"

    root.option_add("*Font", "TkDefaultFont 10")
    root.configure(bg=bg)

    style.configure(".", background=bg, foreground=text)
    style.configure("TFrame", background=bg)
    style.configure("Card.TFrame", background=card_bg, relief="solid", borderwidth=1, bordercolor=border)
    style.configure("TLabel", background=bg, foreground=text)
    style.configure("Card.TLabel", background=card_bg, foreground=text)
    style.configure("CardTitle.TLabel", background=card_bg, foreground=text, font=("TkDefaultFont", 12, "bold"))
    style.configure("Caption.TLabel", background=bg, foreground=muted, font=("TkDefaultFont", 9))

    style.configure(
        "TButton",
        padding=(10, 6),
        background=card_bg,
        bordercolor=border,
        relief="flat",
    )
    style.map("TButton", background=[("active", "#edf2ff")])
    style.configure("Icon.TButton", padding=(4, 2), background=card_bg, borderwidth=0, relief="flat")
    style.map("Icon.TButton", background=[("active", "#edf2ff")])

    style.configure("TEntry", fieldbackground="#ffffff", bordercolor=border)
