from __future__ import annotations

from tkinter import ttk


def test_theme_configures_only_styles_the_views_use(tk_root) -> None:
    style = ttk.Style(tk_root)

    for name in ("Card.TFrame", "Card.TLabel", "CardTitle.TLabel", "Caption.TLabel", "Icon.TButton"):
        assert style.configure(name), name
    assert not style.configure("Primary.TButton")
