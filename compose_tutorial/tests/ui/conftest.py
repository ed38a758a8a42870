from __future__ import annotations

import tkinter as tk

import pytest

from compose_tutorial.app.views.theme import apply_modern_theme


@pytest.fixture
def tk_root():
    try:
        root = tk.Tk()
    except tk.TclError as exc:
        pytest.skip(f"Tk display unavailable: {exc}")
    root.withdraw()
    apply_modern_theme(root)
    yield root
    root.destroy()
