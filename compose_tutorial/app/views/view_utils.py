from __future__ import annotations

import logging
from typing import Any, Callable, Optional

_log = logging.getLogger(__name__)

ICON_GLYPHS = {
    "expand_more": "▾",
    "expand_less": "▴",
}


def safe_call(
    fn: Optional[Callable[..., Any]],
    *args: Any,
    on_error: Optional[Callable[[Exception], None]] = None,
) -> None:
    if fn is None:
        return
    try:
        fn(*args)
    except Exception as exc:
        if on_error:
            on_error(exc)
        else:
            _log.exception("Callback failed: %s", exc)


def icon_glyph(icon: str) -> str:
    """Map a material icon name to a text glyph Tk can draw on a button."""
    return ICON_GLYPHS.get(icon, icon)


__all__ = ["icon_glyph", "safe_call"]
