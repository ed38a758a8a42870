# compose_tutorial/app/main.py
from __future__ import annotations

import logging
import tkinter as tk
from dataclasses import dataclass
from typing import Callable, Dict, Optional

# ---- Views (UI-only) ----
from .views.expandable_card_view import ExpandableCardView
from .views.main_window import MainWindowView
from .views.text_field_view import TextFieldView
from .views.text_views import LayoutView, TextView
from .views.theme import apply_modern_theme
from .views.toggle_button_view import ToggleButtonView

# ---- ViewModels ----
from ..viewmodels.expandable_card_vm import ExpandableCardVM
from ..viewmodels.host import StatefulHost
from ..viewmodels.layout_samples import box_layout, column_layout, flat_text, row_layout
from ..viewmodels.name_vm import NameVM
from ..viewmodels.settings_vm import SettingsVM
from ..viewmodels.text_field_vm import FirstScreenVM, PlainTextFieldVM, SharedFirstScreenVM
from ..viewmodels.toggle_vm import ToggleButtonVM
from ..utils import logging as logging_utils

logging_utils.configure_root()


@dataclass
class Sample:
    """One top-level unit: its Tk view and, for stateful units, its host."""

    view: tk.Widget
    host: Optional[StatefulHost] = None


SampleBuilder = Callable[["App", tk.Widget], Sample]


def _expandable_card(app: "App", parent: tk.Widget) -> Sample:
    view = ExpandableCardView(parent, on_error=app._on_view_error)
    host = ExpandableCardVM(
        title=app.settings_vm.card_title,
        body=app.settings_vm.card_body,
        on_render=view.render,
    )
    return Sample(view, host)


def _toggle_button(app: "App", parent: tk.Widget) -> Sample:
    view = ToggleButtonView(parent, on_error=app._on_view_error)
    return Sample(view, ToggleButtonVM(on_render=view.render))


def _plain_text_field(app: "App", parent: tk.Widget) -> Sample:
    view = TextFieldView(parent, on_error=app._on_view_error)
    return Sample(view, PlainTextFieldVM(on_render=view.render))


def _first_screen(app: "App", parent: tk.Widget) -> Sample:
    view = TextFieldView(parent, on_error=app._on_view_error)
    return Sample(view, FirstScreenVM(on_render=view.render))


def _shared_first_screen(app: "App", parent: tk.Widget) -> Sample:
    view = TextFieldView(parent, on_error=app._on_view_error)
    return Sample(view, SharedFirstScreenVM(app.name_vm, on_render=view.render))


def _flat_text(app: "App", parent: tk.Widget) -> Sample:
    view = TextView(parent)
    view.render(flat_text())
    return Sample(view)


def _layout(factory) -> SampleBuilder:
    def build(app: "App", parent: tk.Widget) -> Sample:
        view = LayoutView(parent)
        view.render(factory())
        return Sample(view)

    return build


SAMPLES: Dict[str, SampleBuilder] = {
    "expandable_card": _expandable_card,
    "toggle_button": _toggle_button,
    "plain_text_field": _plain_text_field,
    "first_screen": _first_screen,
    "shared_first_screen": _shared_first_screen,
    "flat_text": _flat_text,
    "row": _layout(row_layout),
    "column": _layout(column_layout),
    "box": _layout(box_layout),
}
DEFAULT_SAMPLE = "expandable_card"


class App:
    """Composition root: one window rendering one top-level unit."""

    def __init__(self, settings: Optional[SettingsVM] = None, *, sample: str = DEFAULT_SAMPLE) -> None:
        self._log = logging.getLogger(__name__)
        builder = SAMPLES.get(sample)
        if builder is None:
            raise ValueError(f"Unknown sample '{sample}'. Expected one of: {', '.join(SAMPLES)}")

        self.settings_vm = settings or SettingsVM()
        tracing = logging_utils.apply_gui_preferences(self.settings_vm.debug_logging)
        self._log.debug("Recomposition tracing %s", "on" if tracing else "off")

        self.name_vm = NameVM()
        self.win = MainWindowView(
            title=self.settings_vm.window_title,
            geometry=self.settings_vm.geometry,
            on_close=self.close,
        )
        apply_modern_theme(self.win)

        self.sample_name = sample
        self.sample = builder(self, self.win.content_host)
        self.sample.view.pack(side="top", fill="x", anchor="n")
        if self.sample.host is not None:
            self.sample.host.start()

    def close(self) -> None:
        """Leave the composition, release the view-model, then tear down the window."""
        if self.sample.host is not None:
            self.sample.host.dispose()
        self.name_vm.clear()
        self.win.destroy()

    def _on_view_error(self, exc: Exception) -> None:
        self._log.error("View callback failed: %s", exc, exc_info=exc)


def main() -> None:
    app = App()
    app.win.mainloop()


if __name__ == "__main__":
    main()
