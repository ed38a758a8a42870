from __future__ import annotations

import sys

from compose_tutorial.app import main as app_main


def test_entry_point_reaches_every_unit_module() -> None:
    expected = [
        "compose_tutorial.viewmodels.toggle_vm",
        "compose_tutorial.viewmodels.text_field_vm",
        "compose_tutorial.viewmodels.name_vm",
        "compose_tutorial.viewmodels.layout_samples",
        "compose_tutorial.app.views.text_views",
        "compose_tutorial.app.views.toggle_button_view",
        "compose_tutorial.app.views.text_field_view",
        "compose_tutorial.app.views.expandable_card_view",
    ]
    assert [name for name in expected if name not in sys.modules] == []


def test_catalog_default_is_the_card() -> None:
    assert app_main.DEFAULT_SAMPLE == "expandable_card"
    assert app_main.SAMPLES[app_main.DEFAULT_SAMPLE] is app_main._expandable_card
    assert {
        "toggle_button",
        "plain_text_field",
        "first_screen",
        "shared_first_screen",
        "flat_text",
        "row",
        "column",
        "box",
    } <= set(app_main.SAMPLES)
