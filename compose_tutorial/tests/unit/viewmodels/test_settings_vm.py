from __future__ import annotations

import pytest

from compose_tutorial.viewmodels.settings_vm import (
    DEFAULT_CARD_TITLE,
    SettingsVM,
)


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("COMPOSE_TUTORIAL_LOG_LEVEL", raising=False)
    monkeypatch.delenv("COMPOSE_TUTORIAL_DEBUG", raising=False)
    payload = SettingsVM().to_dict()

    assert payload["card_title"] == DEFAULT_CARD_TITLE
    assert payload["card_body"].startswith("Lorem ipsum")
    assert payload["debug_logging"] is False


def test_apply_dict_updates_flat_keys() -> None:
    vm = SettingsVM()
    vm.apply_dict(
        {
            "window_title": " Demo ",
            "geometry": "640x480",
            "card_title": "Other",
            "debug_logging": "yes",
        }
    )

    assert vm.window_title == "Demo"
    assert vm.geometry == "640x480"
    assert vm.card_title == "Other"
    assert vm.debug_logging is True
    assert vm.to_dict()["geometry"] == "640x480"


@pytest.mark.parametrize(
    "payload",
    [
        {"unknown": 1},
        {"geometry": "wide"},
        {"card_title": "   "},
        ["not", "a", "mapping"],
    ],
)
def test_apply_dict_rejects_invalid_payloads(payload) -> None:
    vm = SettingsVM()
    before = vm.to_dict()
    with pytest.raises(ValueError):
        vm.apply_dict(payload)
    assert vm.to_dict() == before


def test_env_debug_flag_sets_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("COMPOSE_TUTORIAL_LOG_LEVEL", raising=False)
    monkeypatch.setenv("COMPOSE_TUTORIAL_DEBUG", "1")
    assert SettingsVM().debug_logging is True
