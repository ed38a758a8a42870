from __future__ import annotations

import logging

import pytest

from compose_tutorial.domain.errors import ALREADY_COMPOSED, LEFT_COMPOSITION, CompositionError
from compose_tutorial.viewmodels.name_vm import NameVM
from compose_tutorial.viewmodels.text_field_vm import SharedFirstScreenVM
from compose_tutorial.viewmodels.toggle_vm import ToggleButtonVM


def test_start_twice_raises() -> None:
    vm = ToggleButtonVM()
    vm.start()
    with pytest.raises(CompositionError) as excinfo:
        vm.start()
    assert excinfo.value.code == ALREADY_COMPOSED


def test_recompose_after_dispose_raises() -> None:
    vm = ToggleButtonVM()
    vm.start()
    vm.dispose()
    vm.dispose()

    assert vm.is_active is False
    with pytest.raises(CompositionError) as excinfo:
        vm.recompose()
    assert excinfo.value.code == LEFT_COMPOSITION


def test_state_writes_after_dispose_do_not_render() -> None:
    renders = []
    vm = ToggleButtonVM(on_render=renders.append)
    vm.start()
    stale = renders[-1]
    vm.dispose()

    stale.on_click()

    assert len(renders) == 1
    assert vm.composition_count == 1


def test_dispose_unsubscribes_from_view_model_channel() -> None:
    name_vm = NameVM()
    renders = []
    screen = SharedFirstScreenVM(name_vm, on_render=renders.append)
    screen.start()
    assert name_vm.name.subscriber_count == 1

    screen.dispose()
    name_vm.on_name_changed("after")

    assert name_vm.name.subscriber_count == 0
    assert [m.value for m in renders] == [""]


def test_each_composition_is_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="compose_tutorial.recomposition")
    vm = ToggleButtonVM()
    vm.start()
    vm.on_click()

    messages = [r.getMessage() for r in caplog.records if r.name == "compose_tutorial.recomposition"]
    assert len(messages) == 2
    assert messages[0].startswith("ToggleButtonVM composition #1")
    assert messages[1].startswith("ToggleButtonVM composition #2")
