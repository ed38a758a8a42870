from __future__ import annotations

from compose_tutorial.viewmodels.name_vm import NameVM


def test_name_channel_replays_latest_value() -> None:
    vm = NameVM()
    vm.on_name_changed("Ada")

    seen = []
    vm.name.subscribe(seen.append)

    assert seen == ["Ada"]


def test_clear_drops_subscribers() -> None:
    vm = NameVM()
    seen = []
    vm.name.subscribe(seen.append)
    vm.clear()
    vm.on_name_changed("late")

    assert seen == [""]
    assert vm.name.get() == "late"


def test_initial_value_is_configurable() -> None:
    assert NameVM("Grace").name.get() == "Grace"
