from __future__ import annotations

import pytest

from compose_tutorial.domain.state import MutableState


def test_write_notifies_observers_synchronously_in_order() -> None:
    state = MutableState("")
    seen = []
    state.subscribe(lambda v: seen.append(("first", v)))
    state.subscribe(lambda v: seen.append(("second", v)))

    assert state.set("A") is True

    assert seen == [("first", "A"), ("second", "A")]
    assert state.value == "A"


def test_equal_write_does_not_notify() -> None:
    state = MutableState(False)
    seen = []
    state.subscribe(seen.append)

    assert state.set(False) is False
    state.value = True
    state.value = True

    assert seen == [True]


def test_update_applies_function_to_current_value() -> None:
    state = MutableState("Ab")
    state.update(lambda v: v + "c")
    assert state.get() == "Abc"


def test_disposed_subscription_stops_delivery_and_is_idempotent() -> None:
    state = MutableState(0)
    seen = []
    sub = state.subscribe(seen.append)
    state.set(1)
    sub.dispose()
    sub.dispose()
    state.set(2)

    assert seen == [1]
    assert sub.active is False
    assert state.observer_count == 0


def test_observer_may_unsubscribe_while_notified() -> None:
    state = MutableState(0)
    seen = []
    subs = []

    def once(value: int) -> None:
        seen.append(value)
        subs[0].dispose()

    subs.append(state.subscribe(once))
    state.subscribe(lambda v: seen.append(-v))
    state.set(3)
    state.set(4)

    assert seen == [3, -3, -4]


def test_observer_errors_propagate_to_writer() -> None:
    state = MutableState(0)

    def boom(_value: int) -> None:
        raise RuntimeError("render failed")

    state.subscribe(boom)
    with pytest.raises(RuntimeError):
        state.set(1)
    assert state.value == 1


def test_non_callable_observer_rejected() -> None:
    state = MutableState(0)
    with pytest.raises(TypeError):
        state.subscribe("not callable")  # type: ignore[arg-type]
