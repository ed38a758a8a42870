from __future__ import annotations

from compose_tutorial.domain import CardPhase
from compose_tutorial.viewmodels.expandable_card_vm import (
    ICON_EXPAND_LESS,
    ICON_EXPAND_MORE,
    ExpandableCardVM,
)

BODY = "Lorem ipsum dolor sit amet."


def _started_card():
    renders = []
    vm = ExpandableCardVM(title="My Title", body=BODY, on_render=renders.append)
    vm.start()
    return vm, renders


def test_initial_render_shows_title_and_expand_control_only() -> None:
    vm, renders = _started_card()

    initial = renders[0]
    assert vm.phase is CardPhase.COLLAPSED
    assert initial.title == "My Title"
    assert initial.body is None
    assert initial.control.content_description == "Expand"
    assert initial.control.icon == ICON_EXPAND_MORE


def test_expand_then_collapse_returns_to_initial_rendering() -> None:
    vm, renders = _started_card()
    initial = renders[0]

    initial.control.on_click()
    expanded = renders[-1]
    assert vm.phase is CardPhase.EXPANDED
    assert expanded.title == "My Title"
    assert expanded.body == BODY
    assert expanded.control.content_description == "Collapse"
    assert expanded.control.icon == ICON_EXPAND_LESS

    expanded.control.on_click()
    collapsed = renders[-1]
    assert vm.phase is CardPhase.COLLAPSED
    assert collapsed == initial
    assert len(renders) == 3


def test_each_phase_exposes_a_single_control() -> None:
    vm, renders = _started_card()
    # The collapsed model only knows how to expand; clicking it twice is the
    # same transition, so no invalid collapse can be triggered from here.
    collapsed = renders[0]
    collapsed.control.on_click()
    collapsed.control.on_click()

    assert vm.phase is CardPhase.EXPANDED
    assert len(renders) == 2
