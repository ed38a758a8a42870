"""Base class for stateful hosts: own remembered state, recompose on change.

Call context:
    Concrete hosts (``ToggleButtonVM``, ``ExpandableCardVM``, the text field
    screens) subclass ``StatefulHost`` and implement ``compose``. The app layer
    passes a view's ``render`` method as ``on_render``.

Lifecycle:
    1. ``start()`` enters the composition: ``on_enter`` creates remembered
       state, then the initial composition runs.
    2. Every change of a remembered state recomposes synchronously, zero or
       more times.
    3. ``dispose()`` leaves the composition and releases all subscriptions.
"""
from __future__ import annotations

from typing import Callable, Generic, List, Optional, TypeVar

from ..domain.errors import ALREADY_COMPOSED, LEFT_COMPOSITION, CompositionError
from ..domain.live_value import LiveValue
from ..domain.state import MutableState, Subscription
from ..utils.logging import recomposition_logger

M = TypeVar("M")
T = TypeVar("T")

RenderSink = Callable[[M], None]

_RECOMPOSITION_LOG = recomposition_logger()


class StatefulHost(Generic[M]):
    """Owns state containers and pushes each composed model to ``on_render``."""

    def __init__(self, on_render: Optional[RenderSink] = None) -> None:
        self.on_render = on_render
        self.composition_count = 0
        self.last_model: Optional[M] = None
        self._subscriptions: List[Subscription] = []
        self._entered = False
        self._left = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self) -> M:
        """Enter the composition and run the initial composition."""
        if self._left:
            raise CompositionError(LEFT_COMPOSITION, f"{type(self).__name__} already left the composition.")
        if self._entered:
            raise CompositionError(ALREADY_COMPOSED, f"{type(self).__name__} is already composed.")
        self._entered = True
        self.on_enter()
        return self.recompose()

    def recompose(self) -> M:
        """Re-run ``compose`` and forward the model to the render sink."""
        if self._left:
            raise CompositionError(LEFT_COMPOSITION, f"{type(self).__name__} already left the composition.")
        model = self.compose()
        self.composition_count += 1
        self.last_model = model
        _RECOMPOSITION_LOG.debug(
            "%s composition #%d: %r", type(self).__name__, self.composition_count, model
        )
        if self.on_render is not None:
            self.on_render(model)
        return model

    def dispose(self) -> None:
        """Leave the composition; remembered state is released."""
        if self._left:
            return
        self._left = True
        for subscription in self._subscriptions:
            subscription.dispose()
        self._subscriptions.clear()
        self.on_leave()

    @property
    def is_active(self) -> bool:
        return self._entered and not self._left

    # ------------------------------------------------------------------
    # Hooks for subclasses
    # ------------------------------------------------------------------
    def on_enter(self) -> None:
        """Create remembered state. Runs once, before the first composition."""

    def on_leave(self) -> None:
        """Release resources held outside remembered state."""

    def compose(self) -> M:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Helpers for subclasses
    # ------------------------------------------------------------------
    def remember(self, initial: T, *, name: str = "") -> MutableState[T]:
        """Create a state container whose changes trigger recomposition."""
        state: MutableState[T] = MutableState(initial, name=name)
        self._subscriptions.append(state.subscribe(self._on_state_changed))
        return state

    def observe_as_state(self, channel: LiveValue[T], *, name: str = "") -> MutableState[T]:
        """Mirror ``channel`` into remembered state for the host's lifetime."""
        state = self.remember(channel.get(), name=name)
        self.track(channel.subscribe(state.set))
        return state

    def track(self, subscription: Subscription) -> Subscription:
        """Dispose ``subscription`` together with this host."""
        self._subscriptions.append(subscription)
        return subscription

    def _on_state_changed(self, _value: object) -> None:
        if self._entered and not self._left:
            self.recompose()


__all__ = ["RenderSink", "StatefulHost"]
