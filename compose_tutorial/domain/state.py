"""Single-value state container with explicit observer notification.

Call context:
    Stateful hosts in ``compose_tutorial.viewmodels`` create one
    ``MutableState`` per remembered value and subscribe their recompose
    callback to it.

Contract:
    - Writes are synchronous: every observer runs before ``set`` returns.
    - Observers run in subscription order and receive the new value.
    - Writing a value equal to the current one does not notify.
    - Exceptions raised by observers propagate to the writer.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, List, Optional, TypeVar

T = TypeVar("T")

Observer = Callable[[T], None]


@dataclass
class Subscription:
    """Token returned by ``subscribe``; ``dispose`` removes the observer.

    Attributes:
        detach: Callable that unregisters the observer from its source.
        active: False once the subscription has been disposed.
    """

    detach: Optional[Callable[[], None]] = field(default=None, repr=False)
    active: bool = True

    def dispose(self) -> None:
        """Unregister the observer. Disposing twice is a no-op."""
        if not self.active:
            return
        self.active = False
        detach, self.detach = self.detach, None
        if detach is not None:
            detach()


class ObserverList(Generic[T]):
    """Ordered observer registry shared by ``MutableState`` and ``LiveValue``."""

    def __init__(self) -> None:
        self._observers: List[Observer] = []

    def add(self, observer: Observer) -> Subscription:
        if not callable(observer):
            raise TypeError("Observer must be callable.")
        self._observers.append(observer)
        return Subscription(detach=lambda: self._remove(observer))

    def notify(self, value: T) -> None:
        # Snapshot so observers may unsubscribe while being notified.
        for observer in list(self._observers):
            observer(value)

    def clear(self) -> None:
        self._observers.clear()

    def __len__(self) -> int:
        return len(self._observers)

    def _remove(self, observer: Observer) -> None:
        try:
            self._observers.remove(observer)
        except ValueError:
            pass


class MutableState(Generic[T]):
    """Mutable single-value holder whose writes are observed.

    Args:
        initial: Value held until the first write.
        name: Optional label used in ``repr`` and debug logs.
    """

    def __init__(self, initial: T, *, name: str = "") -> None:
        self._value: T = initial
        self.name = name
        self._observers: ObserverList[T] = ObserverList()

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        self.set(new_value)

    def get(self) -> T:
        return self._value

    def set(self, new_value: T) -> bool:
        """Store ``new_value`` and notify observers.

        Returns:
            True when the value changed and observers were notified.
        """
        if new_value == self._value:
            return False
        self._value = new_value
        self._observers.notify(new_value)
        return True

    def update(self, fn: Callable[[T], T]) -> bool:
        """Write ``fn(current)``; convenience for flips and appends."""
        return self.set(fn(self._value))

    def subscribe(self, observer: Observer) -> Subscription:
        """Register ``observer``; it is called on every subsequent change."""
        return self._observers.add(observer)

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def __repr__(self) -> str:
        label = f" {self.name}" if self.name else ""
        return f"<MutableState{label} value={self._value!r}>"


__all__ = ["MutableState", "Observer", "ObserverList", "Subscription"]
