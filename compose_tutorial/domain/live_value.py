"""Replay-latest observable channel used by view-models.

``LiveValue`` is the read side handed to screens; ``MutableLiveValue`` adds
``publish`` and stays private to the owning view-model. Unlike
``MutableState``, every publish is delivered, even when the value repeats.
"""
from __future__ import annotations

from typing import Generic, TypeVar

from .state import Observer, ObserverList, Subscription

T = TypeVar("T")


class LiveValue(Generic[T]):
    """Read-only channel: ``get`` and ``subscribe`` with replay-on-subscribe."""

    def __init__(self, initial: T) -> None:
        self._value: T = initial
        self._observers: ObserverList[T] = ObserverList()

    def get(self) -> T:
        return self._value

    def subscribe(self, handler: Observer) -> Subscription:
        """Register ``handler`` and immediately deliver the latest value."""
        subscription = self._observers.add(handler)
        try:
            handler(self._value)
        except BaseException:
            subscription.dispose()
            raise
        return subscription

    @property
    def subscriber_count(self) -> int:
        return len(self._observers)


class MutableLiveValue(LiveValue[T]):
    """Writable channel owned by a single writer."""

    def publish(self, value: T) -> None:
        self._value = value
        self._observers.notify(value)

    def clear_subscribers(self) -> None:
        self._observers.clear()


__all__ = ["LiveValue", "MutableLiveValue"]
