"""External view-model holding the name edited by the text field screens.

State flows down through the read-only ``name`` channel; events flow up
through ``on_name_changed``. The instance is created by the app layer and
passed explicitly to each screen, so the value outlives any single screen.
"""
from __future__ import annotations

import logging

from ..domain.live_value import LiveValue, MutableLiveValue


class NameVM:
    def __init__(self, initial: str = "") -> None:
        self._log = logging.getLogger(__name__)
        self._name: MutableLiveValue[str] = MutableLiveValue(initial)

    @property
    def name(self) -> LiveValue[str]:
        return self._name

    def on_name_changed(self, new_name: str) -> None:
        self._log.debug("Name changed to %r", new_name)
        self._name.publish(new_name)

    def clear(self) -> None:
        """Drop all screen subscriptions when the owning window closes."""
        self._name.clear_subscribers()


__all__ = ["NameVM"]
