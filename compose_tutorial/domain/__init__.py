"""Domain package exports for state containers and unit state machines."""

from .errors import ALREADY_COMPOSED, LEFT_COMPOSITION, CompositionError
from .live_value import LiveValue, MutableLiveValue
from .models import CardPhase, ToggleState
from .state import MutableState, Observer, Subscription

__all__ = [
    "ALREADY_COMPOSED",
    "CardPhase",
    "CompositionError",
    "LEFT_COMPOSITION",
    "LiveValue",
    "MutableLiveValue",
    "MutableState",
    "Observer",
    "Subscription",
    "ToggleState",
]
