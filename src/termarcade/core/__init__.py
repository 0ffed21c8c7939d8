"""Core framework components for termarcade."""

from .geometry import Pos, Size, Line, Rect
from .input import Key, Keys
from .events import EventBus, Event, EventType

__all__ = [
    "Pos",
    "Size",
    "Line",
    "Rect",
    "Key",
    "Keys",
    "EventBus",
    "Event",
    "EventType",
]
