"""이벤트 시스템"""

from .event_bus import EventBus, GameEvent, GameEventType

__all__ = [
    "EventBus",
    "GameEvent",
    "GameEventType",
]
