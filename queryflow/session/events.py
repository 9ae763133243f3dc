"""
Outbound events to the presentation layer.

The graph holds no callbacks. The session publishes events on an EventBus
and the presentation layer subscribes to the ones it renders.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class EventType(str, Enum):
    """Events the session emits."""

    NODE_ADDED = "node_added"
    NODE_REMOVED = "node_removed"
    EDGE_ADDED = "edge_added"
    EDGE_REMOVED = "edge_removed"
    GRAPH_CLEARED = "graph_cleared"
    EVALUATION_COMPLETED = "evaluation_completed"
    SOLUTION_REVEAL_PROGRESS = "solution_reveal_progress"
    SOLUTION_REVEAL_COMPLETE = "solution_reveal_complete"
    CELEBRATE = "celebrate"
    DISCOURAGE = "discourage"
    NODE_HOVER_INFO = "node_hover_info"
    NODE_HOVER_CLEAR = "node_hover_clear"


# Sound cue names; playback belongs to the presentation layer
SOUND_CONNECT = "connect"
SOUND_SUCCESS = "success"
SOUND_ERROR = "error"

CONFETTI = {"particle_count": 100, "spread": 70, "origin_y": 0.6}


@dataclass(frozen=True)
class Event:
    """A single notification."""

    type: EventType
    payload: dict[str, Any] = field(default_factory=dict)

    def __getitem__(self, key: str) -> Any:
        return self.payload[key]


Handler = Callable[[Event], None]


class EventBus:
    """
    Synchronous publish/subscribe hub.

    Handlers run in subscription order inside ``emit``. A handler registered
    with ``event_type=None`` receives every event.
    """

    def __init__(self) -> None:
        self._handlers: dict[Optional[EventType], list[Handler]] = defaultdict(list)

    def subscribe(self, handler: Handler, event_type: Optional[EventType] = None) -> None:
        """Register ``handler`` for one event type, or all when None."""
        self._handlers[event_type].append(handler)

    def unsubscribe(self, handler: Handler, event_type: Optional[EventType] = None) -> None:
        """Remove a previously registered handler."""
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event_type: EventType, **payload: Any) -> Event:
        """Build an event and deliver it to matching handlers."""
        event = Event(type=event_type, payload=payload)
        logger.debug("Event %s", event_type.value)
        for handler in list(self._handlers.get(event_type, [])):
            handler(event)
        for handler in list(self._handlers.get(None, [])):
            handler(event)
        return event
