"""
Event bus for module communication.

Provides a pub/sub pattern so the web layer can observe game changes
without the engine depending on it. Handlers run synchronously in the
publishing thread.
"""

import logging
import threading
from collections import defaultdict
from collections.abc import Callable

from .events import Event, EventType


logger = logging.getLogger(__name__)

Handler = Callable[[Event], None]


class EventBus:
    """
    Simple pub/sub event bus.

    Usage:
        bus = EventBus()
        bus.subscribe(EventType.MOVE_MADE, my_handler)
        bus.publish(Event(type=EventType.MOVE_MADE, data=move))
    """

    def __init__(self, max_log_size: int = 100) -> None:
        self._handlers: dict[EventType, list[Handler]] = defaultdict(list)
        self._global_handlers: list[Handler] = []
        self._lock = threading.Lock()
        self._event_log: list[Event] = []
        self._max_log_size = max_log_size

    def subscribe(self, event_type: EventType, handler: Handler) -> None:
        """Register a handler for an event type."""
        with self._lock:
            if handler not in self._handlers[event_type]:
                self._handlers[event_type].append(handler)

    def subscribe_all(self, handler: Handler) -> None:
        """Register a handler for every event type."""
        with self._lock:
            if handler not in self._global_handlers:
                self._global_handlers.append(handler)

    def unsubscribe(self, event_type: EventType, handler: Handler) -> None:
        """Remove a handler."""
        with self._lock:
            if handler in self._handlers[event_type]:
                self._handlers[event_type].remove(handler)

    def unsubscribe_all(self, handler: Handler) -> None:
        with self._lock:
            if handler in self._global_handlers:
                self._global_handlers.remove(handler)

    def publish(self, event: Event) -> None:
        """Log the event and dispatch it to all matching handlers."""
        with self._lock:
            self._event_log.append(event)
            if len(self._event_log) > self._max_log_size:
                self._event_log.pop(0)
            handlers = self._handlers[event.type].copy() + self._global_handlers.copy()

        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception("Handler error for %s", event.type.name)

    def get_event_log(self, limit: int = 20) -> list[Event]:
        """Get recent events from log."""
        with self._lock:
            return self._event_log[-limit:]

    def clear_log(self) -> None:
        """Clear event log."""
        with self._lock:
            self._event_log.clear()


# ─────────────────────────────────────────────────────────────
# SINGLETON ACCESS
# ─────────────────────────────────────────────────────────────

_bus: EventBus | None = None


def get_event_bus() -> EventBus:
    """Get the global event bus singleton."""
    global _bus
    if _bus is None:
        _bus = EventBus()
    return _bus


def reset_event_bus() -> None:
    """Reset the event bus (for testing)."""
    global _bus
    _bus = None
