from __future__ import annotations

import logging
from collections import defaultdict, deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, DefaultDict, Deque, Dict, Hashable, List, Optional, Tuple

logger = logging.getLogger(__name__)


class MovementEvent(str, Enum):
    """Semantic events emitted by a MovementController."""

    MOVE = "move"  # payload: direction, speed
    STOP = "stop"  # payload: empty
    ACTIVATE = "activate"  # payload: point


@dataclass(frozen=True)
class Event:
    """Event container passed to subscribers.

    Attributes:
        kind: Event kind, typically a MovementEvent member.
        payload: Data attached to the event.
    """

    kind: Hashable
    payload: Dict[str, Any] = field(default_factory=dict)


Handler = Callable[[Event], None]


class EventBus:
    """A small single-threaded publish/subscribe channel.

    Handlers for a kind run synchronously, in subscription order, on the
    thread that publishes. A failing handler is logged and does not stop the
    remaining handlers. The most recent ``max_history`` published events are
    kept in ``history`` (all of them when ``max_history`` is None).
    """

    def __init__(self, max_history: Optional[int] = None) -> None:
        if max_history is not None and max_history < 0:
            raise ValueError("max_history must be >= 0")
        self._subs: DefaultDict[Hashable, List[Handler]] = defaultdict(list)
        self._history: Deque[Event] = deque(maxlen=max_history)

    def subscribe(self, kind: Hashable, handler: Handler) -> None:
        if not callable(handler):
            raise TypeError("handler must be callable")
        self._subs[kind].append(handler)
        logger.debug("Subscribed %s to %r", getattr(handler, "__name__", handler), kind)

    def unsubscribe(self, kind: Hashable, handler: Handler) -> None:
        handlers = self._subs.get(kind)
        if handlers and handler in handlers:
            handlers.remove(handler)
            logger.debug("Unsubscribed %s from %r", getattr(handler, "__name__", handler), kind)

    def publish(self, kind: Hashable, payload: Dict[str, Any] | None = None) -> Event:
        event = Event(kind, payload or {})
        self._history.append(event)
        handlers = list(self._subs.get(kind, ()))
        logger.debug("Publishing %r to %d handlers: %s", kind, len(handlers), event.payload)
        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception("Unhandled exception in handler for %r", kind)
        return event

    def subscriber_count(self, kind: Hashable | None = None) -> int:
        if kind is not None:
            return len(self._subs.get(kind, ()))
        return sum(len(h) for h in self._subs.values())

    def clear(self) -> None:
        """Drop every subscription."""
        self._subs.clear()

    @property
    def history(self) -> Tuple[Event, ...]:
        return tuple(self._history)

    def clear_history(self) -> None:
        self._history.clear()


__all__ = ["Event", "EventBus", "Handler", "MovementEvent"]
