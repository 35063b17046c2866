from __future__ import annotations

import abc
import logging
from collections import defaultdict
from typing import Callable, DefaultDict, List, Union

from .actions import KeyEvent, PointerEvent

logger = logging.getLogger(__name__)

KEY_DOWN = "key_down"
KEY_UP = "key_up"
POINTER_DOWN = "pointer_down"
POINTER_MOVE = "pointer_move"
POINTER_UP = "pointer_up"

LISTENER_KINDS = (KEY_DOWN, KEY_UP, POINTER_DOWN, POINTER_MOVE, POINTER_UP)

Listener = Callable[[Union[KeyEvent, PointerEvent]], None]


class InputSource(abc.ABC):
    """Abstract producer of raw key and pointer events.

    Implementations are thin adapters over a window system. Consumers
    register one callback per listener kind and must remove every callback
    they added when they go away.
    """

    @abc.abstractmethod
    def add_listener(self, kind: str, listener: Listener) -> None:
        """Register ``listener`` for events of ``kind``."""

    @abc.abstractmethod
    def remove_listener(self, kind: str, listener: Listener) -> None:
        """Remove a listener; removing an unknown listener is a no-op."""


class ListenerRegistry(InputSource):
    """InputSource base that keeps listeners in memory and fans events out."""

    def __init__(self) -> None:
        self._listeners: DefaultDict[str, List[Listener]] = defaultdict(list)

    def add_listener(self, kind: str, listener: Listener) -> None:
        if kind not in LISTENER_KINDS:
            raise ValueError(f"Unknown listener kind: {kind}")
        self._listeners[kind].append(listener)

    def remove_listener(self, kind: str, listener: Listener) -> None:
        listeners = self._listeners.get(kind)
        if listeners and listener in listeners:
            listeners.remove(listener)

    def listener_count(self, kind: str | None = None) -> int:
        if kind is not None:
            return len(self._listeners.get(kind, ()))
        return sum(len(v) for v in self._listeners.values())

    def dispatch(self, kind: str, event: Union[KeyEvent, PointerEvent]) -> None:
        for listener in list(self._listeners.get(kind, ())):
            listener(event)


class ManualInputSource(ListenerRegistry):
    """Input source driven by direct method calls.

    Used by headless hosts, replays and tests:

        source = ManualInputSource()
        source.press("ArrowUp", timestamp=0)
        source.release("ArrowUp", timestamp=120)
    """

    def press(self, key: str, timestamp: float = 0.0) -> None:
        self.dispatch(KEY_DOWN, KeyEvent(key, True, timestamp))

    def release(self, key: str, timestamp: float = 0.0) -> None:
        self.dispatch(KEY_UP, KeyEvent(key, False, timestamp))

    def pointer_down(self, x: float, y: float, timestamp: float = 0.0) -> None:
        self.dispatch(POINTER_DOWN, PointerEvent(x, y, timestamp))

    def pointer_move(self, x: float, y: float, timestamp: float = 0.0) -> None:
        self.dispatch(POINTER_MOVE, PointerEvent(x, y, timestamp))

    def pointer_up(self, x: float, y: float, timestamp: float = 0.0) -> None:
        self.dispatch(POINTER_UP, PointerEvent(x, y, timestamp))


__all__ = [
    "InputSource",
    "KEY_DOWN",
    "KEY_UP",
    "LISTENER_KINDS",
    "ListenerRegistry",
    "ManualInputSource",
    "POINTER_DOWN",
    "POINTER_MOVE",
    "POINTER_UP",
]
