from __future__ import annotations

import logging
import time
from typing import Callable, Dict, Optional

import arcade

from .sources import ListenerRegistry, KEY_DOWN, KEY_UP, POINTER_DOWN, POINTER_MOVE, POINTER_UP
from .actions import KeyEvent, PointerEvent

logger = logging.getLogger(__name__)


def _default_key_names() -> Dict[int, str]:
    return {
        arcade.key.UP: "ArrowUp",
        arcade.key.DOWN: "ArrowDown",
        arcade.key.LEFT: "ArrowLeft",
        arcade.key.RIGHT: "ArrowRight",
        arcade.key.W: "W",
        arcade.key.A: "A",
        arcade.key.S: "S",
        arcade.key.D: "D",
        arcade.key.SPACE: "Space",
    }


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class ArcadeInputSource(ListenerRegistry):
    """Feeds Arcade window callbacks into the listener kinds used by the game.

    Arcade reports key codes as ints and puts the origin in the lower-left
    corner; listeners get logical key names and screen coordinates with y
    growing downward, stamped in milliseconds.

    Either forward the window callbacks by hand or call attach(window), which
    pushes this object as an event handler on the window.
    """

    def __init__(
        self,
        window_height: float,
        clock: Optional[Callable[[], float]] = None,
        key_names: Optional[Dict[int, str]] = None,
    ) -> None:
        super().__init__()
        self.window_height = window_height
        self._clock = clock or _monotonic_ms
        self._key_names = key_names if key_names is not None else _default_key_names()
        self._window = None

    def attach(self, window: arcade.Window) -> None:
        if self._window is not None:
            return
        window.push_handlers(self)
        self._window = window
        self.window_height = window.height
        logger.debug("Input source attached to %r", window)

    def detach(self) -> None:
        if self._window is None:
            return
        self._window.remove_handlers(self)
        logger.debug("Input source detached from %r", self._window)
        self._window = None

    def key_name(self, symbol: int) -> Optional[str]:
        return self._key_names.get(symbol)

    def _flip(self, y: float) -> float:
        return self.window_height - y

    # Arcade/pyglet window events
    def on_key_press(self, symbol: int, modifiers: int) -> None:
        name = self.key_name(symbol)
        if name is None:
            logger.debug("Ignoring unmapped key %s (modifiers=%s)", symbol, modifiers)
            return
        self.dispatch(KEY_DOWN, KeyEvent(name, True, self._clock()))

    def on_key_release(self, symbol: int, modifiers: int) -> None:
        name = self.key_name(symbol)
        if name is None:
            return
        self.dispatch(KEY_UP, KeyEvent(name, False, self._clock()))

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int) -> None:
        self.dispatch(POINTER_DOWN, PointerEvent(x, self._flip(y), self._clock()))

    def on_mouse_drag(self, x: float, y: float, dx: float, dy: float, buttons: int, modifiers: int) -> None:
        self.dispatch(POINTER_MOVE, PointerEvent(x, self._flip(y), self._clock()))

    def on_mouse_release(self, x: float, y: float, button: int, modifiers: int) -> None:
        self.dispatch(POINTER_UP, PointerEvent(x, self._flip(y), self._clock()))

    def on_resize(self, width: int, height: int) -> None:
        self.window_height = height


__all__ = ["ArcadeInputSource"]
