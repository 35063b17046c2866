from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple


class Direction(Enum):
    """The four cardinal directions an actor can face or walk in.

    Screen coordinates: x grows to the right, y grows downward.
    """

    UP = auto()
    RIGHT = auto()
    DOWN = auto()
    LEFT = auto()

    @property
    def vector(self) -> Tuple[int, int]:
        return {
            Direction.UP: (0, -1),
            Direction.RIGHT: (1, 0),
            Direction.DOWN: (0, 1),
            Direction.LEFT: (-1, 0),
        }[self]

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)


class InputAction(Enum):
    """Logical input actions, independent of the physical device."""

    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    ACTIVATE = auto()  # e.g., Space

    @property
    def direction(self) -> Optional[Direction]:
        return _ACTION_DIRECTIONS.get(self)

    @property
    def is_movement(self) -> bool:
        return self in _ACTION_DIRECTIONS


_ACTION_DIRECTIONS = {
    InputAction.MOVE_UP: Direction.UP,
    InputAction.MOVE_DOWN: Direction.DOWN,
    InputAction.MOVE_LEFT: Direction.LEFT,
    InputAction.MOVE_RIGHT: Direction.RIGHT,
}


@dataclass(frozen=True)
class KeyEvent:
    """A raw key press or release, identified by its logical key name.

    Attributes:
        key: Backend key name such as "ArrowUp" or "Space".
        pressed: True for key-down, False for key-up.
        timestamp: Milliseconds on the source's clock.
    """

    key: str
    pressed: bool
    timestamp: float = 0.0


@dataclass(frozen=True)
class PointerEvent:
    """A pointer/touch sample in screen coordinates (y grows downward)."""

    x: float
    y: float
    timestamp: float = 0.0


__all__ = ["Direction", "InputAction", "KeyEvent", "PointerEvent"]
