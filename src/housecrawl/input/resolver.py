from __future__ import annotations

import math
from typing import Iterable, Optional

from .actions import Direction, InputAction

DEFAULT_DRAG_THRESHOLD = 10.0

# Most significant first. Horizontal input wins over vertical, and RIGHT over LEFT.
KEY_PRIORITY = (
    (InputAction.MOVE_RIGHT, Direction.RIGHT),
    (InputAction.MOVE_LEFT, Direction.LEFT),
    (InputAction.MOVE_DOWN, Direction.DOWN),
    (InputAction.MOVE_UP, Direction.UP),
)


def resolve_keys(held: Iterable[InputAction]) -> Optional[Direction]:
    """Pick the single direction for a set of held movement actions.

    Returns None when no movement action is held.
    """
    held = set(held)
    for action, direction in KEY_PRIORITY:
        if action in held:
            return direction
    return None


def resolve_drag(dx: float, dy: float, threshold: float = DEFAULT_DRAG_THRESHOLD) -> Optional[Direction]:
    """Turn a drag vector into a direction, or None for a short drag.

    The dominant axis wins; equal components resolve vertically.
    """
    if math.hypot(dx, dy) < threshold:
        return None
    if abs(dx) > abs(dy):
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    return Direction.DOWN if dy > 0 else Direction.UP


__all__ = ["DEFAULT_DRAG_THRESHOLD", "KEY_PRIORITY", "resolve_drag", "resolve_keys"]
