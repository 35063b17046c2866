from __future__ import annotations

import logging
import random
from typing import Optional

from .tiling import DOOR_WIDTH, RoomDimensions

logger = logging.getLogger(__name__)

MIN_FLOOR_AREA = 10
MAX_FLOOR_AREA = 50
MAX_ATTEMPTS = 10
FALLBACK_FLOOR_ROWS = 3
FALLBACK_FLOOR_COLS = 5


class RandomRoomGenerator:
    """Picks random, always-valid RoomDimensions for a house interior.

    - side_height: 1 (60%), 2 (30%) or 3 (10%)
    - floor rows 1-5 and floor columns 4-11, re-rolled until the walkable area
      lies strictly between MIN_FLOOR_AREA and MAX_FLOOR_AREA; after
      MAX_ATTEMPTS a fixed 3x5 floor is used
    - door_position uniform over every valid column

    Passing a seed makes the sequence of rooms reproducible.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random(seed)

    def _roll_side_height(self) -> int:
        roll = self._rng.random()
        if roll < 0.6:
            return 1
        if roll < 0.9:
            return 2
        return 3

    def _roll_floor(self) -> tuple[int, int]:
        for attempt in range(1, MAX_ATTEMPTS + 1):
            rows = self._rng.randint(1, 5)
            # A two-column doorway needs at least four interior columns
            cols = self._rng.randint(4, 11)
            if MIN_FLOOR_AREA < rows * cols < MAX_FLOOR_AREA:
                return rows, cols
            logger.debug("Rejected floor %dx%d (attempt %d)", cols, rows, attempt)
        logger.debug("No floor found in %d attempts; using fallback", MAX_ATTEMPTS)
        return FALLBACK_FLOOR_ROWS, FALLBACK_FLOOR_COLS

    def generate(self) -> RoomDimensions:
        side_height = self._roll_side_height()
        rows, cols = self._roll_floor()
        width = cols + 2
        over_height = rows + 3 + side_height
        door_position = self._rng.randint(2, width - 2 - DOOR_WIDTH)
        room = RoomDimensions(
            width=width,
            over_height=over_height,
            side_height=side_height,
            door_position=door_position,
        )
        logger.info("Rolled random room %s", room)
        return room


__all__ = ["RandomRoomGenerator"]
