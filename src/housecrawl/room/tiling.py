from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence

from ..exceptions import InvalidDimension
from .tiles import DEFAULT_GLYPHS, TileTypes

logger = logging.getLogger(__name__)

MIN_WIDTH = 6
MIN_DOOR_POSITION = 2
DOOR_WIDTH = 2


@dataclass(frozen=True)
class RoomDimensions:
    """Integer parameters of a rectangular room with a door in its bottom wall.

    - width: columns, including both side walls (>= 6)
    - over_height: rows of the room outline, top wall to bottom wall
      (>= 3 + side_height)
    - side_height: rows of wall thickness drawn below the outline (>= 1)
    - door_position: leftmost column of the two-column doorway
      (2 <= door_position < width - 3)
    """

    width: int
    over_height: int
    side_height: int
    door_position: int

    @property
    def total_height(self) -> int:
        return self.over_height + self.side_height

    @property
    def size(self) -> int:
        return self.width * self.total_height

    def validate(self) -> None:
        """Raise InvalidDimension for the first violated precondition."""
        if self.width < MIN_WIDTH:
            raise InvalidDimension("width", f"Room width must be at least {MIN_WIDTH} (got {self.width})")
        if self.door_position < MIN_DOOR_POSITION or self.door_position >= self.width - 3:
            raise InvalidDimension(
                "door_position",
                f"Door position must be at least {MIN_DOOR_POSITION} and less than width-3 "
                f"(got {self.door_position} for width {self.width})",
            )
        if self.side_height < 1:
            raise InvalidDimension("side_height", f"Side height must be at least 1 (got {self.side_height})")
        if self.over_height < 3 + self.side_height:
            raise InvalidDimension(
                "over_height",
                f"Over height must be at least 3 + side_height (got {self.over_height} "
                f"with side_height {self.side_height})",
            )


class RoomTiling:
    """Turns RoomDimensions into a flat, row-major grid of tile ids.

    Layout for width=6, over_height=4, side_height=1, door_position=2::

        ╔════╗   top wall
        ║────║   banding (side_height rows)
        ║····║   floor
        ╚╣··╠╝   bottom wall, doorway punched through
        └┘··└┘   wall thickness (side section)

    The doorway is two columns wide and stays floor from the bottom wall of
    the outline down to the last row. Banding rows 1..side_height-1 use
    side_mid_wall, row side_height uses side_bottom_wall.
    """

    def __init__(self, tiles: TileTypes) -> None:
        self.tiles = tiles

    def generate(self, room: RoomDimensions) -> List[int]:
        room.validate()
        t = self.tiles
        width = room.width
        over_height = room.over_height
        total_height = room.total_height
        door_left = room.door_position - 1
        door_right = room.door_position + DOOR_WIDTH
        door_cols = range(room.door_position, room.door_position + DOOR_WIDTH)
        band_rows = room.side_height - 1

        grid = [t.floor] * room.size

        for y in range(total_height):
            row = y * width
            for x in range(width):
                if x in door_cols and y >= over_height - 1:
                    continue
                left = x == 0
                right = x == width - 1

                if y == 0:
                    tile = t.over_top_left_corner if left else t.over_top_right_corner if right else t.over_top_wall
                elif y == over_height - 1:
                    if left:
                        tile = t.over_bottom_left_corner
                    elif right:
                        tile = t.over_bottom_right_corner
                    elif x == door_left:
                        tile = t.over_internal_right_corner
                    elif x == door_right:
                        tile = t.over_internal_left_corner
                    else:
                        tile = t.over_bottom_wall
                elif y < over_height:
                    if left:
                        tile = t.over_left_wall
                    elif right:
                        tile = t.over_right_wall
                    elif y <= band_rows:
                        tile = t.side_mid_wall
                    elif y == band_rows + 1:
                        tile = t.side_bottom_wall
                    else:
                        continue
                elif y == total_height - 1:
                    if left:
                        tile = t.side_bottom_left_corner
                    elif right:
                        tile = t.side_bottom_right_corner
                    elif x == door_left:
                        tile = t.side_bottom_right_corner
                    elif x == door_right:
                        tile = t.side_bottom_left_corner
                    else:
                        tile = t.side_bottom_wall
                else:
                    if right:
                        tile = t.side_right_wall
                    elif left or x == door_left or x == door_right:
                        # Vertical lines either side of the doorway
                        tile = t.side_left_wall
                    else:
                        tile = t.side_mid_wall
                grid[row + x] = tile

        logger.info(
            "Tiled room %dx%d (side=%d, door=%d)",
            width,
            total_height,
            room.side_height,
            room.door_position,
        )
        return grid


def generate_tiles(tiles: TileTypes, room: RoomDimensions) -> List[int]:
    """Functional shorthand for ``RoomTiling(tiles).generate(room)``."""
    return RoomTiling(tiles).generate(room)


def render_ascii(
    grid: Sequence[int],
    width: int,
    tiles: TileTypes,
    glyphs: Optional[Mapping[str, str]] = None,
) -> str:
    """Render a tile grid as text, one line per row.

    When several roles share an id, the first role in TileTypes order picks
    the glyph. Ids not in the table render as '?'.
    """
    glyphs = glyphs or DEFAULT_GLYPHS
    by_id: Dict[int, str] = {}
    for role, tile_id in tiles.as_dict().items():
        by_id.setdefault(tile_id, glyphs.get(role, "?"))
    rows = []
    for start in range(0, len(grid), width):
        rows.append("".join(by_id.get(tile_id, "?") for tile_id in grid[start : start + width]))
    return "\n".join(rows)


__all__ = ["RoomDimensions", "RoomTiling", "generate_tiles", "render_ascii", "DOOR_WIDTH"]
