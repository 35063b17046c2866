from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict, Tuple

# Offsets of each role from a wall style's base id in the "walls" tileset.
# The sheet is 46 tiles wide, so +46 is the row below.
BASE_OFFSETS: Dict[str, int] = {
    "over_top_left_corner": 0,
    "over_top_wall": 1,
    "over_top_right_corner": 2,
    "over_left_wall": 46,
    "floor": 47,
    "over_right_wall": 48,
    "over_bottom_left_corner": 92,
    "over_bottom_wall": 93,
    "over_bottom_right_corner": 94,
    "over_internal_right_corner": 232,
    "over_internal_left_corner": 230,
    "side_left_wall": 138,
    "side_mid_wall": 139,
    "side_right_wall": 140,
    "side_bottom_left_corner": 184,
    "side_bottom_wall": 185,
    "side_bottom_right_corner": 186,
}

STYLE_COUNT = 30


@dataclass(frozen=True)
class TileTypes:
    """Tile ids for the 17 roles a room tile can play.

    Ids are opaque to the generator: they are only ever copied into the grid
    or compared for equality, so several roles may share one id.

    Over tiles (double line) draw the room outline; side tiles (single line)
    draw the wall thickness seen below it.
    """

    over_top_left_corner: int
    over_top_wall: int
    over_top_right_corner: int
    over_left_wall: int
    floor: int
    over_right_wall: int
    over_bottom_left_corner: int
    over_bottom_wall: int
    over_bottom_right_corner: int
    over_internal_right_corner: int
    over_internal_left_corner: int

    side_left_wall: int
    side_mid_wall: int
    side_right_wall: int
    side_bottom_left_corner: int
    side_bottom_wall: int
    side_bottom_right_corner: int

    @classmethod
    def from_base(cls, base_id: int) -> "TileTypes":
        """Build the table for the wall style starting at ``base_id``."""
        return cls(**{role: base_id + off for role, off in BASE_OFFSETS.items()})

    @classmethod
    def roles(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def as_dict(self) -> Dict[str, int]:
        return {role: getattr(self, role) for role in self.roles()}

    @property
    def colliding(self) -> frozenset[int]:
        """Ids the actor cannot walk through in the lower wall layer."""
        return frozenset(
            {self.side_bottom_wall, self.side_bottom_left_corner, self.side_bottom_right_corner}
        )


def style_offset(index: int) -> int:
    """Base id of the ``index``-th wall style.

    Styles come in blocks of four, seven tiles apart, and the next block starts
    seven sheet rows further down. Indices wrap at STYLE_COUNT.
    """
    i = index % STYLE_COUNT
    return (i % 4) * 7 + (i // 4) * 322


# Box-drawing glyphs per role, used by render_ascii().
DEFAULT_GLYPHS: Dict[str, str] = {
    "over_top_left_corner": "╔",
    "over_top_wall": "═",
    "over_top_right_corner": "╗",
    "over_left_wall": "║",
    "floor": "·",
    "over_right_wall": "║",
    "over_bottom_left_corner": "╚",
    "over_bottom_wall": "═",
    "over_bottom_right_corner": "╝",
    "over_internal_right_corner": "╣",
    "over_internal_left_corner": "╠",
    "side_left_wall": "│",
    "side_mid_wall": "+",
    "side_right_wall": "│",
    "side_bottom_left_corner": "└",
    "side_bottom_wall": "─",
    "side_bottom_right_corner": "┘",
}


__all__ = ["TileTypes", "BASE_OFFSETS", "DEFAULT_GLYPHS", "STYLE_COUNT", "style_offset"]
