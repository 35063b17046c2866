from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .tiles import TileTypes
from .tiling import RoomDimensions


@dataclass
class RoomLayers:
    """A room grid split into the three tilemap layers a renderer paints.

    Each layer is row-major like the source grid; cells a layer does not own
    hold None. ``collision`` marks the ``above`` cells that block movement.
    """

    width: int
    height: int
    below: List[Optional[int]] = field(default_factory=list)
    world: List[Optional[int]] = field(default_factory=list)
    above: List[Optional[int]] = field(default_factory=list)
    collision: List[bool] = field(default_factory=list)

    def collides(self, x: int, y: int) -> bool:
        if not (0 <= x < self.width and 0 <= y < self.height):
            return True
        return self.collision[y * self.width + x]


def split_layers(tiles: TileTypes, room: RoomDimensions, grid: Sequence[int]) -> RoomLayers:
    """Distribute ``grid`` over below/world/above layers.

    Floor goes below the actor, walls above the outline's bottom row go to the
    world layer, and everything from the bottom row down is drawn above the
    actor. Only the bottom edge of the wall thickness collides; the rest of
    the outline is kept out of reach by the physics world bounds.
    """
    if len(grid) != room.size:
        raise ValueError(f"Grid has {len(grid)} tiles, expected {room.size}")
    size = room.size
    layers = RoomLayers(
        width=room.width,
        height=room.total_height,
        below=[None] * size,
        world=[None] * size,
        above=[None] * size,
        collision=[False] * size,
    )
    colliding = tiles.colliding
    for i, tile_id in enumerate(grid):
        y = i // room.width
        if tile_id == tiles.floor:
            layers.below[i] = tile_id
        elif y < room.over_height - 1:
            layers.world[i] = tile_id
        else:
            layers.above[i] = tile_id
            layers.collision[i] = tile_id in colliding
    return layers


__all__ = ["RoomLayers", "split_layers"]
