from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Dict, Iterable, Optional, Set, Tuple

from ..events import Event, EventBus, Handler, MovementEvent
from .items import Item, SceneHost

if TYPE_CHECKING:  # pragma: no cover
    from ..actor.movement import MovementController

logger = logging.getLogger(__name__)

Tile = Tuple[int, int]

DOOR = "door"
ITEM = "item"


def world_to_tile(point: Tuple[float, float], tile_size: float, origin: Tuple[float, float] = (0.0, 0.0)) -> Tile:
    """Tile coordinates of the tile containing ``point``."""
    x, y = point
    ox, oy = origin
    return (math.floor((x - ox) / tile_size), math.floor((y - oy) / tile_size))


class InteractionMap:
    """Decides what an ACTIVATE point in world space refers to.

    Holds door tiles and item placements for one map. When attached to a
    MovementController, each ACTIVATE is converted to a tile and, on a hit,
    published on ``bus`` as a DOOR or ITEM event with the tile (and item) in
    the payload. Items are also activated against ``host`` when one is given.
    """

    def __init__(
        self,
        tile_size: float,
        origin: Tuple[float, float] = (0.0, 0.0),
        doors: Iterable[Tile] = (),
        host: Optional[SceneHost] = None,
    ) -> None:
        self.tile_size = tile_size
        self.origin = origin
        self.doors: Set[Tile] = set(doors)
        self.items: Dict[Tile, Item] = {}
        self.host = host
        self.bus = EventBus()
        self._controller: Optional["MovementController"] = None

    def add_door(self, tile: Tile) -> None:
        self.doors.add(tile)

    def place_item(self, tile: Tile, item: Item) -> None:
        self.items[tile] = item

    def remove_item(self, tile: Tile) -> Optional[Item]:
        return self.items.pop(tile, None)

    def subscribe(self, kind: str, handler: Handler) -> None:
        self.bus.subscribe(kind, handler)

    def target_at(self, point: Tuple[float, float]) -> Tuple[Optional[str], Tile]:
        tile = world_to_tile(point, self.tile_size, self.origin)
        if tile in self.doors:
            return DOOR, tile
        if tile in self.items:
            return ITEM, tile
        return None, tile

    def interact(self, point: Tuple[float, float]) -> Optional[str]:
        """Resolve ``point`` and publish the interaction; returns its kind."""
        kind, tile = self.target_at(point)
        if kind is None:
            logger.debug("Nothing to activate at tile %s", tile)
            return None
        if kind == DOOR:
            self.bus.publish(DOOR, {"tile": tile})
        else:
            item = self.items[tile]
            self.bus.publish(ITEM, {"tile": tile, "item": item})
            if self.host is not None:
                item.activate(self.host)
        logger.info("Activated %s at tile %s", kind, tile)
        return kind

    def _on_activate(self, event: Event) -> None:
        self.interact(event.payload["point"])

    def attach(self, controller: "MovementController") -> None:
        """Listen to ``controller``'s ACTIVATE events."""
        self.detach()
        controller.subscribe(MovementEvent.ACTIVATE, self._on_activate)
        self._controller = controller

    def detach(self) -> None:
        if self._controller is not None:
            self._controller.unsubscribe(MovementEvent.ACTIVATE, self._on_activate)
            self._controller = None


__all__ = ["DOOR", "ITEM", "InteractionMap", "world_to_tile"]
