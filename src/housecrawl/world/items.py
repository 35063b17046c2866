from __future__ import annotations

import logging
from typing import Callable, Dict, Protocol, Tuple, Type

from ..exceptions import UnknownItemError

logger = logging.getLogger(__name__)


class SceneHost(Protocol):
    """The slice of the host scene an item may act on."""

    def start_scene(self, name: str) -> None: ...


class Item(Protocol):
    """An interactable item placed in the world."""

    id: str

    def activate(self, host: SceneHost) -> None:
        """Called when the actor activates the tile holding this item."""


class ItemRegistry:
    """Registry of item classes by id.

    Build one per game and hand it to whatever places or activates items;
    there is no module-level registry.
    """

    def __init__(self) -> None:
        self._classes: Dict[str, Callable[[], Item]] = {}

    def register(self, item_cls: Type[Item]) -> Type[Item]:
        """Register an item class under the id its instances report.

        Returns the class so this can be used as a decorator.
        """
        item_id = item_cls().id
        if item_id in self._classes:
            logger.warning("Replacing item class registered for id '%s'", item_id)
        self._classes[item_id] = item_cls
        logger.debug("Registered item '%s'", item_id)
        return item_cls

    def create(self, item_id: str) -> Item:
        try:
            item_cls = self._classes[item_id]
        except KeyError as exc:
            raise UnknownItemError(f"No item registered with id: {item_id}") from exc
        return item_cls()

    def ids(self) -> Tuple[str, ...]:
        return tuple(self._classes)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._classes

    @classmethod
    def default(cls) -> "ItemRegistry":
        registry = cls()
        registry.register(Heart)
        return registry


class Heart:
    """Leaving a house by picking up the heart returns to the overworld."""

    return_scene = "Game"

    def __init__(self) -> None:
        self.id = "heart"

    def activate(self, host: SceneHost) -> None:
        logger.info("Heart activated; returning to %s", self.return_scene)
        host.start_scene(self.return_scene)


__all__ = ["Heart", "Item", "ItemRegistry", "SceneHost"]
