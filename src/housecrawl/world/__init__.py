"""
World-side consumers of actor events: interaction targets and items.
"""
from .interaction import DOOR, ITEM, InteractionMap, world_to_tile
from .items import Heart, Item, ItemRegistry, SceneHost

__all__ = [
    "DOOR",
    "Heart",
    "ITEM",
    "InteractionMap",
    "Item",
    "ItemRegistry",
    "SceneHost",
    "world_to_tile",
]
