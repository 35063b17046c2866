"""
Room tiling for house interiors.

Contains the RoomTiling generator (room parameters -> flat tile-id grid), the
TileTypes role table, a random room roller and the layer split used by
tilemap renderers.
"""
from .layers import RoomLayers, split_layers
from .random_room import RandomRoomGenerator
from .tiles import DEFAULT_GLYPHS, TileTypes, style_offset
from .tiling import RoomDimensions, RoomTiling, generate_tiles, render_ascii

__all__ = [
    "DEFAULT_GLYPHS",
    "RandomRoomGenerator",
    "RoomDimensions",
    "RoomLayers",
    "RoomTiling",
    "TileTypes",
    "generate_tiles",
    "render_ascii",
    "split_layers",
    "style_offset",
]
