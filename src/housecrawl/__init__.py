"""
housecrawl package root.

Room tiling and actor input handling for a top-down house explorer. Engine
specifics (Arcade windows, sprites, tilemap layers) stay at the edges; the
modules here are plain Python and can be driven headless.
"""

__version__ = "0.1.0"

__all__ = [
    "room",
    "input",
    "actor",
    "world",
]
