"""
Input abstraction layer.

Exposes:
- Direction / InputAction: cardinal directions and logical actions.
- KeyEvent / PointerEvent: raw events delivered by an input source.
- InputMapper: rebindable mapping from key names to actions.
- resolve_keys / resolve_drag: pick one direction from held keys or a drag.
- InputSource / ManualInputSource: producers of raw events.

The Arcade adapter lives in ``housecrawl.input.arcade_source`` and is not
imported here, so headless code never pulls in a window system.
"""
from .actions import Direction, InputAction, KeyEvent, PointerEvent
from .mapping import InputMapper
from .resolver import DEFAULT_DRAG_THRESHOLD, resolve_drag, resolve_keys
from .sources import InputSource, ListenerRegistry, ManualInputSource

__all__ = [
    "DEFAULT_DRAG_THRESHOLD",
    "Direction",
    "InputAction",
    "InputMapper",
    "InputSource",
    "KeyEvent",
    "ListenerRegistry",
    "ManualInputSource",
    "PointerEvent",
    "resolve_drag",
    "resolve_keys",
]
