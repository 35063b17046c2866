from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Any, Dict, FrozenSet, Hashable, List, Optional, Set, Tuple

from ..events import EventBus, Handler, MovementEvent
from ..input.actions import Direction, InputAction, KeyEvent, PointerEvent
from ..input.mapping import InputMapper
from ..input.resolver import resolve_drag, resolve_keys
from ..input.sources import KEY_DOWN, KEY_UP, POINTER_DOWN, POINTER_MOVE, POINTER_UP, InputSource, Listener
from ..settings import ControlSettings
from .body import ActorBody, Point

logger = logging.getLogger(__name__)

# Recent events kept for inspection; pointer moves emit one MOVE per sample.
HISTORY_SIZE = 64


class MovementState(Enum):
    IDLE = auto()
    MOVING = auto()
    DRAGGING = auto()


class MovementController:
    """Turns raw key and pointer input into MOVE / STOP / ACTIVATE events.

    Keyboard: held movement keys resolve to one direction (RIGHT > LEFT >
    DOWN > UP). Every key-down or key-up that leaves a direction emits MOVE;
    releasing the last movement key emits STOP. Space emits ACTIVATE while the
    body is standing still.

    Pointer: a press starts a drag. Moving the pointer at least
    ``drag_threshold`` away from the press point emits MOVE along the dominant
    axis. Releasing emits STOP, preceded by ACTIVATE when the press was a tap
    (shorter than ``tap_max_ms`` with the body standing still).

    Keyboard and pointer are not arbitrated against each other; the latest
    event decides the current direction. While a pointer drag is live the
    state stays DRAGGING, whatever the keyboard does; STOP from a key-up
    then leaves the drag in place.

    The controller registers its listeners on ``source`` at construction and
    removes them in shutdown(). It can be used as a context manager to tie
    that release to a scope.
    """

    def __init__(
        self,
        source: InputSource,
        body: ActorBody,
        settings: Optional[ControlSettings] = None,
        mapper: Optional[InputMapper] = None,
        facing: Direction = Direction.UP,
    ) -> None:
        if source is None:
            raise TypeError("MovementController requires an input source")
        if body is None:
            raise TypeError("MovementController requires a body")
        self.source = source
        self.body = body
        self.settings = settings or ControlSettings()
        if mapper is None:
            mapper = InputMapper.from_config(self.settings.bindings) if self.settings.bindings else InputMapper.default()
        self.mapper = mapper

        self.facing: Direction = facing
        self.state: MovementState = MovementState.IDLE
        self.is_dragging: bool = False
        self.drag_start: Optional[Point] = None
        self.pointer_down_timestamp: Optional[float] = None
        self._active: Set[InputAction] = set()
        self._bus = EventBus(max_history=HISTORY_SIZE)

        self._listeners: List[Tuple[str, Listener]] = [
            (KEY_DOWN, self._on_key_down),
            (KEY_UP, self._on_key_up),
            (POINTER_DOWN, self._on_pointer_down),
            (POINTER_MOVE, self._on_pointer_move),
            (POINTER_UP, self._on_pointer_up),
        ]
        for kind, listener in self._listeners:
            source.add_listener(kind, listener)
        self._shut_down = False

    # ---------- Event channel ----------
    def subscribe(self, kind: Hashable, handler: Handler) -> None:
        self._bus.subscribe(kind, handler)

    def unsubscribe(self, kind: Hashable, handler: Handler) -> None:
        self._bus.unsubscribe(kind, handler)

    def emit(self, kind: Hashable, payload: Optional[Dict[str, Any]] = None) -> None:
        self._bus.publish(kind, payload)

    @property
    def history(self):
        return self._bus.history

    # ---------- Queries ----------
    @property
    def speed(self) -> float:
        return self.settings.speed

    @property
    def active_keys(self) -> FrozenSet[InputAction]:
        return frozenset(self._active)

    @property
    def is_shut_down(self) -> bool:
        return self._shut_down

    def is_moving(self) -> bool:
        vx, vy = self.body.velocity
        return vx != 0 or vy != 0

    def activation_point(self) -> Point:
        """Point just in front of the body, on the side it is facing.

        Recomputed from the current bounds and facing on every call.
        """
        return self.body.bounds().edge_point(self.facing, self.settings.activation_reach)

    # ---------- Emitters ----------
    def _move(self, direction: Direction) -> None:
        self.facing = direction
        logger.debug("MOVE %s (state=%s)", direction.name, self.state.name)
        self.emit(MovementEvent.MOVE, {"direction": direction, "speed": self.speed})

    def _stop(self) -> None:
        self.state = MovementState.DRAGGING if self.is_dragging else MovementState.IDLE
        logger.debug("STOP (facing=%s)", self.facing.name)
        self.emit(MovementEvent.STOP)

    def _activate(self) -> None:
        point = self.activation_point()
        logger.debug("ACTIVATE at (%.1f, %.1f) facing %s", point.x, point.y, self.facing.name)
        self.emit(MovementEvent.ACTIVATE, {"point": point})

    # ---------- Keyboard ----------
    def _on_key_down(self, event: KeyEvent) -> None:
        action = self.mapper.translate_key(event.key)
        if action is None:
            return
        if action is InputAction.ACTIVATE:
            if not self.is_moving():
                self._activate()
            return
        self._active.add(action)
        direction = resolve_keys(self._active)
        if direction is not None:
            if not self.is_dragging:
                self.state = MovementState.MOVING
            self._move(direction)

    def _on_key_up(self, event: KeyEvent) -> None:
        action = self.mapper.translate_key(event.key)
        if action is None or not action.is_movement:
            return
        self._active.discard(action)
        direction = resolve_keys(self._active)
        if direction is not None:
            self._move(direction)
        else:
            self._stop()

    # ---------- Pointer ----------
    def _on_pointer_down(self, event: PointerEvent) -> None:
        self.is_dragging = True
        self.drag_start = Point(event.x, event.y)
        self.pointer_down_timestamp = event.timestamp
        self.state = MovementState.DRAGGING
        logger.debug("Drag started at (%.1f, %.1f)", event.x, event.y)

    def _on_pointer_move(self, event: PointerEvent) -> None:
        if not self.is_dragging or self.drag_start is None:
            return
        direction = resolve_drag(
            event.x - self.drag_start.x,
            event.y - self.drag_start.y,
            self.settings.drag_threshold,
        )
        if direction is not None:
            self._move(direction)

    def _on_pointer_up(self, event: PointerEvent) -> None:
        # A release without a matching press counts as a zero-length press.
        started = self.pointer_down_timestamp
        duration = event.timestamp - started if started is not None else 0.0
        if duration < self.settings.tap_max_ms and not self.is_moving():
            self._activate()
        self.is_dragging = False
        self.drag_start = None
        self.pointer_down_timestamp = None
        self._stop()

    # ---------- Lifecycle ----------
    def shutdown(self) -> None:
        """Release every input listener and bring the body to rest.

        Safe to call repeatedly. Facing is kept.
        """
        if self._shut_down:
            return
        self._shut_down = True
        for kind, listener in self._listeners:
            self.source.remove_listener(kind, listener)
        self.body.set_velocity(0.0, 0.0)
        self._active.clear()
        self.is_dragging = False
        self.drag_start = None
        self.pointer_down_timestamp = None
        self.state = MovementState.IDLE
        logger.debug("Movement controller shut down (facing=%s)", self.facing.name)

    def __enter__(self) -> "MovementController":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()


__all__ = ["MovementController", "MovementState"]
