from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple, Optional, Protocol, Tuple

from ..events import Event, MovementEvent
from ..input.actions import Direction

if TYPE_CHECKING:  # pragma: no cover
    from .movement import MovementController

logger = logging.getLogger(__name__)


class Point(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned bounding box given by its centre and half extents."""

    center_x: float
    center_y: float
    half_width: float
    half_height: float

    def edge_point(self, direction: Direction, reach: float = 0.0) -> Point:
        """Point just past the box edge facing ``direction``."""
        dx, dy = direction.vector
        return Point(
            self.center_x + dx * (self.half_width + reach),
            self.center_y + dy * (self.half_height + reach),
        )


class ActorBody(Protocol):
    """What the movement layer needs from a physics body."""

    @property
    def velocity(self) -> Tuple[float, float]: ...

    def set_velocity(self, vx: float, vy: float) -> None: ...

    def bounds(self) -> Bounds: ...


@dataclass
class KinematicBody:
    """Plain in-memory ActorBody; position only changes through step()."""

    x: float
    y: float
    width: float = 30.0
    height: float = 40.0
    vx: float = 0.0
    vy: float = 0.0

    @property
    def velocity(self) -> Tuple[float, float]:
        return (self.vx, self.vy)

    @property
    def is_moving(self) -> bool:
        return self.vx != 0 or self.vy != 0

    def set_velocity(self, vx: float, vy: float) -> None:
        self.vx = vx
        self.vy = vy

    def bounds(self) -> Bounds:
        return Bounds(self.x, self.y, self.width / 2, self.height / 2)

    def step(self, dt: float) -> None:
        """Advance by ``dt`` seconds at the current velocity."""
        self.x += self.vx * dt
        self.y += self.vy * dt


class BodyDriver:
    """Applies MOVE/STOP events from a controller to a body.

    MOVE sets the velocity along the named direction only (no diagonal
    composition) and starts the matching walk animation. STOP zeroes the
    velocity and shows the idle pose for the last direction walked.
    """

    def __init__(self, controller: "MovementController", body: Optional[ActorBody] = None) -> None:
        self.controller = controller
        self.body = body if body is not None else controller.body
        self.facing: Direction = controller.facing
        self.animation: str = self._idle_key(self.facing)
        controller.subscribe(MovementEvent.MOVE, self._on_move)
        controller.subscribe(MovementEvent.STOP, self._on_stop)

    @staticmethod
    def _walk_key(direction: Direction) -> str:
        return f"walk-{direction.name.lower()}"

    @staticmethod
    def _idle_key(direction: Direction) -> str:
        return f"idle-{direction.name.lower()}"

    def _on_move(self, event: Event) -> None:
        direction: Direction = event.payload["direction"]
        speed: float = event.payload["speed"]
        dx, dy = direction.vector
        self.body.set_velocity(dx * speed, dy * speed)
        self.facing = direction
        self.animation = self._walk_key(direction)

    def _on_stop(self, event: Event) -> None:
        self.body.set_velocity(0.0, 0.0)
        self.animation = self._idle_key(self.facing)

    def detach(self) -> None:
        self.controller.unsubscribe(MovementEvent.MOVE, self._on_move)
        self.controller.unsubscribe(MovementEvent.STOP, self._on_stop)


__all__ = ["ActorBody", "BodyDriver", "Bounds", "KinematicBody", "Point"]
