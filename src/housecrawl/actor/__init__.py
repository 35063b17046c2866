"""
Actor movement.

MovementController turns raw input into MOVE/STOP/ACTIVATE events;
BodyDriver is the reference consumer that applies them to a body.
"""
from .body import ActorBody, BodyDriver, Bounds, KinematicBody, Point
from .movement import MovementController, MovementState

__all__ = [
    "ActorBody",
    "BodyDriver",
    "Bounds",
    "KinematicBody",
    "MovementController",
    "MovementState",
    "Point",
]
