from __future__ import annotations


class HousecrawlError(Exception):
    """Base exception for the housecrawl project."""


class InvalidDimension(HousecrawlError, ValueError):
    """Raised when room parameters violate a structural precondition.

    ``field`` names the first violated parameter, in validation order, using
    the RoomDimensions attribute name: "width", "door_position" (doorPosition
    in camelCase room data), "side_height" (sideHeight) or "over_height"
    (overHeight).
    """

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"Invalid room dimension: {field}")


class UnknownItemError(HousecrawlError, KeyError):
    """Raised when an item id has no registered item class."""


class ConfigError(HousecrawlError):
    """Raised when a settings file cannot be parsed."""
