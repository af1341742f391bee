"""Exceptions raised by the Mission Control core.

Validation failures derive from ``MissionControlError`` (a ``ValueError``) so a
caller can report any bad input with a single ``except`` clause. A missing
footprint is a programming error and is kept outside that hierarchy.
"""

from __future__ import annotations

from typing import Any


class MissionControlError(ValueError):
    """Base class for rejected map or obstacle input."""


class InvalidMapSpecification(MissionControlError):
    """Raised when the bottom-right corner is not south-east of the top-left."""

    def __init__(self, *, top_left: Any = None, bottom_right: Any = None) -> None:
        self.top_left = top_left
        self.bottom_right = bottom_right
        message = "Invalid map specification."
        if top_left is not None and bottom_right is not None:
            message += f" Bottom-right {bottom_right} must not lie north or west of top-left {top_left}."
        super().__init__(message)


class InvalidGeometry(MissionControlError):
    """Raised when an obstacle's shape cannot be built (diagonal fence, bad facing)."""


class InvalidRange(MissionControlError):
    """Raised when a range, radius or depth is outside its allowed interval."""

    def __init__(self, *, obstacle: str, parameter: str, value: float, minimum: str = "greater than 0") -> None:
        self.obstacle = obstacle
        self.parameter = parameter
        self.value = value
        super().__init__(f"{obstacle} {parameter} must be {minimum} (got {value}).")


class MissingFootprint(RuntimeError):
    """Raised when an obstacle is queried for its origin before it has a footprint."""

    def __init__(self, obstacle_name: str) -> None:
        self.obstacle_name = obstacle_name
        super().__init__(f"{obstacle_name} object has no positions.")
