"""Integer grid geometry: coordinates, cardinal directions and map bounds.

The map uses screen orientation: X grows eastward and Y grows southward, so
North is ``(0, -1)``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Union

from .errors import InvalidGeometry, InvalidMapSpecification


@dataclass(frozen=True, order=True)
class Coordinate:
    """Immutable 2D integer point, also used as a grid vector."""

    x: int
    y: int

    def __add__(self, other: Coordinate) -> Coordinate:
        return Coordinate(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Coordinate) -> Coordinate:
        return Coordinate(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: int) -> Coordinate:
        return Coordinate(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"({self.x},{self.y})"

    def equals(self, other: Coordinate) -> bool:
        return self.x == other.x and self.y == other.y

    def is_diagonal_from(self, other: Coordinate) -> bool:
        """True when ``other`` sits on a 45 degree diagonal (and is not this point)."""
        dx = abs(self.x - other.x)
        dy = abs(self.y - other.y)
        return dx == dy and dx != 0

    def length(self) -> float:
        """Euclidean magnitude of the vector from the origin."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def dot(self, other: Coordinate) -> int:
        return self.x * other.x + self.y * other.y

    def distance_to(self, other: Coordinate) -> float:
        return (other - self).length()

    def manhattan_to(self, other: Coordinate) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def to_array(self) -> List[int]:
        return [self.x, self.y]

    def step(self, direction: Direction) -> Coordinate:
        """Return the neighbouring coordinate one step toward ``direction``."""
        return self + direction.vector


class Direction(Enum):
    """Cardinal steps in canonical report order (N, S, E, W)."""

    N = (0, -1)
    S = (0, 1)
    E = (1, 0)
    W = (-1, 0)

    @property
    def letter(self) -> str:
        return self.name

    @property
    def vector(self) -> Coordinate:
        dx, dy = self.value
        return Coordinate(dx, dy)

    @classmethod
    def from_letter(cls, letter: str) -> Direction:
        """Parse ``n``/``s``/``e``/``w`` (any case)."""
        key = letter.strip().upper()
        if key not in cls.__members__:
            raise InvalidGeometry(f"Unknown direction '{letter}'. Use n, s, e or w.")
        return cls[key]

    @classmethod
    def from_vector(cls, vector: Coordinate) -> Direction:
        """Map a cardinal unit vector back to its direction."""
        for direction in cls:
            if direction.value == (vector.x, vector.y):
                return direction
        raise InvalidGeometry(f"Direction {vector} is not a cardinal unit vector.")

    @classmethod
    def between(cls, current: Coordinate, following: Coordinate) -> Direction:
        """Direction of a single cardinal step from ``current`` to ``following``."""
        return cls.from_vector(following - current)


@dataclass(frozen=True)
class Bounds:
    """Inclusive rectangle given by its top-left and bottom-right cells."""

    top_left: Coordinate
    bottom_right: Coordinate

    def __post_init__(self) -> None:
        if self.bottom_right.x < self.top_left.x or self.bottom_right.y < self.top_left.y:
            raise InvalidMapSpecification(top_left=self.top_left, bottom_right=self.bottom_right)

    @property
    def width(self) -> int:
        return self.bottom_right.x - self.top_left.x + 1

    @property
    def height(self) -> int:
        return self.bottom_right.y - self.top_left.y + 1

    def contains(self, coord: Coordinate) -> bool:
        return (
            self.top_left.x <= coord.x <= self.bottom_right.x
            and self.top_left.y <= coord.y <= self.bottom_right.y
        )

    def __contains__(self, coord: Coordinate) -> bool:
        return self.contains(coord)

    def __iter__(self) -> Iterator[Coordinate]:
        """Yield every coordinate in row-major order (north row first)."""
        for y in range(self.top_left.y, self.bottom_right.y + 1):
            for x in range(self.top_left.x, self.bottom_right.x + 1):
                yield Coordinate(x, y)


def cardinal_vector(vector: Union[Coordinate, Direction], *, obstacle: str) -> Coordinate:
    """Validate that ``vector`` is a cardinal unit vector and return it."""
    if isinstance(vector, Direction):
        return vector.vector
    if abs(vector.x) + abs(vector.y) != 1:
        raise InvalidGeometry(f"{obstacle} direction must be n, s, e or w (got {vector}).")
    return vector


def points_within(center: Coordinate, radius: float) -> Iterator[Coordinate]:
    """Yield cells whose centres lie within Euclidean ``radius`` of ``center``.

    The scan covers a box of ``int(radius)`` cells on each side, column by
    column (X outer, Y inner).
    """
    reach = int(radius)
    for x in range(center.x - reach, center.x + reach + 1):
        for y in range(center.y - reach, center.y + reach + 1):
            cell = Coordinate(x, y)
            if center.distance_to(cell) <= radius:
                yield cell
