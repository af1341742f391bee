"""Obstacle model: the closed set of obstacle kinds and their footprints.

Every obstacle computes its footprint (the cells it occupies or watches) once,
when it is constructed, and never changes afterwards. Queries are then plain
set lookups. The one exception is the camera, whose cone of vision is
unbounded and is therefore tested on demand.

Display metadata (character code, name, menu position) lives in a static
catalog keyed by ``ObstacleKind`` rather than on individual instances, so the
menu can be listed without constructing throwaway obstacles.

Kinds and their footprints:
- Guard: the single cell it stands on
- Fence: an inclusive horizontal or vertical segment
- Sensor: a disk around its position (detection only, traversable)
- Camera: its position plus an infinite 45 degree half-angle cone
- Spotlight: its position plus a radius-2 disk ``range`` cells ahead
- Quicksand: a random splatter that thins out away from its centre
"""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Dict, FrozenSet, Iterable, List, Optional

from .config import Config
from .errors import InvalidGeometry, InvalidRange, MissingFootprint
from .geometry import Bounds, Coordinate, cardinal_vector, points_within
from .logging_utils import Color, LOG_TAG_GEOMETRY, log_debug


DEFAULT_MOVEMENT_COST = 1
CAMERA_HALF_ANGLE = math.pi / 4
# Exact diagonals sit on the cone edge; absorbs atan2 rounding so they count as seen.
ANGLE_TOLERANCE = 1e-9
SPOTLIGHT_RADIUS = 2


class ObstacleKind(Enum):
    GUARD = "guard"
    FENCE = "fence"
    SENSOR = "sensor"
    CAMERA = "camera"
    SPOTLIGHT = "spotlight"
    QUICKSAND = "quicksand"


@dataclass(frozen=True)
class ObstacleType:
    """Catalog row describing how an obstacle kind is displayed and treated."""

    kind: ObstacleKind
    code: str
    name: str
    priority: int
    blocks_movement: bool

    @property
    def menu_label(self) -> str:
        return f"{self.code}) Add '{self.name}' obstacle."


OBSTACLE_CATALOG: Dict[ObstacleKind, ObstacleType] = {
    ObstacleKind.GUARD: ObstacleType(ObstacleKind.GUARD, "g", "Guard", 0, True),
    ObstacleKind.FENCE: ObstacleType(ObstacleKind.FENCE, "f", "Fence", 1, True),
    ObstacleKind.SENSOR: ObstacleType(ObstacleKind.SENSOR, "s", "Sensor", 2, False),
    ObstacleKind.CAMERA: ObstacleType(ObstacleKind.CAMERA, "c", "Camera", 3, True),
    ObstacleKind.SPOTLIGHT: ObstacleType(ObstacleKind.SPOTLIGHT, "l", "Spotlight", 4, True),
    ObstacleKind.QUICKSAND: ObstacleType(ObstacleKind.QUICKSAND, "q", "Quicksand", 5, False),
}


def obstacle_types() -> List[ObstacleType]:
    """Catalog rows in menu order."""
    return sorted(OBSTACLE_CATALOG.values(), key=lambda entry: entry.priority)


@dataclass(frozen=True, eq=False)
class Obstacle(ABC):
    """Base class for all obstacle kinds.

    Obstacles compare by identity: two guards on the same cell are still two
    separate registry entries.
    """

    kind: ClassVar[ObstacleKind]
    # Whether ``footprint`` lists every claimed cell (False for the camera cone).
    bounded: ClassVar[bool] = True

    footprint: FrozenSet[Coordinate] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        cells = frozenset(self._compute_footprint())
        object.__setattr__(self, "footprint", cells)
        log_debug(
            f"  {LOG_TAG_GEOMETRY} [Obstacles] {self.display_name} footprint: {len(cells)} cells",
            Color.BLUE,
        )

    @abstractmethod
    def _compute_footprint(self) -> Iterable[Coordinate]:
        """Return every cell the obstacle occupies (finite part only)."""

    @property
    def catalog_entry(self) -> ObstacleType:
        return OBSTACLE_CATALOG[self.kind]

    @property
    def display_code(self) -> str:
        return self.catalog_entry.code

    @property
    def display_name(self) -> str:
        return self.catalog_entry.name

    @property
    def menu_priority(self) -> int:
        return self.catalog_entry.priority

    @property
    def blocks_movement(self) -> bool:
        return self.catalog_entry.blocks_movement

    @property
    def movement_cost(self) -> int:
        """Cost of leaving a cell this obstacle claims. Never below 1."""
        return DEFAULT_MOVEMENT_COST

    @property
    def origin(self) -> Coordinate:
        if not self.footprint:
            raise MissingFootprint(self.display_name)
        return self._origin()

    @abstractmethod
    def _origin(self) -> Coordinate:
        ...

    def contains(self, coord: Coordinate) -> bool:
        return coord in self.footprint

    def footprint_within(self, bounds: Bounds) -> FrozenSet[Coordinate]:
        """Claimed cells inside ``bounds``; works for unbounded kinds too."""
        if self.bounded:
            return frozenset(cell for cell in self.footprint if cell in bounds)
        return frozenset(cell for cell in bounds if self.contains(cell))

    def __str__(self) -> str:
        return f"{self.display_name} at {self.origin}"


@dataclass(frozen=True, eq=False)
class Guard(Obstacle):
    kind: ClassVar[ObstacleKind] = ObstacleKind.GUARD

    position: Coordinate

    def _compute_footprint(self) -> Iterable[Coordinate]:
        return [self.position]

    def _origin(self) -> Coordinate:
        return self.position


@dataclass(frozen=True, eq=False)
class Fence(Obstacle):
    """Straight fence between two endpoints, both included."""

    kind: ClassVar[ObstacleKind] = ObstacleKind.FENCE

    start: Coordinate
    end: Coordinate

    def _compute_footprint(self) -> Iterable[Coordinate]:
        if self.start == self.end:
            raise InvalidGeometry("Fences must be horizontal or vertical; endpoints cannot be the same cell.")
        if self.start.x == self.end.x:
            low, high = sorted((self.start.y, self.end.y))
            return [Coordinate(self.start.x, y) for y in range(low, high + 1)]
        if self.start.y == self.end.y:
            low, high = sorted((self.start.x, self.end.x))
            return [Coordinate(x, self.start.y) for x in range(low, high + 1)]
        raise InvalidGeometry("Fences must be horizontal or vertical.")

    def _origin(self) -> Coordinate:
        return self.start


@dataclass(frozen=True, eq=False)
class Sensor(Obstacle):
    """Detection disk. Sensors never block movement."""

    kind: ClassVar[ObstacleKind] = ObstacleKind.SENSOR

    position: Coordinate
    radius: float

    def _compute_footprint(self) -> Iterable[Coordinate]:
        if self.radius <= 0:
            raise InvalidRange(obstacle="Sensor", parameter="range", value=self.radius)
        return points_within(self.position, self.radius)

    def _origin(self) -> Coordinate:
        return self.position


@dataclass(frozen=True, eq=False)
class Camera(Obstacle):
    """Camera watching an infinite cone in front of it."""

    kind: ClassVar[ObstacleKind] = ObstacleKind.CAMERA
    bounded: ClassVar[bool] = False

    position: Coordinate
    direction: Coordinate

    def _compute_footprint(self) -> Iterable[Coordinate]:
        object.__setattr__(self, "direction", cardinal_vector(self.direction, obstacle="Camera"))
        return [self.position]

    def _origin(self) -> Coordinate:
        return self.position

    def contains(self, coord: Coordinate) -> bool:
        return coord in self.footprint or self.in_cone(coord)

    def in_cone(self, coord: Coordinate) -> bool:
        """True if ``coord`` lies within 45 degrees either side of the facing."""
        to_cell = coord - self.position
        angle_to_cell = math.atan2(to_cell.y, to_cell.x)
        angle_to_direction = math.atan2(self.direction.y, self.direction.x)

        difference = angle_to_cell - angle_to_direction
        # Normalise into (-pi, pi].
        while difference > math.pi:
            difference -= 2 * math.pi
        while difference <= -math.pi:
            difference += 2 * math.pi

        return abs(difference) <= CAMERA_HALF_ANGLE + ANGLE_TOLERANCE


@dataclass(frozen=True, eq=False)
class Spotlight(Obstacle):
    """Lamp at ``position`` lighting a small disk ``range`` cells ahead."""

    kind: ClassVar[ObstacleKind] = ObstacleKind.SPOTLIGHT

    position: Coordinate
    direction: Coordinate
    range: float

    def _compute_footprint(self) -> Iterable[Coordinate]:
        object.__setattr__(self, "direction", cardinal_vector(self.direction, obstacle="Spotlight"))
        if self.range <= 0:
            raise InvalidRange(obstacle="Spotlight", parameter="range", value=self.range)
        cells = [self.position]
        cells.extend(points_within(self.illuminated_center, SPOTLIGHT_RADIUS))
        return cells

    @property
    def illuminated_center(self) -> Coordinate:
        return self.position + self.direction * int(round(self.range))

    def _origin(self) -> Coordinate:
        return self.position


@dataclass(frozen=True, eq=False)
class Quicksand(Obstacle):
    """Traversable splatter of quicksand that is slower to cross.

    Each cell within ``radius`` is included with probability
    ``1 - distance / (radius + 1)``, so the centre is always covered and the
    edges are patchy. The draw happens once, here, using ``rng`` (or a
    generator seeded from ``Config.QUICKSAND_SEED``).
    """

    kind: ClassVar[ObstacleKind] = ObstacleKind.QUICKSAND

    position: Coordinate
    radius: float
    depth: float
    rng: Optional[random.Random] = field(default=None, repr=False, compare=False)

    def _compute_footprint(self) -> Iterable[Coordinate]:
        if self.radius <= 0:
            raise InvalidRange(obstacle="Quicksand", parameter="range", value=self.radius)
        if self.depth < 0:
            raise InvalidRange(
                obstacle="Quicksand",
                parameter="depth",
                value=self.depth,
                minimum="zero or more",
            )

        rng = self.rng if self.rng is not None else random.Random(Config.QUICKSAND_SEED)
        reach = int(round(self.radius))
        cells: List[Coordinate] = []
        for x in range(self.position.x - reach, self.position.x + reach + 1):
            for y in range(self.position.y - reach, self.position.y + reach + 1):
                cell = Coordinate(x, y)
                distance = self.position.distance_to(cell)
                if distance > reach:
                    continue
                probability = 1 - distance / (reach + 1)
                if rng.random() < probability:
                    cells.append(cell)
        return cells

    @property
    def movement_cost(self) -> int:
        # A zero-depth patch is no worse than open ground.
        return max(DEFAULT_MOVEMENT_COST, int(round(self.depth)))

    def _origin(self) -> Coordinate:
        return self.position
