"""Obstacle registry and occupancy lookups.

The registry is the single ordered list of obstacles placed on the map. It is
append-only: obstacles are never edited or removed once added. Registry order
matters because overlapping footprints resolve last-writer-wins on the grid
(the obstacle added later is the one a cell displays).

Queries never iterate the live list. They take a ``snapshot()`` (an immutable
tuple) first, so an append from another thread cannot change the obstacle set
in the middle of a search.
"""

from __future__ import annotations

import random
from threading import Lock
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from .geometry import Coordinate, Direction
from .logging_utils import Color, LOG_TAG_GEOMETRY, log_debug
from .obstacles import (
    DEFAULT_MOVEMENT_COST,
    Camera,
    Fence,
    Guard,
    Obstacle,
    Quicksand,
    Sensor,
    Spotlight,
    obstacle_types,
)
from .schemas import MenuEntry, ObstacleSummary


Snapshot = Tuple[Obstacle, ...]


class ObstacleRegistry:
    """Append-only, ordered collection of the obstacles on the map."""

    def __init__(self, obstacles: Optional[Iterable[Obstacle]] = None):
        self._lock = Lock()
        self._obstacles: List[Obstacle] = []
        for obstacle in obstacles or ():
            self.add(obstacle)

    def add(self, obstacle: Obstacle) -> Obstacle:
        """Append an already constructed obstacle and return it."""
        if not isinstance(obstacle, Obstacle):
            raise TypeError(f"Expected an Obstacle, got {type(obstacle).__name__}")
        with self._lock:
            self._obstacles.append(obstacle)
            index = len(self._obstacles) - 1
        log_debug(
            f"  {LOG_TAG_GEOMETRY} [Registry] #{index} {obstacle.display_name} placed at {obstacle.origin}",
            Color.BLUE,
        )
        return obstacle

    # Construction helpers. Each validates its own parameters and raises
    # before anything is appended.

    def add_guard(self, position: Coordinate) -> Guard:
        return self.add(Guard(position))

    def add_fence(self, start: Coordinate, end: Coordinate) -> Fence:
        return self.add(Fence(start, end))

    def add_sensor(self, position: Coordinate, radius: float) -> Sensor:
        return self.add(Sensor(position, radius))

    def add_camera(self, position: Coordinate, direction: Union[Coordinate, Direction]) -> Camera:
        return self.add(Camera(position, direction))

    def add_spotlight(
        self,
        position: Coordinate,
        direction: Union[Coordinate, Direction],
        range: float,
    ) -> Spotlight:
        return self.add(Spotlight(position, direction, range))

    def add_quicksand(
        self,
        position: Coordinate,
        radius: float,
        depth: float,
        *,
        rng: Optional[random.Random] = None,
    ) -> Quicksand:
        return self.add(Quicksand(position, radius, depth, rng=rng))

    def snapshot(self) -> Snapshot:
        """Point-in-time copy of the obstacle list, in application order."""
        with self._lock:
            return tuple(self._obstacles)

    def __iter__(self) -> Iterator[Obstacle]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        with self._lock:
            return len(self._obstacles)

    def __getitem__(self, index: int) -> Obstacle:
        with self._lock:
            return self._obstacles[index]

    def index_of(self, obstacle: Obstacle) -> int:
        """Registry position of ``obstacle`` (matched by identity)."""
        return index_in(self.snapshot(), obstacle)

    def summaries(self) -> List[ObstacleSummary]:
        return summarize(self.snapshot())


ObstacleSource = Union[ObstacleRegistry, Iterable[Obstacle]]


def as_snapshot(obstacles: ObstacleSource) -> Snapshot:
    """Accept a registry or any iterable of obstacles and freeze it."""
    if isinstance(obstacles, ObstacleRegistry):
        return obstacles.snapshot()
    return tuple(obstacles)


def index_in(obstacles: Snapshot, obstacle: Obstacle) -> int:
    for index, candidate in enumerate(obstacles):
        if candidate is obstacle:
            return index
    raise ValueError(f"{obstacle.display_name} is not registered")


def is_blocked(obstacles: Snapshot, coord: Coordinate) -> bool:
    """True if any movement-blocking obstacle claims ``coord``."""
    return any(obstacle.blocks_movement and obstacle.contains(coord) for obstacle in obstacles)


def movement_cost_at(obstacles: Snapshot, coord: Coordinate) -> int:
    """Cost of stepping out of ``coord``.

    The highest cost declared by a traversable obstacle claiming the cell, so a
    sensor watching a quicksand patch does not make it any easier to cross.
    Unclaimed cells cost the default.
    """
    cost = DEFAULT_MOVEMENT_COST
    for obstacle in obstacles:
        if not obstacle.blocks_movement and obstacle.contains(coord):
            cost = max(cost, obstacle.movement_cost)
    return cost


def summarize(obstacles: Snapshot) -> List[ObstacleSummary]:
    summaries: List[ObstacleSummary] = []
    for index, obstacle in enumerate(obstacles):
        summaries.append(
            ObstacleSummary(
                index=index,
                kind=obstacle.kind.value,
                code=obstacle.display_code,
                name=obstacle.display_name,
                blocks_movement=obstacle.blocks_movement,
                movement_cost=obstacle.movement_cost,
                origin=(obstacle.origin.x, obstacle.origin.y),
                bounded=obstacle.bounded,
                footprint=[(cell.x, cell.y) for cell in sorted(obstacle.footprint)],
            )
        )
    return summaries


def menu_entries() -> List[MenuEntry]:
    """Obstacle kinds in menu order, from the static catalog."""
    return [
        MenuEntry(code=entry.code, name=entry.name, priority=entry.priority, label=entry.menu_label)
        for entry in obstacle_types()
    ]
