"""Cost-aware A* search over the obstacle map.

Movement is four-directional. Cells inside a blocking footprint are
impassable; every other cell can be crossed, and the cost of each step is the
movement cost of the cell being left (1 for open ground, the quicksand depth
for quicksand). The heuristic is Manhattan distance, which never overestimates
because every step costs at least 1.

The map has no edges of its own, so a search is limited by an optional
``bounds`` rectangle and always by a budget of node expansions.

Usage:
    result = find_path(Coordinate(0, 0), Coordinate(4, 4), registry, bounds=grid.bounds)
    if result.found:
        print(result.directions)  # e.g. "SSSSEEEE"
"""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Set, Tuple

from .config import Config
from .geometry import Bounds, Coordinate, Direction
from .logging_utils import Color, LOG_TAG_SEARCH, log_debug
from .registry import ObstacleSource, as_snapshot, is_blocked, movement_cost_at
from .schemas import PathResult, PathStatus


@dataclass
class SearchNode:
    """Frontier entry for a single A* run."""

    coordinate: Coordinate
    g_cost: int
    h_cost: int
    parent: Optional[SearchNode] = None

    @property
    def f_cost(self) -> int:
        return self.g_cost + self.h_cost


def manhattan(a: Coordinate, b: Coordinate) -> int:
    return a.manhattan_to(b)


def directions_for(path: List[Coordinate]) -> str:
    """Translate consecutive cells into N/S/E/W letters."""
    return "".join(Direction.between(current, following).letter for current, following in zip(path, path[1:]))


class AStarPathfinder:
    """A* search bound to one point-in-time snapshot of the obstacles.

    Traversability and movement cost are memoised per coordinate, since a
    search asks about the same cells repeatedly and the snapshot never changes.
    """

    def __init__(
        self,
        obstacles: ObstacleSource,
        *,
        bounds: Optional[Bounds] = None,
        max_steps: Optional[int] = None,
    ):
        self.obstacles = as_snapshot(obstacles)
        self.bounds = bounds
        if max_steps is None:
            Config.validate()
            max_steps = Config.MAX_SEARCH_STEPS
        self.max_steps = max_steps
        if self.max_steps <= 0:
            raise ValueError(f"max_steps must be positive (got {self.max_steps})")
        self._blocked: Dict[Coordinate, bool] = {}
        self._costs: Dict[Coordinate, int] = {}

    def is_traversable(self, coord: Coordinate) -> bool:
        if self.bounds is not None and coord not in self.bounds:
            return False
        blocked = self._blocked.get(coord)
        if blocked is None:
            blocked = is_blocked(self.obstacles, coord)
            self._blocked[coord] = blocked
        return not blocked

    def movement_cost(self, coord: Coordinate) -> int:
        cost = self._costs.get(coord)
        if cost is None:
            cost = movement_cost_at(self.obstacles, coord)
            self._costs[coord] = cost
        return cost

    def neighbours(self, coord: Coordinate) -> Iterator[Coordinate]:
        # N, S, E, W; order only affects tie-breaking between equal-cost paths.
        for direction in Direction:
            yield coord.step(direction)

    def search(self, start: Coordinate, goal: Coordinate) -> PathResult:
        """Run A* from ``start`` to ``goal``.

        The start cell itself is not checked: an agent can always try to walk
        out of the cell it is standing in.
        """
        if not self.is_traversable(goal):
            log_debug(f"  {LOG_TAG_SEARCH} [Pathfinding] Goal {goal} is blocked or out of bounds", Color.RED)
            return self._result(start, goal, "no_path")

        start_node = SearchNode(start, 0, manhattan(start, goal))
        # Counter breaks f-cost ties in insertion order and keeps nodes out of comparisons.
        counter = itertools.count()
        open_heap: List[Tuple[int, int, SearchNode]] = [(start_node.f_cost, next(counter), start_node)]
        best: Dict[Coordinate, SearchNode] = {start: start_node}
        closed: Set[Coordinate] = set()

        while open_heap:
            _, _, node = heapq.heappop(open_heap)
            current = node.coordinate
            # Skip entries superseded by a cheaper route or already processed.
            if current in closed or best[current] is not node:
                continue
            closed.add(current)

            if current == goal:
                path = self._reconstruct(node)
                log_debug(
                    f"  {LOG_TAG_SEARCH} [Pathfinding] Reached {goal} in {len(path) - 1} steps, "
                    f"cost {node.g_cost}, {len(closed)} nodes expanded",
                    Color.GREEN,
                )
                return self._result(start, goal, "found", node=node, path=path, expanded=len(closed))

            if len(closed) >= self.max_steps:
                log_debug(
                    f"  {LOG_TAG_SEARCH} [Pathfinding] Budget of {self.max_steps} expansions spent",
                    Color.RED,
                )
                return self._result(start, goal, "budget_exhausted", expanded=len(closed))

            step_cost = self.movement_cost(current)
            for neighbour in self.neighbours(current):
                if neighbour in closed or not self.is_traversable(neighbour):
                    continue
                tentative = node.g_cost + step_cost
                known = best.get(neighbour)
                if known is None or tentative < known.g_cost:
                    successor = SearchNode(neighbour, tentative, manhattan(neighbour, goal), parent=node)
                    best[neighbour] = successor
                    heapq.heappush(open_heap, (successor.f_cost, next(counter), successor))

        log_debug(
            f"  {LOG_TAG_SEARCH} [Pathfinding] Frontier exhausted after {len(closed)} nodes; no path",
            Color.YELLOW,
        )
        return self._result(start, goal, "no_path", expanded=len(closed))

    @staticmethod
    def _reconstruct(node: SearchNode) -> List[Coordinate]:
        path: List[Coordinate] = []
        current: Optional[SearchNode] = node
        while current is not None:
            path.append(current.coordinate)
            current = current.parent
        path.reverse()
        return path

    @staticmethod
    def _result(
        start: Coordinate,
        goal: Coordinate,
        status: PathStatus,
        *,
        node: Optional[SearchNode] = None,
        path: Optional[List[Coordinate]] = None,
        expanded: int = 0,
    ) -> PathResult:
        cells = path or []
        return PathResult(
            start=(start.x, start.y),
            goal=(goal.x, goal.y),
            status=status,
            directions=directions_for(cells),
            cost=node.g_cost if node is not None else None,
            path=[(cell.x, cell.y) for cell in cells],
            expanded=expanded,
        )


def find_path(
    start: Coordinate,
    goal: Coordinate,
    obstacles: ObstacleSource,
    *,
    bounds: Optional[Bounds] = None,
    max_steps: Optional[int] = None,
) -> PathResult:
    """Find the cheapest cardinal-step route from ``start`` to ``goal``.

    Args:
        start: Agent position
        goal: Mission objective
        obstacles: Registry (or iterable of obstacles) to plan around
        bounds: Optional rectangle the route must stay inside
        max_steps: Expansion budget; defaults to ``Config.MAX_SEARCH_STEPS``

    Returns:
        PathResult with status ``found`` (directions, cost, path), ``no_path``
        or ``budget_exhausted``. Failing to find a path is not an error.
    """
    return AStarPathfinder(obstacles, bounds=bounds, max_steps=max_steps).search(start, goal)
