"""Safe-direction evaluation for an agent standing on the map."""

from __future__ import annotations

from typing import List

from .geometry import Coordinate, Direction
from .logging_utils import Color, LOG_TAG_GEOMETRY, log_debug
from .registry import ObstacleSource, as_snapshot, is_blocked
from .schemas import DirectionReport


def evaluate_safe_directions(position: Coordinate, obstacles: ObstacleSource) -> DirectionReport:
    """Report which cardinal steps from ``position`` avoid blocking obstacles.

    Only blocking obstacles count: sensors and quicksand never rule out a step.
    If the agent is already inside a blocking footprint the position is
    reported as compromised and no directions are computed.

    Returns:
        DirectionReport with status ``compromised``, ``safe`` (directions in
        N, S, E, W order) or ``none`` when every neighbour is blocked.
    """
    snapshot = as_snapshot(obstacles)
    point = (position.x, position.y)

    if is_blocked(snapshot, position):
        log_debug(f"  {LOG_TAG_GEOMETRY} [Directions] {position} is inside a blocking footprint", Color.RED)
        return DirectionReport(position=point, status="compromised")

    safe: List[str] = [
        direction.letter
        for direction in Direction
        if not is_blocked(snapshot, position.step(direction))
    ]
    log_debug(f"  {LOG_TAG_GEOMETRY} [Directions] {position} safe: {''.join(safe) or '-'}", Color.BLUE)

    if not safe:
        return DirectionReport(position=point, status="none")
    return DirectionReport(position=point, status="safe", directions=safe)
