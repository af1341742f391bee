"""
Mission Control - obstacle mapping and safe-route planning on a tactical grid.

Place guards, fences, sensors, cameras, spotlights and quicksand on an
unbounded integer map, then ask which directions are safe to step into or
which route reaches an objective at the lowest cost.

The core performs no console I/O. Every query returns a value; parsing user
input and printing results belongs to the caller.
"""

__version__ = "0.1.0"

# Geometry
from .geometry import Bounds, Coordinate, Direction

# Obstacles
from .obstacles import (
    OBSTACLE_CATALOG,
    Camera,
    Fence,
    Guard,
    Obstacle,
    ObstacleKind,
    ObstacleType,
    Quicksand,
    Sensor,
    Spotlight,
    obstacle_types,
)
from .registry import ObstacleRegistry, menu_entries

# Queries
from .grid import Cell, Grid, create_grid, render
from .directions import evaluate_safe_directions
from .pathfinding import AStarPathfinder, find_path

# Result schemas
from .schemas import (
    CellState,
    DirectionReport,
    MapState,
    MenuEntry,
    ObstacleSummary,
    PathResult,
)

# Errors
from .errors import (
    InvalidGeometry,
    InvalidMapSpecification,
    InvalidRange,
    MissingFootprint,
    MissionControlError,
)

__all__ = [
    # Geometry
    "Coordinate",
    "Direction",
    "Bounds",
    # Obstacles
    "Obstacle",
    "ObstacleKind",
    "ObstacleType",
    "OBSTACLE_CATALOG",
    "obstacle_types",
    "Guard",
    "Fence",
    "Sensor",
    "Camera",
    "Spotlight",
    "Quicksand",
    "ObstacleRegistry",
    "menu_entries",
    # Grid
    "Cell",
    "Grid",
    "create_grid",
    "render",
    # Queries
    "evaluate_safe_directions",
    "find_path",
    "AStarPathfinder",
    # Schemas
    "DirectionReport",
    "PathResult",
    "MenuEntry",
    "ObstacleSummary",
    "CellState",
    "MapState",
    # Errors
    "MissionControlError",
    "InvalidMapSpecification",
    "InvalidGeometry",
    "InvalidRange",
    "MissingFootprint",
]
