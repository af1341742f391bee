"""Rectangular map grid built from the obstacle registry.

A grid covers the cells between a top-left and a bottom-right corner (both
inclusive). When it is built, every cell asks each obstacle, in registry
order, whether it claims the cell; the last obstacle to answer yes becomes the
cell's occupant. Cells keep a reference to the registry's obstacle, never a
copy.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .geometry import Bounds, Coordinate
from .logging_utils import Color, LOG_TAG_GEOMETRY, log_debug
from .obstacles import Obstacle
from .registry import ObstacleSource, Snapshot, as_snapshot, index_in
from .schemas import CellState, MapState


EMPTY_CELL = "."


@dataclass
class Cell:
    """A single map cell and the obstacle (if any) occupying it."""

    position: Coordinate
    occupant: Optional[Obstacle] = None
    display_char: str = EMPTY_CELL

    def assign(self, obstacle: Obstacle) -> None:
        self.occupant = obstacle
        self.display_char = obstacle.display_code

    @property
    def is_empty(self) -> bool:
        return self.occupant is None


@dataclass
class Grid:
    """Rows of cells over ``bounds``; ``cells[row][col]``."""

    bounds: Bounds
    obstacles: Snapshot = ()
    cells: List[List[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = self._build_cells()

    def _build_cells(self) -> List[List[Cell]]:
        rows: List[List[Cell]] = []
        claimed = 0
        for y in range(self.bounds.top_left.y, self.bounds.bottom_right.y + 1):
            row: List[Cell] = []
            for x in range(self.bounds.top_left.x, self.bounds.bottom_right.x + 1):
                cell = Cell(Coordinate(x, y))
                for obstacle in self.obstacles:
                    if obstacle.contains(cell.position):
                        cell.assign(obstacle)
                if not cell.is_empty:
                    claimed += 1
                row.append(cell)
            rows.append(row)
        log_debug(
            f"  {LOG_TAG_GEOMETRY} [Grid] {self.width}x{self.height} map built, {claimed} cells occupied",
            Color.BLUE,
        )
        return rows

    @property
    def origin(self) -> Coordinate:
        return self.bounds.top_left

    @property
    def width(self) -> int:
        return self.bounds.width

    @property
    def height(self) -> int:
        return self.bounds.height

    def get_cell(self, coord: Coordinate) -> Optional[Cell]:
        """Cell at an absolute coordinate, or None outside the map."""
        if coord not in self.bounds:
            return None
        return self.cells[coord.y - self.origin.y][coord.x - self.origin.x]

    def occupant_at(self, coord: Coordinate) -> Optional[Obstacle]:
        cell = self.get_cell(coord)
        return cell.occupant if cell else None

    def __iter__(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def to_state(self) -> MapState:
        cells = {}
        for cell in self:
            if cell.occupant is None:
                continue
            cells[(cell.position.x, cell.position.y)] = CellState(
                code=cell.display_char,
                occupant=cell.occupant.display_name,
                occupant_index=index_in(self.obstacles, cell.occupant),
            )
        top_left = self.bounds.top_left
        bottom_right = self.bounds.bottom_right
        return MapState(
            top_left=(top_left.x, top_left.y),
            bottom_right=(bottom_right.x, bottom_right.y),
            width=self.width,
            height=self.height,
            cells=cells,
        )

    def __str__(self) -> str:
        return render(self)


def create_grid(top_left: Coordinate, bottom_right: Coordinate, obstacles: ObstacleSource = ()) -> Grid:
    """Build a grid over the given corners.

    Raises:
        InvalidMapSpecification: If ``bottom_right`` lies north or west of ``top_left``.
    """
    bounds = Bounds(top_left, bottom_right)
    return Grid(bounds=bounds, obstacles=as_snapshot(obstacles))


def render(grid: Grid) -> str:
    """Row-major text map: ``.`` for empty cells, obstacle codes otherwise."""
    return "".join("".join(cell.display_char for cell in row) + "\n" for row in grid.cells)
