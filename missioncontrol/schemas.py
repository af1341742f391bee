"""Pydantic schemas for query results and map snapshots.

The geometry and obstacle types are lightweight dataclasses; these models are
what the core hands back to its caller. They keep results serializable and
give the console layer ready-made operator messages.
"""

from __future__ import annotations

from typing import Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, Field


Point = Tuple[int, int]

DirectionStatus = Literal["compromised", "safe", "none"]
PathStatus = Literal["found", "no_path", "budget_exhausted"]


class DirectionReport(BaseModel):
    """Outcome of a safe-direction query for one agent position."""

    position: Point
    status: DirectionStatus
    directions: List[str] = Field(
        default_factory=list,
        description="Safe cardinal letters in N, S, E, W order",
    )

    @property
    def compromised(self) -> bool:
        return self.status == "compromised"

    @property
    def letters(self) -> str:
        return "".join(self.directions)

    def message(self) -> str:
        if self.status == "compromised":
            return "Agent, your location is compromised. Abort mission."
        if self.status == "none":
            return "You cannot safely move in any direction. Abort mission."
        return f"You can safely take any of the following directions: {self.letters}"


class PathResult(BaseModel):
    """Outcome of an A* query between two cells."""

    start: Point
    goal: Point
    status: PathStatus
    directions: str = Field("", description="One N/S/E/W letter per step")
    cost: Optional[int] = Field(None, description="Total movement cost; None unless found")
    path: List[Point] = Field(default_factory=list, description="Visited cells, start to goal")
    expanded: int = Field(0, description="Number of nodes closed during the search")

    @property
    def found(self) -> bool:
        return self.status == "found"

    def message(self) -> str:
        if self.found:
            return f"The following path will take you to the objective:\n{self.directions}"
        if self.status == "budget_exhausted":
            return "The search gave up before reaching the objective. Narrow the search area."
        return "There is no safe path to the objective."


class MenuEntry(BaseModel):
    """One obstacle kind as offered to the operator."""

    code: str
    name: str
    priority: int
    label: str


class ObstacleSummary(BaseModel):
    """Serializable description of a placed obstacle."""

    index: int = Field(..., description="Position in the registry (application order)")
    kind: str
    code: str
    name: str
    blocks_movement: bool
    movement_cost: int
    origin: Point
    bounded: bool = Field(True, description="False when the footprint extends indefinitely")
    footprint: List[Point] = Field(
        default_factory=list,
        description="Sorted footprint cells (finite part only for unbounded kinds)",
    )


class CellState(BaseModel):
    """A grid cell claimed by an obstacle."""

    code: str
    occupant: Optional[str] = None
    occupant_index: Optional[int] = None


class MapState(BaseModel):
    """Sparse snapshot of a rendered grid."""

    top_left: Point
    bottom_right: Point
    width: int
    height: int
    cells: Dict[Point, CellState] = Field(
        default_factory=dict,
        description="Sparse map: (x, y) → occupying obstacle; empty cells omitted",
    )
