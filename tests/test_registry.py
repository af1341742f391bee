"""Tests for the obstacle registry, snapshots and cost lookups."""

import random

import pytest

from missioncontrol.errors import InvalidGeometry
from missioncontrol.geometry import Coordinate, Direction
from missioncontrol.obstacles import Guard
from missioncontrol.registry import (
    ObstacleRegistry,
    as_snapshot,
    is_blocked,
    menu_entries,
    movement_cost_at,
)


def make_registry() -> ObstacleRegistry:
    registry = ObstacleRegistry()
    registry.add_guard(Coordinate(1, 2))
    registry.add_fence(Coordinate(0, 5), Coordinate(3, 5))
    registry.add_camera(Coordinate(10, 10), Direction.S)
    return registry


def test_helpers_append_in_order():
    registry = make_registry()

    assert len(registry) == 3
    assert [obstacle.display_code for obstacle in registry] == ["g", "f", "c"]
    assert registry[0].origin == Coordinate(1, 2)
    assert registry.index_of(registry[2]) == 2


def test_invalid_obstacle_is_not_appended():
    registry = ObstacleRegistry()

    with pytest.raises(InvalidGeometry):
        registry.add_fence(Coordinate(0, 0), Coordinate(1, 1))

    assert len(registry) == 0


def test_add_rejects_non_obstacles():
    registry = ObstacleRegistry()

    with pytest.raises(TypeError):
        registry.add(Coordinate(0, 0))


def test_snapshot_is_point_in_time():
    registry = make_registry()
    snapshot = registry.snapshot()

    registry.add_guard(Coordinate(7, 7))

    assert isinstance(snapshot, tuple)
    assert len(snapshot) == 3
    assert len(registry.snapshot()) == 4


def test_as_snapshot_accepts_plain_iterables():
    guard = Guard(Coordinate(0, 0))

    assert as_snapshot([guard]) == (guard,)
    assert as_snapshot(ObstacleRegistry([guard]))[0] is guard


def test_is_blocked_ignores_traversable_obstacles():
    registry = ObstacleRegistry()
    registry.add_sensor(Coordinate(0, 0), 2)
    registry.add_guard(Coordinate(5, 5))
    snapshot = registry.snapshot()

    assert not is_blocked(snapshot, Coordinate(0, 0))
    assert is_blocked(snapshot, Coordinate(5, 5))
    assert not is_blocked(snapshot, Coordinate(9, 9))


def test_movement_cost_lookup():
    registry = ObstacleRegistry()
    registry.add_quicksand(Coordinate(2, 2), 0.4, 4, rng=random.Random(0))
    registry.add_sensor(Coordinate(2, 2), 1)
    snapshot = registry.snapshot()

    # Sensor overlaid on quicksand keeps the quicksand cost
    assert movement_cost_at(snapshot, Coordinate(2, 2)) == 4
    # Sensor alone and open ground cost the default
    assert movement_cost_at(snapshot, Coordinate(2, 3)) == 1
    assert movement_cost_at(snapshot, Coordinate(8, 8)) == 1


def test_summaries_describe_obstacles():
    summaries = make_registry().summaries()

    guard, fence, camera = summaries
    assert guard.index == 0
    assert guard.footprint == [(1, 2)]
    assert guard.blocks_movement
    assert fence.footprint == [(0, 5), (1, 5), (2, 5), (3, 5)]
    assert camera.kind == "camera"
    assert camera.bounded is False
    assert camera.origin == (10, 10)


def test_menu_entries_follow_priority():
    entries = menu_entries()

    assert entries[0].label == "g) Add 'Guard' obstacle."
    assert entries[-1].code == "q"
    assert entries[-1].label == "q) Add 'Quicksand' obstacle."
    assert [entry.name for entry in entries] == [
        "Guard",
        "Fence",
        "Sensor",
        "Camera",
        "Spotlight",
        "Quicksand",
    ]
