"""Tests for the safe-direction evaluator."""

import random

from missioncontrol import (
    Camera,
    Coordinate,
    Direction,
    ObstacleRegistry,
    evaluate_safe_directions,
)


def test_all_directions_safe_on_empty_map():
    report = evaluate_safe_directions(Coordinate(3, 3), ObstacleRegistry())

    assert report.status == "safe"
    assert report.directions == ["N", "S", "E", "W"]
    assert report.message() == "You can safely take any of the following directions: NSEW"


def test_guard_to_the_north_removes_north():
    registry = ObstacleRegistry()
    registry.add_guard(Coordinate(3, 2))

    report = evaluate_safe_directions(Coordinate(3, 3), registry)

    assert report.directions == ["S", "E", "W"]
    assert report.letters == "SEW"


def test_standing_on_obstacle_is_compromised():
    registry = ObstacleRegistry()
    registry.add_fence(Coordinate(0, 3), Coordinate(6, 3))

    report = evaluate_safe_directions(Coordinate(3, 3), registry)

    assert report.compromised
    assert report.directions == []
    assert report.message() == "Agent, your location is compromised. Abort mission."


def test_surrounded_agent_has_no_safe_direction():
    registry = ObstacleRegistry()
    for direction in Direction:
        registry.add_guard(Coordinate(3, 3).step(direction))

    report = evaluate_safe_directions(Coordinate(3, 3), registry)

    assert report.status == "none"
    assert report.directions == []
    assert report.message() == "You cannot safely move in any direction. Abort mission."


def test_traversable_obstacles_do_not_restrict_movement():
    registry = ObstacleRegistry()
    registry.add_sensor(Coordinate(3, 3), 2)
    registry.add_quicksand(Coordinate(4, 3), 1, 5, rng=random.Random(11))

    report = evaluate_safe_directions(Coordinate(3, 3), registry)

    # Inside the sensor disk but not compromised
    assert report.status == "safe"
    assert report.directions == ["N", "S", "E", "W"]


def test_camera_cone_edges():
    camera = Camera(Coordinate(0, 0), Direction.E)

    # (4,5) sits outside the cone; its north and east neighbours are on the 45 degree edge
    report = evaluate_safe_directions(Coordinate(4, 5), [camera])
    assert report.directions == ["S", "W"]

    assert evaluate_safe_directions(Coordinate(6, 1), [camera]).compromised
