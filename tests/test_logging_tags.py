"""Tests for diagnostic log tags ([•] geometry vs [A*] search).

These tests assert that:
- Queries print nothing unless verbose output is enabled
- Verbose output tags grid work with [•] and search work with [A*]
- MISSIONCONTROL_NO_COLOR strips ANSI codes
"""

from __future__ import annotations

import contextlib
import io

import pytest

from missioncontrol import Bounds, Coordinate, ObstacleRegistry, create_grid, find_path
from missioncontrol.config import Config
from missioncontrol.logging_utils import Color, colored


@pytest.fixture
def plain_output(monkeypatch):
    monkeypatch.setenv("MISSIONCONTROL_NO_COLOR", "1")


def test_queries_are_silent_by_default(monkeypatch, plain_output):
    monkeypatch.setattr(Config, "VERBOSE", False)
    registry = ObstacleRegistry()

    buf = io.StringIO()
    with contextlib.redirect_stdout(buf):
        registry.add_guard(Coordinate(1, 1))
        create_grid(Coordinate(0, 0), Coordinate(2, 2), registry)
        find_path(Coordinate(0, 0), Coordinate(2, 2), registry)

    assert buf.getvalue() == ""


def test_verbose_tags(monkeypatch, plain_output):
    monkeypatch.setattr(Config, "VERBOSE", True)
    registry = ObstacleRegistry()

    buf = io.StringIO()
    with contextlib.redirect_stdout(buf):
        registry.add_fence(Coordinate(1, 0), Coordinate(1, 1))
        create_grid(Coordinate(0, 0), Coordinate(2, 2), registry)
        find_path(Coordinate(0, 0), Coordinate(2, 0), registry, bounds=Bounds(Coordinate(0, 0), Coordinate(2, 2)))
    out = buf.getvalue()

    assert "[•] [Obstacles] Fence footprint: 2 cells" in out
    assert "[•] [Registry] #0 Fence placed at (1,0)" in out
    assert "[•] [Grid] 3x3 map built, 2 cells occupied" in out
    assert "[A*] [Pathfinding] Reached (2,0) in 6 steps, cost 6" in out
    assert "\033[" not in out


def test_verbose_reports_unreachable_goal(monkeypatch, plain_output):
    monkeypatch.setattr(Config, "VERBOSE", True)
    registry = ObstacleRegistry()
    registry.add_guard(Coordinate(3, 3))

    buf = io.StringIO()
    with contextlib.redirect_stdout(buf):
        find_path(Coordinate(0, 0), Coordinate(3, 3), registry)

    assert "[A*] [Pathfinding] Goal (3,3) is blocked or out of bounds" in buf.getvalue()


def test_colored_respects_no_color(monkeypatch):
    monkeypatch.delenv("MISSIONCONTROL_NO_COLOR", raising=False)
    assert colored("hi", Color.GREEN) == "\033[92mhi\033[0m"
    assert colored("hi", Color.RED, bold=True).startswith(Color.BOLD.value)

    monkeypatch.setenv("MISSIONCONTROL_NO_COLOR", "1")
    assert colored("hi", Color.GREEN) == "hi"
