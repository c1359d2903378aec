from __future__ import annotations

import math

import pytest

from engine.sim.session import SessionState
from engine.sim.spawner import Spawner
from engine.sim.stats import Stats, compute_stats, format_area, format_gravity
from shapes.kinds import ShapeKind


def test_empty_stats() -> None:
    assert compute_stats([]) == Stats(0, 0.0)


def test_total_area_is_sum_of_shape_areas(display, session: SessionState, rng) -> None:
    spawner = Spawner(session, display, shape_size=30, rng=rng, catalogue=[ShapeKind.CIRCLE])
    for _ in range(3):
        spawner.spawn()
    stats = compute_stats(session.shapes)
    assert stats.count == 3
    assert stats.total_area == pytest.approx(3 * math.pi * 900)


def test_formatting() -> None:
    assert format_area(2827.433) == "2827"
    assert format_area(0.0) == "0"
    assert format_gravity(1.0) == "1.0"
    assert format_gravity(1.2000000000000002) == "1.2"
