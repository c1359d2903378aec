from __future__ import annotations

import pytest

from common.types import Position
from engine.sim.entity import ShapeEntity
from engine.sim.session import SessionState
from engine.sim.spawner import Spawner
from engine.sim.step import SimulationTicker, advance, destroy
from shapes.builder import area_of, build_outline
from shapes.kinds import ShapeKind


def _register(display, session: SessionState, kind: ShapeKind, x: float, y: float) -> ShapeEntity:
    shape = ShapeEntity(
        kind=kind,
        size=30.0,
        color=0xFF0000,
        position=Position(x, y),
        outline=build_outline(kind, 30.0),
        area=area_of(kind, 30.0),
    )
    shape.handle = display.add_drawable(shape.outline, shape.color, shape.position)
    session.add(shape)
    return shape


def test_advance_moves_every_shape_by_displacement(display, session: SessionState) -> None:
    a = _register(display, session, ShapeKind.CIRCLE, 10, 0)
    b = _register(display, session, ShapeKind.SQUARE, 20, 100)
    culled = advance(session.shapes, 2.5, bottom=600, display=display)
    assert culled == []
    assert a.position.y == pytest.approx(2.5)
    assert b.position.y == pytest.approx(102.5)
    # x は変わらない
    assert (a.position.x, b.position.x) == (10, 20)


def test_advance_culls_below_bottom_and_detaches(display, session: SessionState) -> None:
    keep = _register(display, session, ShapeKind.CIRCLE, 10, 0)
    gone = _register(display, session, ShapeKind.HEXAGON, 10, 595)
    handle = gone.handle
    culled = advance(session.shapes, 10, bottom=600, display=display)
    assert culled == [gone]
    assert session.shapes == [keep]
    assert gone.handle is None
    assert handle not in display.drawables
    assert keep.handle in display.drawables


def test_advance_keeps_shape_exactly_at_bottom(display, session: SessionState) -> None:
    s = _register(display, session, ShapeKind.CIRCLE, 0, 590)
    advance(session.shapes, 10, bottom=600, display=display)
    assert s in session


def test_advance_culls_consecutive_shapes(display, session: SessionState) -> None:
    # 末尾から走査するので連続した削除でも取りこぼさない
    shapes = [_register(display, session, ShapeKind.SQUARE, i, 599) for i in range(4)]
    culled = advance(session.shapes, 5, bottom=600, display=display)
    assert len(culled) == 4
    assert session.shapes == []
    assert display.drawables == {}
    assert set(map(id, culled)) == set(map(id, shapes))


def test_destroy_is_idempotent(display, session: SessionState) -> None:
    s = _register(display, session, ShapeKind.TRIANGLE, 0, 0)
    assert destroy(session, display, s) is True
    assert destroy(session, display, s) is False
    assert len(display.removed) == 1


def test_ticker_end_to_end_culls_and_updates_stats(make_display, session: SessionState) -> None:
    display = make_display(800, 800)
    spawner = Spawner(session, display, shape_size=30)
    spawner.spawn((100, 790))
    ticker = SimulationTicker(session, display)
    ticker.tick(1.0)
    assert ticker.stats.count == 1  # y = 791 はまだ画面内
    ticker.tick(20.0)  # gravity 1 × delta 20
    assert ticker.stats.count == 0
    assert len(session) == 0
    assert ticker.stats.total_area == 0.0
    assert display.drawables == {}


def test_ticker_scales_with_gravity_and_frame_delta(display, session: SessionState) -> None:
    s = _register(display, session, ShapeKind.CIRCLE, 0, 0)
    session.set_gravity(1.6)
    ticker = SimulationTicker(session, display)
    ticker.tick(2.0)
    assert s.position.y == pytest.approx(3.2)
    assert ticker.stats.count == 1
    assert ticker.stats.total_area == pytest.approx(s.area)
