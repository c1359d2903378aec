from __future__ import annotations

import pytest

from common.types import Position
from engine.sim.entity import ShapeEntity
from engine.sim.session import SessionState
from shapes.builder import area_of, build_outline
from shapes.kinds import ShapeKind


def _entity(x: float = 0.0, y: float = 0.0) -> ShapeEntity:
    return ShapeEntity(
        kind=ShapeKind.SQUARE,
        size=30.0,
        color=0x123456,
        position=Position(x, y),
        outline=build_outline(ShapeKind.SQUARE, 30.0),
        area=area_of(ShapeKind.SQUARE, 30.0),
    )


def test_add_and_remove_by_identity(session: SessionState) -> None:
    a = _entity()
    b = _entity()  # 同じ内容でも別エンティティ
    session.add(a)
    session.add(b)
    assert len(session) == 2
    assert session.remove(b) is True
    assert a in session
    assert b not in session
    assert session.shapes == [a]


def test_remove_absent_is_noop(session: SessionState) -> None:
    a = _entity()
    assert session.remove(a) is False
    session.add(a)
    assert session.remove(a) is True
    assert session.remove(a) is False
    assert len(session) == 0


def test_spawn_rate_validation() -> None:
    with pytest.raises(ValueError):
        SessionState(spawn_rate=0)
    s = SessionState()
    with pytest.raises(ValueError):
        s.set_spawn_rate(-1)
    assert s.spawn_rate == 1


def test_rate_listeners_are_notified_and_unsubscribed(session: SessionState) -> None:
    seen: list[float] = []
    unsubscribe = session.subscribe_rate(seen.append)
    session.set_spawn_rate(3)
    unsubscribe()
    session.set_spawn_rate(4)
    assert seen == [3]
    assert session.spawn_rate == 4


def test_gravity_setter(session: SessionState) -> None:
    session.set_gravity(1.4)
    assert session.gravity == pytest.approx(1.4)
