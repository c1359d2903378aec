from __future__ import annotations

import pytest

from engine.sim.session import SessionState
from engine.ui import controls
from engine.ui.controls import ControlPanel


def test_rate_up_and_down(session: SessionState) -> None:
    panel = ControlPanel(session)
    assert panel.increase_rate()
    assert panel.increase_rate()
    assert session.spawn_rate == 3
    assert panel.decrease_rate()
    assert session.spawn_rate == 2


def test_rate_down_is_ignored_at_minimum(session: SessionState) -> None:
    panel = ControlPanel(session)
    assert panel.decrease_rate() is False
    assert session.spawn_rate == 1


def test_gravity_steps_are_rounded(session: SessionState) -> None:
    panel = ControlPanel(session)
    for _ in range(3):
        panel.increase_gravity()
    assert session.gravity == pytest.approx(1.6)
    assert str(session.gravity) == "1.6"


def test_gravity_down_stops_at_step(session: SessionState) -> None:
    panel = ControlPanel(session)
    for _ in range(10):
        panel.decrease_gravity()
    assert session.gravity == pytest.approx(0.2)
    assert panel.decrease_gravity() is False
    assert session.gravity == pytest.approx(0.2)


def test_apply_dispatch_and_change_callback(session: SessionState) -> None:
    changes: list[tuple[str, float]] = []
    panel = ControlPanel(session, on_change=lambda name, v: changes.append((name, v)))
    panel.apply(controls.RATE_UP)
    panel.apply(controls.GRAVITY_UP)
    panel.apply(controls.GRAVITY_DOWN)
    panel.apply(controls.RATE_DOWN)
    panel.apply(controls.RATE_DOWN)  # 下限で無視（通知なし）
    assert changes == [
        ("rate", 2),
        ("gravity", pytest.approx(1.2)),
        ("gravity", pytest.approx(1.0)),
        ("rate", 1),
    ]
    with pytest.raises(KeyError):
        panel.apply("warp")


def test_rate_change_reaches_subscribers(session: SessionState) -> None:
    seen: list[float] = []
    session.subscribe_rate(seen.append)
    ControlPanel(session).increase_rate()
    assert seen == [2]
