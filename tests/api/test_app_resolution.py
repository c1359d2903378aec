from __future__ import annotations

import pytest

from api.app_runner.utils import (
    make_close_handler,
    make_key_handler,
    resolve_background,
    resolve_canvas_size,
    resolve_fps,
    resolve_hud_config,
)


def test_resolve_fps_priority() -> None:
    assert resolve_fps(30, {"fps": 24}) == 30
    assert resolve_fps(None, {"fps": 24}) == 24
    assert resolve_fps(0) == 1
    assert resolve_fps(None, {"fps": "bad"}) == 60


def test_resolve_canvas_size() -> None:
    assert resolve_canvas_size((640, 480)) == (640, 480)
    assert resolve_canvas_size(None, {"canvas": {"width": 1024, "height": 768}}) == (1024, 768)
    assert resolve_canvas_size(None, {}) == (800, 600)
    assert resolve_canvas_size(None, {"canvas": "big"}) == (800, 600)
    with pytest.raises(ValueError):
        resolve_canvas_size((0, 480))


def test_resolve_background_defaults_to_light_blue() -> None:
    r, g, b, a = resolve_background(None, {})
    assert (round(r * 255), round(g * 255), round(b * 255), a) == (0x96, 0xD1, 0xE3, 1.0)
    assert resolve_background("#000000", {"background": "#ffffff"}) == (0.0, 0.0, 0.0, 1.0)
    assert resolve_background(None, {"background": "nope"}) == resolve_background(None, {})


def test_resolve_hud_config() -> None:
    assert resolve_hud_config(None, {"hud": {"enabled": False}}).enabled is False
    assert resolve_hud_config(True, {"hud": {"enabled": False}}).enabled is True
    assert resolve_hud_config(None, {}).enabled is True


def test_run_app_init_only_does_not_open_window() -> None:
    from api import run_app

    assert run_app(canvas_size=(320, 240), fps=30, init_only=True) is None


def test_close_handler_runs_cleanups_once_in_order() -> None:
    calls: list[str] = []
    close = make_close_handler(
        [lambda: calls.append("timer"), lambda: calls.append("unsubscribe")],
        lambda: calls.append("exit"),
    )
    close()
    close()
    assert calls == ["timer", "unsubscribe", "exit"]


def test_escape_requests_close_through_shared_path() -> None:
    events: list[str] = []
    cleanups: list[str] = []
    close = make_close_handler([lambda: cleanups.append("release")], lambda: events.append("exit"))
    # ESC は on_close の dispatch を要求し、その結果として後始末が走る
    handle = make_key_handler(
        {1: "rate_up"},
        escape_key=27,
        apply_action=events.append,
        request_close=close,
    )
    assert handle(27, 0) is True
    assert cleanups == ["release"]
    assert events == ["exit"]


def test_key_handler_dispatches_actions_and_ignores_unknown() -> None:
    applied: list[str] = []
    closed: list[bool] = []
    handle = make_key_handler(
        {1: "rate_up", 2: "gravity_down"},
        escape_key=27,
        apply_action=applied.append,
        request_close=lambda: closed.append(True),
    )
    assert handle(1, 0) is True
    assert handle(2, 0) is True
    assert handle(99, 0) is False
    assert applied == ["rate_up", "gravity_down"]
    assert closed == []
