from __future__ import annotations

import logging

import pytest

from common import settings
from common.env import env_float, env_int, env_str
from common.logging import resolve_level


@pytest.fixture()
def restore_settings(monkeypatch: pytest.MonkeyPatch):
    yield
    monkeypatch.undo()
    settings.reload_from_env()


def test_env_helpers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SHAPEFALL_TEST_INT", "7")
    monkeypatch.setenv("SHAPEFALL_TEST_BAD", "x")
    monkeypatch.setenv("SHAPEFALL_TEST_FLOAT", "0.25")
    monkeypatch.setenv("SHAPEFALL_TEST_STR", "  debug ")
    assert env_int("SHAPEFALL_TEST_INT", 1) == 7
    assert env_int("SHAPEFALL_TEST_INT", 1, min_value=10) == 10
    assert env_int("SHAPEFALL_TEST_BAD", 3) == 3
    assert env_float("SHAPEFALL_TEST_FLOAT", 1.0) == pytest.approx(0.25)
    assert env_float("SHAPEFALL_TEST_MISSING", 2.0) == 2.0
    assert env_str("SHAPEFALL_TEST_STR", "INFO") == "debug"


def test_settings_defaults() -> None:
    s = settings._Settings()
    assert s.SHAPE_SIZE == 30.0
    assert s.SPAWN_RATE == 1
    assert s.GRAVITY == 1.0
    assert s.GRAVITY_STEP == pytest.approx(0.2)
    assert s.FPS == 60


def test_settings_reload_from_env(monkeypatch: pytest.MonkeyPatch, restore_settings) -> None:
    monkeypatch.setenv("SHAPEFALL_SHAPE_SIZE", "45")
    monkeypatch.setenv("SHAPEFALL_SPAWN_RATE", "0")
    monkeypatch.setenv("SHAPEFALL_GRAVITY", "2.5")
    monkeypatch.setenv("SHAPEFALL_LOG_LEVEL", "debug")
    settings.reload_from_env()
    s = settings.get()
    assert s.SHAPE_SIZE == 45.0
    assert s.SPAWN_RATE == 1  # 下限丸め
    assert s.GRAVITY == 2.5
    assert s.LOG_LEVEL == "DEBUG"


def test_resolve_level() -> None:
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level("nonsense") == logging.INFO
    assert resolve_level(30) == logging.WARNING
