"""共通フィクスチャ。

- 乱数シード固定
- 辞書ベースの偽 Display（GL なしで Spawner/Step を検証する）
- 空のセッション
"""

from __future__ import annotations

import itertools
from typing import Any, Callable

import numpy as np
import pytest

from common.types import Position
from engine.sim.session import SessionState


class FakeDisplay:
    """`engine.core.display.Display` を満たす最小実装。"""

    def __init__(self, width: float = 800.0, height: float = 600.0) -> None:
        self.width = float(width)
        self.height = float(height)
        self.drawables: dict[int, tuple[Any, int, Position]] = {}
        self.removed: list[int] = []
        self._ids = itertools.count(1)

    def add_drawable(self, outline: Any, color: int, position: Position) -> int:
        handle = next(self._ids)
        self.drawables[handle] = (outline, color, position)
        return handle

    def remove_drawable(self, handle: Any) -> None:
        if self.drawables.pop(handle, None) is not None:
            self.removed.append(handle)


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy の乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture()
def rng() -> np.random.Generator:
    return np.random.default_rng(2024)


@pytest.fixture()
def display() -> FakeDisplay:
    return FakeDisplay()


@pytest.fixture()
def make_display() -> Callable[[float, float], FakeDisplay]:
    """寸法を指定して偽 Display を作るファクトリ。"""
    return FakeDisplay


@pytest.fixture()
def session() -> SessionState:
    return SessionState(spawn_rate=1, gravity=1.0)
