"""
どこで: `engine.core` の簡易フレームドライバ。
何を: `Tickable` の列を固定順序で呼び出す FrameClock（経過秒 → フレームデルタ換算とループ管理）。
なぜ: pyglet から呼ばせるだけで、シミュレーション → 統計 → HUD の更新順を統一するため。
"""

from __future__ import annotations

import time
from typing import Sequence

from .tickable import Tickable

# 60fps で 1 フレーム = 1.0
DEFAULT_BASE_FPS = 60.0


def seconds_to_frame_delta(dt_sec: float, base_fps: float = DEFAULT_BASE_FPS) -> float:
    """経過秒をフレームデルタ（base_fps 基準のフレーム数）に換算する。"""
    return float(dt_sec) * float(base_fps)


class FrameClock:
    """登録された Tickable を固定順序で実行するだけの極小クラス。

    Tickable には秒ではなくフレームデルタを渡す。
    """

    def __init__(self, tickables: Sequence[Tickable], *, base_fps: float = DEFAULT_BASE_FPS):
        self._tickables = tuple(tickables)
        self._base_fps = float(base_fps)
        self._last_time = time.perf_counter()

    # GUI フレームワークから schedule_interval で呼ばせる
    def tick(self, dt: float | None = None) -> None:
        if dt is None:  # pyglet は dt（秒）を渡してくれる
            now = time.perf_counter()  # 他フレームワーク用
            dt = now - self._last_time
            self._last_time = now

        delta = seconds_to_frame_delta(dt, self._base_fps)
        for t in self._tickables:
            t.tick(delta)
