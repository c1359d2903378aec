"""
どこで: `engine.ui` の計測サブモジュール。
何を: シミュレーション統計（形状数・総面積・生成レート・重力）を毎フレーム、
      実効FPSとプロセスの CPU/MEM を一定間隔でサンプリングし、HUD 描画向けに文字列辞書として保持。
なぜ: 表示用の整形を 1 箇所にまとめ、HUD 側は文字列を並べるだけにするため。
"""

from __future__ import annotations

import os
import time
from typing import Any

from engine.sim.session import SessionState
from engine.sim.stats import format_area, format_gravity
from engine.sim.step import SimulationTicker

from ..core.tickable import Tickable
from . import fields


class StatsSampler(Tickable):
    """統計は毎フレーム、FPS/CPU/MEM は `interval` 秒ごとに dict へ書き込む。"""

    def __init__(
        self,
        ticker: SimulationTicker,
        session: SessionState,
        *,
        interval: float = 0.2,
        show_cpu_mem: bool = True,
    ):
        self._ticker = ticker
        self._session = session
        self._interval = float(interval)
        self._show_cpu_mem = bool(show_cpu_mem)
        self._proc: Any = None
        if self._show_cpu_mem:
            import psutil

            self._proc = psutil.Process(os.getpid())
        # 前回サンプリング時刻とフレーム数（実効FPS算出に使用）
        self._last = 0.0
        self._frames = 0
        self.data: dict[str, str] = {}

    # -------- Tickable --------
    def tick(self, dt: float) -> None:
        stats = self._ticker.stats
        self.data[fields.SHAPES] = str(stats.count)
        self.data[fields.AREA] = format_area(stats.total_area)
        self.data[fields.RATE] = f"{self._session.spawn_rate:g}"
        self.data[fields.GRAVITY] = format_gravity(self._session.gravity)

        self._frames += 1
        now = time.monotonic()
        if self._last > 0.0 and now - self._last < self._interval:
            return
        elapsed = now - self._last if self._last > 0.0 else 0.0
        fps = (self._frames / elapsed) if elapsed > 0.0 else 0.0
        self._last = now
        self._frames = 0

        self.data[fields.FPS] = f"{fps:4.1f}"
        if self._proc is not None:
            self.data[fields.CPU] = f"{self._proc.cpu_percent(0.0):4.1f}%"
            self.data[fields.MEM] = self._human(self._proc.memory_info().rss)

    # -------- helpers --------
    @staticmethod
    def _human(n: float) -> str:
        for u in "B KB MB GB TB".split():
            if n < 1024:
                return f"{n:4.1f}{u}"
            n /= 1024
        return f"{n:4.1f}PB"


__all__ = ["StatsSampler"]
