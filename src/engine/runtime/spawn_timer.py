"""
どこで: `engine.runtime.spawn_timer`。
何を: 一定レート（個/秒）で生成コールバックを呼ぶ周期タイマー。レート変更時は解除→再登録する。
なぜ: 描画フレームとは独立したテンポで形状を生成し、レート変更で重複/取りこぼしを起こさないため。

クロック:
- `schedule_interval(fn, interval)` / `unschedule(fn)` を持つもの（`pyglet.clock` モジュール、
  または `pyglet.clock.Clock` インスタンス）。None なら `pyglet.clock` を遅延 import する。
- 登録中のスケジュールは常に高々 1 つ。
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Protocol

logger = logging.getLogger(__name__)

SpawnCallback = Callable[[float], None]


class IntervalClock(Protocol):
    def schedule_interval(self, func: Callable[..., Any], interval: float, *args: Any) -> Any: ...

    def unschedule(self, func: Callable[..., Any]) -> Any: ...


def interval_for_rate(rate: float) -> float:
    """レート（個/秒）から周期（秒）を求める（1000/n ms = 1/n 秒）。"""
    r = float(rate)
    if not r > 0.0:
        raise ValueError(f"rate must be > 0, got {rate}")
    return 1.0 / r


class SpawnTimer:
    """生成コールバックを `rate` Hz で呼ぶ周期タイマー。"""

    def __init__(
        self,
        callback: SpawnCallback,
        rate: float,
        *,
        clock: IntervalClock | None = None,
    ) -> None:
        self._callback = callback
        self._rate = float(rate)
        self._interval = interval_for_rate(rate)
        self._clock = clock
        self._running = False

    def _resolve_clock(self) -> IntervalClock:
        if self._clock is None:
            # 遅延インポート（テスト時のヘッドレス収集でウィンドウ系を読まないため）
            import pyglet.clock

            self._clock = pyglet.clock  # type: ignore[assignment]
        return self._clock  # type: ignore[return-value]

    def _fire(self, dt: float) -> None:
        self._callback(dt)

    @property
    def rate(self) -> float:
        return self._rate

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        """現在のレートでスケジュールを開始する（既に動作中なら何もしない）。"""
        if self._running:
            return
        self._resolve_clock().schedule_interval(self._fire, self._interval)
        self._running = True
        logger.debug("spawn timer started: every %.3fs", self._interval)

    def stop(self) -> None:
        if not self._running:
            return
        self._resolve_clock().unschedule(self._fire)
        self._running = False

    def set_rate(self, rate: float) -> None:
        """レートを変更する。動作中ならスケジュールを解除して新しい周期で張り直す。"""
        interval = interval_for_rate(rate)
        self._rate = float(rate)
        self._interval = interval
        if self._running:
            self.stop()
            self.start()
        logger.debug("spawn timer rate -> %s/sec (%.1f ms)", rate, interval * 1000.0)


__all__ = ["SpawnTimer", "IntervalClock", "interval_for_rate"]
