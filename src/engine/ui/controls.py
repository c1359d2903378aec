"""
どこで: `engine.ui.controls`。
何を: 生成レート/重力の増減操作（操作パネル）。下限を下回る減少は黙って無視する。
なぜ: キー入力などの離散イベントを 1 つの入口に集め、UI 側のガードをドメインの検証と分けるため。

既定ステップ:
- レート: ±1（1 未満には下げない）
- 重力: ±0.2（0.2 以下からは下げない）
"""

from __future__ import annotations

import logging
from typing import Callable

from engine.sim.session import SessionState

logger = logging.getLogger(__name__)

# アクション名（キー割り当ては api.app 側で行う）
RATE_UP = "rate_up"
RATE_DOWN = "rate_down"
GRAVITY_UP = "gravity_up"
GRAVITY_DOWN = "gravity_down"

# 浮動小数の累積誤差で下限判定が揺れないよう丸める桁数
_GRAVITY_DIGITS = 6


class ControlPanel:
    """レート/重力の増減操作。"""

    def __init__(
        self,
        session: SessionState,
        *,
        rate_step: int = 1,
        min_rate: int = 1,
        gravity_step: float = 0.2,
        min_gravity: float | None = None,
        on_change: Callable[[str, float], None] | None = None,
    ) -> None:
        self.session = session
        self.rate_step = rate_step
        self.min_rate = min_rate
        self.gravity_step = float(gravity_step)
        self.min_gravity = float(gravity_step if min_gravity is None else min_gravity)
        self._on_change = on_change
        self._actions: dict[str, Callable[[], bool]] = {
            RATE_UP: self.increase_rate,
            RATE_DOWN: self.decrease_rate,
            GRAVITY_UP: self.increase_gravity,
            GRAVITY_DOWN: self.decrease_gravity,
        }

    def _notify(self, name: str, value: float) -> None:
        if self._on_change is not None:
            self._on_change(name, value)

    # ---- レート ----
    def increase_rate(self) -> bool:
        self.session.set_spawn_rate(self.session.spawn_rate + self.rate_step)
        self._notify("rate", self.session.spawn_rate)
        return True

    def decrease_rate(self) -> bool:
        current = self.session.spawn_rate
        if current <= self.min_rate:
            logger.debug("rate decrease ignored at %s", current)
            return False
        self.session.set_spawn_rate(max(self.min_rate, current - self.rate_step))
        self._notify("rate", self.session.spawn_rate)
        return True

    # ---- 重力 ----
    def increase_gravity(self) -> bool:
        self.session.set_gravity(round(self.session.gravity + self.gravity_step, _GRAVITY_DIGITS))
        self._notify("gravity", self.session.gravity)
        return True

    def decrease_gravity(self) -> bool:
        current = round(self.session.gravity, _GRAVITY_DIGITS)
        if current <= self.min_gravity:
            logger.debug("gravity decrease ignored at %.2f", current)
            return False
        self.session.set_gravity(round(current - self.gravity_step, _GRAVITY_DIGITS))
        self._notify("gravity", self.session.gravity)
        return True

    # ---- ディスパッチ ----
    def apply(self, action: str) -> bool:
        """アクション名で操作する。未知のアクションは KeyError。"""
        return self._actions[action]()


__all__ = [
    "ControlPanel",
    "RATE_UP",
    "RATE_DOWN",
    "GRAVITY_UP",
    "GRAVITY_DOWN",
]
