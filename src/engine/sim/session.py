"""
どこで: `engine.sim.session`。
何を: 生存中の形状リスト・生成レート・重力を保持する `SessionState`。
なぜ: Spawner（追加）/ Simulation Step（削除）/ 操作パネル（レート/重力）が共有する唯一の可変状態を 1 箇所に置くため。

スレッド:
- pyglet のイベントループ上（単一スレッド）からのみ触る前提。ロックは持たない。
"""

from __future__ import annotations

import logging
from typing import Callable

from .entity import ShapeEntity

logger = logging.getLogger(__name__)

RateListener = Callable[[float], None]


class SessionState:
    """シミュレーション状態。

    不変条件:
    - `shapes` は破棄済みのエンティティを含まない。
    - `shapes` 内の全エンティティは表示面に登録済み。
    """

    def __init__(self, spawn_rate: float = 1, gravity: float = 1.0) -> None:
        self.shapes: list[ShapeEntity] = []
        self._spawn_rate = self._check_rate(spawn_rate)
        self._gravity = float(gravity)
        self._rate_listeners: list[RateListener] = []

    @staticmethod
    def _check_rate(rate: float) -> float:
        if not float(rate) > 0.0:
            raise ValueError(f"spawn rate must be > 0, got {rate}")
        return rate

    # ---- shapes ----
    def add(self, shape: ShapeEntity) -> None:
        self.shapes.append(shape)

    def remove(self, shape: ShapeEntity) -> bool:
        """`shape` をリストから外す。含まれていなければ何もせず False。"""
        for i, s in enumerate(self.shapes):
            if s is shape:
                del self.shapes[i]
                return True
        return False

    def __contains__(self, shape: object) -> bool:
        return any(s is shape for s in self.shapes)

    def __len__(self) -> int:
        return len(self.shapes)

    # ---- spawn rate ----
    @property
    def spawn_rate(self) -> float:
        return self._spawn_rate

    def set_spawn_rate(self, rate: float) -> None:
        """生成レート（個/秒）を変更し、購読者（SpawnTimer）へ通知する。"""
        self._spawn_rate = self._check_rate(rate)
        logger.debug("spawn rate -> %s/sec", rate)
        for fn in list(self._rate_listeners):
            fn(self._spawn_rate)

    def subscribe_rate(self, fn: RateListener) -> Callable[[], None]:
        """レート変更の購読を登録し、解除関数を返す。"""
        self._rate_listeners.append(fn)

        def _unsubscribe() -> None:
            if fn in self._rate_listeners:
                self._rate_listeners.remove(fn)

        return _unsubscribe

    # ---- gravity ----
    @property
    def gravity(self) -> float:
        return self._gravity

    def set_gravity(self, value: float) -> None:
        """重力を変更（次の Simulation Step から反映）。"""
        self._gravity = float(value)
        logger.debug("gravity -> %.2f", self._gravity)


__all__ = ["SessionState"]
