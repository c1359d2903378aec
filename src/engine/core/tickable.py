"""
どこで: `engine.core` の更新インターフェース。
何を: 1フレーム更新 `tick(dt)` を持つ `Tickable` Protocol を定義。
なぜ: フレーム駆動のオブジェクト（シミュレーション/レンダラ/HUD）を一様に扱うため。
"""

from typing import Protocol


class Tickable(Protocol):
    """1 フレーム分の更新を行うインターフェース。"""

    def tick(self, dt: float) -> None:
        """内部状態を 1 フレームぶん進める。

        `dt` はフレームデルタ（60fps 基準で 1 フレーム = 1.0 の無次元量）。
        """
