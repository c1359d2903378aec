"""
どこで: `engine.sim.entity`。
何を: 落下中の 1 形状（種類・サイズ・色・位置・輪郭・面積・描画ハンドル）を表す `ShapeEntity`。
なぜ: 輪郭/面積を生成時に確定させ、以後は位置だけを書き換える単位をはっきりさせるため。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property

import numpy as np

from common.types import RGB24, Position
from shapes.kinds import ShapeKind
from shapes.outline import Outline, outline_bounds
from util.hit_test import contains_point

from ..core.display import DrawableHandle


@dataclass(eq=False)
class ShapeEntity:
    """落下中の形状。

    - `outline` と `area` は寿命中不変。書き換わるのは `position` だけ。
    - 同一性（`is`）で比較する。同じ種類/位置の別エンティティは別物。
    - `handle` は表示面に登録している間だけ非 None。
    """

    kind: ShapeKind
    size: float
    color: RGB24
    position: Position
    outline: Outline
    area: float
    handle: DrawableHandle | None = field(default=None, repr=False)
    resolution: int = field(default=12, repr=False)

    @cached_property
    def polygon(self) -> np.ndarray:
        """当たり判定用の折れ線（原点基準）。"""
        return self.outline.flatten(self.resolution)

    @cached_property
    def bounds(self) -> tuple[float, float, float, float]:
        return outline_bounds(self.outline, self.resolution)

    def contains(self, x: float, y: float) -> bool:
        """キャンバス座標の点 `(x, y)` が輪郭内にあるか。"""
        return contains_point(
            self.polygon, x - self.position.x, y - self.position.y, bounds=self.bounds
        )


__all__ = ["ShapeEntity"]
