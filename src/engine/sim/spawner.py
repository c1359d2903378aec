"""
どこで: `engine.sim.spawner`。
何を: 新しい形状の種類/色/位置を決め、輪郭を生成してセッションと表示面に登録する。クリック処理も担う。
なぜ: 「タイマーでの生成」「空き領域クリックでの生成」「形状クリックでの削除」の入口を揃えるため。

要点:
- 種類は 7 種から一様、色は 24bit 全域から一様に選ぶ。
- 位置指定なし: `x = random()·width`, `y = -shape_size`（上端のすぐ外から落ちてくる）。
- クリックは手前（新しい形状）から当たり判定し、当たれば削除のみ。空き領域なら生成。
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from common.settings import get as get_settings
from common.types import Position, Vec2
from shapes.builder import area_of, build_outline
from shapes.kinds import CATALOGUE, ShapeKind

from ..core.display import Display
from .entity import ShapeEntity
from .session import SessionState
from .step import destroy

logger = logging.getLogger(__name__)

# 24bit RGB の上限（含む）
MAX_COLOR = 0xFFFFFF


class Spawner:
    """形状の生成とクリック処理。

    Parameters
    ----------
    session : SessionState
        追加先の状態（参照で保持し、コピーしない）。
    display : Display
        登録先の表示面（幅は生成位置の乱択に使う）。
    shape_size : float | None
        全形状共通のサイズ。None で設定値（既定 30）。
    rng : np.random.Generator | None
        乱数源。None で `np.random.default_rng()`。
    catalogue : Sequence[ShapeKind]
        選択肢の種類。
    """

    def __init__(
        self,
        session: SessionState,
        display: Display,
        *,
        shape_size: float | None = None,
        rng: np.random.Generator | None = None,
        catalogue: Sequence[ShapeKind] = CATALOGUE,
        resolution: int | None = None,
    ) -> None:
        settings = get_settings()
        self.session = session
        self.display = display
        self.shape_size = float(settings.SHAPE_SIZE if shape_size is None else shape_size)
        if not self.shape_size > 0.0:
            raise ValueError(f"shape_size must be > 0, got {shape_size}")
        if not catalogue:
            raise ValueError("catalogue must not be empty")
        self._catalogue = tuple(catalogue)
        self._rng = rng if rng is not None else np.random.default_rng()
        self._resolution = int(settings.CURVE_RESOLUTION if resolution is None else resolution)

    # ---- 生成 ----
    def _pick_kind(self) -> ShapeKind:
        return self._catalogue[int(self._rng.integers(len(self._catalogue)))]

    def _pick_color(self) -> int:
        return int(self._rng.integers(0, MAX_COLOR + 1))

    def spawn(self, position: Vec2 | None = None) -> ShapeEntity:
        """形状を 1 つ生成して登録する。

        引数:
            position: 生成位置。None なら上端の外（`y = -shape_size`）のランダムな x。
        """
        if position is not None:
            pos = Position(float(position[0]), float(position[1]))
        else:
            pos = Position(float(self._rng.random()) * self.display.width, -self.shape_size)

        kind = self._pick_kind()
        shape = ShapeEntity(
            kind=kind,
            size=self.shape_size,
            color=self._pick_color(),
            position=pos,
            outline=build_outline(kind, self.shape_size, self._rng),
            area=area_of(kind, self.shape_size),
            resolution=self._resolution,
        )
        shape.handle = self.display.add_drawable(shape.outline, shape.color, shape.position)
        self.session.add(shape)
        logger.debug(
            "spawned %s at (%.1f, %.1f) color=#%06x", kind.name, pos.x, pos.y, shape.color
        )
        return shape

    def spawn_on_tick(self, dt: float) -> None:
        """周期タイマー用のコールバック（pyglet は経過秒 `dt` を渡す）。"""
        self.spawn()

    # ---- クリック ----
    def shape_at(self, x: float, y: float) -> ShapeEntity | None:
        """点 `(x, y)` にある最前面（最も新しい）形状。"""
        for shape in reversed(self.session.shapes):
            if shape.contains(x, y):
                return shape
        return None

    def remove(self, shape: ShapeEntity) -> bool:
        """形状を表示面とセッションから取り除く（二重削除は no-op）。"""
        removed = destroy(self.session, self.display, shape)
        if removed:
            logger.debug("removed %s by click", shape.kind.name)
        return removed

    def handle_pointer(
        self, x: float, y: float, target: ShapeEntity | None = None
    ) -> ShapeEntity | None:
        """ポインタ押下を処理する。

        形状上の押下（`target` 指定、または当たり判定で検出）はその形状を削除して None を返す。
        空き領域の押下だけが `(x, y)` への生成を行い、生成した形状を返す。
        """
        hit = target if target is not None else self.shape_at(x, y)
        if hit is not None:
            self.remove(hit)
            return None
        return self.spawn((x, y))


__all__ = ["Spawner", "MAX_COLOR"]
