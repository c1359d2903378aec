"""
どこで: `shapes.outline`（輪郭の不変表現）。
何を: 多角形・楕円・二次曲線ループの 3 種の輪郭データと、描画/当たり判定用の折れ線化を提供。
なぜ: 生成時に一度だけ輪郭を確定させ、以降は位置だけを動かす（輪郭は寿命中不変）ため。

データモデル:
- `PolygonOutline.vertices`: 閉じた頂点列（先頭と末尾が一致）。
- `EllipseOutline(rx, ry)`: 原点中心の楕円（円は rx == ry）。
- `CurveOutline(start, segments)`: 始点 + `QuadSegment(control, end)` の列。最後の end は start に戻る。

すべて原点基準・Y 下向き（キャンバス座標）で、配置は `ShapeEntity.position` 側が持つ。
`flatten(resolution)` は `(K, 2) float32` の閉じた折れ線（先頭 == 末尾）を返す。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

import numpy as np

from common.types import Vec2


def _closed(arr: np.ndarray) -> np.ndarray:
    """先頭点を末尾に複製して閉ループにする（既に閉じていればそのまま）。"""
    if arr.shape[0] == 0 or np.array_equal(arr[0], arr[-1]):
        return arr
    return np.append(arr, arr[0:1], axis=0)


@dataclass(frozen=True)
class PolygonOutline:
    """閉じた折れ線で表す輪郭（正多角形）。"""

    vertices: tuple[Vec2, ...]

    @property
    def is_closed(self) -> bool:
        return len(self.vertices) >= 2 and self.vertices[0] == self.vertices[-1]

    def flatten(self, resolution: int = 12) -> np.ndarray:
        # 直線のみなので resolution は不要
        return _closed(np.asarray(self.vertices, dtype=np.float32).reshape(-1, 2))


@dataclass(frozen=True)
class EllipseOutline:
    """原点中心の楕円輪郭。`rx` は X 半径、`ry` は Y 半径。"""

    rx: float
    ry: float

    def flatten(self, resolution: int = 12) -> np.ndarray:
        # 二次曲線 1 本あたりの分割数に合わせ、1/8 周ごとに resolution 点を置く
        count = max(8, int(resolution) * 8)
        t = np.linspace(0.0, 2.0 * np.pi, count, endpoint=False)
        pts = np.stack([np.cos(t) * self.rx, np.sin(t) * self.ry], axis=1).astype(np.float32)
        return _closed(pts)


@dataclass(frozen=True)
class QuadSegment:
    """二次ベジェ曲線 1 区間（始点は直前の区間の end）。"""

    control: Vec2
    end: Vec2


@dataclass(frozen=True)
class CurveOutline:
    """始点と二次曲線区間の列で表す閉曲線。"""

    start: Vec2
    segments: tuple[QuadSegment, ...]

    @property
    def is_closed(self) -> bool:
        return bool(self.segments) and self.segments[-1].end == self.start

    def flatten(self, resolution: int = 12) -> np.ndarray:
        steps = max(1, int(resolution))
        t = np.linspace(0.0, 1.0, steps + 1, dtype=np.float64)[1:, None]
        pieces = [np.asarray([self.start], dtype=np.float64)]
        p0 = np.asarray(self.start, dtype=np.float64)
        for seg in self.segments:
            c = np.asarray(seg.control, dtype=np.float64)
            e = np.asarray(seg.end, dtype=np.float64)
            # B(t) = (1-t)^2 P0 + 2(1-t)t C + t^2 E
            pieces.append((1.0 - t) ** 2 * p0 + 2.0 * (1.0 - t) * t * c + t**2 * e)
            p0 = e
        return _closed(np.concatenate(pieces, axis=0).astype(np.float32))


Outline = Union[PolygonOutline, EllipseOutline, CurveOutline]


def outline_bounds(outline: Outline, resolution: int = 12) -> tuple[float, float, float, float]:
    """原点基準の外接矩形 `(min_x, min_y, max_x, max_y)` を返す。"""
    if isinstance(outline, EllipseOutline):
        rx, ry = abs(float(outline.rx)), abs(float(outline.ry))
        return (-rx, -ry, rx, ry)
    pts = outline.flatten(resolution)
    mins = pts.min(axis=0)
    maxs = pts.max(axis=0)
    return (float(mins[0]), float(mins[1]), float(maxs[0]), float(maxs[1]))


__all__ = [
    "Outline",
    "PolygonOutline",
    "EllipseOutline",
    "QuadSegment",
    "CurveOutline",
    "outline_bounds",
]
