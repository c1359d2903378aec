"""
どこで: `util` のクリック当たり判定補助。
何を: 閉じた折れ線（輪郭を折れ線化したもの）に対する点の内外判定。
なぜ: 形状上のクリック（削除）と空き領域のクリック（生成）を区別するため。

実装メモ:
- 判定はレイキャスティング（偶奇規則）。辺上近傍の扱いは半開区間条件に従う。
- 外接矩形で先に棄却し、Numba 版の走査は候補だけに行う。
"""

from __future__ import annotations

import numpy as np
from numba import njit


@njit(cache=True)
def point_in_polygon_njit(polygon: np.ndarray, x: float, y: float) -> bool:
    """レイキャスティングで点の内外を判定（Numba最適化）。

    閉ループを前提に `% n` で終端を接続する（先頭 == 末尾でも結果は同じ）。
    """
    n = len(polygon)
    inside = False

    p1x, p1y = polygon[0, 0], polygon[0, 1]
    for i in range(1, n + 1):
        p2x, p2y = polygon[i % n, 0], polygon[i % n, 1]
        if y > min(p1y, p2y):
            if y <= max(p1y, p2y):
                if x <= max(p1x, p2x):
                    xinters = p1x
                    if p1y != p2y:
                        xinters = (y - p1y) * (p2x - p1x) / (p2y - p1y) + p1x
                    if p1x == p2x or x <= xinters:
                        inside = not inside
        p1x, p1y = p2x, p2y

    return inside


def contains_point(
    polygon: np.ndarray,
    x: float,
    y: float,
    bounds: tuple[float, float, float, float] | None = None,
) -> bool:
    """原点基準の折れ線 `polygon (K, 2)` が点 `(x, y)` を含むか。

    引数:
        polygon: 閉じた折れ線（3 点以上）。
        x, y: 判定点（polygon と同じ座標系）。
        bounds: 外接矩形 `(min_x, min_y, max_x, max_y)`。省略時は polygon から求める。
    """
    if polygon.shape[0] < 3:
        return False
    if bounds is None:
        mins = polygon.min(axis=0)
        maxs = polygon.max(axis=0)
        bounds = (float(mins[0]), float(mins[1]), float(maxs[0]), float(maxs[1]))
    min_x, min_y, max_x, max_y = bounds
    if x < min_x or x > max_x or y < min_y or y > max_y:
        return False
    return bool(point_in_polygon_njit(np.ascontiguousarray(polygon, dtype=np.float64), x, y))


__all__ = ["point_in_polygon_njit", "contains_point"]
