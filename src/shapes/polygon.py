from __future__ import annotations

import math

import numpy as np

from .outline import PolygonOutline

MIN_SIDES = 3


def _polygon_vertices(n_sides: int, radius: float) -> np.ndarray:
    """正多角形の頂点配列を生成します。

    引数:
        n_sides: 辺の数。
        radius: 外接円半径。

    返り値:
        頂点配列 `(n_sides + 1, 2)`（角度 i·2π/n、i = 0..n。最初と最後の頂点は一致）。
    """
    # i = n の頂点は 2π で i = 0 と同じ位置。浮動小数誤差を避けるため先頭を複製する
    t = np.arange(n_sides, dtype=np.float64) * (2.0 * np.pi / n_sides)
    x = np.cos(t) * radius
    y = np.sin(t) * radius
    vertices = np.stack([x, y], axis=1)
    return np.append(vertices, vertices[0:1], axis=0)


def regular_polygon(n_sides: int, size: float) -> PolygonOutline:
    """原点中心・外接円半径 `size` の正 n 角形の輪郭を返す。"""
    if n_sides < MIN_SIDES:
        raise ValueError(f"n_sides must be >= {MIN_SIDES}, got {n_sides}")
    verts = _polygon_vertices(int(n_sides), float(size))
    return PolygonOutline(vertices=tuple((float(x), float(y)) for x, y in verts))


def regular_polygon_area(n_sides: int, size: float) -> float:
    """正 n 角形の面積 `n·size² / (4·tan(π/n))`。

    注: 辺長基準の公式に `size` をそのまま与えた値で、外接円半径での厳密な面積とは異なる。
    総面積の統計はこの値で集計する。
    """
    if n_sides < MIN_SIDES:
        raise ValueError(f"n_sides must be >= {MIN_SIDES}, got {n_sides}")
    return n_sides * size**2 / (4.0 * math.tan(math.pi / n_sides))


__all__ = ["regular_polygon", "regular_polygon_area"]
