"""
どこで: `shapes.builder`（ジオメトリエンジンの入口）。
何を: `ShapeKind` と `size` から輪郭 (`build_outline`) と面積 (`area_of`) を求める。
なぜ: 種類ごとの生成/面積の分岐を 1 箇所に閉じ込め、カタログとの不整合を即座に検出するため。

分岐は閉じた列挙に対する if 連鎖で書き、未知の種類は `ValueError` で即失敗させる
（実行時に回復すべき状況ではなく、カタログとエンジンの不一致を示すため）。
"""

from __future__ import annotations

import numpy as np

from .blob import random_blob, random_blob_area
from .ellipse import circle, circle_area, ellipse, ellipse_area
from .kinds import ShapeKind
from .outline import Outline
from .polygon import regular_polygon, regular_polygon_area


def _check_size(size: float) -> float:
    s = float(size)
    if not s > 0.0:
        raise ValueError(f"size must be > 0, got {size}")
    return s


def build_outline(
    kind: ShapeKind, size: float, rng: np.random.Generator | None = None
) -> Outline:
    """形状の輪郭を原点基準で生成する。

    Parameters
    ----------
    kind : ShapeKind
        形状の種類。
    size : float
        外接円半径相当のスケール（> 0）。
    rng : np.random.Generator | None
        RANDOM の揺らぎに使う乱数源。他の種類では使わない（`size` だけで決定的）。

    Raises
    ------
    ValueError
        `size <= 0`、または未知の種類。
    """
    s = _check_size(size)
    if kind is ShapeKind.CIRCLE:
        return circle(s)
    if kind is ShapeKind.ELLIPSE:
        return ellipse(s)
    if kind is ShapeKind.RANDOM:
        return random_blob(s, rng)
    if isinstance(kind, ShapeKind) and kind.sides is not None:
        return regular_polygon(kind.sides, s)
    raise ValueError(f"unknown shape kind: {kind!r}")


def area_of(kind: ShapeKind, size: float) -> float:
    """形状の面積（RANDOM は 0.5·π·size² の近似値）。"""
    s = _check_size(size)
    if kind is ShapeKind.CIRCLE:
        return circle_area(s)
    if kind is ShapeKind.ELLIPSE:
        return ellipse_area(s)
    if kind is ShapeKind.RANDOM:
        return random_blob_area(s)
    if isinstance(kind, ShapeKind) and kind.sides is not None:
        return regular_polygon_area(kind.sides, s)
    raise ValueError(f"unknown shape kind: {kind!r}")


__all__ = ["build_outline", "area_of"]
