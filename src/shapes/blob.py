"""
どこで: `shapes.blob`。
何を: 乱択で揺らした 8〜12 点を二次曲線でなめらかに結んだ不定形（RANDOM）の輪郭を生成。
なぜ: 毎回形の異なる「ぷよぷよした塊」を安価に作るため。

生成規則:
- 点数 n = 8 + floor(random()·5)（8..12）。
- 点 i は角度 2π·i/n、半径 size·(0.8 + random()·0.4)。
- 点 0 から始め、奇数番目を制御点・その次を終点として二次曲線を連ねる。
  最後は点 n-1 を制御点にして点 0 へ戻る（閉ループは常に 1 本）。

面積は厳密計算せず 0.5·π·size² で近似する。
"""

from __future__ import annotations

import math

import numpy as np

from .outline import CurveOutline, QuadSegment

MIN_POINTS = 8
EXTRA_POINTS = 5
RADIUS_MIN = 0.8
RADIUS_JITTER = 0.4
AREA_FACTOR = 0.5


def _jittered_points(size: float, rng: np.random.Generator) -> np.ndarray:
    n = MIN_POINTS + int(math.floor(rng.random() * EXTRA_POINTS))
    radius = size * (RADIUS_MIN + rng.random(n) * RADIUS_JITTER)
    angle = np.arange(n, dtype=np.float64) / n * 2.0 * np.pi
    return np.stack([radius * np.cos(angle), radius * np.sin(angle)], axis=1)


def random_blob(size: float, rng: np.random.Generator | None = None) -> CurveOutline:
    """半径 `size` 前後の不定形閉曲線を生成する。

    引数:
        size: 基準半径（点の半径は [0.8·size, 1.2·size]）。
        rng: 乱数源。None なら新しい `np.random.default_rng()` を使う。
    """
    gen = rng if rng is not None else np.random.default_rng()
    pts = [(float(x), float(y)) for x, y in _jittered_points(float(size), gen)]
    n = len(pts)

    segments: list[QuadSegment] = []
    for i in range(1, n - 1, 2):
        segments.append(QuadSegment(control=pts[i], end=pts[i + 1]))
    # 最終点を制御点にして始点へ閉じる
    segments.append(QuadSegment(control=pts[n - 1], end=pts[0]))
    return CurveOutline(start=pts[0], segments=tuple(segments))


def random_blob_area(size: float) -> float:
    """不定形の近似面積（0.5·π·size²）。"""
    return AREA_FACTOR * math.pi * size**2


__all__ = ["random_blob", "random_blob_area"]
