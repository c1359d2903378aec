"""
どこで: `shapes` パッケージ（ジオメトリエンジン）。
何を: 形状カタログ `ShapeKind`・輪郭型・`build_outline`/`area_of` を再輸出する。
なぜ: 生成（Spawner）と描画（Renderer）が同じ入口から輪郭を得られるようにするため。
"""

from .builder import area_of, build_outline
from .kinds import CATALOGUE, ShapeKind
from .outline import CurveOutline, EllipseOutline, Outline, PolygonOutline, QuadSegment

__all__ = [
    "ShapeKind",
    "CATALOGUE",
    "Outline",
    "PolygonOutline",
    "EllipseOutline",
    "CurveOutline",
    "QuadSegment",
    "build_outline",
    "area_of",
]
