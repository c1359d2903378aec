"""
どこで: `shapes.kinds`。
何を: 形状カタログ（閉じた列挙 `ShapeKind`）と、多角形の辺数対応を定義。
なぜ: 種類の集合を固定し、輪郭/面積の分岐を列挙で網羅的に書けるようにするため。
"""

from __future__ import annotations

from enum import Enum


class ShapeKind(Enum):
    """落下する形状の種類。

    正多角形は値が辺数（3..6）。CIRCLE/ELLIPSE/RANDOM は専用の式を使う。
    """

    TRIANGLE = 3
    SQUARE = 4
    PENTAGON = 5
    HEXAGON = 6
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    RANDOM = "random"

    @property
    def sides(self) -> int | None:
        """正多角形の辺数（多角形以外は None）。"""
        return self.value if isinstance(self.value, int) else None

    @property
    def is_polygon(self) -> bool:
        return self.sides is not None


# 生成時に一様選択する 7 種
CATALOGUE: tuple[ShapeKind, ...] = (
    ShapeKind.CIRCLE,
    ShapeKind.ELLIPSE,
    ShapeKind.TRIANGLE,
    ShapeKind.SQUARE,
    ShapeKind.PENTAGON,
    ShapeKind.HEXAGON,
    ShapeKind.RANDOM,
)


__all__ = ["ShapeKind", "CATALOGUE"]
