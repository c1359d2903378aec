"""
どこで: `common` の型定義。
何を: Vec2/RGBA などの軽量エイリアス（組込みジェネリックで記述）と、可変な位置 `Position`。
なぜ: 依存の少ない場所に配置して循環と分散定義を避けるため。
"""

from __future__ import annotations

from dataclasses import dataclass

Vec2 = tuple[float, float]
RGBA = tuple[float, float, float, float]

# 24bit RGB (0x000000..0xFFFFFF)
RGB24 = int


@dataclass
class Position:
    """キャンバス座標での位置（Y 下向き）。

    形状エンティティと描画側のドローアブルが同じインスタンスを共有し、
    シミュレーションが書き換えた値をそのまま描画に使う。
    """

    x: float
    y: float

    def as_tuple(self) -> Vec2:
        return (self.x, self.y)


__all__ = ["Vec2", "RGBA", "RGB24", "Position"]
