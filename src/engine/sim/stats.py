from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .entity import ShapeEntity


@dataclass(frozen=True)
class Stats:
    """生存中の形状から導く集計値（状態としては保持しない）。"""

    count: int = 0
    total_area: float = 0.0


def compute_stats(shapes: Iterable[ShapeEntity]) -> Stats:
    count = 0
    total = 0.0
    for shape in shapes:
        count += 1
        total += shape.area
    return Stats(count=count, total_area=total)


def format_area(value: float) -> str:
    """面積の表示文字列（小数なし）。"""
    return f"{value:.0f}"


def format_gravity(value: float) -> str:
    """重力の表示文字列（小数 1 桁）。"""
    return f"{value:.1f}"


__all__ = ["Stats", "compute_stats", "format_area", "format_gravity"]
