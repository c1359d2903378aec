from __future__ import annotations

import math

from .outline import EllipseOutline

# 楕円の短径比（Y 半径 = 0.6 · size）
ELLIPSE_RATIO = 0.6


def circle(size: float) -> EllipseOutline:
    """半径 `size` の円。"""
    return EllipseOutline(rx=float(size), ry=float(size))


def ellipse(size: float) -> EllipseOutline:
    """半径 `(size, 0.6·size)` の楕円。"""
    return EllipseOutline(rx=float(size), ry=float(size) * ELLIPSE_RATIO)


def circle_area(size: float) -> float:
    return math.pi * size**2


def ellipse_area(size: float) -> float:
    return math.pi * size * (size * ELLIPSE_RATIO)


__all__ = ["ELLIPSE_RATIO", "circle", "ellipse", "circle_area", "ellipse_area"]
