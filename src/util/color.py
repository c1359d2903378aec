"""
どこで: `util.color`。
何を: 色指定の正規化/変換（Hex, 24bit 整数, RGBA 0–1, RGBA 0–255）を一元化。
なぜ: 形状色（24bit 整数）と背景/HUD 色（Hex やタプル）を同じ受理仕様で扱うため。
"""

from __future__ import annotations

from typing import Sequence

from common.types import RGBA


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else 1.0 if x > 1.0 else float(x)


def rgb24_to_rgba(value: int, alpha: float = 1.0) -> RGBA:
    """24bit 整数（0xRRGGBB）を RGBA(0–1) に変換する。"""
    v = int(value)
    if v < 0 or v > 0xFFFFFF:
        raise ValueError(f"24bit color out of range: {value!r}")
    r = (v >> 16) & 0xFF
    g = (v >> 8) & 0xFF
    b = v & 0xFF
    return (r / 255.0, g / 255.0, b / 255.0, _clamp01(alpha))


def parse_hex_color_str(s: str) -> RGBA:
    """Hex 文字列から RGBA(0–1) を返す。

    受理形式: "#RRGGBB", "#RRGGBBAA", "0xRRGGBB", "0xRRGGBBAA", "RRGGBB", "RRGGBBAA"。
    大文字/小文字は不問。
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) not in (6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB or RRGGBBAA)")
    try:
        r = int(t[0:2], 16)
        g = int(t[2:4], 16)
        b = int(t[4:6], 16)
        a = int(t[6:8], 16) if len(t) == 8 else 255
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def normalize_color(value: object) -> RGBA:
    """色を RGBA(0–1) へ正規化する。

    - 受理: Hex 文字列, 24bit 整数, (r,g,b[,a]) （0–1 または 0–255）
    - 返値: (r,g,b,a) （0–1）
    """
    if isinstance(value, str):
        return parse_hex_color_str(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return rgb24_to_rgba(value)
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"unsupported color type: {type(value)!r}")
    seq: Sequence[float | int] = value
    if len(seq) not in (3, 4):
        raise ValueError("color tuple/list must be length 3 or 4")
    try:
        fseq = [float(x) for x in seq]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color tuple/list: {value!r}") from e
    if len(fseq) == 3:
        fseq.append(1.0 if all(0.0 <= x <= 1.0 for x in fseq) else 255.0)
    # まず 0–1 とみなし、範囲外があれば 0–255 として扱う
    if all(0.0 <= x <= 1.0 for x in fseq):
        r, g, b, a = fseq
        return (r, g, b, a)
    r, g, b, a = (max(0, min(255, int(round(x)))) / 255.0 for x in fseq)
    return (r, g, b, a)


def to_u8_rgba(value: object) -> tuple[int, int, int, int]:
    """色を RGBA(0–255) へ変換する（pyglet Label 用）。"""
    r, g, b, a = normalize_color(value)
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)), int(round(a * 255)))


__all__ = [
    "rgb24_to_rgba",
    "parse_hex_color_str",
    "normalize_color",
    "to_u8_rgba",
]
