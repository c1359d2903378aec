"""
どこで: `engine.ui.fields`。
何を: HUD 表示に用いる標準フィールド名（ラベルキー）と既定の表示順を定義する。
なぜ: 項目名の重複や表記ゆれを避け、順序指定や参照を安定化するため。
"""

from __future__ import annotations

# 表示キー（ラベルの左側に出るキー文字列）
SHAPES = "SHAPES"
AREA = "AREA"
RATE = "SHAPES/SEC"
GRAVITY = "GRAVITY"
FPS = "FPS"
CPU = "CPU"
MEM = "MEM"

# 上から順に積む（シミュレーション値を先頭に）
DEFAULT_ORDER: tuple[str, ...] = (SHAPES, AREA, RATE, GRAVITY, FPS, CPU, MEM)

__all__ = ["SHAPES", "AREA", "RATE", "GRAVITY", "FPS", "CPU", "MEM", "DEFAULT_ORDER"]
