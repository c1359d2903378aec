"""
どこで: `engine.core` の表示面インターフェース。
何を: 形状の追加/削除とキャンバス寸法だけを持つ `Display` Protocol を定義。
なぜ: シミュレーション層を GL/ウィンドウから切り離し、ヘッドレスで検証できるようにするため。
"""

from __future__ import annotations

from typing import Hashable, Protocol

from common.types import RGB24, Position
from shapes.outline import Outline

DrawableHandle = Hashable


class Display(Protocol):
    """描画面。実装は `engine.render.renderer.FillRenderer`（テストでは辞書ベースの偽物）。"""

    @property
    def width(self) -> float: ...

    @property
    def height(self) -> float: ...

    def add_drawable(self, outline: Outline, color: RGB24, position: Position) -> DrawableHandle:
        """輪郭を登録し、以後 `position` の値に追従して描画する。"""
        ...

    def remove_drawable(self, handle: DrawableHandle) -> None:
        """登録を外す。未知/削除済みのハンドルは無視する。"""
        ...


__all__ = ["Display", "DrawableHandle"]
