"""
どこで: `engine.ui` の HUD 表示モジュール。
何を: StatsSampler のキー/値ペアを pyglet の Label でウィンドウ左上にオーバーレイ描画する。
なぜ: 形状数・総面積・生成レート・重力を常に見えるようにし、操作の手応えを返すため。
"""

from __future__ import annotations

import time
from typing import Literal

import pyglet
from pyglet.window import Window

from util.color import to_u8_rgba

from ..core.tickable import Tickable
from .config import HUDConfig
from .sampler import StatsSampler

LINE_HEIGHT = 20
MARGIN = 10


class OverlayHUD(Tickable):
    """StatsSampler が溜めた文字列を pyglet Label で描画する。"""

    def __init__(
        self,
        window: Window,
        sampler: StatsSampler,
        *,
        config: HUDConfig | None = None,
    ):
        self.window = window
        self.sampler = sampler
        self._config = config or HUDConfig()
        self._labels: dict[str, pyglet.text.Label] = {}
        self._color = to_u8_rgba(self._config.text_color)
        self._font = self._config.font_name
        self.font_size = int(self._config.font_size)
        # --- messages ---
        self._messages: list[tuple[str, float, Literal["info", "warn", "error"]]] = []

    def _make_label(self, y: float, *, size: int, color: tuple[int, int, int, int]) -> pyglet.text.Label:
        return pyglet.text.Label(
            text="",
            x=MARGIN,
            y=y,
            anchor_x="left",
            anchor_y="top",
            font_name=self._font,
            font_size=size,
            color=color,
        )

    # -------- Tickable --------
    def tick(self, dt: float) -> None:
        if not self._config.enabled:
            return
        # 順序は HUDConfig に従う。未知キーは末尾に追加
        desired = list(self._config.order)
        for k in self.sampler.data.keys():
            if k not in desired:
                desired.append(k)

        new_labels: dict[str, pyglet.text.Label] = {}
        row = 0
        for key in desired:
            if key not in self.sampler.data:
                continue
            y = self.window.height - MARGIN - row * LINE_HEIGHT
            lab = self._labels.get(key)
            if lab is None:
                lab = self._make_label(y, size=self.font_size, color=self._color)
            else:
                lab.y = y
            lab.text = f"{key} : {self.sampler.data[key]}"
            new_labels[key] = lab
            row += 1
        self._labels = new_labels

        # メッセージの有効期限を掃除
        now = time.monotonic()
        self._messages = [m for m in self._messages if m[1] > now]

    # -------- draw --------
    def draw(self) -> None:
        if not self._config.enabled:
            return
        for lab in self._labels.values():
            lab.draw()
        # 一時メッセージ（下端に重ねて表示）
        y = MARGIN + LINE_HEIGHT
        for text, _expire, level in self._messages:
            rgba = {
                "info": (0, 0, 0, 200),
                "warn": (200, 120, 0, 230),
                "error": (200, 0, 0, 230),
            }[level]
            lbl = self._make_label(y, size=self.font_size, color=rgba)
            lbl.text = text
            lbl.draw()
            y += LINE_HEIGHT

    # ---- public helpers ----
    def show_message(
        self, text: str, level: Literal["info", "warn", "error"] = "info", timeout_sec: float = 2
    ) -> None:
        expire = time.monotonic() + max(0.1, float(timeout_sec))
        self._messages.append((text, expire, level))


__all__ = ["OverlayHUD"]
