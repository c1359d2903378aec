"""
どこで: `engine.core` の描画ウィンドウ薄ラッパ。
何を: Pyglet Window（MSAA/背景クリア）と描画/ポインタ押下コールバック登録を提供。
なぜ: レンダラ/シミュレーション層から GUI 依存を切り離し、最小インターフェイスで統一するため。

使用例:
    win = RenderWindow(800, 600, bg_color=(0.59, 0.82, 0.89, 1.0))

    win.add_draw_callback(renderer.draw)
    win.add_pointer_callback(spawner.handle_pointer)
    pyglet.app.run()
"""

from typing import Callable

import pyglet
from pyglet.gl import Config, glClearColor

PointerCallback = Callable[[float, float], object]


def to_canvas_y(window_height: float, y: float) -> float:
    """pyglet の Y 上向き座標をキャンバスの Y 下向き座標へ変換する。"""
    return float(window_height) - float(y)


class RenderWindow(pyglet.window.Window):
    def __init__(
        self,
        width: int,
        height: int,
        *,
        bg_color: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0),
        caption: str = "Shapefall",
    ):
        """ウィンドウを生成する。

        引数:
            width: ウィンドウ幅（ピクセル）。
            height: ウィンドウ高さ（ピクセル）。
            bg_color: 背景色 RGBA（0.0〜1.0）。
        """
        # 形状の縁を滑らかにするために MSAA を有効化
        config = Config(double_buffer=True, sample_buffers=1, samples=4, vsync=True)
        super().__init__(width=width, height=height, caption=caption, config=config)
        self._bg_color = bg_color
        self._draw_callbacks: list[Callable[[], None]] = []
        self._pointer_callbacks: list[PointerCallback] = []

    def add_draw_callback(self, func: Callable[[], None]) -> None:
        """
        `on_draw` 中に呼び出す描画関数を登録する。

        - 関数は引数を取らず、副作用で描画を行うこと。
        - 登録順に呼び出される。
        """
        self._draw_callbacks.append(func)

    def add_pointer_callback(self, func: PointerCallback) -> None:
        """ポインタ押下時に `(x, y)`（キャンバス座標, Y 下向き）で呼ぶ関数を登録する。"""
        self._pointer_callbacks.append(func)

    def on_draw(self):  # Pyglet 既定のイベント名
        """ウィンドウ描画イベントハンドラ。登録された描画コールバックを呼び出す。"""
        r, g, b, a = self._bg_color
        glClearColor(r, g, b, a)
        self.clear()
        for cb in self._draw_callbacks:
            cb()

    def on_mouse_press(self, x, y, button, modifiers):  # noqa: ANN001
        cx = float(x)
        cy = to_canvas_y(self.height, y)
        for cb in self._pointer_callbacks:
            cb(cx, cy)
