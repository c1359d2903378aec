"""
どこで: `api.app`（実行ランナー）。
何を: ウィンドウ・塗りつぶしレンダラ・セッション・生成タイマー・操作パネル・HUD を結線し、
      pyglet のイベントループを回す。
なぜ: 各部品（`engine.sim`/`engine.runtime`/`engine.render`/`engine.ui`）は互いを知らないため、
      組み立てと寿命管理を 1 箇所にまとめるため。

実行フロー（概要）:
1) ロギング/設定解決: `setup_default_logging()`、`util.utils.load_config()` から FPS・キャンバス・
   背景・HUD を補完（引数が優先）。
2) ウィンドウ/GL: `RenderWindow` を生成し、ModernGL のブレンドを有効化。`FillRenderer` が表示面。
3) シミュレーション: `SessionState` / `Spawner` / `SimulationTicker` を作り、最初の 1 個を即時生成。
4) 生成タイマー: `SpawnTimer` を `session.subscribe_rate` に接続（レート変更で張り直し）。
5) 入力: ポインタ押下は `Spawner.handle_pointer`、矢印キーは `ControlPanel`、ESC で終了。
6) フレーム駆動: `FrameClock([ticker, renderer, sampler, overlay])` を `pyglet.clock` で駆動。

キー割り当て:
- ↑ / ↓ : 生成レート ±1（1 未満には下げない）
- → / ← : 重力 ±0.2（0.2 以下からは下げない）
- ESC   : 終了

注意/制限:
- ヘッドレス/仮想環境では `pyglet`/`ModernGL` の初期化に失敗する場合がある（ログに残して再送出）。
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from common.logging import setup_default_logging
from common.settings import get as get_settings
from engine.core.tickable import Tickable
from engine.sim.session import SessionState
from engine.sim.spawner import Spawner
from engine.sim.step import SimulationTicker
from engine.ui import controls
from engine.ui.config import HUDConfig
from engine.ui.controls import ControlPanel
from util.utils import load_config

from .app_runner.utils import (
    make_close_handler,
    make_key_handler,
    resolve_background,
    resolve_canvas_size,
    resolve_fps,
    resolve_hud_config,
)

logger = logging.getLogger(__name__)


def run_app(
    *,
    canvas_size: tuple[int, int] | None = None,
    fps: int | None = None,
    background: Any = None,
    shape_size: float | None = None,
    spawn_rate: float | None = None,
    gravity: float | None = None,
    show_hud: bool | None = None,
    seed: int | None = None,
    init_only: bool = False,
) -> None:
    """落下図形アプリを起動する。

    Parameters
    ----------
    canvas_size : tuple[int, int] | None
        `(width, height)` [px]。None で設定ファイル、無ければ 800×600。
    fps : int | None
        描画更新レート。None で設定ファイルから解決。最終的に 1 以上にクランプ。
    background : str | tuple | None
        背景色（RGBA 0–1 または #RRGGBB/#RRGGBBAA）。None で設定/#96d1e3。
    shape_size : float | None
        形状サイズ。None で `SHAPEFALL_SHAPE_SIZE`（既定 30）。
    spawn_rate : float | None
        初期の生成レート（個/秒）。None で `SHAPEFALL_SPAWN_RATE`（既定 1）。
    gravity : float | None
        初期の重力（フレームあたり px）。None で `SHAPEFALL_GRAVITY`（既定 1.0）。
    show_hud : bool | None
        HUD の有効/無効。None で設定ファイルの `hud.enabled` を尊重。
    seed : int | None
        乱数シード（種類/色/位置/不定形の再現用）。
    init_only : bool
        True で設定解決だけ行い、ウィンドウを開かずに戻る。
    """
    settings = get_settings()
    setup_default_logging(settings.LOG_LEVEL)

    cfg = load_config() or {}
    fps = resolve_fps(fps, cfg)
    width, height = resolve_canvas_size(canvas_size, cfg)
    bg_rgba = resolve_background(background, cfg)
    hud_conf: HUDConfig = resolve_hud_config(show_hud, cfg)
    rate = settings.SPAWN_RATE if spawn_rate is None else spawn_rate
    grav = settings.GRAVITY if gravity is None else gravity
    session = SessionState(spawn_rate=rate, gravity=grav)
    logger.info(
        "shapefall: canvas=%dx%d fps=%d rate=%s gravity=%.1f", width, height, fps, rate, grav
    )

    if init_only:
        return None

    # 遅延インポート（ヘッドレス環境でのウィンドウ生成を避ける）
    import moderngl
    import pyglet
    from pyglet.window import key

    from engine.core.frame_clock import FrameClock
    from engine.core.render_window import RenderWindow
    from engine.render.renderer import FillRenderer
    from engine.runtime.spawn_timer import SpawnTimer
    from engine.ui.overlay import OverlayHUD
    from engine.ui.sampler import StatsSampler

    # ---- Window & ModernGL --------------------------------------
    try:
        window = RenderWindow(width, height, bg_color=bg_rgba)  # type: ignore[abstract]
        mgl_ctx = moderngl.create_context()
    except Exception:
        logger.exception("failed to create window / GL context")
        raise
    mgl_ctx.enable(moderngl.BLEND)
    mgl_ctx.blend_func = (moderngl.SRC_ALPHA, moderngl.ONE_MINUS_SRC_ALPHA)
    renderer = FillRenderer(mgl_ctx, width, height, resolution=settings.CURVE_RESOLUTION)

    # ---- Simulation ---------------------------------------------
    rng = np.random.default_rng(seed)
    spawner = Spawner(session, renderer, shape_size=shape_size, rng=rng)
    ticker = SimulationTicker(session, renderer)
    spawner.spawn()

    spawn_timer = SpawnTimer(spawner.spawn_on_tick, session.spawn_rate)
    unsubscribe_rate = session.subscribe_rate(spawn_timer.set_rate)
    spawn_timer.start()

    # ---- HUD ----------------------------------------------------
    sampler = StatsSampler(
        ticker,
        session,
        interval=hud_conf.sample_interval,
        show_cpu_mem=hud_conf.enabled and hud_conf.show_cpu_mem,
    )
    overlay: OverlayHUD | None = None
    if hud_conf.enabled:
        overlay = OverlayHUD(window, sampler, config=hud_conf)

    def _on_control_change(name: str, value: float) -> None:
        if overlay is not None:
            overlay.show_message(f"{name} -> {value:g}")

    panel = ControlPanel(
        session,
        rate_step=settings.RATE_STEP,
        gravity_step=settings.GRAVITY_STEP,
        on_change=_on_control_change,
    )

    # ---- Draw / input callbacks ---------------------------------
    def _draw_main() -> None:
        renderer.draw()
        if overlay is not None:
            overlay.draw()

    window.add_draw_callback(_draw_main)
    window.add_pointer_callback(spawner.handle_pointer)

    key_actions = {
        key.UP: controls.RATE_UP,
        key.DOWN: controls.RATE_DOWN,
        key.RIGHT: controls.GRAVITY_UP,
        key.LEFT: controls.GRAVITY_DOWN,
    }

    # ---- FrameClock ---------------------------------------------
    tickables: list[Tickable] = [ticker, renderer, sampler]
    if overlay is not None:
        tickables.append(overlay)
    frame_clock = FrameClock(tickables, base_fps=settings.FRAME_DELTA_BASE_FPS)
    pyglet.clock.schedule_interval(frame_clock.tick, 1 / fps)

    # ---- pyglet イベント ----------------------------------------
    # ESC も閉じるボタンと同じく on_close を経由させ、後始末を 1 箇所に集める
    handle_key = make_key_handler(
        key_actions,
        escape_key=key.ESCAPE,
        apply_action=panel.apply,
        request_close=lambda: window.dispatch_event("on_close"),
    )
    close_app = make_close_handler(
        [
            spawn_timer.stop,
            unsubscribe_rate,
            lambda: pyglet.clock.unschedule(frame_clock.tick),
            renderer.release,
        ],
        pyglet.app.exit,
    )

    @window.event
    def on_key_press(sym, mods):  # noqa: ANN001
        if handle_key(sym, mods):
            return pyglet.event.EVENT_HANDLED
        return None

    @window.event
    def on_resize(w, h):  # noqa: ANN001
        renderer.resize(w, h)

    @window.event
    def on_close():  # noqa: ANN001
        close_app()

    try:
        pyglet.app.run()
    except Exception:
        logger.exception("event loop terminated with an error")
        raise


__all__ = ["run_app"]
