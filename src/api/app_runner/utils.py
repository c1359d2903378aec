"""
どこで: `api.app_runner.utils`（純粋関数/小ヘルパ）。
何を: FPS・キャンバス寸法・背景色・HUD 設定の解決（引数 > 設定ファイル > 既定）を提供。
なぜ: `api.app` を薄く保ち、ウィンドウを開かずに解決規則をテストできるようにするため。
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from common.settings import get as get_settings
from common.types import RGBA
from engine.ui.config import HUDConfig
from util.color import normalize_color

DEFAULT_CANVAS = (800, 600)
DEFAULT_BACKGROUND = "#96d1e3"


def resolve_fps(requested_fps: int | None, config: Mapping[str, Any] | None = None) -> int:
    """FPS を解決して 1 以上の int を返す。

    - 明示指定があればそれを優先（<=0 は 1 に丸める）。
    - それ以外は設定ファイルの `fps`、無ければ `common.settings` の FPS。
    """
    if requested_fps is not None:
        return max(1, int(requested_fps))
    cfg = config or {}
    raw = cfg.get("fps")
    if raw is not None:
        try:
            return max(1, int(raw))
        except (TypeError, ValueError):
            pass
    return max(1, int(get_settings().FPS))


def resolve_canvas_size(
    canvas_size: tuple[int, int] | None, config: Mapping[str, Any] | None = None
) -> tuple[int, int]:
    """キャンバス [px] を解決する。

    - タプル: `(width, height)` をそのまま（正であることを検証、不正は `ValueError`）
    - None: 設定ファイルの `canvas.width/height`、無ければ 800×600
    """
    if canvas_size is not None:
        try:
            w, h = int(canvas_size[0]), int(canvas_size[1])
        except (TypeError, ValueError, IndexError) as e:
            raise ValueError(f"invalid canvas_size tuple: {canvas_size}") from e
        if w <= 0 or h <= 0:
            raise ValueError(f"canvas_size must be positive, got: {(w, h)}")
        return w, h
    cfg = config or {}
    canvas = cfg.get("canvas", {})
    if not isinstance(canvas, Mapping):
        return DEFAULT_CANVAS
    try:
        w = int(canvas.get("width", DEFAULT_CANVAS[0]))
        h = int(canvas.get("height", DEFAULT_CANVAS[1]))
    except (TypeError, ValueError):
        return DEFAULT_CANVAS
    if w <= 0 or h <= 0:
        return DEFAULT_CANVAS
    return w, h


def resolve_background(background: Any, config: Mapping[str, Any] | None = None) -> RGBA:
    """背景色 RGBA(0–1) を解決する（引数 > 設定 `background` > 既定 #96d1e3）。"""
    if background is not None:
        return normalize_color(background)
    cfg = config or {}
    raw = cfg.get("background")
    if raw is not None:
        try:
            return normalize_color(raw)
        except ValueError:
            pass
    return normalize_color(DEFAULT_BACKGROUND)


def resolve_hud_config(
    show_hud: bool | None, config: Mapping[str, Any] | None = None
) -> HUDConfig:
    """HUD 設定を解決する（優先: show_hud 明示 > 設定 `hud.enabled` > 既定 True）。"""
    cfg = config or {}
    hud_conf = HUDConfig.from_mapping(cfg.get("hud"))
    if show_hud is None:
        return hud_conf
    from dataclasses import replace

    return replace(hud_conf, enabled=bool(show_hud))


def make_close_handler(
    cleanups: list[Callable[[], object]], exit_app: Callable[[], object]
) -> Callable[[], None]:
    """ウィンドウ終了時の後始末を 1 度だけ実行する関数を返す。

    `cleanups` を登録順に呼んだ後 `exit_app` を呼ぶ。2 回目以降は何もしない
    （ESC 経由と閉じるボタン経由の両方から呼ばれ得るため）。
    """
    done = False

    def _close() -> None:
        nonlocal done
        if done:
            return
        done = True
        for fn in cleanups:
            fn()
        exit_app()

    return _close


def make_key_handler(
    key_actions: Mapping[int, str],
    *,
    escape_key: int,
    apply_action: Callable[[str], object],
    request_close: Callable[[], object],
) -> Callable[[int, int], bool]:
    """キー押下ハンドラを返す。処理したキーなら True。

    - `escape_key`: `request_close()`（呼び出し側で `on_close` を dispatch する）
    - `key_actions` に含まれるキー: 対応する操作名で `apply_action(name)`
    """

    def _on_key(symbol: int, modifiers: int) -> bool:
        if symbol == escape_key:
            request_close()
            return True
        action = key_actions.get(symbol)
        if action is None:
            return False
        apply_action(action)
        return True

    return _on_key


__all__ = [
    "resolve_fps",
    "resolve_canvas_size",
    "resolve_background",
    "resolve_hud_config",
    "make_close_handler",
    "make_key_handler",
]
