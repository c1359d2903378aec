"""
どこで: `common.settings`
何を: シミュレーションの既定値（形状サイズ・生成レート・重力・FPS など）を型付きで一元管理し、起動時に環境変数から読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_float, env_int, env_str


@dataclass
class _Settings:
    # 形状
    SHAPE_SIZE: float = 30.0
    CURVE_RESOLUTION: int = 12

    # 生成/重力
    SPAWN_RATE: int = 1
    RATE_STEP: int = 1
    GRAVITY: float = 1.0
    GRAVITY_STEP: float = 0.2

    # フレーム駆動
    FPS: int = 60
    FRAME_DELTA_BASE_FPS: float = 60.0

    # Misc
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - 数値は下限丸めを適用（サイズ/レート/FPS は正の値のみ意味を持つ）。
    - 不正値は既定値へフォールバック。
    """
    defaults = _Settings()

    _settings.SHAPE_SIZE = (
        env_float("SHAPEFALL_SHAPE_SIZE", defaults.SHAPE_SIZE, min_value=1.0)
        or defaults.SHAPE_SIZE
    )
    _settings.CURVE_RESOLUTION = (
        env_int("SHAPEFALL_CURVE_RESOLUTION", defaults.CURVE_RESOLUTION, min_value=2)
        or defaults.CURVE_RESOLUTION
    )

    _settings.SPAWN_RATE = (
        env_int("SHAPEFALL_SPAWN_RATE", defaults.SPAWN_RATE, min_value=1) or defaults.SPAWN_RATE
    )
    _settings.RATE_STEP = (
        env_int("SHAPEFALL_RATE_STEP", defaults.RATE_STEP, min_value=1) or defaults.RATE_STEP
    )
    gravity = env_float("SHAPEFALL_GRAVITY", defaults.GRAVITY)
    _settings.GRAVITY = defaults.GRAVITY if gravity is None else gravity
    _settings.GRAVITY_STEP = (
        env_float("SHAPEFALL_GRAVITY_STEP", defaults.GRAVITY_STEP, min_value=0.01)
        or defaults.GRAVITY_STEP
    )

    _settings.FPS = env_int("SHAPEFALL_FPS", defaults.FPS, min_value=1) or defaults.FPS
    _settings.FRAME_DELTA_BASE_FPS = (
        env_float("SHAPEFALL_FRAME_DELTA_BASE_FPS", defaults.FRAME_DELTA_BASE_FPS, min_value=1.0)
        or defaults.FRAME_DELTA_BASE_FPS
    )

    _settings.LOG_LEVEL = env_str("SHAPEFALL_LOG_LEVEL", defaults.LOG_LEVEL).upper()


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
