"""
どこで: `engine.ui.config`。
何を: HUD 表示の設定（有効/無効・CPU/MEM 表示・フォント・色・サンプリング周期）を定義する。
なぜ: HUD の表示を宣言的に制御し、YAML 設定（`hud:` セクション）から組み立てられるようにするため。
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from .fields import DEFAULT_ORDER


@dataclass(frozen=True)
class HUDConfig:
    """HUD の表示設定。

    Parameters
    ----------
    enabled : bool
        HUD 全体の有効/無効。
    show_cpu_mem : bool
        CPU/MEM 表示の有無（無効時は psutil を使わない）。
    font_name : str | None
        フォント名（None で pyglet 既定）。
    font_size : int
        フォントサイズ。
    text_color : str | tuple
        文字色（Hex / 0..1 / 0..255）。
    sample_interval : float
        FPS/CPU/MEM のサンプリング周期（秒）。
    order : tuple[str, ...]
        表示順（上から）。
    """

    enabled: bool = True
    show_cpu_mem: bool = True
    font_name: str | None = None
    font_size: int = 12
    text_color: Any = (0, 0, 0, 200)
    sample_interval: float = 0.2
    order: tuple[str, ...] = DEFAULT_ORDER

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "HUDConfig":
        """辞書（YAML の `hud:`）から生成する。未知キーは無視する。"""
        if not isinstance(data, Mapping):
            return cls()
        known = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in data.items() if k in known}
        if "order" in kwargs and kwargs["order"] is not None:
            kwargs["order"] = tuple(str(k) for k in kwargs["order"])
        return cls(**kwargs)


__all__ = ["HUDConfig"]
