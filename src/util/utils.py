"""
どこで: `util.utils`（設定ファイル読込）。
何を: `configs/default.yaml` → ルート `config.yaml` → `SHAPEFALL_CONFIG` の順に YAML を重ねた辞書を返す。
なぜ: キャンバス/背景/FPS/HUD の既定値をコード外で調整でき、壊れた設定でも起動を止めないため。
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping

import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV = "SHAPEFALL_CONFIG"


def _read_yaml_mapping(path: Path) -> Dict[str, Any]:
    """YAML を読み、トップレベルが辞書でなければ空辞書（読めない場合も空）。"""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.warning("config not readable: %s (%s)", path, e)
        return {}
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        logger.warning("config ignored, invalid YAML: %s (%s)", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("config ignored, top level is not a mapping: %s", path)
        return {}
    return data


def _overlay(base: Dict[str, Any], extra: Mapping[str, Any]) -> None:
    """`extra` を `base` に重ねる。辞書同士のセクションは 1 段だけキー単位で混ぜる。"""
    for key, value in extra.items():
        current = base.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            merged = dict(current)
            merged.update(value)
            base[key] = merged
        else:
            base[key] = value


def _config_root(start: Path) -> Path:
    # <repo>/src/util/utils.py から上へ辿り、configs/ か pyproject.toml のある最寄りを採用
    for parent in [start] + list(start.parents):
        if (parent / "configs").is_dir() or (parent / "pyproject.toml").exists():
            return parent
    return start.parent.parent


def _candidate_files(root: Path) -> Iterable[Path]:
    yield root / "configs" / "default.yaml"
    yield root / "config.yaml"
    extra = os.getenv(CONFIG_ENV)
    if extra:
        yield Path(extra).expanduser()


def load_config(root: Path | None = None) -> Dict[str, Any]:
    """設定辞書を返す（フェイルソフト）。

    - 後に読むファイルほど優先。存在しないファイルは黙って飛ばす。
    - `canvas:` や `hud:` のようなセクションは、上書き側にあるキーだけが置き換わる。
    - どれも読めなければ空辞書。
    """
    project_root = root if root is not None else _config_root(Path(__file__).resolve().parent)
    config: Dict[str, Any] = {}
    for path in _candidate_files(project_root):
        if path.is_file():
            _overlay(config, _read_yaml_mapping(path))
    return config


__all__ = ["load_config", "CONFIG_ENV"]
