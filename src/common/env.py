"""
どこで: `common.env`
何を: 環境変数の軽量パースヘルパを提供。
なぜ: 設定読込で `os.getenv` + 例外/境界ガードを毎回書かずに済ませるため。
"""

from __future__ import annotations

import os
from typing import Optional


def env_int(
    name: str, default: Optional[int] = None, *, min_value: Optional[int] = None
) -> Optional[int]:
    """整数環境変数を取得（存在しない/不正値は既定値）。

    Parameters
    ----------
    name : str
        環境変数名。
    default : Optional[int]
        既定値（`None` を渡すと `None` を許容）。
    min_value : Optional[int]
        下限（指定時、結果が下回れば下限に丸める）。

    Returns
    -------
    Optional[int]
        取得した整数値。未設定/不正時は `default` を返す。
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        val = int(raw)
    except ValueError:
        return default
    if min_value is not None and val < min_value:
        val = min_value
    return val


def env_float(
    name: str, default: Optional[float] = None, *, min_value: Optional[float] = None
) -> Optional[float]:
    """浮動小数環境変数を取得（`env_int` の float 版）。"""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    if min_value is not None and val < min_value:
        val = min_value
    return val


def env_str(name: str, default: str) -> str:
    """文字列環境変数を取得（空文字は未設定扱い）。"""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()
