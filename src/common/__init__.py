"""
どこで: `common` パッケージ。
何を: 環境変数パース・型付き設定・ロギング初期化・型エイリアスなどの軽量基盤。
なぜ: shapes/engine/api から再利用する共通基盤を分離し、依存の向きを単純化するため。
"""

from .logging import setup_default_logging
from .settings import get as get_settings

__all__ = [
    "get_settings",
    "setup_default_logging",
]
