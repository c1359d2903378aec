"""
どこで: `api` 入口（高レベル公開 API）。
何を: 落下図形アプリの起動関数 `run_app` と、形状生成の補助を再輸出。
なぜ: 利用者が単一名前空間から起動まで完結できるようにするため。

Usage:
    from api import run

    run(canvas_size=(800, 600), spawn_rate=2, gravity=1.4)
"""

from shapes.builder import area_of, build_outline
from shapes.kinds import CATALOGUE, ShapeKind

from .app import run_app
from .app import run_app as run

__all__ = [
    # メインAPI
    "run_app",  # 実行（詳細指定）
    "run",  # 実行（エイリアス、簡易）
    # 形状（高度な使用）
    "ShapeKind",
    "CATALOGUE",
    "build_outline",
    "area_of",
]

# バージョン情報
__version__ = "2026.10"
