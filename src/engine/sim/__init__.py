"""
どこで: `engine.sim` サブパッケージ。
何を: 形状エンティティ・セッション状態・生成器・フレーム更新・統計を提供。
なぜ: 落下シミュレーションの中核を GL/ウィンドウから切り離し、ヘッドレスで検証可能にするため。
"""

from .entity import ShapeEntity
from .session import SessionState
from .spawner import Spawner
from .stats import Stats, compute_stats
from .step import SimulationTicker, advance, destroy

__all__ = [
    "ShapeEntity",
    "SessionState",
    "Spawner",
    "Stats",
    "compute_stats",
    "SimulationTicker",
    "advance",
    "destroy",
]
