"""
どこで: `engine.sim.step`（1 フレームの物理更新）。
何を: 全形状の Y を `displacement` だけ進め、下端を越えたものを表示面とリストから取り除く。
なぜ: 位置の書き換えをこの関数に限定し、反復中の削除を安全に行う手順を 1 箇所にまとめるため。

手順:
- 末尾から先頭へ走査する（削除しても未処理の index がずれない）。
- 各形状で `y += displacement` → `y > bottom` なら削除。
- `displacement = gravity · frame_delta`。`SimulationTicker` がフレームごとに 1 回呼ぶ。
"""

from __future__ import annotations

import logging

from ..core.display import Display
from .entity import ShapeEntity
from .session import SessionState
from .stats import Stats, compute_stats

logger = logging.getLogger(__name__)


def detach(shape: ShapeEntity, display: Display | None) -> None:
    """表示面から外す（既に外れていれば何もしない）。"""
    handle = shape.handle
    if handle is None:
        return
    shape.handle = None
    if display is not None:
        display.remove_drawable(handle)


def destroy(session: SessionState, display: Display | None, shape: ShapeEntity) -> bool:
    """形状を表示面と `session` の両方から取り除く。

    既に取り除かれていれば何もせず False を返す（二重削除は no-op）。
    """
    removed = session.remove(shape)
    detach(shape, display)
    return removed


def advance(
    shapes: list[ShapeEntity],
    displacement: float,
    bottom: float,
    display: Display | None = None,
) -> list[ShapeEntity]:
    """全形状を `displacement` だけ落下させ、`bottom` を越えたものを除去する。

    Parameters
    ----------
    shapes : list[ShapeEntity]
        生存中の形状（就地で変更する）。
    displacement : float
        今フレームの Y 移動量。
    bottom : float
        下端（キャンバス高さ）。`y > bottom` で除去。
    display : Display | None
        除去した形状の描画を外す表示面。

    Returns
    -------
    list[ShapeEntity]
        除去した形状（走査順 = 新しいものから）。
    """
    culled: list[ShapeEntity] = []
    for i in range(len(shapes) - 1, -1, -1):
        shape = shapes[i]
        shape.position.y += displacement
        if shape.position.y > bottom:
            detach(shape, display)
            del shapes[i]
            culled.append(shape)
    return culled


class SimulationTicker:
    """フレームごとに `advance` を 1 回実行し、直後に統計を再計算する Tickable。"""

    def __init__(self, session: SessionState, display: Display) -> None:
        self.session = session
        self.display = display
        self.stats = Stats()

    def tick(self, dt: float) -> None:
        displacement = self.session.gravity * dt
        culled = advance(self.session.shapes, displacement, self.display.height, self.display)
        if culled and logger.isEnabledFor(logging.DEBUG):
            logger.debug("culled %d shape(s) below y=%s", len(culled), self.display.height)
        self.stats = compute_stats(self.session.shapes)


__all__ = ["advance", "destroy", "detach", "SimulationTicker"]
