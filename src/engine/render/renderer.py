"""
どこで: `engine.render` の高レベル描画（`Display` 実装）。
何を: 登録された形状の輪郭を三角形ファンに展開し、現在位置へ平行移動して ModernGL で塗りつぶし描画。
なぜ: 形状の追加/削除/位置追従と、毎フレームのアップロード/描画/リソース寿命を一箇所に集約するため。

描画モデル:
- 輪郭は登録時に一度だけ折れ線化（`outline.flatten`）し、原点中心のファン三角形にしておく。
- 毎フレームは各形状の `position`（エンティティと共有）を足すだけで全頂点を作り直す。
- 全形状の輪郭は原点に対して星形（多角形/楕円/不定形）なので、原点からのファンで正しく塗れる。
- 描画順は登録順（新しい形状が手前）。
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Any

import moderngl as mgl
import numpy as np

from common.types import RGB24, RGBA, Position
from engine.core.geometry import Geometry
from shapes.outline import Outline
from util.color import rgb24_to_rgba

from ..core.tickable import Tickable


@dataclass
class _Drawable:
    ring: np.ndarray  # (K, 2) 閉じた折れ線（原点基準）
    color: RGBA
    position: Position


def canvas_projection(width: float, height: float) -> np.ndarray:
    """キャンバス座標（左上原点・Y 下向き, px）→ クリップ空間の正射影行列（列優先 f4）。"""
    return np.array(
        [
            [2 / width, 0, 0, -1],
            [0, -2 / height, 0, 1],
            [0, 0, -1, 0],
            [0, 0, 0, 1],
        ],
        dtype="f4",
    ).T  # 転置を適用


def fan_triangles(geometry: Geometry) -> tuple[np.ndarray, np.ndarray]:
    """各リングを原点からのファン三角形に展開する。

    Parameters
    ----------
    geometry : Geometry
        閉じたリングの集合（原点基準）。

    Returns
    -------
    tuple[np.ndarray, np.ndarray]
        `(vertices (3T, 2) float32, owner (3T,) int64)`。`owner` は各頂点が属するリング番号。
    """
    if geometry.is_empty:
        return np.empty((0, 2), dtype=np.float32), np.empty((0,), dtype=np.int64)

    coords = geometry.coords
    a_idx = geometry.edge_starts()
    tris = np.zeros((a_idx.shape[0], 3, 2), dtype=np.float32)
    tris[:, 1, :] = coords[a_idx]
    tris[:, 2, :] = coords[a_idx + 1]
    owner = np.repeat(geometry.ring_index()[a_idx], 3)
    return tris.reshape(-1, 2), owner


class FillRenderer(Tickable):
    """
    形状ドローアブルを保持し、毎フレーム頂点を組み立てて GPU に送る。
    `engine.core.display.Display` を満たす。
    """

    def __init__(
        self,
        mgl_context: Any,
        width: float,
        height: float,
        *,
        resolution: int = 12,
    ):
        self.ctx = mgl_context
        self._logger = logging.getLogger(__name__)
        self._width = float(width)
        self._height = float(height)
        self._resolution = int(resolution)

        # 遅延 import（optional 依存のない環境でも import 可能にするため）
        from .fill_mesh import FillMesh  # local import
        from .shader import Shader  # local import

        self.program = Shader.create_shader(mgl_context)
        self.program["projection"].write(canvas_projection(width, height).tobytes())
        self.gpu = FillMesh(ctx=mgl_context, program=self.program)

        self._drawables: dict[int, _Drawable] = {}
        self._ids = itertools.count(1)
        self._dirty = True
        self._fan_local = np.empty((0, 2), dtype=np.float32)
        self._fan_owner = np.empty((0,), dtype=np.int64)
        self._fan_colors = np.empty((0, 4), dtype=np.float32)

    # ---- Display ----
    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    def add_drawable(self, outline: Outline, color: RGB24, position: Position) -> int:
        handle = next(self._ids)
        self._drawables[handle] = _Drawable(
            ring=outline.flatten(self._resolution),
            color=rgb24_to_rgba(color),
            position=position,
        )
        self._dirty = True
        return handle

    def remove_drawable(self, handle: Any) -> None:
        if self._drawables.pop(handle, None) is not None:
            self._dirty = True

    def __len__(self) -> int:
        return len(self._drawables)

    # ---- サイズ変更 ----
    def resize(self, width: float, height: float) -> None:
        """キャンバス寸法と投影行列を更新する（以後の下端判定/生成位置にも反映）。"""
        self._width = float(width)
        self._height = float(height)
        self.program["projection"].write(canvas_projection(width, height).tobytes())

    # --------------------------------------------------------------------- #
    # Tickable                                                               #
    # --------------------------------------------------------------------- #
    def tick(self, dt: float) -> None:
        """毎フレーム呼ばれ、現在位置で頂点を作り直して GPU へ転送。"""
        if self._dirty:
            self._rebuild()
        vertices = self.build_vertices()
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug(
                "Uploading fill: shapes=%d verts=%d", len(self._drawables), len(vertices)
            )
        self.gpu.upload(vertices)

    def build_vertices(self) -> np.ndarray:
        """`(V, 6) float32`（x, y, r, g, b, a）の三角形リスト。"""
        if self._fan_local.shape[0] == 0:
            return np.empty((0, 6), dtype=np.float32)
        centers = np.array(
            [(d.position.x, d.position.y) for d in self._drawables.values()], dtype=np.float32
        )
        xy = self._fan_local + centers[self._fan_owner]
        return np.hstack([xy, self._fan_colors]).astype(np.float32, copy=False)

    def _rebuild(self) -> None:
        drawables = list(self._drawables.values())
        geometry = Geometry.from_lines([d.ring for d in drawables])
        self._fan_local, self._fan_owner = fan_triangles(geometry)
        colors = np.array([d.color for d in drawables], dtype=np.float32).reshape(-1, 4)
        self._fan_colors = colors[self._fan_owner] if len(drawables) else colors
        self._dirty = False

    # --------------------------------------------------------------------- #
    # Public drawing API                                                    #
    # --------------------------------------------------------------------- #
    def draw(self) -> None:
        """GPUに送ったデータを画面に描画"""
        self.gpu.render(mgl.TRIANGLES)

    def release(self) -> None:
        """GPU リソースを解放。"""
        self.gpu.release()
        self.program.release()


__all__ = ["FillRenderer", "fan_triangles", "canvas_projection"]
