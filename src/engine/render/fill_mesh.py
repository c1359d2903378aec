"""
どこで: `engine.render` の低レベルメッシュ層。
何を: VBO/VAO の確保・更新・解放を担当し、三角形リストの FillMesh を管理。
なぜ: GPU 転送の詳細を Renderer から切り離し、再確保や VAO の張り直しを一元化するため。
"""

from __future__ import annotations

from typing import Any

import numpy as np

# in_vert (2f) + in_color (4f)
VERTEX_FORMAT = "2f 4f"
FLOATS_PER_VERTEX = 6


class FillMesh:
    """
    GPUに塗りつぶし三角形の頂点（位置 + 色）を送り込む作業を管理
    """

    def __init__(
        self,
        ctx: Any,
        program: Any,
        # 初期GPUメモリ確保量（既定: 1MB）。必要に応じて自動拡張。
        initial_reserve: int = 1024 * 1024,
    ):
        """
        ctx: moderngl コンテキスト
        program: `Shader.create_shader` で作ったプログラム
        VBO: 三角形ごとに展開した頂点（x, y, r, g, b, a）
        VAO: VBO と属性名の対応付け
        """
        self.ctx = ctx
        self.program = program
        self.initial_reserve = initial_reserve

        self.vbo = ctx.buffer(reserve=initial_reserve, dynamic=True)
        self.vao = self._make_vao()
        self.vertex_count: int = 0

    def _make_vao(self) -> Any:
        return self.ctx.vertex_array(
            self.program, [(self.vbo, VERTEX_FORMAT, "in_vert", "in_color")]
        )

    # ---------- バッファ操作 ----------
    def _ensure_capacity(self, vbo_size: int) -> None:
        """データが大きくなったらGPUのバッファを再確保"""
        if vbo_size <= self.vbo.size:
            return
        self.vbo.release()
        self.vao.release()
        self.vbo = self.ctx.buffer(reserve=max(vbo_size, self.vbo.size * 2), dynamic=True)
        # VAO は VBO が差し替わるたびに張り直す
        self.vao = self._make_vao()

    def upload(self, vertices: np.ndarray) -> None:
        """`(V, 6) float32` の頂点をGPUへ送り込む"""
        if vertices.size == 0:
            self.vertex_count = 0
            return
        data = np.ascontiguousarray(vertices, dtype=np.float32)
        self._ensure_capacity(data.nbytes)
        self.vbo.orphan()
        self.vbo.write(data.tobytes())
        self.vertex_count = int(data.shape[0])

    def render(self, mode: int) -> None:
        if self.vertex_count > 0:
            self.vao.render(mode, vertices=self.vertex_count)

    def release(self) -> None:
        """GPUのメモリを解放する（終了時に使う）"""
        self.vbo.release()
        self.vao.release()
