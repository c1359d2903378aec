"""
描画用の 2D リング集合（`Geometry`）

各形状の輪郭（`shapes.outline`）を折れ線化した閉リングを 1 本の連続配列に詰め、
Renderer が全形状の三角形を 1 回のベクトル演算で組み立てられるようにする。

データモデル（不変条件）:
- `coords: float32 ndarray (N, 2)`: 全頂点を連結した配列（Y 下向き）。
- `offsets: int32 ndarray (M+1,)`: i 本目のリングは `coords[offsets[i] : offsets[i+1]]`。
  先頭は 0、末尾は N、単調非減少。

    # リング0 は 4 点（閉じた三角形）、リング1 は 5 点（閉じた四角形）
    # coords (N=9):   a0 a1 a2 a0 | b0 b1 b2 b3 b0
    # offsets (M+1):  [0, 4, 9]
"""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

LineLike = np.ndarray | Sequence[Sequence[float]]


class Geometry:
    """閉リング（または折れ線）の集合。生成後は配列を書き換えない。"""

    __slots__ = ("coords", "offsets")

    coords: np.ndarray
    offsets: np.ndarray

    def __init__(self, coords: np.ndarray, offsets: np.ndarray) -> None:
        c = np.ascontiguousarray(coords, dtype=np.float32)
        o = np.ascontiguousarray(offsets, dtype=np.int32)
        if c.ndim != 2 or c.shape[1] != 2:
            raise ValueError(f"coords must have shape (N, 2), got {c.shape}")
        if o.ndim != 1 or o.size == 0 or o[0] != 0 or o[-1] != c.shape[0]:
            raise ValueError("offsets must start at 0 and end at len(coords)")
        if np.any(np.diff(o) < 0):
            raise ValueError("offsets must be non-decreasing")
        self.coords = c
        self.offsets = o

    @classmethod
    def from_lines(cls, lines: Iterable[LineLike]) -> "Geometry":
        """`(K, 2)` 座標列の並びから生成する。"""
        arrays = [np.asarray(line, dtype=np.float32) for line in lines]
        for arr in arrays:
            if arr.ndim != 2 or arr.shape[1] != 2:
                raise ValueError(f"each line must have shape (K, 2), got {arr.shape}")
        if not arrays:
            return cls(np.empty((0, 2), dtype=np.float32), np.zeros(1, dtype=np.int32))
        offsets = np.concatenate([[0], np.cumsum([a.shape[0] for a in arrays])])
        return cls(np.concatenate(arrays, axis=0), offsets)

    # ---- 参照 ----
    @property
    def is_empty(self) -> bool:
        return self.coords.shape[0] == 0

    def __len__(self) -> int:
        """リング本数。"""
        return int(self.offsets.shape[0] - 1)

    @property
    def n_vertices(self) -> int:
        return int(self.coords.shape[0])

    def counts(self) -> np.ndarray:
        """各リングの頂点数 `(M,)`。"""
        return np.diff(self.offsets).astype(np.int64)

    def ring_index(self) -> np.ndarray:
        """頂点ごとの所属リング番号 `(N,)`。"""
        return np.repeat(np.arange(len(self), dtype=np.int64), self.counts())

    def edge_starts(self) -> np.ndarray:
        """辺の始点になる頂点 index（各リングの最終頂点を除く全頂点）。

        辺 `k` は `coords[s[k]] → coords[s[k] + 1]`。
        """
        is_start = np.ones(self.n_vertices, dtype=bool)
        counts = self.counts()
        is_start[self.offsets[1:][counts > 0] - 1] = False
        return np.nonzero(is_start)[0]

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return f"Geometry(N={self.n_vertices}, M={len(self)})"


__all__ = ["Geometry"]
