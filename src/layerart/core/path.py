# どこで: `src/layerart/core/path.py`。
# 何を: 閉ポリライン列 ShapePath のモデルと連結・変換・bbox ユーティリティ。
# なぜ: 形状生成・レイヤー合成・SVG 出力で同じ頂点表現を共有するため。

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True)
class ShapePath:
    """閉じたポリラインの集合を表現する 2D パス。

    Parameters
    ----------
    coords : np.ndarray
        float64 型 shape (N, 2) の頂点配列。
    offsets : np.ndarray
        int32 型 shape (M+1,) のポリライン開始インデックス配列。

    Notes
    -----
    各ポリラインは先頭頂点を終端に重ねて閉じる。
    頂点 0 個のパスを「空パス」とし、offsets は ``[0]`` になる。
    配列は writeable=False で保持する。
    """

    coords: np.ndarray
    offsets: np.ndarray

    def __post_init__(self) -> None:
        """配列形状と整合性を検証し、不変条件を満たす形に固定する。"""
        coords = np.asarray(self.coords, dtype=np.float64)
        offsets = np.asarray(self.offsets, dtype=np.int32)

        if coords.size == 0:
            coords = coords.reshape(0, 2)
        if coords.ndim != 2 or coords.shape[1] != 2:
            raise ValueError("coords は shape (N,2) の 2 次元配列である必要がある")
        if offsets.ndim != 1 or offsets.size == 0:
            raise ValueError("offsets は 1 要素以上の 1 次元配列である必要がある")
        if offsets[0] != 0:
            raise ValueError("offsets[0] は 0 である必要がある")
        if offsets[-1] != coords.shape[0]:
            raise ValueError("offsets[-1] は coords 行数と一致する必要がある")
        if np.any(np.diff(offsets) < 0):
            raise ValueError("offsets は単調非減少である必要がある")

        coords.setflags(write=False)
        offsets.setflags(write=False)

        object.__setattr__(self, "coords", coords)
        object.__setattr__(self, "offsets", offsets)

    @classmethod
    def empty(cls) -> ShapePath:
        """頂点を持たない空パスを返す。"""
        return cls(
            coords=np.zeros((0, 2), dtype=np.float64),
            offsets=np.zeros((1,), dtype=np.int32),
        )

    @classmethod
    def from_vertices(cls, vertices: np.ndarray) -> ShapePath:
        """頂点列 (N,2) を 1 本の閉ポリラインとして返す。N=0 なら空パス。"""
        xy = np.asarray(vertices, dtype=np.float64).reshape(-1, 2)
        if xy.shape[0] == 0:
            return cls.empty()
        # 先頭頂点を終端に複製してポリラインを閉じる。
        closed = np.concatenate([xy, xy[:1]], axis=0)
        offsets = np.array([0, closed.shape[0]], dtype=np.int32)
        return cls(coords=closed, offsets=offsets)

    @property
    def is_empty(self) -> bool:
        return self.coords.shape[0] == 0

    @property
    def n_polylines(self) -> int:
        return int(self.offsets.size - 1)

    def polylines(self) -> Iterator[np.ndarray]:
        """各ポリラインの頂点配列（shape (K,2)）を順に返す。"""
        for start, end in zip(self.offsets[:-1], self.offsets[1:]):
            start_i = int(start)
            end_i = int(end)
            if end_i > start_i:
                yield self.coords[start_i:end_i]

    def bounds(self) -> tuple[float, float, float, float] | None:
        """(min_x, min_y, max_x, max_y) を返す。空パスなら None。"""
        if self.is_empty:
            return None
        mins = self.coords.min(axis=0)
        maxs = self.coords.max(axis=0)
        return float(mins[0]), float(mins[1]), float(maxs[0]), float(maxs[1])

    @property
    def width(self) -> float:
        b = self.bounds()
        return 0.0 if b is None else b[2] - b[0]

    @property
    def height(self) -> float:
        b = self.bounds()
        return 0.0 if b is None else b[3] - b[1]

    def transformed(self, matrix: np.ndarray) -> ShapePath:
        """3x3 同次座標アフィン行列を適用したパスを返す。

        Parameters
        ----------
        matrix : np.ndarray
            shape (3,3) の行列。最下行は (0, 0, 1) を想定する。

        Returns
        -------
        ShapePath
            変換後のパス。offsets は共有する。
        """
        if self.is_empty:
            return self
        m = np.asarray(matrix, dtype=np.float64)
        linear = m[:2, :2]
        shift = m[:2, 2]
        coords = self.coords @ linear.T + shift
        return ShapePath(coords=coords, offsets=self.offsets)


def concat_paths(*paths: ShapePath) -> ShapePath:
    """複数の ShapePath を連結して 1 つにまとめる。

    空パスは結果に何も寄与しない。全て空（または引数なし）なら空パスを返す。
    """
    non_empty = [p for p in paths if not p.is_empty]
    if not non_empty:
        return ShapePath.empty()
    if len(non_empty) == 1:
        return non_empty[0]

    total_coords = np.concatenate([p.coords for p in non_empty], axis=0)

    new_offsets: list[int] = [0]
    offset_base = 0
    for p in non_empty:
        # 先頭 0 を除いた差分部分だけをシフトして足し込む。
        new_offsets.extend((p.offsets[1:] + offset_base).tolist())
        offset_base += int(p.offsets[-1])

    return ShapePath(
        coords=total_coords,
        offsets=np.asarray(new_offsets, dtype=np.int32),
    )


__all__ = ["ShapePath", "concat_paths"]
