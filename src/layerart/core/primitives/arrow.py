"""
どこで: `src/layerart/core/primitives/arrow.py`。矢印プリミティブの実体生成。
何を: 上向きの矢じり＋軸からなる 7 頂点のシルエットを構築する。
"""

from __future__ import annotations

import numpy as np

from layerart.core.path import ShapePath
from layerart.core.primitives.polygon import Point

STEM_RATIO = 0.3


def arrow(center: Point, size: float) -> ShapePath:
    """上向き矢印の閉ポリラインを生成する。

    Parameters
    ----------
    center : tuple[float, float]
        bbox の中心 (cx, cy)。
    size : float
        大きさ。高さ 2*size、幅 1.5*size、軸幅は幅の 0.3 倍。

    Returns
    -------
    ShapePath
        7 頂点の閉じたポリライン。

    Notes
    -----
    size=0 は面積 0 の（空ではない）パスになる。負の size は上下左右が反転する。
    """
    s = float(size)
    cx, cy = float(center[0]), float(center[1])
    width = s * 1.5
    height = s * 2.0
    stem = width * STEM_RATIO

    half_w = width * 0.5
    half_h = height * 0.5
    half_stem = stem * 0.5

    vertices = np.array(
        [
            [cx, cy - half_h],  # 先端
            [cx + half_w, cy],
            [cx + half_stem, cy],
            [cx + half_stem, cy + half_h],
            [cx - half_stem, cy + half_h],
            [cx - half_stem, cy],
            [cx - half_w, cy],
        ],
        dtype=np.float64,
    )
    return ShapePath.from_vertices(vertices)


__all__ = ["arrow"]
