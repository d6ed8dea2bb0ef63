"""
どこで: `src/layerart/core/primitives/star.py`。星形プリミティブの実体生成。
何を: 外径/内径を交互に取る 2*points 頂点の閉ポリラインを構築する。
"""

from __future__ import annotations

import numpy as np

from layerart.core.path import ShapePath
from layerart.core.primitives.polygon import Point, ring_points


def star(
    center: Point,
    inner_radius: float,
    outer_radius: float,
    points: int,
) -> ShapePath:
    """星形の閉ポリラインを生成する。

    Parameters
    ----------
    center : tuple[float, float]
        中心 (cx, cy)。
    inner_radius : float
        谷の頂点の半径。
    outer_radius : float
        先端の頂点の半径。inner_radius より小さくてもよい（反転した星になる）。
    points : int
        先端の数。0 以下は空パス。

    Returns
    -------
    ShapePath
        先端（outer_radius）から始まる閉じたポリライン。
    """
    n = int(points)
    if n <= 0:
        return ShapePath.empty()

    total = n * 2
    radii = np.where(
        np.arange(total) % 2 == 0,
        float(outer_radius),
        float(inner_radius),
    )
    return ShapePath.from_vertices(ring_points(center, radii, total))


__all__ = ["star"]
