"""
どこで: `src/layerart/core/primitives/polygon.py`。正多角形プリミティブの実体生成。
何を: 円周上の等間隔配置（ring_points）と、それを閉じた正多角形パスを構築する。
なぜ: star やレイヤー内の複製配置と同じ角度配置ロジックを共有するため。
"""

from __future__ import annotations

import math

import numpy as np

from layerart.core.path import ShapePath

Point = tuple[float, float]

# 先頭頂点は真上（y 下向き座標で -90°）。
START_ANGLE_DEG = -90.0


def ring_points(
    center: Point,
    radius: float | np.ndarray,
    count: int,
    *,
    phase: float = 0.0,
) -> np.ndarray:
    """円周上に count 個の点を等間隔に並べて返す。

    Parameters
    ----------
    center : tuple[float, float]
        円の中心 (cx, cy)。
    radius : float or np.ndarray
        半径。shape (count,) の配列を渡すと点ごとに半径を変えられる。
    count : int
        点の数。0 以下なら空配列を返す。
    phase : float, optional
        開始角への加算量 [deg]。0 のとき先頭点は真上。

    Returns
    -------
    np.ndarray
        float64 型 shape (count, 2) の点列。
    """
    n = int(count)
    if n <= 0:
        return np.zeros((0, 2), dtype=np.float64)

    step = 2.0 * math.pi / n
    angles = np.arange(n, dtype=np.float64) * step + math.radians(START_ANGLE_DEG + float(phase))
    r = np.asarray(radius, dtype=np.float64)
    cx, cy = float(center[0]), float(center[1])
    x = cx + r * np.cos(angles)
    y = cy + r * np.sin(angles)
    return np.stack([x, y], axis=1)


def polygon(
    center: Point,
    radius: float,
    sides: int,
    *,
    phase: float = 0.0,
) -> ShapePath:
    """正多角形の閉ポリラインを生成する。

    Parameters
    ----------
    center : tuple[float, float]
        中心 (cx, cy)。
    radius : float
        外接円の半径。
    sides : int
        辺の数。0 以下は空パス。1, 2 は特別扱いせず退化した形状になる。
    phase : float, optional
        頂点開始角への加算量 [deg]。

    Returns
    -------
    ShapePath
        開始点を終端に重ねた閉じたポリライン。
    """
    return ShapePath.from_vertices(ring_points(center, radius, sides, phase=phase))


__all__ = ["Point", "START_ANGLE_DEG", "polygon", "ring_points"]
