"""
どこで: `src/layerart/core/primitives/ellipse.py`。円・楕円・カプセルの実体生成。
何を: 中心・半径・分割数から曲線形状を折れ線近似した閉ポリラインを構築する。
なぜ: 曲線も多角形と同じ ShapePath で扱い、変換/出力の経路を 1 本にするため。
"""

from __future__ import annotations

import math

import numpy as np

from layerart.core.path import ShapePath
from layerart.core.primitives.polygon import Point

MIN_SEGMENTS = 4


def _segments(segments: int) -> int:
    # 4 の倍数でないと bbox が半径と一致しないので切り上げる。
    n = max(MIN_SEGMENTS, int(segments))
    return n + (-n % 4)


def ellipse(
    center: Point,
    radius_x: float,
    radius_y: float,
    *,
    segments: int = 64,
) -> ShapePath:
    """楕円の閉ポリラインを生成する。

    Parameters
    ----------
    center : tuple[float, float]
        中心 (cx, cy)。
    radius_x, radius_y : float
        x/y 方向の半径。
    segments : int, optional
        近似に用いる分割数。4 未満は 4 に、4 の倍数でなければ切り上げる。

    Returns
    -------
    ShapePath
        bbox が中心に対して対称な閉じたポリライン。
    """
    n = _segments(segments)
    angles = np.linspace(0.0, 2.0 * math.pi, num=n, endpoint=False)
    cx, cy = float(center[0]), float(center[1])
    x = cx + float(radius_x) * np.cos(angles)
    y = cy + float(radius_y) * np.sin(angles)
    return ShapePath.from_vertices(np.stack([x, y], axis=1))


def circle(
    center: Point,
    radius: float,
    scale: float = 1.0,
    *,
    segments: int = 64,
) -> ShapePath:
    """円の閉ポリラインを生成する。

    bbox は幅・高さとも ``2 * radius * scale`` で、中心は center に一致する。
    """
    r = float(radius) * float(scale)
    return ellipse(center, r, r, segments=segments)


def capsule(
    center: Point,
    width: float,
    height: float,
    *,
    segments: int = 32,
) -> ShapePath:
    """水平方向に伸びたカプセル（スタジアム）形の閉ポリラインを生成する。

    短辺の半分を端の半円の半径とし、残りを直線部にする。
    width <= height のときは直線部 0 の円になる。
    """
    w = abs(float(width))
    h = abs(float(height))
    r = min(w, h) * 0.5
    straight = max(w * 0.5 - r, 0.0)
    cx, cy = float(center[0]), float(center[1])

    half = max(2, _segments(segments) // 2)
    # 右端の半円（-90°→90°）、左端の半円（90°→270°）の順に辿る。
    right = np.linspace(-0.5 * math.pi, 0.5 * math.pi, num=half + 1)
    left = np.linspace(0.5 * math.pi, 1.5 * math.pi, num=half + 1)

    right_xy = np.stack([cx + straight + r * np.cos(right), cy + r * np.sin(right)], axis=1)
    left_xy = np.stack([cx - straight + r * np.cos(left), cy + r * np.sin(left)], axis=1)
    return ShapePath.from_vertices(np.concatenate([right_xy, left_xy], axis=0))


__all__ = ["capsule", "circle", "ellipse"]
