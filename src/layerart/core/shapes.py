"""
どこで: `src/layerart/core/shapes.py`。
何を: 図形種別 ShapeKind と、種別から基本ジェネレータへのディスパッチ表を定義する。
なぜ: 名前付き図形を閉じた列挙で扱い、生成ロジックを polygon/star/arrow/ellipse に集約するため。
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

import numpy as np

from layerart.core.path import ShapePath
from layerart.core.primitives import (
    Point,
    arrow,
    capsule,
    circle,
    ellipse,
    polygon,
    star,
)


class ShapeKind(str, Enum):
    """描画できる図形の種別。値はアートワーク文字列の shape トークンと一致する。"""

    CIRCLE = "circle"
    OVAL = "oval"
    TRIANGLE = "triangle"
    SQUARE = "square"
    RECTANGLE = "rectangle"
    PENTAGON = "pentagon"
    HEXAGON = "hexagon"
    OCTAGON = "octagon"
    DIAMOND = "diamond"
    RHOMBUS = "rhombus"
    PARALLELOGRAM = "parallelogram"
    TRAPEZOID = "trapezoid"
    STAR = "star"
    ARROW = "arrow"
    CAPSULE = "capsule"

    @classmethod
    def parse(cls, text: str) -> ShapeKind | None:
        """トークン文字列から ShapeKind を返す。未知の名前は None。"""
        key = str(text).strip().lower()
        for kind in cls:
            if kind.value == key:
                return kind
        return None


ShapeBuilder = Callable[[Point, float, int], ShapePath]

STAR_INNER_RATIO = 0.4
STAR_POINTS = 5


def _quad(center: Point, radius: float, unit: list[tuple[float, float]]) -> ShapePath:
    """単位座標（半径 1 基準）の頂点列を center/radius で配置した閉パスを返す。"""
    xy = np.asarray(unit, dtype=np.float64) * float(radius)
    xy = xy + np.array([float(center[0]), float(center[1])], dtype=np.float64)
    return ShapePath.from_vertices(xy)


def _regular(sides: int, *, phase: float = 0.0) -> ShapeBuilder:
    def build(center: Point, radius: float, segments: int) -> ShapePath:
        return polygon(center, radius, sides, phase=phase)

    return build


def _unit_quad(unit: list[tuple[float, float]]) -> ShapeBuilder:
    def build(center: Point, radius: float, segments: int) -> ShapePath:
        return _quad(center, radius, unit)

    return build


_BUILDERS: dict[ShapeKind, ShapeBuilder] = {
    ShapeKind.CIRCLE: lambda c, r, seg: circle(c, r, segments=seg),
    ShapeKind.OVAL: lambda c, r, seg: ellipse(c, r, r * 0.7, segments=seg),
    ShapeKind.TRIANGLE: _regular(3),
    # 45° ずらして辺を軸に揃える。
    ShapeKind.SQUARE: _regular(4, phase=45.0),
    ShapeKind.PENTAGON: _regular(5),
    ShapeKind.HEXAGON: _regular(6),
    ShapeKind.OCTAGON: _regular(8, phase=180.0 / 8.0),
    ShapeKind.RECTANGLE: _unit_quad([(-1.0, -0.6), (1.0, -0.6), (1.0, 0.6), (-1.0, 0.6)]),
    ShapeKind.DIAMOND: _unit_quad([(0.0, -1.0), (0.7, 0.0), (0.0, 1.0), (-0.7, 0.0)]),
    ShapeKind.RHOMBUS: _unit_quad([(-1.0, 0.0), (0.0, -0.6), (1.0, 0.0), (0.0, 0.6)]),
    ShapeKind.PARALLELOGRAM: _unit_quad(
        [(-0.6, -0.6), (1.0, -0.6), (0.6, 0.6), (-1.0, 0.6)]
    ),
    ShapeKind.TRAPEZOID: _unit_quad([(-0.6, -0.6), (0.6, -0.6), (1.0, 0.6), (-1.0, 0.6)]),
    ShapeKind.STAR: lambda c, r, seg: star(c, r * STAR_INNER_RATIO, r, STAR_POINTS),
    ShapeKind.ARROW: lambda c, r, seg: arrow(c, r),
    ShapeKind.CAPSULE: lambda c, r, seg: capsule(c, 2.0 * r, r, segments=seg // 2),
}


def build_shape(
    kind: ShapeKind,
    center: Point,
    radius: float,
    *,
    segments: int = 64,
) -> ShapePath:
    """ShapeKind に対応する閉パスを生成する。

    Parameters
    ----------
    kind : ShapeKind
        図形種別。
    center : tuple[float, float]
        図形の中心。
    radius : float
        図形の代表半径（外接円相当）。
    segments : int, optional
        曲線形状の分割数。

    Returns
    -------
    ShapePath
        閉じたポリライン。
    """
    return _BUILDERS[ShapeKind(kind)](center, float(radius), int(segments))


__all__ = ["ShapeKind", "build_shape"]
