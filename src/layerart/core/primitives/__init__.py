# どこで: `src/layerart/core/primitives/__init__.py`。
# 何を: 基本図形ジェネレータ（polygon/star/arrow/ellipse 系）を再エクスポートする。

from __future__ import annotations

from .arrow import arrow
from .ellipse import capsule, circle, ellipse
from .polygon import Point, polygon, ring_points
from .star import star

__all__ = [
    "Point",
    "arrow",
    "capsule",
    "circle",
    "ellipse",
    "polygon",
    "ring_points",
    "star",
]
