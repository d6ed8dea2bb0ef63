"""ShapeKind から基本ジェネレータへのディスパッチのテスト。"""

from __future__ import annotations

import math

import numpy as np
import pytest

from layerart.core.shapes import ShapeKind, build_shape


def test_shape_kind_has_fifteen_members() -> None:
    assert len(ShapeKind) == 15
    assert {k.value for k in ShapeKind} >= {
        "circle",
        "square",
        "rectangle",
        "pentagon",
        "hexagon",
        "octagon",
        "diamond",
        "rhombus",
        "parallelogram",
        "trapezoid",
        "star",
        "arrow",
    }


def test_parse_is_case_insensitive_and_rejects_unknown() -> None:
    assert ShapeKind.parse(" Circle ") is ShapeKind.CIRCLE
    assert ShapeKind.parse("TRAPEZOID") is ShapeKind.TRAPEZOID
    assert ShapeKind.parse("blob") is None


@pytest.mark.parametrize("kind", list(ShapeKind))
def test_every_kind_builds_closed_path_within_radius(kind: ShapeKind) -> None:
    """全種別が中心まわり半径 r に収まる非空の閉パスを返す。"""
    r = 10.0
    path = build_shape(kind, (100.0, 200.0), r)
    assert not path.is_empty
    np.testing.assert_array_equal(path.coords[0], path.coords[-1])
    min_x, min_y, max_x, max_y = path.bounds()
    eps = 1e-9
    assert 100.0 - r - eps <= min_x and max_x <= 100.0 + r + eps
    assert 200.0 - r - eps <= min_y and max_y <= 200.0 + r + eps


def test_square_is_axis_aligned() -> None:
    path = build_shape(ShapeKind.SQUARE, (0.0, 0.0), 10.0)
    assert path.coords.shape == (5, 2)
    assert path.width == pytest.approx(10.0 * math.sqrt(2.0))
    assert path.height == pytest.approx(10.0 * math.sqrt(2.0))


def test_kind_accepts_plain_string_value() -> None:
    path = build_shape("hexagon", (0.0, 0.0), 5.0)  # type: ignore[arg-type]
    assert path.coords.shape == (7, 2)


def test_curved_kinds_follow_segments() -> None:
    path = build_shape(ShapeKind.CIRCLE, (0.0, 0.0), 5.0, segments=16)
    assert path.coords.shape == (17, 2)
