"""star / arrow プリミティブのテスト。"""

from __future__ import annotations

import numpy as np
import pytest

from layerart.core.primitives import arrow, star


@pytest.mark.parametrize("points", [0, -2])
def test_star_non_positive_points_is_empty(points: int) -> None:
    assert star((0.0, 0.0), 4.0, 10.0, points).is_empty


def test_star_with_two_points_is_non_empty() -> None:
    path = star((0.0, 0.0), 4.0, 10.0, 2)
    assert not path.is_empty
    assert path.coords.shape == (5, 2)


def test_star_alternates_outer_and_inner_radius() -> None:
    """先端は真上から始まり、外径/内径を交互に取る。"""
    path = star((0.0, 0.0), 4.0, 10.0, 5)
    assert path.coords.shape == (11, 2)
    np.testing.assert_allclose(path.coords[0], [0.0, -10.0], rtol=0.0, atol=1e-9)
    radii = np.hypot(path.coords[:-1, 0], path.coords[:-1, 1])
    np.testing.assert_allclose(radii[0::2], 10.0)
    np.testing.assert_allclose(radii[1::2], 4.0)


def test_star_with_swapped_radii_stays_non_empty() -> None:
    """inner > outer の反転した星も生成できる。"""
    path = star((0.0, 0.0), 10.0, 4.0, 5)
    assert not path.is_empty
    assert path.width > 0.0


@pytest.mark.parametrize("size", [1.0, 10.0, 37.5])
def test_arrow_bbox_matches_size(size: float) -> None:
    """高さ 2*size、幅 1.5*size、中心は指定点。"""
    path = arrow((50.0, 60.0), size)
    assert path.coords.shape == (8, 2)
    assert path.height == pytest.approx(2.0 * size, abs=1.0)
    assert path.width == pytest.approx(1.5 * size, abs=1.0)
    min_x, min_y, max_x, max_y = path.bounds()
    assert (min_x + max_x) / 2.0 == pytest.approx(50.0)
    assert (min_y + max_y) / 2.0 == pytest.approx(60.0)


def test_arrow_tip_points_up() -> None:
    path = arrow((0.0, 0.0), 10.0)
    np.testing.assert_allclose(path.coords[0], [0.0, -10.0])


def test_arrow_stem_width() -> None:
    """軸幅は全幅の 0.3 倍。"""
    path = arrow((0.0, 0.0), 10.0)
    stem = path.coords[2, 0] - path.coords[5, 0]
    assert stem == pytest.approx(0.3 * 15.0)


@pytest.mark.parametrize("size", [0.0, -5.0])
def test_arrow_non_positive_size_is_non_empty(size: float) -> None:
    path = arrow((0.0, 0.0), size)
    assert not path.is_empty
    assert path.height == pytest.approx(abs(2.0 * size))
