"""ShapePath の不変条件と連結・変換のテスト。"""

from __future__ import annotations

import numpy as np
import pytest

from layerart.core.path import ShapePath, concat_paths
from layerart.core.transform import translate


def _triangle(offset: float = 0.0) -> ShapePath:
    return ShapePath.from_vertices(
        np.array([[0.0, 0.0], [10.0, 0.0], [0.0, 10.0]], dtype=np.float64) + offset
    )


def test_from_vertices_closes_polyline() -> None:
    path = _triangle()
    assert path.coords.shape == (4, 2)
    assert path.offsets.tolist() == [0, 4]
    assert path.n_polylines == 1
    np.testing.assert_array_equal(path.coords[0], path.coords[-1])


def test_arrays_are_read_only() -> None:
    path = _triangle()
    assert not path.coords.flags.writeable
    assert not path.offsets.flags.writeable
    with pytest.raises(ValueError):
        path.coords[0, 0] = 1.0


def test_empty_path() -> None:
    empty = ShapePath.empty()
    assert empty.is_empty
    assert empty.offsets.tolist() == [0]
    assert empty.bounds() is None
    assert empty.width == 0.0
    assert list(empty.polylines()) == []
    assert ShapePath.from_vertices(np.zeros((0, 2))).is_empty


@pytest.mark.parametrize(
    ("coords", "offsets"),
    [
        (np.zeros((3, 3)), [0, 3]),
        (np.zeros((3, 2)), [1, 3]),
        (np.zeros((3, 2)), [0, 2]),
        (np.zeros((3, 2)), [0, 2, 1, 3]),
        (np.zeros((3, 2)), []),
    ],
)
def test_invalid_arrays_raise(coords: np.ndarray, offsets: list[int]) -> None:
    with pytest.raises(ValueError):
        ShapePath(coords=coords, offsets=np.asarray(offsets, dtype=np.int32))


def test_concat_paths_skips_empty_and_shifts_offsets() -> None:
    merged = concat_paths(_triangle(), ShapePath.empty(), _triangle(100.0))
    assert merged.n_polylines == 2
    assert merged.offsets.tolist() == [0, 4, 8]
    assert len(list(merged.polylines())) == 2
    assert merged.bounds() == (0.0, 0.0, 110.0, 110.0)


def test_concat_paths_without_inputs_is_empty() -> None:
    assert concat_paths().is_empty
    assert concat_paths(ShapePath.empty(), ShapePath.empty()).is_empty


def test_transformed_applies_affine_matrix() -> None:
    moved = _triangle().transformed(translate(5.0, -5.0))
    assert moved.bounds() == (5.0, -5.0, 15.0, 5.0)
    assert moved.offsets.tolist() == [0, 4]
    assert ShapePath.empty().transformed(translate(1.0, 1.0)).is_empty
