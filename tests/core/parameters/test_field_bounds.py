"""数値ダイヤルの値域クランプ（`validate`）のテスト。"""

from __future__ import annotations

import math

import pytest

from layerart.core.parameters.bounds import FIELD_BOUNDS, field_bounds, validate

_SAMPLES = [
    -(10**400),
    -1e9,
    -300.5,
    -1.0,
    0.0,
    0.25,
    1.0,
    45.0,
    99.9,
    400.0,
    1e9,
    10**400,
    math.inf,
    -math.inf,
    math.nan,
]


@pytest.mark.parametrize("field", sorted(FIELD_BOUNDS))
def test_validate_stays_within_bounds_and_is_idempotent(field: str) -> None:
    """全フィールド・任意の値で結果が [lower, upper] に入り、2 回目の適用で変わらない。"""
    b = FIELD_BOUNDS[field]
    for value in _SAMPLES:
        once = validate(field, value)
        assert b.lower <= once <= b.upper
        assert validate(field, once) == once


def test_validate_keeps_in_range_values() -> None:
    """値域内の値はそのまま返る。"""
    assert validate("rotation", 45.0) == 45.0
    assert validate("horizontal", -120.5) == -120.5
    assert validate("scale", 1.25) == 1.25


def test_validate_clamps_to_bounds() -> None:
    """値域外の値は上限/下限に寄せる。"""
    assert validate("rotation", 400.0) == 360.0
    assert validate("rotation", -5.0) == 0.0
    assert validate("scale", 3.0) == 2.0
    assert validate("scale", 0.1) == 0.5
    assert validate("layer", 500) == 72.0
    assert validate("primitive", 0) == 1.0
    assert validate("vertical", -1000) == -300.0


def test_validate_nan_goes_to_upper_bound() -> None:
    """NaN は上限として扱う。"""
    assert validate("skewX", math.nan) == 100.0


def test_validate_does_not_raise_for_unparseable_or_unknown() -> None:
    """float 化できない値は 0.0 扱い、未知フィールドは float 化だけする。"""
    assert validate("scale", "abc") == 0.5  # type: ignore[arg-type]
    assert validate("rotation", None) == 0.0  # type: ignore[arg-type]
    assert validate("unknown", 1234) == 1234.0
    assert field_bounds("unknown") is None


def test_layer_and_primitive_are_not_truncated_by_validate() -> None:
    """int 種別でも validate は切り捨てない（消費側で int 化する）。"""
    assert field_bounds("layer").kind == "int"
    assert validate("layer", 10.7) == 10.7


def test_validate_clamps_ints_too_large_for_float() -> None:
    """float に収まらない整数も例外にせず、符号側の境界へ寄せる。"""
    assert validate("rotation", 10**400) == 360.0
    assert validate("rotation", -(10**400)) == 0.0
    assert validate("horizontal", -(10**400)) == -300.0
    assert validate("unknown", 10**400) == math.inf
