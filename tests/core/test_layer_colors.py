"""レイヤー色の合成（パレット巡回 / 手続き的スペクトル）と色調整のテスト。"""

from __future__ import annotations

import colorsys
import math

import pytest

from layerart.core.colors import (
    adjust_color,
    cyberpunk_rainbow_color,
    half_spectrum_rainbow_color,
    layer_color,
    layer_position,
    palette_color,
    rainbow_color,
    spectrum_hue,
    standard_rainbow_color,
)
from layerart.core.parameters.artwork import ArtworkParameters
from layerart.core.parameters.style import BLACK, RainbowStyle

_POSITIONS = [0, 25, 50, 75, 100]
_ADJUSTMENTS = [-1.0, -0.5, 0.0, 0.5, 1.0]


def _hue(rgb: tuple[float, float, float]) -> float:
    return colorsys.rgb_to_hsv(*rgb)[0]


@pytest.mark.parametrize("style", list(RainbowStyle))
def test_rainbow_functions_are_total(style: RainbowStyle) -> None:
    """全位置・全調整量で 0..1 の有限な RGB を返す。"""
    for position in _POSITIONS:
        for hue_adj in _ADJUSTMENTS:
            for sat_adj in _ADJUSTMENTS:
                rgb = rainbow_color(style, position, hue_adj, sat_adj)
                assert len(rgb) == 3
                for v in rgb:
                    assert math.isfinite(v)
                    assert 0.0 <= v <= 1.0


def test_rainbow_functions_tolerate_out_of_range_input() -> None:
    for fn in (standard_rainbow_color, cyberpunk_rainbow_color, half_spectrum_rainbow_color):
        for v in fn(-50, math.nan, math.inf):
            assert 0.0 <= v <= 1.0
        for v in fn(1000, 5.0, -5.0):
            assert 0.0 <= v <= 1.0
        for v in fn(10**400, 10**400, -(10**400)):
            assert 0.0 <= v <= 1.0


def test_color_functions_tolerate_ints_too_large_for_float() -> None:
    for v in rainbow_color(RainbowStyle.STANDARD, 50, 10**400, 0.0):
        assert 0.0 <= v <= 1.0
    for v in rainbow_color(RainbowStyle.CYBERPUNK, -(10**400), 0.0, 0.0):
        assert 0.0 <= v <= 1.0
    assert adjust_color((1.0, 0.0, 0.0), 10**400, 10**400, False) == adjust_color(
        (1.0, 0.0, 0.0), 0.0, 1.0, False
    )


@pytest.mark.parametrize("position", _POSITIONS)
def test_half_spectrum_span_is_half_of_standard(position: int) -> None:
    standard = spectrum_hue(RainbowStyle.STANDARD, position) - spectrum_hue(RainbowStyle.STANDARD, 0)
    half = spectrum_hue(RainbowStyle.HALF_SPECTRUM, position) - spectrum_hue(
        RainbowStyle.HALF_SPECTRUM, 0
    )
    assert half == pytest.approx(standard / 2.0)


def test_standard_hue_follows_position() -> None:
    assert _hue(standard_rainbow_color(50)) == pytest.approx(0.5, abs=1e-6)
    assert _hue(standard_rainbow_color(25)) == pytest.approx(0.25, abs=1e-6)
    assert _hue(half_spectrum_rainbow_color(50)) == pytest.approx(0.25, abs=1e-6)


def test_cyberpunk_hue_stays_in_cyan_magenta_band() -> None:
    for position in range(0, 101, 10):
        hue = _hue(cyberpunk_rainbow_color(position))
        assert 0.5 - 1e-6 <= hue <= 5.0 / 6.0 + 1e-6


def test_hue_adjustment_wraps_around() -> None:
    assert standard_rainbow_color(0, 1.0) == pytest.approx(standard_rainbow_color(0, 0.0))


def test_full_negative_saturation_adjustment_gives_gray() -> None:
    r, g, b = standard_rainbow_color(30, 0.0, -1.0)
    assert r == pytest.approx(g)
    assert g == pytest.approx(b)


def test_adjust_color_shifts_hue_and_scales_saturation() -> None:
    red = (1.0, 0.0, 0.0)
    assert adjust_color(red, 1.0 / 3.0, 1.0, False) == pytest.approx((0.0, 1.0, 0.0))
    assert adjust_color(red, 0.0, 0.0, False) == pytest.approx((1.0, 1.0, 1.0))
    assert adjust_color(red, 0.0, 1.0, False) == pytest.approx(red)


def test_adjust_color_substitutes_procedural_color() -> None:
    """rainbow フラグが立っていれば元の色相を位置にした手続き的な色で置き換える。"""
    red = (1.0, 0.0, 0.0)
    assert adjust_color(red, 0.0, 1.0, True) == pytest.approx(rainbow_color(RainbowStyle.STANDARD, 0))
    assert adjust_color(red, 0.0, 1.0, True, rainbow_style=RainbowStyle.CYBERPUNK) == pytest.approx(
        rainbow_color(RainbowStyle.CYBERPUNK, 0)
    )


def test_palette_cycles_past_visible_preset_count() -> None:
    """number_of_visible_presets は巡回範囲を制限しない。"""
    presets = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))
    params = ArtworkParameters(
        color_presets=presets, layer_count=7, number_of_visible_presets=1
    ).validated()
    for i in range(7):
        assert layer_color(params, i) == pytest.approx(presets[i % 3])


def test_palette_color_of_empty_presets_is_black() -> None:
    assert palette_color((), 3) == BLACK


def test_layer_position_spans_zero_to_hundred() -> None:
    assert layer_position(0, 5) == 0
    assert layer_position(2, 5) == 50
    assert layer_position(4, 5) == 100
    assert layer_position(0, 1) == 0
    assert layer_position(0, 0) == 0


def test_procedural_mode_uses_layer_position() -> None:
    params = ArtworkParameters(
        use_procedural_rainbow=True,
        rainbow_style=RainbowStyle.HALF_SPECTRUM,
        layer_count=5,
        hue_adjustment=0.1,
    ).validated()
    assert layer_color(params, 2) == pytest.approx(
        rainbow_color(RainbowStyle.HALF_SPECTRUM, 50, 0.1, 0.0)
    )
