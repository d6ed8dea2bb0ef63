"""
どこで: `src/layerart/core/colors.py`。
何を: レイヤー色の合成（パレット巡回 / 3 種の手続き的スペクトル）と色調整を提供する。
なぜ: UI 側の共有状態に依存せず、(パラメータ, レイヤー番号) だけから色を決められるようにするため。
"""

from __future__ import annotations

import colorsys
import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from layerart.core.parameters.style import BLACK, ColorRGB, RainbowStyle

if TYPE_CHECKING:
    from layerart.core.parameters.artwork import ArtworkParameters


@dataclass(frozen=True, slots=True)
class HueBand:
    """位置 0..100 を線形に写す色相帯（色相環に対する割合）。"""

    start: float
    span: float


HUE_BANDS: dict[RainbowStyle, HueBand] = {
    RainbowStyle.STANDARD: HueBand(start=0.0, span=1.0),
    # シアン (180°) からマゼンタ (300°) まで。
    RainbowStyle.CYBERPUNK: HueBand(start=0.5, span=1.0 / 3.0),
    RainbowStyle.HALF_SPECTRUM: HueBand(start=0.0, span=0.5),
}


def _clamp01(v: float) -> float:
    if not v > 0.0:
        return 0.0
    return 1.0 if v > 1.0 else v


def _clamp_position(position: float) -> int:
    try:
        p = float(position)
    except OverflowError:
        p = math.inf if position > 0 else -math.inf
    except (TypeError, ValueError):
        return 0
    if math.isnan(p):
        return 0
    return int(round(max(0.0, min(100.0, p))))


def _finite(value: float, default: float = 0.0) -> float:
    try:
        v = float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    return v if math.isfinite(v) else default


def spectrum_hue(style: RainbowStyle, position: int) -> float:
    """位置 position(0..100) に対応する、wrap 前の基準色相を返す。

    standard は色相環全周、half-spectrum はその半分、cyberpunk はシアン〜マゼンタ帯に写す。
    """
    band = HUE_BANDS[RainbowStyle.coerce(style)]
    return band.start + band.span * (_clamp_position(position) / 100.0)


def _hsv(hue: float, saturation: float, brightness: float) -> ColorRGB:
    r, g, b = colorsys.hsv_to_rgb(hue % 1.0, _clamp01(saturation), _clamp01(brightness))
    return float(r), float(g), float(b)


def standard_rainbow_color(
    position: int,
    hue_adjustment: float = 0.0,
    saturation_adjustment: float = 0.0,
) -> ColorRGB:
    """色相環全周を使う標準スペクトルの色を返す。"""
    p = _clamp_position(position)
    angle = p * 0.1
    hue = spectrum_hue(RainbowStyle.STANDARD, p) + _finite(hue_adjustment)
    saturation = min(1.0, max(0.3, 0.9 + 0.1 * math.sin(angle * 0.7)))
    saturation *= 1.0 + _finite(saturation_adjustment)
    brightness = min(1.0, max(0.8, 0.95 + 0.1 * math.cos(angle * 0.3)))
    return _hsv(hue, saturation, brightness)


def cyberpunk_rainbow_color(
    position: int,
    hue_adjustment: float = 0.0,
    saturation_adjustment: float = 0.0,
) -> ColorRGB:
    """シアン〜マゼンタ帯に寄せたスペクトルの色を返す。"""
    p = _clamp_position(position)
    phase = p * 0.05
    hue = spectrum_hue(RainbowStyle.CYBERPUNK, p) + _finite(hue_adjustment)
    saturation = min(1.0, 0.85 + 0.15 * math.sin(phase * 0.5))
    saturation *= 1.0 + _finite(saturation_adjustment)
    bright_phase = 0.5 * math.sin(phase * 1.7) + 0.5 * math.cos(phase * 2.3)
    brightness = min(1.0, 0.85 + 0.15 * bright_phase)
    return _hsv(hue, saturation, brightness)


def half_spectrum_rainbow_color(
    position: int,
    hue_adjustment: float = 0.0,
    saturation_adjustment: float = 0.0,
) -> ColorRGB:
    """色相 0〜180° だけを使うスペクトルの色を返す。"""
    p = _clamp_position(position)
    angle = p * 0.05
    hue = spectrum_hue(RainbowStyle.HALF_SPECTRUM, p) + _finite(hue_adjustment)
    saturation = min(1.0, max(0.3, 0.95 + 0.05 * math.sin(angle * 0.9)))
    saturation *= 1.0 + _finite(saturation_adjustment)
    brightness = min(1.0, max(0.9, 0.95 + 0.05 * math.cos(angle * 0.5)))
    return _hsv(hue, saturation, brightness)


_RAINBOWS = {
    RainbowStyle.STANDARD: standard_rainbow_color,
    RainbowStyle.CYBERPUNK: cyberpunk_rainbow_color,
    RainbowStyle.HALF_SPECTRUM: half_spectrum_rainbow_color,
}


def rainbow_color(
    style: RainbowStyle,
    position: int,
    hue_adjustment: float = 0.0,
    saturation_adjustment: float = 0.0,
) -> ColorRGB:
    """style に応じた手続き的スペクトルの色を返す。

    Parameters
    ----------
    style : RainbowStyle
        スペクトルの種類。
    position : int
        全レイヤーに対する位置 [%]。0..100 外はクランプする。
    hue_adjustment : float, optional
        色相への加算量（色相環に対する割合）。
    saturation_adjustment : float, optional
        彩度倍率 ``1 + saturation_adjustment`` として適用する。

    Returns
    -------
    tuple[float, float, float]
        0..1 float RGB。
    """
    return _RAINBOWS[RainbowStyle.coerce(style)](position, hue_adjustment, saturation_adjustment)


def adjust_color(
    color: ColorRGB,
    hue_shift: float,
    saturation_scale: float,
    use_procedural_rainbow: bool,
    *,
    rainbow_style: RainbowStyle = RainbowStyle.STANDARD,
) -> ColorRGB:
    """単色（ストローク/塗り）に色相シフトと彩度スケールを適用して返す。

    Parameters
    ----------
    color : tuple[float, float, float]
        元の色。
    hue_shift : float
        色相への加算量（色相環に対する割合）。
    saturation_scale : float
        彩度の倍率。結果は 0..1 にクランプする。
    use_procedural_rainbow : bool
        True なら元の色相を位置に読み替えた手続き的スペクトル色で置き換える。
    rainbow_style : RainbowStyle, optional
        置き換えに使うスペクトルの種類。

    Returns
    -------
    tuple[float, float, float]
        調整後の色（不透明度は扱わない）。
    """
    r, g, b = (_clamp01(_finite(v)) for v in color)
    hue, saturation, brightness = colorsys.rgb_to_hsv(r, g, b)
    shift = _finite(hue_shift)
    scale = _finite(saturation_scale, default=1.0)

    if use_procedural_rainbow:
        return rainbow_color(rainbow_style, round(hue * 100.0), shift, scale - 1.0)

    return _hsv(hue + shift, saturation * scale, brightness)


def palette_color(presets: Sequence[ColorRGB], layer_index: int) -> ColorRGB:
    """presets を layer_index で巡回した色を返す。presets が空なら黒。"""
    if not presets:
        return BLACK
    return tuple(presets[int(layer_index) % len(presets)])  # type: ignore[return-value]


def layer_position(layer_index: int, layer_count: int) -> int:
    """レイヤー番号を全体に対する位置 [%]（0..100 の整数）に変換する。"""
    n = int(layer_count)
    if n <= 1:
        return 0
    return _clamp_position(100.0 * int(layer_index) / (n - 1))


def layer_color(params: ArtworkParameters, layer_index: int) -> ColorRGB:
    """検証済みパラメータから layer_index 番目のレイヤーの塗り色を返す。

    use_procedural_rainbow が True なら rainbow_style のスペクトル、
    False なら color_presets の巡回色に色相/彩度調整を掛けたものを使う。
    number_of_visible_presets は巡回範囲を制限しない。
    """
    if params.use_procedural_rainbow:
        position = layer_position(layer_index, int(params.layer_count))
        return rainbow_color(
            params.rainbow_style,
            position,
            params.hue_adjustment,
            params.saturation_adjustment,
        )

    base = palette_color(params.color_presets, layer_index)
    return adjust_color(
        base,
        params.hue_adjustment,
        1.0 + params.saturation_adjustment,
        False,
    )


__all__ = [
    "HUE_BANDS",
    "HueBand",
    "RainbowStyle",
    "adjust_color",
    "cyberpunk_rainbow_color",
    "half_spectrum_rainbow_color",
    "layer_color",
    "layer_position",
    "palette_color",
    "rainbow_color",
    "spectrum_hue",
    "standard_rainbow_color",
]
