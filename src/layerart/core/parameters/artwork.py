# どこで: `src/layerart/core/parameters/artwork.py`。
# 何を: アートワーク 1 枚分のパラメータ ArtworkParameters と、復号済み文字列 mapping からの復元を定義する。
# なぜ: UI パネル間で共有していた色/ストローク設定も含め、カーネルへ明示的な値として渡すため。

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable

from layerart.core.shapes import ShapeKind

from .bounds import validate
from .style import (
    BLACK,
    DEFAULT_PALETTE,
    WHITE,
    ColorRGB,
    RainbowStyle,
    hex_to_rgb01,
)

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ArtworkParameters:
    """アートワークを決める全ダイヤル。

    数値フィールドは float で保持する。layer_count / primitive_count /
    number_of_visible_presets は消費側で int に切り捨てる。
    値域は `validated()` で保証する（コンストラクタ自体はクランプしない）。
    """

    shape: ShapeKind = ShapeKind.CIRCLE
    rotation: float = 0.0
    scale: float = 1.0
    layer_count: float = 1.0
    skew_x: float = 0.0
    skew_y: float = 0.0
    spread: float = 0.0
    horizontal: float = 0.0
    vertical: float = 0.0
    primitive_count: float = 1.0
    color_presets: tuple[ColorRGB, ...] = field(default=DEFAULT_PALETTE)
    background_color: ColorRGB = WHITE
    use_procedural_rainbow: bool = False
    rainbow_style: RainbowStyle = RainbowStyle.STANDARD
    hue_adjustment: float = 0.0
    saturation_adjustment: float = 0.0
    number_of_visible_presets: float = 5.0
    stroke_color: ColorRGB = BLACK
    stroke_width: float = 2.0
    shape_alpha: float = 1.0

    def validated(self) -> ArtworkParameters:
        """全数値フィールドを値域にクランプしたコピーを返す。

        color_presets が空なら既定パレットで置き換える。冪等。
        """
        updates: dict[str, Any] = {
            attr: validate(key, getattr(self, attr)) for attr, key in NUMERIC_FIELDS.items()
        }
        updates["shape"] = ShapeKind.parse(getattr(self.shape, "value", self.shape)) or ShapeKind.CIRCLE
        style = self.rainbow_style
        if not isinstance(style, str):
            style = int(validate("rainbowStyle", style))
        updates["rainbow_style"] = RainbowStyle.coerce(style)
        updates["use_procedural_rainbow"] = bool(self.use_procedural_rainbow)
        presets = tuple(tuple(float(v) for v in c) for c in self.color_presets)
        updates["color_presets"] = presets or DEFAULT_PALETTE
        return replace(self, **updates)

    @property
    def n_layers(self) -> int:
        return int(self.layer_count)

    @property
    def n_primitives(self) -> int:
        return int(self.primitive_count)


# 属性名 -> アートワーク文字列のキー名
NUMERIC_FIELDS: dict[str, str] = {
    "rotation": "rotation",
    "scale": "scale",
    "layer_count": "layer",
    "skew_x": "skewX",
    "skew_y": "skewY",
    "spread": "spread",
    "horizontal": "horizontal",
    "vertical": "vertical",
    "primitive_count": "primitive",
    "hue_adjustment": "hueAdj",
    "saturation_adjustment": "satAdj",
    "number_of_visible_presets": "presetCount",
    "stroke_width": "strokeWidth",
    "shape_alpha": "alpha",
}


def _parse_float(text: str) -> float | None:
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _parse_bool(text: str) -> bool | None:
    key = text.strip().lower()
    if key in ("true", "1", "yes"):
        return True
    if key in ("false", "0", "no"):
        return False
    return None


def _parse_style(text: str) -> RainbowStyle | None:
    value = _parse_float(text)
    if value is not None:
        return RainbowStyle.coerce(int(validate("rainbowStyle", value)))
    key = text.strip().replace("-", "_").upper()
    if key in RainbowStyle.__members__ or key == "HALFSPECTRUM":
        return RainbowStyle.coerce(text)
    return None


def _parse_palette(text: str) -> tuple[ColorRGB, ...] | None:
    # 循環 import を避けるため codec は関数内で読む。
    from .codec import reconstruct_colors

    colors = reconstruct_colors(text)
    return tuple(colors) if colors else None


_PARSERS: dict[str, tuple[str, Callable[[str], Any]]] = {
    "shape": ("shape", ShapeKind.parse),
    "colors": ("color_presets", _parse_palette),
    "background": ("background_color", hex_to_rgb01),
    "useRainbow": ("use_procedural_rainbow", _parse_bool),
    "rainbowStyle": ("rainbow_style", _parse_style),
    "strokeColor": ("stroke_color", hex_to_rgb01),
}
_PARSERS.update({key: (attr, _parse_float) for attr, key in NUMERIC_FIELDS.items()})


def params_from_decoded(
    decoded: Mapping[str, str],
    *,
    base: ArtworkParameters | None = None,
) -> ArtworkParameters:
    """復号済みの文字列 mapping から ArtworkParameters を組み立てる。

    Parameters
    ----------
    decoded : Mapping[str, str]
        `decode_artwork` の戻り値。
    base : ArtworkParameters or None, optional
        欠損・解釈失敗したキーに使う値。None なら既定値。

    Returns
    -------
    ArtworkParameters
        検証済み（クランプ済み）のパラメータ。

    Notes
    -----
    例外は送出しない。未知のキーは無視し、解釈に失敗したキーは WARNING を出して base の値を残す。
    """

    params = base if base is not None else ArtworkParameters()
    updates: dict[str, Any] = {}
    for key, raw in decoded.items():
        entry = _PARSERS.get(key)
        if entry is None:
            continue
        attr, parse = entry
        value = parse(str(raw))
        if value is None:
            _logger.warning("アートワークの値を解釈できないため既定値を使います: %s=%r", key, raw)
            continue
        updates[attr] = value
    return replace(params, **updates).validated()


ARTWORK_FIELD_NAMES: tuple[str, ...] = tuple(f.name for f in fields(ArtworkParameters))


__all__ = [
    "ARTWORK_FIELD_NAMES",
    "ArtworkParameters",
    "NUMERIC_FIELDS",
    "params_from_decoded",
]
