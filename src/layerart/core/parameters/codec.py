# どこで: `src/layerart/core/parameters/codec.py`。
# 何を: ArtworkParameters と `key:value;...` 形式のアートワーク文字列の encode/decode を提供する。
# なぜ: 永続化・共有に使う唯一の文字列表現を 1 箇所に閉じ、書式変更の影響範囲を局所化するため。

from __future__ import annotations

import logging

from .artwork import ArtworkParameters, params_from_decoded
from .bounds import validate
from .style import ColorRGB, hex_to_rgb01, rgb01_to_hex

_logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ";"
KEY_VALUE_SEPARATOR = ":"
COLOR_SEPARATOR = ","

# 先頭 12 キーは固定順。以降は色/ストローク設定の拡張キー。
BASE_KEYS: tuple[str, ...] = (
    "shape",
    "rotation",
    "scale",
    "layer",
    "skewX",
    "skewY",
    "spread",
    "horizontal",
    "vertical",
    "primitive",
    "colors",
    "background",
)
EXTENDED_KEYS: tuple[str, ...] = (
    "useRainbow",
    "rainbowStyle",
    "hueAdj",
    "satAdj",
    "presetCount",
    "strokeColor",
    "strokeWidth",
    "alpha",
)
ARTWORK_KEYS: tuple[str, ...] = BASE_KEYS + EXTENDED_KEYS


def _fmt_float(field: str, value: float) -> str:
    """値域にクランプした float を小数部付きの文字列（例: ``"45.0"``）で返す。"""

    return repr(float(validate(field, value)))


def _fmt_int(field: str, value: float) -> str:
    return str(int(validate(field, value)))


def encode_colors(colors: tuple[ColorRGB, ...] | list[ColorRGB]) -> str:
    """色列をカンマ区切りの ``#RRGGBB`` 列に変換して返す。"""

    return COLOR_SEPARATOR.join(rgb01_to_hex(c) for c in colors)


def encode_artwork(params: ArtworkParameters) -> str:
    """ArtworkParameters をアートワーク文字列に変換して返す。

    Notes
    -----
    先に `validated()` を通すため、数値は常に値域内、rainbowStyle は 0..2 の整数、
    colors は 1 色以上になる。例外は送出しない。
    """

    params = params.validated()
    tokens: list[tuple[str, str]] = [
        ("shape", str(getattr(params.shape, "value", params.shape))),
        ("rotation", _fmt_float("rotation", params.rotation)),
        ("scale", _fmt_float("scale", params.scale)),
        ("layer", _fmt_float("layer", params.layer_count)),
        ("skewX", _fmt_float("skewX", params.skew_x)),
        ("skewY", _fmt_float("skewY", params.skew_y)),
        ("spread", _fmt_float("spread", params.spread)),
        ("horizontal", _fmt_float("horizontal", params.horizontal)),
        ("vertical", _fmt_float("vertical", params.vertical)),
        ("primitive", _fmt_float("primitive", params.primitive_count)),
        ("colors", encode_colors(params.color_presets)),
        ("background", rgb01_to_hex(params.background_color)),
        ("useRainbow", "true" if params.use_procedural_rainbow else "false"),
        ("rainbowStyle", _fmt_int("rainbowStyle", int(params.rainbow_style))),
        ("hueAdj", _fmt_float("hueAdj", params.hue_adjustment)),
        ("satAdj", _fmt_float("satAdj", params.saturation_adjustment)),
        ("presetCount", _fmt_int("presetCount", params.number_of_visible_presets)),
        ("strokeColor", rgb01_to_hex(params.stroke_color)),
        ("strokeWidth", _fmt_float("strokeWidth", params.stroke_width)),
        ("alpha", _fmt_float("alpha", params.shape_alpha)),
    ]
    return FIELD_SEPARATOR.join(f"{k}{KEY_VALUE_SEPARATOR}{v}" for k, v in tokens)


def decode_artwork(text: str) -> dict[str, str]:
    """アートワーク文字列を key -> 生の値文字列の dict に分解して返す。

    Parameters
    ----------
    text : str
        ``key:value`` を ``;`` で連結した文字列。

    Returns
    -------
    dict[str, str]
        出現したキーだけを含む dict。値のパース・クランプは行わない。
        ``:`` を含まないトークンが 1 つでもあれば入力全体を無効として空 dict を返す。

    Notes
    -----
    各トークンは最初の ``:`` で分割する。重複キーは後勝ち。
    """

    result: dict[str, str] = {}
    for token in str(text).split(FIELD_SEPARATOR):
        key, sep, value = token.partition(KEY_VALUE_SEPARATOR)
        if not sep:
            _logger.warning("区切り文字 ':' の無いトークンがあるためアートワーク文字列を無視します: %r", token)
            return {}
        result[key] = value
    return result


def reconstruct_colors(text: str) -> list[ColorRGB]:
    """カンマ区切りの ``#RRGGBB`` 列を色のリストに変換して返す。

    解釈できないトークンは捨てる。空文字列は空リストになる。
    """

    if not text:
        return []
    colors: list[ColorRGB] = []
    for token in str(text).split(COLOR_SEPARATOR):
        rgb = hex_to_rgb01(token)
        if rgb is None:
            _logger.debug("解釈できない色トークンを無視します: %r", token)
            continue
        colors.append(rgb)
    return colors


def loads_artwork(text: str, *, base: ArtworkParameters | None = None) -> ArtworkParameters:
    """アートワーク文字列から検証済み ArtworkParameters を復元して返す。"""

    return params_from_decoded(decode_artwork(text), base=base)


__all__ = [
    "ARTWORK_KEYS",
    "BASE_KEYS",
    "EXTENDED_KEYS",
    "decode_artwork",
    "encode_artwork",
    "encode_colors",
    "loads_artwork",
    "reconstruct_colors",
]
