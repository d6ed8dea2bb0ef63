"""
どこで: `src/layerart/core/parameters/style.py`。
何を: 色表現（0..1 float RGB / 0..255 int RGB / #RRGGBB）の相互変換ユーティリティ。
なぜ: codec・色合成・SVG 出力で同じ丸め規則の色変換を共有するため。
"""

from __future__ import annotations

import re
from enum import IntEnum

ColorRGB = tuple[float, float, float]

_HEX_RE = re.compile(r"^#?([0-9A-Fa-f]{6})$")

BLACK: ColorRGB = (0.0, 0.0, 0.0)
WHITE: ColorRGB = (1.0, 1.0, 1.0)


def rgb01_to_rgb255(rgb: ColorRGB) -> tuple[int, int, int]:
    """0..1 float の RGB を 0..255 int の RGB に変換して返す。"""

    r, g, b = rgb
    out: list[int] = []
    for v in (r, g, b):
        fv = float(v)
        fv = 0.0 if not fv > 0.0 else 1.0 if fv > 1.0 else fv
        out.append(int(round(fv * 255.0)))
    return int(out[0]), int(out[1]), int(out[2])


def rgb255_to_rgb01(rgb: tuple[int, int, int]) -> ColorRGB:
    """0..255 int の RGB を 0..1 float の RGB に変換して返す。"""

    r, g, b = rgb
    return float(r) / 255.0, float(g) / 255.0, float(b) / 255.0


def rgb01_to_hex(rgb: ColorRGB) -> str:
    """0..1 float RGB を ``#RRGGBB``（大文字、alpha なし）に変換して返す。"""

    r, g, b = rgb01_to_rgb255(rgb)
    return f"#{r:02X}{g:02X}{b:02X}"


def hex_to_rgb01(text: str) -> ColorRGB | None:
    """``#RRGGBB`` 文字列を 0..1 float RGB に変換して返す。

    Parameters
    ----------
    text : str
        16 進 6 桁の色。先頭 ``#`` は省略可、前後の空白は無視する。

    Returns
    -------
    tuple[float, float, float] or None
        解釈できない場合は None。
    """

    m = _HEX_RE.match(str(text).strip())
    if m is None:
        return None
    value = int(m.group(1), 16)
    return rgb255_to_rgb01(((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF))


# 既定パレット（purple, blue, pink, yellow, green, red, orange, cyan, indigo, mint）。
DEFAULT_PALETTE: tuple[ColorRGB, ...] = tuple(
    c
    for c in (
        hex_to_rgb01("#AF52DE"),
        hex_to_rgb01("#007AFF"),
        hex_to_rgb01("#FF2D55"),
        hex_to_rgb01("#FFCC00"),
        hex_to_rgb01("#34C759"),
        hex_to_rgb01("#FF3B30"),
        hex_to_rgb01("#FF9500"),
        hex_to_rgb01("#32ADE6"),
        hex_to_rgb01("#5856D6"),
        hex_to_rgb01("#00C7BE"),
    )
    if c is not None
)


class RainbowStyle(IntEnum):
    """手続き的スペクトルの種類。値はアートワーク文字列の rainbowStyle と一致する。"""

    STANDARD = 0
    CYBERPUNK = 1
    HALF_SPECTRUM = 2

    @classmethod
    def coerce(cls, value: object) -> RainbowStyle:
        """整数/名前から RainbowStyle を返す。解釈できなければ STANDARD。"""
        if isinstance(value, RainbowStyle):
            return value
        if isinstance(value, str):
            key = value.strip().replace("-", "_").upper()
            aliases = {"HALFSPECTRUM": "HALF_SPECTRUM", "DYNAMIC": "STANDARD"}
            key = aliases.get(key, key)
            if key in cls.__members__:
                return cls[key]
        try:
            return cls(int(value))  # type: ignore[call-overload]
        except (TypeError, ValueError):
            return cls.STANDARD


__all__ = [
    "BLACK",
    "ColorRGB",
    "DEFAULT_PALETTE",
    "RainbowStyle",
    "WHITE",
    "hex_to_rgb01",
    "rgb01_to_hex",
    "rgb01_to_rgb255",
    "rgb255_to_rgb01",
]
