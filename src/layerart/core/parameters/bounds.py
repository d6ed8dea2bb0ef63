# どこで: `src/layerart/core/parameters/bounds.py`。
# 何を: 数値ダイヤルごとの値域表と、値域へのクランプ（validate）を提供する。
# なぜ: 範囲外の値を例外にせず黙って丸め、下流が常に値域内の値だけを見るようにするため。

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FieldBounds:
    """数値フィールドの閉区間 [lower, upper] と種別。"""

    kind: str  # "float" | "int"
    lower: float
    upper: float

    def clamp(self, value: float) -> float:
        v = float(value)
        if math.isnan(v):
            return float(self.upper)
        return max(float(self.lower), min(float(self.upper), v))


# キーはアートワーク文字列のトークン名と揃える。
FIELD_BOUNDS: dict[str, FieldBounds] = {
    "rotation": FieldBounds(kind="float", lower=0.0, upper=360.0),
    "scale": FieldBounds(kind="float", lower=0.5, upper=2.0),
    "layer": FieldBounds(kind="int", lower=0.0, upper=72.0),
    "skewX": FieldBounds(kind="float", lower=0.0, upper=100.0),
    "skewY": FieldBounds(kind="float", lower=0.0, upper=100.0),
    "spread": FieldBounds(kind="float", lower=0.0, upper=100.0),
    "horizontal": FieldBounds(kind="float", lower=-300.0, upper=300.0),
    "vertical": FieldBounds(kind="float", lower=-300.0, upper=300.0),
    "primitive": FieldBounds(kind="int", lower=1.0, upper=6.0),
    "hueAdj": FieldBounds(kind="float", lower=-1.0, upper=1.0),
    "satAdj": FieldBounds(kind="float", lower=-1.0, upper=1.0),
    "presetCount": FieldBounds(kind="int", lower=1.0, upper=10.0),
    "rainbowStyle": FieldBounds(kind="int", lower=0.0, upper=2.0),
    "strokeWidth": FieldBounds(kind="float", lower=0.0, upper=20.0),
    "alpha": FieldBounds(kind="float", lower=0.0, upper=1.0),
}


def field_bounds(field: str) -> FieldBounds | None:
    """フィールド名に対応する値域を返す。未登録なら None。"""

    return FIELD_BOUNDS.get(str(field))


def validate(field: str, value: float) -> float:
    """value を field の値域にクランプして返す。

    Parameters
    ----------
    field : str
        アートワーク文字列のキー名（例: ``"rotation"``, ``"skewX"``）。
    value : float
        任意の数値。

    Returns
    -------
    float
        ``max(lower, min(upper, value))``。NaN は上限に寄せる。
        未登録のフィールドは float 化しただけの値を返す。

    Notes
    -----
    例外は送出しない。float 化できない値は 0.0、float に収まらない整数は ±inf として扱う。冪等。
    """

    try:
        v = float(value)
    except OverflowError:
        # float に収まらない巨大な整数は符号付き無限大として扱う。
        v = math.inf if value > 0 else -math.inf
    except (TypeError, ValueError):
        v = 0.0

    bounds = FIELD_BOUNDS.get(str(field))
    if bounds is None:
        return v
    return bounds.clamp(v)


__all__ = ["FIELD_BOUNDS", "FieldBounds", "field_bounds", "validate"]
