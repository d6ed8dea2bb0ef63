# どこで: `src/layerart/__init__.py`。
# 何を: ルート `layerart` パッケージと、よく使う関数・型の公開エイリアスを定義する。
# なぜ: import 起点を `layerart` に統一するため。

from __future__ import annotations

from layerart.core.colors import adjust_color, layer_color, rainbow_color
from layerart.core.layer import DrawInstruction, LayerInstance, LayoutConfig
from layerart.core.parameters import (
    ArtworkParameters,
    ArtworkRecord,
    decode_artwork,
    encode_artwork,
    loads_artwork,
    reconstruct_colors,
    validate,
)
from layerart.core.parameters.style import RainbowStyle
from layerart.core.path import ShapePath
from layerart.core.pipeline import compose_layers, compute_layer, layers
from layerart.core.shapes import ShapeKind, build_shape

__all__ = [
    "ArtworkParameters",
    "ArtworkRecord",
    "DrawInstruction",
    "LayerInstance",
    "LayoutConfig",
    "RainbowStyle",
    "ShapeKind",
    "ShapePath",
    "adjust_color",
    "build_shape",
    "compose_layers",
    "compute_layer",
    "decode_artwork",
    "encode_artwork",
    "layer_color",
    "layers",
    "loads_artwork",
    "rainbow_color",
    "reconstruct_colors",
    "validate",
]
