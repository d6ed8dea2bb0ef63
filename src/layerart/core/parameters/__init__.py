# どこで: `src/layerart/core/parameters/__init__.py`。
# 何を: パラメータ（値域検証 / モデル / codec / 色変換 / レコード）の公開エイリアスをまとめる。
# なぜ: 呼び出し側から最小インポートで使えるようにするため。

from .artwork import ArtworkParameters, NUMERIC_FIELDS, params_from_decoded
from .bounds import FIELD_BOUNDS, FieldBounds, field_bounds, validate
from .codec import (
    ARTWORK_KEYS,
    BASE_KEYS,
    decode_artwork,
    encode_artwork,
    loads_artwork,
    reconstruct_colors,
)
from .record import ArtworkRecord, decode_record, dumps_record, encode_record, loads_record
from .style import ColorRGB, DEFAULT_PALETTE, hex_to_rgb01, rgb01_to_hex

__all__ = [
    "ARTWORK_KEYS",
    "BASE_KEYS",
    "FIELD_BOUNDS",
    "NUMERIC_FIELDS",
    "ArtworkParameters",
    "ArtworkRecord",
    "ColorRGB",
    "DEFAULT_PALETTE",
    "FieldBounds",
    "decode_artwork",
    "decode_record",
    "dumps_record",
    "encode_artwork",
    "encode_record",
    "field_bounds",
    "hex_to_rgb01",
    "loads_artwork",
    "loads_record",
    "params_from_decoded",
    "reconstruct_colors",
    "rgb01_to_hex",
    "validate",
]
