"""
どこで: `src/layerart/__main__.py`（`python -m layerart` / `layerart`）。
何を: アートワーク文字列の SVG レンダリング・分解表示・生成を行うコマンドライン。
なぜ: UI 無しでパラメータの確認と書き出しを反復できるようにするため。
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from layerart.core.parameters.artwork import ArtworkParameters
from layerart.core.parameters.codec import decode_artwork, encode_artwork, loads_artwork, reconstruct_colors
from layerart.core.parameters.style import ColorRGB, RainbowStyle, hex_to_rgb01
from layerart.core.runtime_config import runtime_config, set_config_path
from layerart.core.shapes import ShapeKind
from layerart.export.svg import export_artwork_svg

_logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_NAME = "layerart.svg"


class _ArtworkFileError(Exception):
    pass


def _read_artwork(text: str) -> str:
    """``@path`` ならファイルの中身、それ以外は引数そのものを返す。"""
    if not text.startswith("@"):
        return text
    path = Path(text[1:]).expanduser()
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise _ArtworkFileError(f"アートワークファイルを読めません: {path}") from exc


def _hex_color(text: str) -> ColorRGB:
    rgb = hex_to_rgb01(text)
    if rgb is None:
        raise argparse.ArgumentTypeError(f"#RRGGBB 形式の色である必要があります: {text!r}")
    return rgb


def _palette(text: str) -> tuple[ColorRGB, ...]:
    colors = reconstruct_colors(text)
    if not colors:
        raise argparse.ArgumentTypeError(f"有効な色が 1 つもありません: {text!r}")
    return tuple(colors)


def _cmd_render(args: argparse.Namespace) -> int:
    if args.config is not None:
        set_config_path(args.config)
    try:
        cfg = runtime_config()
        params = loads_artwork(_read_artwork(args.artwork))
        out = Path(args.out) if args.out is not None else cfg.output_dir / DEFAULT_OUTPUT_NAME
        saved = export_artwork_svg(params, out, layout=cfg.layout, decimals=cfg.svg_decimals)
    finally:
        if args.config is not None:
            set_config_path(None)
    print(saved)
    return 0


def _cmd_decode(args: argparse.Namespace) -> int:
    decoded = decode_artwork(_read_artwork(args.artwork))
    print(json.dumps(decoded, ensure_ascii=False, indent=2))
    return 0


def _cmd_encode(args: argparse.Namespace) -> int:
    updates = {
        name: value
        for name, value in (
            ("shape", None if args.shape is None else ShapeKind(args.shape)),
            ("rotation", args.rotation),
            ("scale", args.scale),
            ("layer_count", args.layers),
            ("skew_x", args.skew_x),
            ("skew_y", args.skew_y),
            ("spread", args.spread),
            ("horizontal", args.horizontal),
            ("vertical", args.vertical),
            ("primitive_count", args.primitives),
            ("color_presets", args.colors),
            ("background_color", args.background),
            ("rainbow_style", None if args.rainbow_style is None else RainbowStyle.coerce(args.rainbow_style)),
            ("hue_adjustment", args.hue),
            ("saturation_adjustment", args.saturation),
            ("number_of_visible_presets", args.preset_count),
            ("stroke_color", args.stroke_color),
            ("stroke_width", args.stroke_width),
            ("shape_alpha", args.alpha),
        )
        if value is not None
    }
    if args.rainbow:
        updates["use_procedural_rainbow"] = True
    params = replace(ArtworkParameters(), **updates).validated()
    print(encode_artwork(params))
    return 0


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="layerart", description="レイヤー型ジェネラティブアートのツール")
    p.add_argument("-v", "--verbose", action="store_true", help="DEBUG ログを表示する")
    sub = p.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="アートワーク文字列を SVG に書き出す")
    render.add_argument("artwork", help="アートワーク文字列、または @ファイルパス")
    render.add_argument("out", nargs="?", default=None, help="出力 SVG（省略時: <paths.output_dir>/layerart.svg）")
    render.add_argument("--config", default=None, help="config.yaml のパス")
    render.set_defaults(func=_cmd_render)

    decode = sub.add_parser("decode", help="アートワーク文字列を key/value の JSON で表示する")
    decode.add_argument("artwork", help="アートワーク文字列、または @ファイルパス")
    decode.set_defaults(func=_cmd_decode)

    encode = sub.add_parser("encode", help="指定値からアートワーク文字列を生成する")
    encode.add_argument("--shape", choices=[k.value for k in ShapeKind], default=None)
    encode.add_argument("--rotation", type=float, default=None, help="レイヤーごとの回転 [deg]")
    encode.add_argument("--scale", type=float, default=None)
    encode.add_argument("--layers", type=float, default=None, help="レイヤー数")
    encode.add_argument("--skew-x", dest="skew_x", type=float, default=None)
    encode.add_argument("--skew-y", dest="skew_y", type=float, default=None)
    encode.add_argument("--spread", type=float, default=None)
    encode.add_argument("--horizontal", type=float, default=None)
    encode.add_argument("--vertical", type=float, default=None)
    encode.add_argument("--primitives", type=float, default=None, help="1 レイヤーあたりの図形数")
    encode.add_argument("--colors", type=_palette, default=None, help="カンマ区切りの #RRGGBB 列")
    encode.add_argument("--background", type=_hex_color, default=None)
    encode.add_argument("--rainbow", action="store_true", help="手続き的スペクトルで塗る")
    encode.add_argument("--rainbow-style", dest="rainbow_style", choices=["standard", "cyberpunk", "half-spectrum"], default=None)
    encode.add_argument("--hue", type=float, default=None, help="色相調整 [-1,1]")
    encode.add_argument("--saturation", type=float, default=None, help="彩度調整 [-1,1]")
    encode.add_argument("--preset-count", dest="preset_count", type=float, default=None)
    encode.add_argument("--stroke-color", dest="stroke_color", type=_hex_color, default=None)
    encode.add_argument("--stroke-width", dest="stroke_width", type=float, default=None)
    encode.add_argument("--alpha", type=float, default=None)
    encode.set_defaults(func=_cmd_encode)

    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return int(args.func(args))
    except _ArtworkFileError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except (FileNotFoundError, RuntimeError) as exc:
        _logger.debug("設定エラー", exc_info=True)
        print(f"config error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
