"""
どこで: `src/layerart/export/svg.py`。
何を: 描画命令列（DrawInstruction）を塗りつぶし図形の SVG として保存する関数を提供する。
なぜ: ラスタライズせずに、合成結果を決定的なベクタファイルとして確認・共有できるようにするため。
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from pathlib import Path

import numpy as np

from layerart.core.layer import DrawInstruction, LayoutConfig
from layerart.core.parameters.artwork import ArtworkParameters
from layerart.core.parameters.style import ColorRGB, rgb01_to_hex
from layerart.core.pipeline import DEFAULT_LAYOUT, layers

_logger = logging.getLogger(__name__)

_SVG_NS = "http://www.w3.org/2000/svg"
_FLOAT_DECIMALS = 3


def _fmt(value: float, *, decimals: int = _FLOAT_DECIMALS) -> str:
    """SVG 出力向けに float を決定的な文字列へ変換して返す。"""
    text = f"{float(value):.{int(decimals)}f}"
    if text.startswith("-0") and float(text) == 0.0:
        return text[1:]
    return text


def _iter_polylines(*, coords: np.ndarray, offsets: np.ndarray) -> Iterator[np.ndarray]:
    """coords/offsets から閉ポリライン（shape (N,2)）を列挙する。3 点未満は面を持たないので飛ばす。"""
    for start, end in zip(offsets[:-1], offsets[1:]):
        start_i = int(start)
        end_i = int(end)
        if end_i - start_i < 3:
            continue
        yield coords[start_i:end_i, :2]


def _polyline_to_d(polyline_xy: np.ndarray, *, decimals: int) -> str:
    """閉ポリラインを SVG path の d 属性へ変換して返す。終端の重複頂点は Z で置き換える。"""
    pts = polyline_xy
    if pts.shape[0] > 1 and np.array_equal(pts[0], pts[-1]):
        pts = pts[:-1]
    parts = [f"M {_fmt(pts[0, 0], decimals=decimals)} {_fmt(pts[0, 1], decimals=decimals)}"]
    for xy in pts[1:]:
        parts.append(f"L {_fmt(xy[0], decimals=decimals)} {_fmt(xy[1], decimals=decimals)}")
    parts.append("Z")
    return " ".join(parts)


def export_svg(
    instructions: Sequence[DrawInstruction],
    path: str | Path,
    *,
    canvas_size: tuple[int, int],
    background: ColorRGB | None = None,
    stroke_color: ColorRGB | None = None,
    stroke_width: float = 0.0,
    decimals: int = _FLOAT_DECIMALS,
) -> Path:
    """描画命令列を SVG として保存する。

    Parameters
    ----------
    instructions : Sequence[DrawInstruction]
        背面から前面の順の描画命令。
    path : str or Path
        出力先パス。親ディレクトリが無ければ作る。
    canvas_size : tuple[int, int]
        キャンバス寸法 (width, height)。
    background : tuple[float, float, float] or None, optional
        背景色。None なら背景 rect を出力しない。
    stroke_color : tuple[float, float, float] or None, optional
        輪郭色。None または stroke_width <= 0 なら輪郭なし。
    stroke_width : float, optional
        輪郭の太さ（viewBox 単位）。
    decimals : int, optional
        座標の小数桁数。

    Returns
    -------
    Path
        保存先パス。

    Raises
    ------
    ValueError
        canvas_size が正の値でない場合。
    """
    _path = Path(path)
    canvas_w, canvas_h = canvas_size
    if canvas_w <= 0 or canvas_h <= 0:
        raise ValueError(f"canvas_size は正の値である必要がある: got={canvas_size!r}")

    if stroke_color is not None and float(stroke_width) > 0.0:
        stroke_attr = (
            f'stroke="{rgb01_to_hex(stroke_color)}" '
            f'stroke-width="{_fmt(stroke_width, decimals=decimals)}" stroke-linejoin="round"'
        )
    else:
        stroke_attr = 'stroke="none"'

    lines: list[str] = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append(
        (
            f'<svg xmlns="{_SVG_NS}" viewBox="0 0 {int(canvas_w)} {int(canvas_h)}" '
            f'width="{int(canvas_w)}" height="{int(canvas_h)}">'
        )
    )
    if background is not None:
        lines.append(
            f'  <rect x="0" y="0" width="{int(canvas_w)}" height="{int(canvas_h)}" '
            f'fill="{rgb01_to_hex(background)}" />'
        )

    n_paths = 0
    for inst in instructions:
        realized = inst.realized()
        fill = rgb01_to_hex(inst.color)
        opacity = _fmt(min(max(float(inst.alpha), 0.0), 1.0), decimals=decimals)
        for polyline_xy in _iter_polylines(coords=realized.coords, offsets=realized.offsets):
            d = _polyline_to_d(polyline_xy, decimals=decimals)
            lines.append(
                f'  <path d="{d}" fill="{fill}" fill-opacity="{opacity}" {stroke_attr} />'
            )
            n_paths += 1

    lines.append("</svg>")

    _path.parent.mkdir(parents=True, exist_ok=True)
    with _path.open("w", encoding="utf-8", newline="\n") as f:
        f.write("\n".join(lines) + "\n")

    _logger.debug("SVG を保存しました: path=%s layers=%d paths=%d", _path, len(instructions), n_paths)
    return _path


def export_artwork_svg(
    params: ArtworkParameters,
    path: str | Path,
    *,
    layout: LayoutConfig | None = None,
    decimals: int = _FLOAT_DECIMALS,
) -> Path:
    """パラメータからレイヤーを合成し、背景色と輪郭設定込みで SVG に保存する。"""
    layout = DEFAULT_LAYOUT if layout is None else layout
    p = params.validated()
    return export_svg(
        layers(p, layout),
        path,
        canvas_size=layout.canvas_size,
        background=p.background_color,
        stroke_color=p.stroke_color,
        stroke_width=p.stroke_width,
        decimals=decimals,
    )


__all__ = ["export_artwork_svg", "export_svg"]
