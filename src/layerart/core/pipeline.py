"""
どこで: `src/layerart/core/pipeline.py`。
何を: 検証済み ArtworkParameters からレイヤーごとの形状・変換・色を導出し、描画命令列を返す。
なぜ: SVG 出力や CLI など複数の出口で同じ合成結果を共有するため。
"""

from __future__ import annotations

import math

from layerart.core.colors import layer_color
from layerart.core.layer import DrawInstruction, LayerInstance, LayoutConfig
from layerart.core.parameters.artwork import ArtworkParameters
from layerart.core.path import ShapePath, concat_paths
from layerart.core.primitives import ring_points
from layerart.core.shapes import build_shape
from layerart.core.transform import compose, rotate, shear, skew_factor, translate

DEFAULT_LAYOUT = LayoutConfig()


def layer_scale(scale: float, index: int, growth: float) -> float:
    """index 番目のレイヤー倍率 ``(1 + (scale - 1) * growth) ** (index + 1)`` を返す。"""
    return (1.0 + (float(scale) - 1.0) * float(growth)) ** (int(index) + 1)


def _local_path(params: ArtworkParameters, radius: float, segments: int) -> ShapePath:
    n = params.n_primitives
    if n <= 1:
        return build_shape(params.shape, (0.0, 0.0), radius, segments=segments)
    centers = ring_points((0.0, 0.0), radius, n)
    return concat_paths(
        *(
            build_shape(params.shape, (float(x), float(y)), radius, segments=segments)
            for x, y in centers
        )
    )


def compute_layer(
    params: ArtworkParameters,
    index: int,
    layout: LayoutConfig | None = None,
) -> LayerInstance:
    """index 番目のレイヤーを導出する。

    Parameters
    ----------
    params : ArtworkParameters
        検証済みのパラメータ。未検証なら呼び出し側で `validated()` を通しておく。
    index : int
        レイヤー番号（0 始まり）。
    layout : LayoutConfig or None, optional
        レイアウト既定値。None なら組み込み既定値。

    Returns
    -------
    LayerInstance
        レイヤー 1 枚分の導出値。

    Notes
    -----
    他レイヤーの状態に依存しないため、任意の順序・並列で計算しても結果は同じ。
    """

    layout = DEFAULT_LAYOUT if layout is None else layout
    i = int(index)

    theta = float(params.rotation) * i
    s = layer_scale(params.scale, i, layout.scale_growth)
    radius = layout.base_radius * s
    kx = skew_factor(params.skew_x)
    ky = skew_factor(params.skew_y)
    spread_offset = float(params.spread) * layout.spread_step * i

    # 累積回転方向へ (周回半径 + spread) だけずらしてから平行移動する。y 下向きなので vertical は符号反転。
    orbit_radius = radius if layout.orbit else 0.0
    distance = orbit_radius + spread_offset
    rad = math.radians(theta)
    cx, cy = layout.center
    x = cx + distance * math.cos(rad) + float(params.horizontal)
    y = cy + distance * math.sin(rad) - float(params.vertical)

    transform = compose(translate(x, y), shear(kx, ky), rotate(theta))
    return LayerInstance(
        index=i,
        rotation=theta,
        layer_scale=s,
        radius=radius,
        shear=(kx, ky),
        spread_offset=spread_offset,
        position=(x, y),
        color=layer_color(params, i),
        path=_local_path(params, radius, layout.circle_segments),
        transform=transform,
    )


def compose_layers(
    params: ArtworkParameters,
    layout: LayoutConfig | None = None,
) -> list[LayerInstance]:
    """0..n_layers-1 の全レイヤーを背面から順に返す。"""
    return [compute_layer(params, i, layout) for i in range(params.n_layers)]


def layers(
    params: ArtworkParameters,
    layout: LayoutConfig | None = None,
) -> list[DrawInstruction]:
    """パラメータを検証し、描画命令列（背面から前面の順）を返す。

    layer_count が 0 なら空リスト。例外は送出しない。
    """
    p = params.validated()
    return [
        DrawInstruction(
            path=inst.path,
            transform=inst.transform,
            color=inst.color,
            alpha=float(p.shape_alpha),
        )
        for inst in compose_layers(p, layout)
    ]


__all__ = ["DEFAULT_LAYOUT", "compose_layers", "compute_layer", "layer_scale", "layers"]
