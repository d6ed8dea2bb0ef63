"""
どこで: `src/layerart/core/layer.py`。
何を: レイアウト設定 LayoutConfig と、レイヤー 1 枚分の導出値 LayerInstance / 描画命令 DrawInstruction を定義する。
なぜ: キャンバス寸法などの環境値を明示的に受け渡し、合成結果を export 側と共有するため。
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from layerart.core.parameters.style import ColorRGB
from layerart.core.path import ShapePath


@dataclass(frozen=True, slots=True)
class LayoutConfig:
    """レイヤー合成のレイアウト既定値。

    Parameters
    ----------
    canvas_size : tuple[int, int]
        キャンバスの (width, height)。中心が合成の原点になる。
    base_radius : float
        layer scale 1.0 のときの図形半径。
    scale_growth : float
        1 レイヤーごとの倍率 ``1 + (scale - 1) * scale_growth``。
    spread_step : float
        spread 1 単位・1 レイヤーあたりの外側へのずれ量。
    orbit : bool
        True なら各レイヤーを半径分だけ累積回転方向へずらして周回させる。
    circle_segments : int
        曲線形状の分割数。
    """

    canvas_size: tuple[int, int] = (1600, 1800)
    base_radius: float = 30.0
    scale_growth: float = 0.25
    spread_step: float = 0.1
    orbit: bool = True
    circle_segments: int = 64

    def __post_init__(self) -> None:
        w, h = self.canvas_size
        if int(w) <= 0 or int(h) <= 0:
            raise ValueError(f"canvas_size は正の (w, h) である必要がある: {self.canvas_size!r}")
        if int(self.circle_segments) < 4:
            raise ValueError(f"circle_segments は 4 以上である必要がある: {self.circle_segments!r}")
        object.__setattr__(self, "canvas_size", (int(w), int(h)))
        object.__setattr__(self, "circle_segments", int(self.circle_segments))

    @property
    def center(self) -> tuple[float, float]:
        w, h = self.canvas_size
        return float(w) / 2.0, float(h) / 2.0


@dataclass(frozen=True, slots=True)
class LayerInstance:
    """(parameters, index, layout) から導出されるレイヤー 1 枚分の値。"""

    index: int
    rotation: float
    layer_scale: float
    radius: float
    shear: tuple[float, float]
    spread_offset: float
    position: tuple[float, float]
    color: ColorRGB
    path: ShapePath
    transform: np.ndarray

    def realized(self) -> ShapePath:
        """transform をローカルパスに適用したキャンバス座標のパスを返す。"""
        return self.path.transformed(self.transform)


@dataclass(frozen=True, slots=True)
class DrawInstruction:
    """描画/出力に渡す (path, transform, color) と不透明度。"""

    path: ShapePath
    transform: np.ndarray
    color: ColorRGB
    alpha: float = 1.0

    def as_tuple(self) -> tuple[ShapePath, np.ndarray, ColorRGB]:
        return self.path, self.transform, self.color

    def realized(self) -> ShapePath:
        return self.path.transformed(self.transform)


__all__ = ["DrawInstruction", "LayerInstance", "LayoutConfig"]
