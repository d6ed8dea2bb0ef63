"""2D アフィン変換（3x3 同次座標行列）の生成と合成。

レイヤーごとの変換は ``translate(position) @ shear(kx, ky) @ rotate(deg)`` の順で合成する。
座標系は y 下向き（SVG と同じ）で、正の角度は画面上で時計回りになる。
"""

from __future__ import annotations

import math

import numpy as np


def identity() -> np.ndarray:
    return np.eye(3, dtype=np.float64)


def translate(dx: float, dy: float) -> np.ndarray:
    m = identity()
    m[0, 2] = float(dx)
    m[1, 2] = float(dy)
    return m


def rotate(degrees: float) -> np.ndarray:
    """原点まわりに degrees [deg] 回転する行列を返す（mod 360 はしない）。"""
    rad = math.radians(float(degrees))
    c = math.cos(rad)
    s = math.sin(rad)
    m = identity()
    m[0, 0] = c
    m[0, 1] = -s
    m[1, 0] = s
    m[1, 1] = c
    return m


def shear(kx: float, ky: float) -> np.ndarray:
    """x' = x + kx*y, y' = ky*x + y のせん断行列を返す。"""
    m = identity()
    m[0, 1] = float(kx)
    m[1, 0] = float(ky)
    return m


def scale(sx: float, sy: float | None = None) -> np.ndarray:
    m = identity()
    m[0, 0] = float(sx)
    m[1, 1] = float(sx if sy is None else sy)
    return m


def skew_factor(percent: float) -> float:
    """スキュー量 [0,100] をせん断係数 ``tan((percent/100) * π/4)`` に変換する。"""
    return math.tan((float(percent) / 100.0) * (math.pi / 4.0))


def compose(*matrices: np.ndarray) -> np.ndarray:
    """行列を左から順に掛け合わせる（右端が最初に適用される）。"""
    out = identity()
    for m in matrices:
        out = out @ np.asarray(m, dtype=np.float64)
    return out


def apply(matrix: np.ndarray, points: np.ndarray) -> np.ndarray:
    """shape (N,2) の点列に行列を適用して返す。"""
    m = np.asarray(matrix, dtype=np.float64)
    xy = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    return xy @ m[:2, :2].T + m[:2, 2]


__all__ = [
    "apply",
    "compose",
    "identity",
    "rotate",
    "scale",
    "shear",
    "skew_factor",
    "translate",
]
