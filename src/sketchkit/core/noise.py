"""
どこで: `src/sketchkit/core/noise.py`。
何を: seed 付きの 2 次元 Perlin ノイズ（値域 [0, 1]）と、その格子サンプルを提供する。
なぜ: ノイズテクスチャや揺らぎのある配置を、再現可能な乱数で作るため。
"""

from __future__ import annotations

from functools import lru_cache

import numpy as np
from numba import njit  # type: ignore[import-untyped]

_GRAD2_8 = [
    [1.0, 1.0],
    [-1.0, 1.0],
    [1.0, -1.0],
    [-1.0, -1.0],
    [1.0, 0.0],
    [-1.0, 0.0],
    [0.0, 1.0],
    [0.0, -1.0],
]

NOISE_GRADIENTS_2D = np.asarray(_GRAD2_8, dtype=np.float64)
NOISE_GRADIENTS_2D.setflags(write=False)


@lru_cache(maxsize=16)
def permutation_table(seed: int) -> np.ndarray:
    """seed から 512 要素（256 要素の順列を 2 回並べたもの）の置換表を作る。"""
    perm = np.random.default_rng(int(seed)).permutation(256).astype(np.int32)
    table = np.concatenate([perm, perm])
    table.setflags(write=False)
    return table


@njit(fastmath=True, cache=True)
def _fade(t):
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


@njit(fastmath=True, cache=True)
def _lerp(a, b, t):
    return a + t * (b - a)


@njit(fastmath=True, cache=True)
def _grad(hash_val, x, y, grad2_array):
    g = grad2_array[int(hash_val) & 7]
    return g[0] * x + g[1] * y


@njit(fastmath=True, cache=True)
def _perlin_noise_2d(x, y, perm_table, grad2_array):
    """[-1, 1] 付近の値を返す 2 次元 Perlin ノイズ。"""
    fx = np.floor(x)
    fy = np.floor(y)
    X = int(fx) & 255
    Y = int(fy) & 255
    x -= fx
    y -= fy

    u = _fade(x)
    v = _fade(y)

    A = perm_table[X] + Y
    B = perm_table[X + 1] + Y

    gAA = _grad(perm_table[A & 511], x, y, grad2_array)
    gBA = _grad(perm_table[B & 511], x - 1.0, y, grad2_array)
    gAB = _grad(perm_table[(A + 1) & 511], x, y - 1.0, grad2_array)
    gBB = _grad(perm_table[(B + 1) & 511], x - 1.0, y - 1.0, grad2_array)

    return _lerp(_lerp(gAA, gBA, u), _lerp(gAB, gBB, u), v)


@njit(fastmath=True, cache=True)
def _to_unit_range(n):
    value = 0.5 * (n + 1.0)
    if value < 0.0:
        return 0.0
    if value > 1.0:
        return 1.0
    return value


@njit(cache=True)
def _noise_grid_nb(width, height, scale, perm_table, grad2_array):
    out = np.empty((height, width), dtype=np.float64)
    for j in range(height):
        for i in range(width):
            n = _perlin_noise_2d(i * scale, j * scale, perm_table, grad2_array)
            out[j, i] = _to_unit_range(n)
    return out


def noise2(x: float, y: float, seed: int = 0) -> float:
    """座標 (x, y) の Perlin ノイズ値を [0, 1] で返す。

    整数格子点では常に 0.5 になる。
    """
    n = _perlin_noise_2d(float(x), float(y), permutation_table(int(seed)), NOISE_GRADIENTS_2D)
    return float(_to_unit_range(n))


def noise_grid(width: int, height: int, scale: float = 0.01, seed: int = 0) -> np.ndarray:
    """`(height, width)` の格子で `noise2(i * scale, j * scale, seed)` を評価する。

    Parameters
    ----------
    width, height : int
        格子サイズ。0 以下は空配列になる。
    scale : float, default 0.01
        格子 1 マスあたりのノイズ座標の増分。
    seed : int, default 0
        置換表の seed。
    """
    w = max(0, int(width))
    h = max(0, int(height))
    return _noise_grid_nb(w, h, float(scale), permutation_table(int(seed)), NOISE_GRADIENTS_2D)


__all__ = ["noise2", "noise_grid", "permutation_table"]
