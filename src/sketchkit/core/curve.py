"""
どこで: `src/sketchkit/core/curve.py`。
何を: 頂点列を通る Catmull-Rom 曲線の制御点列を組み立て、合成 Bézier としてサンプル点列化する。
なぜ: 頂点を滑らかに通る開曲線/閉曲線を、ポリラインとして描画・出力するため。
"""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from sketchkit.core.realized_geometry import RealizedGeometry, empty_geometry, geometry_from_lines
from sketchkit.core.shapes.polygon import as_vertex_array


def curve_control_points(vertices: Sequence | Iterable | np.ndarray, closed: bool = False) -> np.ndarray:
    """頂点列から Catmull-Rom の制御点列 `(K, 2)` を作る。

    Parameters
    ----------
    vertices : Sequence | np.ndarray
        曲線が通る頂点列（`x`/`y` 属性を持つ要素、(x, y) ペア、または (N, 2) 配列）。
    closed : bool, default False
        False の場合は先頭と末尾を 1 回ずつ複製する（端点まで曲線が届く）。
        True の場合は末尾に先頭 3 頂点を追加する（先頭と末尾が滑らかにつながる）。
    """
    v = as_vertex_array(vertices)
    if v.shape[0] == 0:
        return v.copy()
    if closed:
        extra = v[np.arange(3) % v.shape[0]]
        return np.concatenate([v, extra], axis=0)
    return np.concatenate([v[:1], v, v[-1:]], axis=0)


def sample_curve(
    control_points: np.ndarray,
    samples_per_segment: int = 16,
    *,
    tightness: float = 0.0,
) -> np.ndarray:
    """制御点列を一様 Catmull-Rom 曲線としてサンプルし、`(N, 2)` を返す。

    曲線は制御点 `1 .. K-2` を通る（先頭と末尾の制御点は接線にだけ効く）。

    Parameters
    ----------
    control_points : np.ndarray
        shape (K, 2) の制御点列。K < 4 の場合は空配列を返す。
    samples_per_segment : int, default 16
        1 区間あたりのサンプル数（2 未満は 2 に丸める）。区間の継ぎ目は重複させない。
    tightness : float, default 0.0
        0 で通常の Catmull-Rom、1 で折れ線。
    """
    p = np.asarray(control_points, dtype=np.float64).reshape(-1, 2)
    k = int(p.shape[0])
    if k < 4:
        return np.zeros((0, 2), dtype=np.float64)

    samples = max(2, int(samples_per_segment))
    scale = 0.5 * (1.0 - float(tightness))

    # 通過点 1..k-2 の接線。
    m = scale * (p[2:] - p[:-2])

    segs: list[np.ndarray] = []
    for i in range(1, k - 2):
        p0 = p[i]
        p1 = p[i + 1]
        c1 = p0 + m[i - 1] / 3.0
        c2 = p1 - m[i] / 3.0

        ts = np.linspace(0.0, 1.0, num=samples, dtype=np.float64)
        if i > 1:
            ts = ts[1:]
        u = 1.0 - ts
        curve = (
            (u**3)[:, None] * p0
            + (3.0 * (u**2) * ts)[:, None] * c1
            + (3.0 * u * (ts**2))[:, None] * c2
            + (ts**3)[:, None] * p1
        )
        segs.append(curve)

    return np.concatenate(segs, axis=0)


def curve_geometry(
    vertices: Sequence | Iterable | np.ndarray,
    closed: bool = False,
    samples_per_segment: int = 16,
) -> RealizedGeometry:
    """頂点列を通る曲線を 1 本のポリラインとして返す。頂点が 2 未満なら空。"""
    control = curve_control_points(vertices, closed)
    points = sample_curve(control, samples_per_segment)
    if points.shape[0] < 2:
        return empty_geometry()
    return geometry_from_lines([points])


__all__ = ["curve_control_points", "curve_geometry", "sample_curve"]
