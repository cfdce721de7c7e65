"""
どこで: `src/sketchkit/core/shapes/ellipse.py`。楕円/円のトリム描画。
何を: 比率区間 [start, end] を角度 [start*2π, end*2π] に対応させた弧を点列化して出力する。
なぜ: 描画バックエンドの arc に頼らず、PathSink だけで弧を受け渡すため。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

import numpy as np

from sketchkit.core.path_sink import PathSink
from sketchkit.core.runtime_config import runtime_config
from sketchkit.core.shapes.trimmed_shape import emit_points


class ArcMode(str, Enum):
    """弧の閉じ方。"""

    OPEN = "open"
    """弧のみ。"""
    CHORD = "chord"
    """弧の終点から始点へ弦で閉じる。"""
    PIE = "pie"
    """中心 → 弧 → 中心の扇形。"""


def _as_arc_mode(mode: ArcMode | str) -> ArcMode:
    if isinstance(mode, ArcMode):
        return mode
    try:
        return ArcMode(str(mode).lower())
    except ValueError as exc:
        choices = ", ".join(m.value for m in ArcMode)
        raise ValueError(f"ArcMode は {choices} のいずれかである必要がある: got={mode!r}") from exc


def _resolve_detail(detail: int | None) -> int:
    if detail is None:
        return int(runtime_config().ellipse_detail)
    d = int(detail)
    if d < 3:
        d = 3
    return d


def trimmed_ellipse_points(
    x: float,
    y: float,
    size_x: float,
    size_y: float,
    start_ratio: float,
    end_ratio: float,
    mode: ArcMode | str = ArcMode.OPEN,
    detail: int | None = None,
) -> np.ndarray:
    """楕円弧の点列を shape (K,2) で返す。

    Parameters
    ----------
    x, y : float
        中心座標。
    size_x, size_y : float
        幅と高さ（直径）。
    start_ratio, end_ratio : float
        周回比率。0 で +X 方向、角度はラジアンで `ratio * 2π`。
    mode : ArcMode | str, default ArcMode.OPEN
        弧の閉じ方。
    detail : int | None, optional
        1 周あたりの分割数。None は設定値 `shapes.ellipse_detail`。3 未満は 3 にクランプする。

    Returns
    -------
    np.ndarray
        弧の点列。`start_ratio == end_ratio` のときは空（shape (0,2)）。
    """
    arc_mode = _as_arc_mode(mode)
    s = float(start_ratio)
    e = float(end_ratio)
    if s == e:
        return np.zeros((0, 2), dtype=np.float64)

    per_turn = _resolve_detail(detail)
    n_segments = max(1, int(math.ceil(per_turn * abs(e - s))))
    angles = np.linspace(s * 2.0 * math.pi, e * 2.0 * math.pi, num=n_segments + 1, dtype=np.float64)

    cx = float(x)
    cy = float(y)
    rx = 0.5 * float(size_x)
    ry = 0.5 * float(size_y)
    arc = np.stack([cx + rx * np.cos(angles), cy + ry * np.sin(angles)], axis=1)

    if arc_mode is ArcMode.CHORD:
        return np.concatenate([arc, arc[:1]], axis=0)
    if arc_mode is ArcMode.PIE:
        center = np.array([[cx, cy]], dtype=np.float64)
        return np.concatenate([center, arc, center], axis=0)
    return arc


def trimmed_ellipse(
    x: float,
    y: float,
    size_x: float,
    size_y: float,
    start_ratio: float,
    end_ratio: float,
    sink: PathSink,
    mode: ArcMode | str = ArcMode.OPEN,
    detail: int | None = None,
) -> None:
    """楕円弧を sink へ出力する。`start_ratio == end_ratio` のときは何も出力しない。"""
    points = trimmed_ellipse_points(x, y, size_x, size_y, start_ratio, end_ratio, mode, detail)
    if points.shape[0] == 0:
        return
    emit_points(points, sink)


def trimmed_circle(
    x: float,
    y: float,
    size: float,
    start_ratio: float,
    end_ratio: float,
    sink: PathSink,
    mode: ArcMode | str = ArcMode.OPEN,
    detail: int | None = None,
) -> None:
    """円弧を sink へ出力する。"""
    trimmed_ellipse(x, y, size, size, start_ratio, end_ratio, sink, mode, detail)


@dataclass(frozen=True, slots=True)
class TrimmedEllipse:
    """中心・寸法・閉じ方を固定した楕円のトリム描画ハンドル。"""

    x: float
    y: float
    size_x: float
    size_y: float
    mode: ArcMode = ArcMode.OPEN
    detail: int | None = None

    def __call__(self, start_ratio: float, end_ratio: float, sink: PathSink) -> None:
        trimmed_ellipse(
            self.x,
            self.y,
            self.size_x,
            self.size_y,
            start_ratio,
            end_ratio,
            sink,
            self.mode,
            self.detail,
        )

    def points(self, start_ratio: float, end_ratio: float) -> np.ndarray:
        return trimmed_ellipse_points(
            self.x,
            self.y,
            self.size_x,
            self.size_y,
            start_ratio,
            end_ratio,
            self.mode,
            self.detail,
        )


def create_ellipse(
    x: float,
    y: float,
    size_x: float,
    size_y: float,
    mode: ArcMode | str = ArcMode.OPEN,
    detail: int | None = None,
) -> TrimmedEllipse:
    """楕円のトリム描画ハンドルを生成する。"""
    return TrimmedEllipse(
        float(x),
        float(y),
        float(size_x),
        float(size_y),
        _as_arc_mode(mode),
        None if detail is None else int(detail),
    )


def create_circle(
    x: float,
    y: float,
    size: float,
    mode: ArcMode | str = ArcMode.OPEN,
    detail: int | None = None,
) -> TrimmedEllipse:
    """円のトリム描画ハンドルを生成する。"""
    return create_ellipse(x, y, size, size, mode, detail)


__all__ = [
    "ArcMode",
    "TrimmedEllipse",
    "create_circle",
    "create_ellipse",
    "trimmed_circle",
    "trimmed_ellipse",
    "trimmed_ellipse_points",
]
