"""
どこで: `src/sketchkit/core/shapes/line.py`。線分のトリム描画。
何を: 始点→終点の線分を比率区間で切り出し、2 点のパスとして出力する。
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from sketchkit.core.path_sink import PathSink
from sketchkit.core.shapes.trimmed_shape import emit_points


def trimmed_line_points(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    start_ratio: float,
    end_ratio: float,
) -> np.ndarray:
    """線分上の `start_ratio`〜`end_ratio` に対応する 2 点を shape (2,2) で返す。"""
    dx = float(x2) - float(x1)
    dy = float(y2) - float(y1)
    s = float(start_ratio)
    e = float(end_ratio)
    return np.array(
        [
            [float(x1) + s * dx, float(y1) + s * dy],
            [float(x1) + e * dx, float(y1) + e * dy],
        ],
        dtype=np.float64,
    )


def trimmed_line(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    start_ratio: float,
    end_ratio: float,
    sink: PathSink,
) -> None:
    """線分を比率区間で切り出して sink へ出力する。"""
    emit_points(trimmed_line_points(x1, y1, x2, y2, start_ratio, end_ratio), sink)


@dataclass(frozen=True, slots=True)
class TrimmedLine:
    """端点を固定した線分のトリム描画ハンドル。"""

    x1: float
    y1: float
    x2: float
    y2: float

    def __call__(self, start_ratio: float, end_ratio: float, sink: PathSink) -> None:
        trimmed_line(self.x1, self.y1, self.x2, self.y2, start_ratio, end_ratio, sink)

    def points(self, start_ratio: float, end_ratio: float) -> np.ndarray:
        return trimmed_line_points(self.x1, self.y1, self.x2, self.y2, start_ratio, end_ratio)


def create_line(x1: float, y1: float, x2: float, y2: float) -> TrimmedLine:
    """線分のトリム描画ハンドルを生成する。"""
    return TrimmedLine(float(x1), float(y1), float(x2), float(y2))


__all__ = ["TrimmedLine", "create_line", "trimmed_line", "trimmed_line_points"]
