"""
どこで: `src/sketchkit/core/shapes/trimmed_shape.py`。
何を: トリム可能な図形ハンドルの共通プロトコルと、点列 → PathSink 出力の共通処理。
なぜ: line/ellipse/polygon の各ハンドルを同じ呼び出し形で扱えるようにするため。
"""

from __future__ import annotations

from typing import Protocol

import numpy as np

from sketchkit.core.path_sink import PathSink, PolylineRecorder
from sketchkit.core.realized_geometry import RealizedGeometry


class TrimmedShape(Protocol):
    """`(start_ratio, end_ratio, sink)` で部分描画できる図形。"""

    def __call__(self, start_ratio: float, end_ratio: float, sink: PathSink) -> None: ...


def emit_points(points: np.ndarray, sink: PathSink) -> None:
    """点列を 1 本のパスとして sink へ出力する。

    `begin_path` と `end_path` はちょうど 1 回ずつ呼ぶ。
    """
    sink.begin_path()
    for x, y in points:
        sink.emit_vertex(float(x), float(y))
    sink.end_path()


def realize_shape(shape: TrimmedShape, start_ratio: float, end_ratio: float) -> RealizedGeometry:
    """図形を記録用 sink へ描画し、結果を RealizedGeometry として返す。"""
    recorder = PolylineRecorder()
    shape(start_ratio, end_ratio, recorder)
    return recorder.geometry()


__all__ = ["TrimmedShape", "emit_points", "realize_shape"]
