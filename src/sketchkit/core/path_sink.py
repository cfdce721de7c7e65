"""
どこで: `src/sketchkit/core/path_sink.py`。
何を: トリム済み図形の頂点出力先（PathSink）と、その記録実装を提供する。
なぜ: 描画バックエンドに依存せず、begin/vertex/end の呼び出し列だけで図形を受け渡すため。
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np

from sketchkit.core.realized_geometry import RealizedGeometry, geometry_from_lines


@runtime_checkable
class PathSink(Protocol):
    """パス構築プリミティブの最小インターフェース。

    1 回の描画につき `begin_path` → `emit_vertex` × N → `end_path` の順で呼ばれる。
    """

    def begin_path(self) -> None: ...

    def emit_vertex(self, x: float, y: float) -> None: ...

    def end_path(self) -> None: ...


class PolylineRecorder:
    """PathSink の呼び出し列を記録し、ポリライン集合として返す実装。

    Notes
    -----
    `begin_path` / `end_path` の 1 区間を 1 本のポリラインとして扱う。
    頂点を 1 つも受け取らなかった区間も 0 点のポリラインとして残す。
    """

    def __init__(self) -> None:
        self._lines: list[np.ndarray] = []
        self._current: list[tuple[float, float]] | None = None

    def begin_path(self) -> None:
        if self._current is not None:
            raise RuntimeError("begin_path が end_path なしで再度呼ばれた")
        self._current = []

    def emit_vertex(self, x: float, y: float) -> None:
        if self._current is None:
            raise RuntimeError("emit_vertex は begin_path と end_path の間で呼ぶ必要がある")
        self._current.append((float(x), float(y)))

    def end_path(self) -> None:
        if self._current is None:
            raise RuntimeError("end_path に対応する begin_path がない")
        line = np.asarray(self._current, dtype=np.float64).reshape(-1, 2)
        self._lines.append(line)
        self._current = None

    @property
    def n_paths(self) -> int:
        """確定済みパス本数を返す。"""
        return len(self._lines)

    def clear(self) -> None:
        """記録済みのパスを破棄する。"""
        self._lines.clear()
        self._current = None

    def geometry(self) -> RealizedGeometry:
        """記録済みパスを RealizedGeometry として返す。"""
        if self._current is not None:
            raise RuntimeError("end_path 前のパスが残っている")
        return geometry_from_lines(list(self._lines))


__all__ = ["PathSink", "PolylineRecorder"]
