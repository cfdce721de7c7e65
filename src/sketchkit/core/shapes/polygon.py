"""
どこで: `src/sketchkit/core/shapes/polygon.py`。
何を: 閉多角形の周長を [0,1] で正規化したパス表を作り、指定区間だけを出力する。
なぜ: 周上の任意区間（折り返しや辺の途中を含む）をアニメーションの毎フレームで
      安価に描けるよう、弧長パラメータ化を 1 回だけ前計算しておくため。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, NamedTuple, Sequence

import numpy as np
from numba import njit  # type: ignore[import-untyped, attr-defined]

from sketchkit.core.path_sink import PathSink
from sketchkit.core.realized_geometry import RealizedGeometry, geometry_from_lines
from sketchkit.core.shapes.trimmed_shape import emit_points


class Vertex(NamedTuple):
    """2D 頂点。"""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class PathSegment:
    """多角形の 1 辺と、その辺が受け持つ周長比率の区間。

    Attributes
    ----------
    from_vertex, to_vertex : Vertex
        辺の始点と終点。入力頂点を float 化したコピーで、呼び出し側の
        頂点オブジェクトそのものではない。
    length : float
        辺のユークリッド長。
    previous_ratio, next_ratio : float
        周長全体に対する累積比率の区間 `[previous_ratio, next_ratio]`。
    """

    from_vertex: Vertex
    to_vertex: Vertex
    length: float
    previous_ratio: float
    next_ratio: float


@dataclass(frozen=True, slots=True)
class PathTable:
    """閉多角形の弧長パラメータ化テーブル。

    Parameters
    ----------
    vertices : np.ndarray
        float64 型 shape (n, 2) の頂点配列。辺 i は `vertices[i] -> vertices[(i+1) % n]`。
    lengths : np.ndarray
        shape (n,) の辺長。
    previous_ratios, next_ratios : np.ndarray
        shape (n,) の累積比率。`next_ratios[i] == previous_ratios[i+1]` かつ
        `next_ratios[-1] == 1.0`。

    Notes
    -----
    `build_path_table()` で構築する。配列は writeable=False で保持する。
    """

    vertices: np.ndarray
    lengths: np.ndarray
    previous_ratios: np.ndarray
    next_ratios: np.ndarray

    def __post_init__(self) -> None:
        for name in ("vertices", "lengths", "previous_ratios", "next_ratios"):
            arr = np.array(getattr(self, name), dtype=np.float64, copy=True)
            arr.setflags(write=False)
            object.__setattr__(self, name, arr)

    def __len__(self) -> int:
        return int(self.vertices.shape[0])

    @property
    def perimeter(self) -> float:
        """周長（辺長の総和）を返す。"""
        return float(self.lengths.sum())

    def segment(self, index: int) -> PathSegment:
        """`index` 番目の辺を PathSegment として返す。"""
        n = len(self)
        i = int(index) % n
        j = (i + 1) % n
        return PathSegment(
            from_vertex=Vertex(float(self.vertices[i, 0]), float(self.vertices[i, 1])),
            to_vertex=Vertex(float(self.vertices[j, 0]), float(self.vertices[j, 1])),
            length=float(self.lengths[i]),
            previous_ratio=float(self.previous_ratios[i]),
            next_ratio=float(self.next_ratios[i]),
        )

    def segments(self) -> tuple[PathSegment, ...]:
        """全辺を頂点順に返す（最後は閉じ辺）。"""
        return tuple(self.segment(i) for i in range(len(self)))


def _vertex_row(v: Any) -> tuple[float, float]:
    if isinstance(v, Mapping):
        return float(v["x"]), float(v["y"])
    if hasattr(v, "x") and hasattr(v, "y"):
        return float(v.x), float(v.y)
    x, y = v
    return float(x), float(y)


def as_vertex_array(vertices: Sequence[Any] | np.ndarray) -> np.ndarray:
    """頂点列を float64 型 shape (n, 2) の配列へ変換する。

    各要素は `{"x": .., "y": ..}` の Mapping、`x`/`y` 属性を持つオブジェクト、
    (x, y) の組のいずれか。ndarray はそのまま (n, 2) へ整形する。

    Raises
    ------
    ValueError
        点として読めない要素を含む場合。
    """
    if isinstance(vertices, np.ndarray):
        return np.asarray(vertices, dtype=np.float64).reshape(-1, 2)

    rows: list[tuple[float, float]] = []
    for i, v in enumerate(vertices):
        try:
            rows.append(_vertex_row(v))
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"頂点 {i} を (x, y) として読めません: got={v!r}") from exc
    return np.asarray(rows, dtype=np.float64).reshape(-1, 2)


@njit(cache=True)  # type: ignore[misc]
def _closed_segment_lengths_nb(v: np.ndarray) -> np.ndarray:
    n = v.shape[0]
    out = np.empty(n, dtype=np.float64)
    for i in range(n):
        j = i + 1 if i + 1 < n else 0
        dx = v[j, 0] - v[i, 0]
        dy = v[j, 1] - v[i, 1]
        out[i] = np.sqrt(dx * dx + dy * dy)
    return out


@njit(cache=True)  # type: ignore[misc]
def _cumulative_ratios_nb(lengths: np.ndarray, total: float) -> tuple[np.ndarray, np.ndarray]:
    n = lengths.shape[0]
    previous = np.empty(n, dtype=np.float64)
    following = np.empty(n, dtype=np.float64)
    last = 0.0
    for i in range(n):
        previous[i] = last
        last = last + lengths[i] / total
        following[i] = last
    # 浮動小数の累積誤差を吸収し、終端はちょうど 1 にする。
    following[n - 1] = 1.0
    return previous, following


@njit(cache=True)  # type: ignore[misc]
def _lower_bound(a: np.ndarray, x: float) -> int:
    lo = 0
    hi = a.shape[0]
    while lo < hi:
        mid = (lo + hi) // 2
        if a[mid] < x:
            lo = mid + 1
        else:
            hi = mid
    return lo


@njit(cache=True)  # type: ignore[misc]
def _upper_bound(a: np.ndarray, x: float) -> int:
    lo = 0
    hi = a.shape[0]
    while lo < hi:
        mid = (lo + hi) // 2
        if a[mid] <= x:
            lo = mid + 1
        else:
            hi = mid
    return lo


@njit(cache=True)  # type: ignore[misc]
def _locate_start_nb(previous_ratios: np.ndarray, ratio: float) -> int:
    # previous_ratio <= ratio を満たす最後の辺。
    i = _upper_bound(previous_ratios, ratio) - 1
    if i < 0:
        return 0
    return i


@njit(cache=True)  # type: ignore[misc]
def _locate_end_nb(next_ratios: np.ndarray, ratio: float) -> int:
    # next_ratio >= ratio を満たす最初の辺。
    n = next_ratios.shape[0]
    i = _lower_bound(next_ratios, ratio)
    if i >= n:
        return n - 1
    return i


@njit(cache=True)  # type: ignore[misc]
def _inverse_lerp(value: float, start: float, end: float) -> float:
    span = end - start
    if span == 0.0:
        return 0.0
    return (value - start) / span


@njit(cache=True)  # type: ignore[misc]
def _trim_points_nb(
    vertices: np.ndarray,
    previous_ratios: np.ndarray,
    next_ratios: np.ndarray,
    start_ratio: float,
    end_ratio: float,
) -> np.ndarray:
    n = vertices.shape[0]
    si = _locate_start_nb(previous_ratios, start_ratio)
    ei = _locate_end_nb(next_ratios, end_ratio)
    ts = _inverse_lerp(start_ratio, previous_ratios[si], next_ratios[si])
    te = _inverse_lerp(end_ratio, previous_ratios[ei], next_ratios[ei])

    interior = ei - si if ei > si else 0
    out = np.empty((interior + 2, 2), dtype=np.float64)

    sj = si + 1 if si + 1 < n else 0
    out[0, 0] = (1.0 - ts) * vertices[si, 0] + ts * vertices[sj, 0]
    out[0, 1] = (1.0 - ts) * vertices[si, 1] + ts * vertices[sj, 1]

    for k in range(interior):
        j = si + k + 1
        if j >= n:
            j -= n
        out[k + 1, 0] = vertices[j, 0]
        out[k + 1, 1] = vertices[j, 1]

    ej = ei + 1 if ei + 1 < n else 0
    out[interior + 1, 0] = (1.0 - te) * vertices[ei, 0] + te * vertices[ej, 0]
    out[interior + 1, 1] = (1.0 - te) * vertices[ei, 1] + te * vertices[ej, 1]
    return out


def build_path_table(vertices: Sequence[Any] | np.ndarray) -> PathTable:
    """頂点列から閉多角形のパス表を構築する。

    Parameters
    ----------
    vertices : Sequence | np.ndarray
        2 点以上の頂点列。各要素は `{"x", "y"}` の Mapping、`x`/`y` 属性を
        持つオブジェクト、(x, y) の組のいずれか。
        最後の頂点から先頭への閉じ辺は自動で追加する。

    Returns
    -------
    PathTable
        n 頂点に対して n 辺を持つパス表。

    Notes
    -----
    周長 0（全頂点が一致）の入力は前提条件違反で、結果は未定義。
    """
    v = as_vertex_array(vertices)
    lengths = _closed_segment_lengths_nb(v)
    total = float(lengths.sum())
    previous, following = _cumulative_ratios_nb(lengths, total)
    return PathTable(
        vertices=v,
        lengths=lengths,
        previous_ratios=previous,
        next_ratios=following,
    )


def locate_start(ratio: float, table: PathTable) -> int:
    """開始比率 `ratio` を含む辺のインデックスを返す。

    `previous_ratio <= ratio` を満たす最後の辺を選ぶため、辺の境界ちょうどの値は
    後ろ側の辺に属する。該当なしは 0。
    """
    return int(_locate_start_nb(table.previous_ratios, float(ratio)))


def locate_end(ratio: float, table: PathTable) -> int:
    """終了比率 `ratio` を含む辺のインデックスを返す。

    `next_ratio >= ratio` を満たす最初の辺を選ぶため、辺の境界ちょうどの値は
    前側の辺に属する。該当なしは最後の辺。
    """
    return int(_locate_end_nb(table.next_ratios, float(ratio)))


def trimmed_points(start_ratio: float, end_ratio: float, table: PathTable) -> np.ndarray:
    """周長比率区間 `[start_ratio, end_ratio]` に対応する点列を返す。

    Returns
    -------
    np.ndarray
        shape (K, 2)。先頭は開始辺上の補間点、続いて区間内の頂点、末尾は終了辺上の補間点。
        `start_ratio == end_ratio` のときは同一点 2 つ。
    """
    return _trim_points_nb(
        table.vertices,
        table.previous_ratios,
        table.next_ratios,
        float(start_ratio),
        float(end_ratio),
    )


def render_trimmed(
    start_ratio: float,
    end_ratio: float,
    table: PathTable,
    sink: PathSink,
) -> None:
    """区間 `[start_ratio, end_ratio]` の周上パスを sink へ出力する。

    Parameters
    ----------
    start_ratio, end_ratio : float
        `0 <= start_ratio <= end_ratio <= 1` を前提とする（検証しない）。
    table : PathTable
        `build_path_table()` の結果。
    sink : PathSink
        出力先。`begin_path` 1 回、`emit_vertex` N 回、`end_path` 1 回の順で呼ぶ。
    """
    emit_points(trimmed_points(start_ratio, end_ratio, table), sink)


@dataclass(frozen=True, slots=True)
class TrimmedPolygon:
    """パス表を保持し、任意区間を繰り返し描画するためのハンドル。"""

    table: PathTable

    def __call__(self, start_ratio: float, end_ratio: float, sink: PathSink) -> None:
        render_trimmed(start_ratio, end_ratio, self.table, sink)

    def points(self, start_ratio: float, end_ratio: float) -> np.ndarray:
        return trimmed_points(start_ratio, end_ratio, self.table)

    def realize(self, start_ratio: float, end_ratio: float) -> RealizedGeometry:
        return geometry_from_lines([self.points(start_ratio, end_ratio)])


def create_polygon(vertices: Sequence[Any] | np.ndarray) -> TrimmedPolygon:
    """頂点列を通る閉多角形のトリム描画ハンドルを生成する。"""
    return TrimmedPolygon(table=build_path_table(vertices))


__all__ = [
    "PathSegment",
    "PathTable",
    "TrimmedPolygon",
    "Vertex",
    "as_vertex_array",
    "build_path_table",
    "create_polygon",
    "locate_end",
    "locate_start",
    "render_trimmed",
    "trimmed_points",
]
