"""PolylineRecorder / RealizedGeometry の組み立てをテスト。"""

from __future__ import annotations

import numpy as np
import pytest

from sketchkit.core.path_sink import PathSink, PolylineRecorder
from sketchkit.core.realized_geometry import (
    RealizedGeometry,
    concat_realized_geometries,
    empty_geometry,
    geometry_from_lines,
)


def test_recorder_satisfies_path_sink_protocol() -> None:
    assert isinstance(PolylineRecorder(), PathSink)


def test_recorder_collects_one_polyline_per_bracket() -> None:
    rec = PolylineRecorder()
    rec.begin_path()
    rec.emit_vertex(0.0, 0.0)
    rec.emit_vertex(1.0, 2.0)
    rec.end_path()
    rec.begin_path()
    rec.emit_vertex(5.0, 5.0)
    rec.end_path()

    geom = rec.geometry()
    assert rec.n_paths == 2
    assert geom.offsets.tolist() == [0, 2, 3]
    np.testing.assert_allclose(geom.coords, [[0.0, 0.0], [1.0, 2.0], [5.0, 5.0]])


def test_recorder_rejects_nested_begin() -> None:
    rec = PolylineRecorder()
    rec.begin_path()
    with pytest.raises(RuntimeError):
        rec.begin_path()


def test_recorder_rejects_vertex_outside_bracket() -> None:
    rec = PolylineRecorder()
    with pytest.raises(RuntimeError):
        rec.emit_vertex(0.0, 0.0)


def test_recorder_rejects_end_without_begin() -> None:
    with pytest.raises(RuntimeError):
        PolylineRecorder().end_path()


def test_recorder_geometry_requires_closed_path() -> None:
    rec = PolylineRecorder()
    rec.begin_path()
    with pytest.raises(RuntimeError):
        rec.geometry()


def test_recorder_clear() -> None:
    rec = PolylineRecorder()
    rec.begin_path()
    rec.emit_vertex(0.0, 0.0)
    rec.end_path()
    rec.clear()
    assert rec.n_paths == 0
    assert rec.geometry().n_lines == 0


def test_realized_geometry_is_read_only_copy() -> None:
    coords = np.array([[0.0, 0.0], [1.0, 1.0]])
    geom = RealizedGeometry(coords=coords, offsets=np.array([0, 2]))
    coords[0, 0] = 99.0

    assert geom.coords[0, 0] == 0.0
    assert geom.coords.flags.writeable is False
    assert geom.offsets.dtype == np.int32


@pytest.mark.parametrize(
    ("coords", "offsets"),
    [
        (np.zeros((2, 3)), [0, 2]),
        (np.zeros((2, 2)), [1, 2]),
        (np.zeros((2, 2)), [0, 1]),
        (np.zeros((3, 2)), [0, 2, 1, 3]),
        (np.zeros((0, 2)), []),
    ],
)
def test_realized_geometry_validation(coords: np.ndarray, offsets: list[int]) -> None:
    with pytest.raises(ValueError):
        RealizedGeometry(coords=coords, offsets=np.asarray(offsets, dtype=np.int32))


def test_geometry_helpers() -> None:
    assert empty_geometry().n_lines == 0
    assert geometry_from_lines([]).n_lines == 0

    a = geometry_from_lines([np.array([[0.0, 0.0], [1.0, 0.0]])])
    b = geometry_from_lines([np.array([[2.0, 2.0]]), np.array([[3.0, 3.0], [4.0, 4.0]])])
    merged = concat_realized_geometries(a, b)

    assert merged.offsets.tolist() == [0, 2, 3, 5]
    np.testing.assert_allclose(merged.line(2), [[3.0, 3.0], [4.0, 4.0]])
    assert len(merged.lines()) == 3
