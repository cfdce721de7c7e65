"""core.curve（Catmull-Rom 曲線）をテスト。"""

from __future__ import annotations

import numpy as np

from sketchkit.core.curve import curve_control_points, curve_geometry, sample_curve
from sketchkit.core.shapes.polygon import Vertex

SQUARE = [Vertex(30.0, 30.0), Vertex(70.0, 30.0), Vertex(70.0, 70.0), Vertex(30.0, 70.0)]


def test_open_control_points_duplicate_ends() -> None:
    control = curve_control_points(SQUARE)
    assert control.shape == (6, 2)
    np.testing.assert_array_equal(control[0], control[1])
    np.testing.assert_array_equal(control[-1], control[-2])


def test_closed_control_points_append_first_three() -> None:
    control = curve_control_points(SQUARE, closed=True)
    assert control.shape == (7, 2)
    np.testing.assert_array_equal(control[4:], control[:3])


def test_open_curve_passes_through_every_vertex() -> None:
    samples = 8
    pts = sample_curve(curve_control_points(SQUARE), samples)

    # 3 区間、継ぎ目を共有するので 8 + 7 + 7 点。
    assert pts.shape == (22, 2)
    np.testing.assert_allclose(pts[0], [30.0, 30.0])
    np.testing.assert_allclose(pts[7], [70.0, 30.0])
    np.testing.assert_allclose(pts[14], [70.0, 70.0])
    np.testing.assert_allclose(pts[-1], [30.0, 70.0])


def test_closed_curve_returns_to_start() -> None:
    pts = sample_curve(curve_control_points(SQUARE, closed=True), 5)
    # 曲線は 2 番目の頂点から始まり、1 周して同じ点に戻る。
    np.testing.assert_allclose(pts[0], [70.0, 30.0])
    np.testing.assert_allclose(pts[-1], [70.0, 30.0])
    assert pts.shape == (4 * 5 - 3, 2)


def test_straight_control_points_give_straight_curve() -> None:
    control = np.array([[0.0, 0.0], [1.0, 0.0], [2.0, 0.0], [3.0, 0.0]])
    pts = sample_curve(control, 11)
    np.testing.assert_allclose(pts[:, 1], 0.0)
    np.testing.assert_allclose(pts[:, 0], np.linspace(1.0, 2.0, 11), atol=1e-12)


def test_tightness_one_is_polyline() -> None:
    control = np.array([[0.0, 0.0], [0.0, 0.0], [10.0, 10.0], [20.0, 0.0], [20.0, 0.0]])
    pts = sample_curve(control, 3, tightness=1.0)
    np.testing.assert_allclose(pts, [[0.0, 0.0], [5.0, 5.0], [10.0, 10.0], [15.0, 5.0], [20.0, 0.0]])


def test_too_few_control_points_give_empty_curve() -> None:
    assert sample_curve(np.zeros((3, 2)), 8).shape == (0, 2)
    assert curve_geometry([Vertex(1.0, 1.0)]).n_lines == 0


def test_curve_geometry_is_single_polyline() -> None:
    geom = curve_geometry(SQUARE, closed=True, samples_per_segment=4)
    assert geom.n_lines == 1
    assert geom.coords.shape == (4 * 4 - 3, 2)
