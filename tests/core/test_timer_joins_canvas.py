"""timer / joins / scaled_canvas をテスト。"""

from __future__ import annotations

import numpy as np
import pytest

from sketchkit.core.joins import nested_loop_join, round_robin
from sketchkit.core.scaled_canvas import ScaledCanvas, Size, calculate_scale_factor
from sketchkit.core.timer import Timer, step_timers


def test_timer_reports_progress_until_one() -> None:
    seen: list[float] = []
    timer = Timer(4, seen.append)

    results = []
    while True:
        alive = timer()
        results.append(alive)
        if not alive:
            break

    assert seen == [0.0, 0.25, 0.5, 0.75, 1.0]
    assert results == [True, True, True, True, False]
    assert timer.completed is True


def test_completed_timer_is_noop() -> None:
    seen: list[float] = []
    timer = Timer(1, seen.append)
    assert timer() is True
    assert timer() is False
    assert timer() is False
    assert seen == [0.0, 1.0]


def test_timer_rejects_non_positive_duration() -> None:
    with pytest.raises(ValueError):
        Timer(0, lambda _: None)


def test_step_timers_drops_finished_timers() -> None:
    short = Timer(1, lambda _: None)
    long = Timer(3, lambda _: None)
    timers = [short, long]

    timers = step_timers(timers)
    assert timers == [short, long]
    timers = step_timers(timers)
    assert timers == [long]
    timers = step_timers(timers)
    timers = step_timers(timers)
    assert timers == []


def test_nested_loop_join_order() -> None:
    pairs: list[tuple[str, str]] = []
    nested_loop_join(["A0", "A1", "A2", "A3"], ["B0", "B1"], lambda a, b: pairs.append((a, b)))
    assert pairs == [
        ("A0", "B0"),
        ("A0", "B1"),
        ("A1", "B0"),
        ("A1", "B1"),
        ("A2", "B0"),
        ("A2", "B1"),
        ("A3", "B0"),
        ("A3", "B1"),
    ]


def test_round_robin_visits_each_unordered_pair_once() -> None:
    pairs: list[tuple[str, str]] = []
    round_robin(["A0", "A1", "A2", "A3"], lambda a, b: pairs.append((a, b)))
    assert pairs == [
        ("A0", "A1"),
        ("A0", "A2"),
        ("A0", "A3"),
        ("A1", "A2"),
        ("A1", "A3"),
        ("A2", "A3"),
    ]


def test_round_robin_with_fewer_than_two_items() -> None:
    calls: list[object] = []
    round_robin([], lambda a, b: calls.append(a))
    round_robin(["only"], lambda a, b: calls.append(a))
    assert calls == []


def test_calculate_scale_factor_keeps_aspect_ratio() -> None:
    assert calculate_scale_factor((640, 480), (1280, 1280)) == pytest.approx(2.0)
    assert calculate_scale_factor(Size(640, 480), Size(320, 1000)) == pytest.approx(0.5)


def test_calculate_scale_factor_rejects_empty_content() -> None:
    with pytest.raises(ValueError):
        calculate_scale_factor((0, 480), (100, 100))


def test_scaled_canvas_fit_and_transforms() -> None:
    canvas = ScaledCanvas.fit((640, 480), (320, 480))
    assert canvas.scale_factor == pytest.approx(0.5)
    assert canvas.physical_size == Size(320.0, 240.0)

    pts = np.array([[320.0, 240.0], [0.0, 480.0]])
    physical = canvas.to_physical(pts)
    np.testing.assert_allclose(physical, [[160.0, 120.0], [0.0, 240.0]])
    np.testing.assert_allclose(canvas.to_logical(physical), pts)
