"""core.random_functions を固定の乱数源でテスト。"""

from __future__ import annotations

import itertools
import math

import numpy as np
import pytest

from sketchkit.core.easing import in_quad
from sketchkit.core.random_functions import create_random_functions


def _fixed(*values: float):
    it = itertools.cycle(values)
    return lambda: next(it)


def test_scalar_helpers() -> None:
    r = create_random_functions(_fixed(0.25))
    assert r.ratio() == 0.25
    assert r.value(8.0) == pytest.approx(2.0)
    assert r.between(10.0, 20.0) == pytest.approx(12.5)
    assert r.angle() == pytest.approx(math.pi / 2)
    assert r.from_absolute(4.0) == pytest.approx(-2.0)


def test_signed_and_boolean() -> None:
    r = create_random_functions(_fixed(0.3, 0.7))
    assert r.signed(5.0) == 5.0
    assert r.signed(5.0) == -5.0
    assert r.signed(5.0, positive_probability=0.2) == -5.0
    assert r.signed(5.0, positive_probability=0.8) == 5.0
    assert r.boolean(0.5) is True
    assert r.boolean(0.5) is False


def test_integer_helpers() -> None:
    r = create_random_functions(_fixed(0.99))
    assert r.integer.value(10) == 9
    assert r.integer.between(5, 8) == 7


def test_discrete_helpers() -> None:
    r = create_random_functions(_fixed(0.6))
    assert r.discrete.ratio(0.25) == pytest.approx(0.5)
    assert r.discrete.value(2.0, 10.0) == pytest.approx(6.0)
    assert r.discrete.between(5.0, 100.0, 200.0) == pytest.approx(160.0)
    assert r.discrete.angle(math.pi / 2) == pytest.approx(math.pi)


def test_array_helpers() -> None:
    r = create_random_functions(_fixed(0.5))
    items = ["a", "b", "c", "d"]
    assert r.array.get(items) == "c"
    assert r.array.remove_get(items) == "c"
    assert items == ["a", "b", "d"]


def test_curved_helpers() -> None:
    r = create_random_functions(_fixed(0.5))
    assert r.curved.ratio(in_quad) == pytest.approx(0.25)
    assert r.curved.value(in_quad, 8.0) == pytest.approx(2.0)
    assert r.curved.between(in_quad, 10.0, 14.0) == pytest.approx(11.0)


def test_vector2d_helpers() -> None:
    r = create_random_functions(_fixed(0.25))
    np.testing.assert_allclose(r.vector2d.unit(), [0.0, 1.0], atol=1e-12)
    np.testing.assert_allclose(r.vector2d.with_length(3.0), [0.0, 3.0], atol=1e-12)


def test_seeded_source_is_reproducible() -> None:
    a = create_random_functions(seed=42)
    b = create_random_functions(seed=42)
    xs = [a.ratio() for _ in range(5)]
    ys = [b.ratio() for _ in range(5)]
    assert xs == ys
    assert all(0.0 <= x < 1.0 for x in xs)
