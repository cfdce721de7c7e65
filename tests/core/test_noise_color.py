"""core.noise と core.color をテスト。"""

from __future__ import annotations

import numpy as np
import pytest

from sketchkit.core.color import Color, color_with_alpha, lerp_color, parse_color, reverse_color
from sketchkit.core.noise import noise2, noise_grid, permutation_table


def test_noise2_is_in_unit_range_and_deterministic() -> None:
    rng = np.random.default_rng(0)
    pts = rng.random((200, 2)) * 50.0
    values = [noise2(x, y, seed=3) for x, y in pts]
    assert all(0.0 <= v <= 1.0 for v in values)
    assert values == [noise2(x, y, seed=3) for x, y in pts]


def test_noise2_is_half_on_integer_lattice() -> None:
    assert noise2(3.0, 7.0) == pytest.approx(0.5)
    assert noise2(0.0, 0.0, seed=9) == pytest.approx(0.5)


def test_noise_depends_on_seed() -> None:
    a = noise_grid(16, 16, 0.37, seed=1)
    b = noise_grid(16, 16, 0.37, seed=2)
    assert not np.allclose(a, b)


def test_noise_grid_matches_pointwise_noise() -> None:
    grid = noise_grid(5, 3, 0.2, seed=4)
    assert grid.shape == (3, 5)
    assert grid[2, 4] == pytest.approx(noise2(4 * 0.2, 2 * 0.2, seed=4))


def test_noise_grid_empty() -> None:
    assert noise_grid(0, 4).shape == (4, 0)


def test_permutation_table_layout() -> None:
    table = permutation_table(5)
    assert table.shape == (512,)
    assert sorted(table[:256].tolist()) == list(range(256))
    np.testing.assert_array_equal(table[:256], table[256:])


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("#fff", Color(255, 255, 255, 255)),
        ("#0080ff", Color(0, 128, 255, 255)),
        ("#0080ff40", Color(0, 128, 255, 64)),
        ("#1234", Color(0x11, 0x22, 0x33, 0x44)),
        ((10, 20, 30), Color(10, 20, 30, 255)),
        ([10, 20, 30, 40], Color(10, 20, 30, 40)),
        ((300, -5, 12.6), Color(255, 0, 13, 255)),
        (Color(1, 2, 3, 4), Color(1, 2, 3, 4)),
    ],
)
def test_parse_color(value, expected: Color) -> None:
    assert parse_color(value) == expected


@pytest.mark.parametrize("value", ["fff", "#ff", "#gggggg", (1, 2), ("a", "b", "c"), 42, None])
def test_parse_color_rejects_invalid(value) -> None:
    with pytest.raises(ValueError):
        parse_color(value)


def test_color_with_alpha_and_reverse() -> None:
    assert color_with_alpha("#102030", 128) == Color(16, 32, 48, 128)
    assert reverse_color(Color(0, 100, 255, 7)) == Color(255, 155, 0, 7)


def test_lerp_color() -> None:
    a = Color(0, 0, 0, 0)
    b = Color(200, 100, 50, 255)
    assert lerp_color(a, b, 0.0) == a
    assert lerp_color(a, b, 1.0) == b
    assert lerp_color(a, b, 0.5) == Color(100, 50, 25, 128)
    assert lerp_color(a, b, 2.0) == b


def test_color_to_hex() -> None:
    assert Color(255, 0, 16).to_hex() == "#ff0010"
    assert Color(255, 0, 16, 1).to_hex(with_alpha=True) == "#ff001001"
