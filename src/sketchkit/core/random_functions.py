"""
どこで: `src/sketchkit/core/random_functions.py`。
何を: [0,1) を返す乱数源 1 つから、範囲指定・整数・離散・配列選択・曲線変形・2D ベクトルの
      各種乱数ヘルパーを組み立てる。
なぜ: seed 付きの乱数源を差し替えるだけで、スケッチ全体の乱数を再現可能にするため。
"""

from __future__ import annotations

import math
from typing import Callable, MutableSequence, Sequence, TypeVar

import numpy as np

RandomSource = Callable[[], float]
Curve = Callable[[float], float]
T = TypeVar("T")

TWO_PI = 2.0 * math.pi


class IntegerRandom:
    """整数乱数。"""

    def __init__(self, source: RandomSource) -> None:
        self._source = source

    def value(self, max_int: int) -> int:
        """0 以上 `max_int` 未満の整数。`max_int` が負の場合は想定しない。"""
        return int(math.floor(self._source() * max_int))

    def between(self, min_int: int, max_int: int) -> int:
        """`min_int` 以上 `max_int` 未満の整数。"""
        return int(min_int) + int(math.floor(self._source() * (max_int - min_int)))


class DiscreteRandom:
    """`step` 間隔に量子化した乱数。"""

    def __init__(self, source: RandomSource) -> None:
        self._source = source

    def ratio(self, step: float) -> float:
        """例: step=0.25 なら 0, 0.25, 0.5, 0.75 のいずれか。"""
        return math.floor(self._source() / step) * step

    def value(self, step: float, max_value: float) -> float:
        return math.floor(self._source() * (max_value / step)) * step

    def between(self, step: float, min_value: float, max_value: float) -> float:
        return min_value + math.floor(self._source() * ((max_value - min_value) / step)) * step

    def angle(self, step: float) -> float:
        """[0, 2π) を `step` ラジアン刻みで量子化した角度。"""
        return math.floor(self._source() * (TWO_PI / step)) * step


class ArrayRandom:
    """シーケンスからのランダム選択。空シーケンスは想定しない。"""

    def __init__(self, source: RandomSource) -> None:
        self._source = source

    def _index(self, length: int) -> int:
        return int(math.floor(self._source() * length))

    def get(self, items: Sequence[T]) -> T:
        return items[self._index(len(items))]

    def remove_get(self, items: MutableSequence[T]) -> T:
        """要素を 1 つ取り除いて返す（`items` を変更する）。"""
        return items.pop(self._index(len(items)))


class CurvedRandom:
    """[0,1) の乱数を `curve` で写像してから使う乱数。"""

    def __init__(self, source: RandomSource) -> None:
        self._source = source

    def ratio(self, curve: Curve) -> float:
        return curve(self._source())

    def value(self, curve: Curve, magnitude: float) -> float:
        return curve(self._source()) * magnitude

    def between(self, curve: Curve, start: float, end: float) -> float:
        """`start > end` は想定しない。"""
        return start + curve(self._source()) * (end - start)


class Vector2DRandom:
    """ランダムな向きの 2D ベクトル（shape (2,) の float64 配列）。"""

    def __init__(self, source: RandomSource) -> None:
        self._source = source

    def unit(self) -> np.ndarray:
        angle = self._source() * TWO_PI
        return np.array([math.cos(angle), math.sin(angle)], dtype=np.float64)

    def with_length(self, length: float) -> np.ndarray:
        return self.unit() * float(length)


class RandomFunctions:
    """乱数源 `source`（[0,1) を返す関数）を共有する乱数ヘルパー集。

    Attributes
    ----------
    integer : IntegerRandom
    discrete : DiscreteRandom
    array : ArrayRandom
    curved : CurvedRandom
    vector2d : Vector2DRandom
    """

    def __init__(self, source: RandomSource) -> None:
        self._source = source
        self.integer = IntegerRandom(source)
        self.discrete = DiscreteRandom(source)
        self.array = ArrayRandom(source)
        self.curved = CurvedRandom(source)
        self.vector2d = Vector2DRandom(source)

    def ratio(self) -> float:
        """[0, 1) の乱数。"""
        return float(self._source())

    def value(self, max_value: float) -> float:
        """[0, max_value) の乱数。"""
        return self._source() * max_value

    def between(self, min_value: float, max_value: float) -> float:
        """[min_value, max_value) の乱数。`min_value > max_value` は想定しない。"""
        return min_value + self._source() * (max_value - min_value)

    def angle(self) -> float:
        """[0, 2π) のラジアン角。"""
        return self._source() * TWO_PI

    def signed(self, n: float, positive_probability: float = 0.5) -> float:
        """確率 `positive_probability` で `n`、それ以外で `-n` を返す。"""
        return n if self._source() < positive_probability else -n

    def boolean(self, probability: float) -> bool:
        """確率 `probability` で True を返す。"""
        return bool(self._source() < probability)

    def from_absolute(self, absolute_value: float) -> float:
        """[-absolute_value, absolute_value) の乱数。"""
        return -absolute_value + self._source() * 2.0 * absolute_value


def create_random_functions(
    source: RandomSource | None = None,
    *,
    seed: int | None = None,
) -> RandomFunctions:
    """乱数ヘルパー集を生成する。

    Parameters
    ----------
    source : Callable[[], float] | None, optional
        [0,1) を返す乱数源。None の場合は `numpy.random.default_rng(seed).random`。
    seed : int | None, optional
        `source` 省略時の seed。`source` 指定時は無視する。
    """
    if source is None:
        rng = np.random.default_rng(seed)

        def source() -> float:
            return float(rng.random())

    return RandomFunctions(source)


__all__ = [
    "ArrayRandom",
    "CurvedRandom",
    "DiscreteRandom",
    "IntegerRandom",
    "RandomFunctions",
    "Vector2DRandom",
    "create_random_functions",
]
