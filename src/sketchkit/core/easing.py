"""
どこで: `src/sketchkit/core/easing.py`。
何を: 比率 [0,1] → [0,1] のイージング関数群と、その合成関数を提供する。
なぜ: アニメーションの進行率（トリム区間など）を曲線で整形するため。

Notes
-----
名前付きイージングはすべて `f(0) == 0` かつ `f(1) == 1` を満たす。
back 系は途中で [0,1] をはみ出す。
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

import numpy as np

from sketchkit.core.runtime_config import runtime_config

Easing = Callable[[float], float]


def _square(x: float) -> float:
    return x * x


def _cube(x: float) -> float:
    return x * x * x


def _pow4(x: float) -> float:
    return _square(x * x)


def linear(x: float) -> float:
    return x


# -- in ----


def in_quad(x: float) -> float:
    return _square(x)


def in_cubic(x: float) -> float:
    return _cube(x)


def in_quart(x: float) -> float:
    return _pow4(x)


def in_expo(x: float) -> float:
    return 2.0 ** (10.0 * (x - 1.0)) if x else 0.0


def _resolve_coefficient(coefficient: float | None) -> float:
    if coefficient is None:
        return float(runtime_config().back_coefficient)
    return float(coefficient)


def create_in_back(coefficient: float | None = None) -> Easing:
    """"easeInBack" を生成する。`coefficient` 省略時は設定値（既定 1.70158）。"""
    c = _resolve_coefficient(coefficient)

    def in_back(x: float) -> float:
        return x * x * ((c + 1.0) * x - c)

    return in_back


# -- out ----


def out_quad(x: float) -> float:
    return -_square(x - 1.0) + 1.0


def out_cubic(x: float) -> float:
    return _cube(x - 1.0) + 1.0


def out_quart(x: float) -> float:
    return -_pow4(x - 1.0) + 1.0


def out_expo(x: float) -> float:
    return -(2.0 ** (-10.0 * x)) + 1.0 if x < 1.0 else 1.0


def create_out_back(coefficient: float | None = None) -> Easing:
    """"easeOutBack" を生成する。`coefficient` 省略時は設定値（既定 1.70158）。"""
    c = _resolve_coefficient(coefficient)

    def out_back(x: float) -> float:
        r = x - 1.0
        r2 = r * r
        return (c + 1.0) * (r * r2) + c * r2 + 1.0

    return out_back


# -- composition ----


def concatenate(easing_a: Easing, easing_b: Easing, threshold_ratio: float = 0.5) -> Easing:
    """2 つのイージングを正規化せずに連結する。

    `x < threshold_ratio` では `easing_a(x / threshold_ratio)`、
    それ以外では `easing_b((x - threshold_ratio) / (1 - threshold_ratio))` を返す。
    """
    t = float(threshold_ratio)
    inverse_t = 1.0 / t
    ratio_b = 1.0 - t

    def concatenated(x: float) -> float:
        if x < t:
            return easing_a(inverse_t * x)
        return easing_b((x - t) / ratio_b)

    return concatenated


def integrate(easing_a: Easing, easing_b: Easing, threshold_ratio: float = 0.5) -> Easing:
    """2 つのイージングを [0, t] と [t, 1] の値域へ正規化して接続する。

    Parameters
    ----------
    easing_a, easing_b : Easing
        前半/後半のイージング。
    threshold_ratio : float, default 0.5
        切り替え位置 t。出力も x = t で t になる。
    """
    t = float(threshold_ratio)
    inverse_t = 1.0 / t
    ratio_b = 1.0 - t

    def integrated(x: float) -> float:
        if x < t:
            return t * easing_a(inverse_t * x)
        return t + ratio_b * easing_b((x - t) / ratio_b)

    return integrated


in_out_quad = integrate(in_quad, out_quad)
in_out_cubic = integrate(in_cubic, out_cubic)
in_out_quart = integrate(in_quart, out_quart)
in_out_expo = integrate(in_expo, out_expo)

out_in_quad = integrate(out_quad, in_quad)
out_in_cubic = integrate(out_cubic, in_cubic)
out_in_quart = integrate(out_quart, in_quart)
out_in_expo = integrate(out_expo, in_expo)


def create_in_out_back(coefficient: float | None = None) -> Easing:
    return integrate(create_in_back(coefficient), create_out_back(coefficient))


def create_out_in_back(coefficient: float | None = None) -> Easing:
    return integrate(create_out_back(coefficient), create_in_back(coefficient))


# -- lookup ----


class EaseDirection(str, Enum):
    IN = "in"
    OUT = "out"
    IN_OUT = "in_out"
    OUT_IN = "out_in"


class EaseCurve(str, Enum):
    QUAD = "quad"
    CUBIC = "cubic"
    QUART = "quart"
    EXPO = "expo"
    BACK = "back"


_FIXED_EASINGS: dict[tuple[EaseCurve, EaseDirection], Easing] = {
    (EaseCurve.QUAD, EaseDirection.IN): in_quad,
    (EaseCurve.QUAD, EaseDirection.OUT): out_quad,
    (EaseCurve.QUAD, EaseDirection.IN_OUT): in_out_quad,
    (EaseCurve.QUAD, EaseDirection.OUT_IN): out_in_quad,
    (EaseCurve.CUBIC, EaseDirection.IN): in_cubic,
    (EaseCurve.CUBIC, EaseDirection.OUT): out_cubic,
    (EaseCurve.CUBIC, EaseDirection.IN_OUT): in_out_cubic,
    (EaseCurve.CUBIC, EaseDirection.OUT_IN): out_in_cubic,
    (EaseCurve.QUART, EaseDirection.IN): in_quart,
    (EaseCurve.QUART, EaseDirection.OUT): out_quart,
    (EaseCurve.QUART, EaseDirection.IN_OUT): in_out_quart,
    (EaseCurve.QUART, EaseDirection.OUT_IN): out_in_quart,
    (EaseCurve.EXPO, EaseDirection.IN): in_expo,
    (EaseCurve.EXPO, EaseDirection.OUT): out_expo,
    (EaseCurve.EXPO, EaseDirection.IN_OUT): in_out_expo,
    (EaseCurve.EXPO, EaseDirection.OUT_IN): out_in_expo,
}

_BACK_FACTORIES: dict[EaseDirection, Callable[[float | None], Easing]] = {
    EaseDirection.IN: create_in_back,
    EaseDirection.OUT: create_out_back,
    EaseDirection.IN_OUT: create_in_out_back,
    EaseDirection.OUT_IN: create_out_in_back,
}


def get_easing(
    curve: EaseCurve | str,
    direction: EaseDirection | str = EaseDirection.IN,
    *,
    coefficient: float | None = None,
) -> Easing:
    """曲線種別と方向からイージング関数を返す。

    Raises
    ------
    ValueError
        未知の curve/direction が指定された場合。
    """
    try:
        curve_e = EaseCurve(curve)
        direction_e = EaseDirection(direction)
    except ValueError as exc:
        raise ValueError(f"未知のイージング: curve={curve!r}, direction={direction!r}") from exc

    if curve_e is EaseCurve.BACK:
        return _BACK_FACTORIES[direction_e](coefficient)
    return _FIXED_EASINGS[(curve_e, direction_e)]


def easing_names() -> list[str]:
    """`<direction>_<curve>` 形式の名前一覧を返す（`linear` を含む）。"""
    names = ["linear"]
    for direction in EaseDirection:
        for curve in EaseCurve:
            names.append(f"{direction.value}_{curve.value}")
    return names


def easing_by_name(name: str, *, coefficient: float | None = None) -> Easing:
    """`in_out_cubic` のような名前からイージング関数を返す。"""
    if name == "linear":
        return linear
    direction, sep, curve = str(name).rpartition("_")
    if not sep:
        raise ValueError(f"未知のイージング名: {name!r}")
    return get_easing(curve, direction, coefficient=coefficient)


def sample_easing(easing: Easing, n: int = 11) -> np.ndarray:
    """[0,1] を n 等分点でサンプルし、shape (n, 2) の (x, easing(x)) を返す。"""
    count = max(2, int(n))
    xs = np.linspace(0.0, 1.0, num=count, dtype=np.float64)
    ys = np.asarray([easing(float(x)) for x in xs], dtype=np.float64)
    return np.stack([xs, ys], axis=1)


__all__ = [
    "EaseCurve",
    "EaseDirection",
    "Easing",
    "concatenate",
    "create_in_back",
    "create_in_out_back",
    "create_out_back",
    "create_out_in_back",
    "easing_by_name",
    "easing_names",
    "get_easing",
    "in_cubic",
    "in_expo",
    "in_out_cubic",
    "in_out_expo",
    "in_out_quad",
    "in_out_quart",
    "in_quad",
    "in_quart",
    "integrate",
    "linear",
    "out_cubic",
    "out_expo",
    "out_in_cubic",
    "out_in_expo",
    "out_in_quad",
    "out_in_quart",
    "out_quad",
    "out_quart",
    "sample_easing",
]
