"""
どこで: `src/sketchkit/core/scaled_canvas.py`。
何を: 論理サイズのキャンバスを、縦横比を保ったままコンテナへ収める倍率と座標変換を提供する。
なぜ: 描画は常に論理座標で書き、出力先の大きさだけを後から差し替えられるようにするため。
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True)
class Size:
    """幅と高さ。"""

    width: float
    height: float


def _as_size(value: Size | tuple[float, float]) -> Size:
    if isinstance(value, Size):
        return value
    w, h = value
    return Size(float(w), float(h))


def calculate_scale_factor(
    content_size: Size | tuple[float, float],
    container_size: Size | tuple[float, float],
) -> float:
    """`content_size` を縦横比を保って `container_size` に収める倍率を返す。

    `min(container.width / content.width, container.height / content.height)`。
    """
    content = _as_size(content_size)
    container = _as_size(container_size)
    if content.width <= 0 or content.height <= 0:
        raise ValueError(f"content_size は正である必要があります: {content}")
    return min(container.width / content.width, container.height / content.height)


@dataclass(frozen=True, slots=True)
class ScaledCanvas:
    """論理サイズと倍率の組。

    Attributes
    ----------
    logical_size : Size
        描画コードが前提とする論理サイズ。
    scale_factor : float
        論理座標 → 物理座標の倍率。
    """

    logical_size: Size
    scale_factor: float

    @classmethod
    def fit(
        cls,
        logical_size: Size | tuple[float, float],
        container_size: Size | tuple[float, float],
    ) -> "ScaledCanvas":
        logical = _as_size(logical_size)
        return cls(logical, calculate_scale_factor(logical, container_size))

    @property
    def physical_size(self) -> Size:
        s = self.scale_factor
        return Size(self.logical_size.width * s, self.logical_size.height * s)

    def to_physical(self, points: np.ndarray) -> np.ndarray:
        """論理座標の点列を物理座標へ変換した新しい配列を返す。"""
        return np.asarray(points, dtype=np.float64) * self.scale_factor

    def to_logical(self, points: np.ndarray) -> np.ndarray:
        return np.asarray(points, dtype=np.float64) / self.scale_factor


__all__ = ["ScaledCanvas", "Size", "calculate_scale_factor"]
