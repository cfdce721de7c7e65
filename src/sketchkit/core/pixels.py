"""
どこで: `src/sketchkit/core/pixels.py`。
何を: 論理座標でピクセルを塗る RGBA バッファと、テクスチャ生成・スナップショット復元を提供する。
なぜ: ピクセル密度（density）を意識せずに、論理ピクセル単位でテクスチャを組み立てるため。

Notes
-----
`pixels` 配列は shape `(height * density, width * density, 4)` の uint8。
論理ピクセル (x, y) は物理ブロック `[y*d:(y+1)*d, x*d:(x+1)*d]` に対応する。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

import numpy as np

from sketchkit.core.color import ColorLike, lerp_color, parse_color
from sketchkit.core.noise import noise_grid
from sketchkit.core.runtime_config import runtime_config

_logger = logging.getLogger(__name__)

SetPixel = Callable[[int, int, float, float, float, float], None]
SetPixelRow = Callable[[int, float, float, float, float], None]
RunSetPixel = Callable[[SetPixel, int, int], None]
RunSetPixelRow = Callable[[SetPixelRow, int], None]


def _channels(r: float, g: float, b: float, a: float) -> np.ndarray:
    values = np.asarray([r, g, b, a], dtype=np.float64)
    return np.clip(np.rint(values), 0.0, 255.0).astype(np.uint8)


@dataclass(slots=True)
class PixelBuffer:
    """論理サイズ `width × height`、密度 `density` の RGBA バッファ。

    Parameters
    ----------
    width, height : int
        論理サイズ（1 以上）。
    density : int | None, optional
        ピクセル密度。None の場合は設定値 `pixels.density`。
    """

    width: int
    height: int
    density: int | None = None
    pixels: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.width = int(self.width)
        self.height = int(self.height)
        if self.width < 1 or self.height < 1:
            raise ValueError(f"PixelBuffer のサイズは 1 以上である必要があります: {self.width}x{self.height}")
        if self.density is None:
            self.density = int(runtime_config().pixel_density)
        self.density = int(self.density)
        if self.density < 1:
            raise ValueError(f"density は 1 以上である必要があります: got={self.density}")
        d = self.density
        self.pixels = np.zeros((self.height * d, self.width * d, 4), dtype=np.uint8)

    @property
    def physical_size(self) -> tuple[int, int]:
        """物理ピクセルでの `(width, height)`。"""
        d = int(self.density)  # type: ignore[arg-type]
        return self.width * d, self.height * d

    def logical_pixels(self) -> np.ndarray:
        """各論理ピクセルの左上物理ピクセルを集めた `(height, width, 4)` のビュー。"""
        d = int(self.density)  # type: ignore[arg-type]
        return self.pixels[::d, ::d]


def set_pixel(
    buf: PixelBuffer, x: int, y: int, r: float, g: float, b: float, a: float = 255
) -> None:
    """論理ピクセル (x, y) に対応する `density × density` ブロックを塗る。

    範囲外の座標は numpy のスライス規則に従い、何も書き込まない。
    """
    d = int(buf.density)  # type: ignore[arg-type]
    x0 = int(x) * d
    y0 = int(y) * d
    if x0 < 0 or y0 < 0:
        return
    buf.pixels[y0 : y0 + d, x0 : x0 + d] = _channels(r, g, b, a)


def set_pixel_row(buf: PixelBuffer, y: int, r: float, g: float, b: float, a: float = 255) -> None:
    """論理行 y に対応する物理行（全幅）を塗る。"""
    d = int(buf.density)  # type: ignore[arg-type]
    y0 = int(y) * d
    if y0 < 0:
        return
    buf.pixels[y0 : y0 + d, :] = _channels(r, g, b, a)


def draw_texture(buf: PixelBuffer, run_set_pixel: RunSetPixel) -> None:
    """全論理座標について `run_set_pixel(setter, x, y)` を呼ぶ（行優先）。"""

    def setter(x: int, y: int, r: float, g: float, b: float, a: float = 255) -> None:
        set_pixel(buf, x, y, r, g, b, a)

    for y in range(buf.height):
        for x in range(buf.width):
            run_set_pixel(setter, x, y)


def draw_texture_row_by_row(buf: PixelBuffer, run_set_pixel_row: RunSetPixelRow) -> None:
    """全論理行について `run_set_pixel_row(setter, y)` を呼ぶ。"""

    def setter(y: int, r: float, g: float, b: float, a: float = 255) -> None:
        set_pixel_row(buf, y, r, g, b, a)

    for y in range(buf.height):
        run_set_pixel_row(setter, y)


def create_texture(
    width: int, height: int, run_set_pixel: RunSetPixel, *, density: int | None = None
) -> PixelBuffer:
    buf = PixelBuffer(width, height, density)
    draw_texture(buf, run_set_pixel)
    return buf


def create_texture_row_by_row(
    width: int, height: int, run_set_pixel_row: RunSetPixelRow, *, density: int | None = None
) -> PixelBuffer:
    buf = PixelBuffer(width, height, density)
    draw_texture_row_by_row(buf, run_set_pixel_row)
    return buf


def _fill_alpha_grid(buf: PixelBuffer, color: ColorLike, alpha_grid: np.ndarray) -> None:
    """論理解像度の alpha 格子を物理解像度へ拡大して、単色 + alpha で塗る。"""
    c = parse_color(color)
    d = int(buf.density)  # type: ignore[arg-type]
    alpha = np.clip(np.rint(alpha_grid), 0.0, 255.0).astype(np.uint8)
    alpha = np.repeat(np.repeat(alpha, d, axis=0), d, axis=1)
    buf.pixels[..., 0] = c.r
    buf.pixels[..., 1] = c.g
    buf.pixels[..., 2] = c.b
    buf.pixels[..., 3] = alpha


def random_texture(
    width: int,
    height: int,
    color: ColorLike,
    max_alpha_factor: float,
    *,
    seed: int | None = None,
    density: int | None = None,
) -> PixelBuffer:
    """単色で、論理ピクセルごとに alpha を `[0, max_alpha_factor * 255)` の一様乱数にする。"""
    buf = PixelBuffer(width, height, density)
    rng = np.random.default_rng(seed)
    max_alpha = float(max_alpha_factor) * 255.0
    _fill_alpha_grid(buf, color, rng.random((buf.height, buf.width)) * max_alpha)
    return buf


def noise_texture(
    width: int,
    height: int,
    color: ColorLike,
    max_alpha_factor: float,
    noise_scale: float = 0.01,
    *,
    seed: int = 0,
    density: int | None = None,
) -> PixelBuffer:
    """単色で、alpha を `noise2(x * noise_scale, y * noise_scale) * max_alpha` にする。"""
    buf = PixelBuffer(width, height, density)
    max_alpha = float(max_alpha_factor) * 255.0
    grid = noise_grid(buf.width, buf.height, float(noise_scale), int(seed))
    _fill_alpha_grid(buf, color, grid * max_alpha)
    return buf


def gradation_texture(
    width: int,
    height: int,
    from_color: ColorLike,
    to_color: ColorLike,
    gradient: float = 1.0,
    *,
    density: int | None = None,
) -> PixelBuffer:
    """上端 `from_color` から下端 `to_color` への縦グラデーション。

    行 y の色は `lerp_color(from_color, to_color, (y / (height - 1)) ** gradient)`。
    高さ 1 のときは `from_color` の 1 行になる。
    """
    max_y = int(height) - 1

    def run_row(setter: SetPixelRow, y: int) -> None:
        t = 0.0 if max_y <= 0 else (y / max_y) ** float(gradient)
        c = lerp_color(from_color, to_color, t)
        setter(y, c.r, c.g, c.b, c.a)

    return create_texture_row_by_row(width, height, run_row, density=density)


def store_pixels(buf: PixelBuffer) -> Callable[[], None]:
    """現在のピクセルを退避し、それを書き戻す `restore()` を返す。

    `restore()` は何度呼んでもよい。退避内容は以降の描画の影響を受けない。
    """
    snapshot = buf.pixels.copy()
    _logger.debug("pixels を退避しました: shape=%s", snapshot.shape)

    def restore() -> None:
        buf.pixels[...] = snapshot

    return restore


__all__ = [
    "PixelBuffer",
    "create_texture",
    "create_texture_row_by_row",
    "draw_texture",
    "draw_texture_row_by_row",
    "gradation_texture",
    "noise_texture",
    "random_texture",
    "set_pixel",
    "set_pixel_row",
    "store_pixels",
]
