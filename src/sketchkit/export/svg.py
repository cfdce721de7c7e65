"""
どこで: `src/sketchkit/export/svg.py`。
何を: RealizedGeometry 列（トリム済みパスなど）を SVG として保存する関数を提供する。
なぜ: ウィンドウなしで、トリム結果を確認・共有できるファイルに落とすため。
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from pathlib import Path

import numpy as np

from sketchkit.core.color import ColorLike, parse_color
from sketchkit.core.realized_geometry import RealizedGeometry
from sketchkit.core.runtime_config import runtime_config

_logger = logging.getLogger(__name__)

_SVG_NS = "http://www.w3.org/2000/svg"


def _fmt(value: float, *, decimals: int) -> str:
    """SVG 出力向けに float を決定的な文字列へ変換して返す（`-0.000` は `0.000`）。"""
    text = f"{float(value):.{int(decimals)}f}"
    if text.startswith("-0") and float(text) == 0.0:
        return text[1:]
    return text


def _iter_polylines(geometry: RealizedGeometry) -> Iterator[np.ndarray]:
    """2 点以上の polyline（shape (N,2)）だけを列挙する。"""
    offsets = geometry.offsets
    for start, end in zip(offsets[:-1], offsets[1:]):
        start_i = int(start)
        end_i = int(end)
        if end_i - start_i < 2:
            continue
        yield geometry.coords[start_i:end_i]


def _polyline_to_d(polyline_xy: np.ndarray, *, decimals: int) -> str:
    """polyline を SVG path の d 属性（`M x y L x y ...`）へ変換して返す。"""
    parts = [f"M {_fmt(polyline_xy[0, 0], decimals=decimals)} {_fmt(polyline_xy[0, 1], decimals=decimals)}"]
    for xy in polyline_xy[1:]:
        parts.append(f"L {_fmt(xy[0], decimals=decimals)} {_fmt(xy[1], decimals=decimals)}")
    return " ".join(parts)


def export_svg(
    geometries: Sequence[RealizedGeometry],
    path: str | Path,
    *,
    canvas_size: tuple[int, int],
    stroke: ColorLike = "#000000",
    stroke_width: float = 1.0,
    decimals: int | None = None,
) -> Path:
    """RealizedGeometry 列を SVG として保存する。

    Parameters
    ----------
    geometries : Sequence[RealizedGeometry]
        出力するジオメトリ列。各 polyline は `<path>` 1 要素になる。
    path : str or Path
        出力先パス。親ディレクトリは自動作成する。
    canvas_size : tuple[int, int]
        viewBox と width/height に使うキャンバス寸法。
    stroke : ColorLike, default "#000000"
        線色。アルファが 255 未満なら `stroke-opacity` も出力する。
    stroke_width : float, default 1.0
        線幅（viewBox 単位）。
    decimals : int | None, optional
        座標の小数桁数。None の場合は設定値 `export.svg.decimals`。

    Returns
    -------
    Path
        保存先パス。

    Raises
    ------
    ValueError
        canvas_size が正でない場合、または decimals が負の場合。
    """
    _path = Path(path)
    canvas_w, canvas_h = canvas_size
    if canvas_w <= 0 or canvas_h <= 0:
        raise ValueError(f"canvas_size は正の値である必要があります: got={canvas_size!r}")

    if decimals is None:
        decimals = runtime_config().svg_decimals
    decimals = int(decimals)
    if decimals < 0:
        raise ValueError(f"decimals は 0 以上である必要があります: got={decimals}")

    color = parse_color(stroke)
    stroke_attrs = f'stroke="{color.to_hex().upper()}"'
    if color.a < 255:
        stroke_attrs += f' stroke-opacity="{_fmt(color.a / 255.0, decimals=3)}"'
    width_text = _fmt(stroke_width, decimals=decimals)
    w_text = str(int(canvas_w))
    h_text = str(int(canvas_h))

    lines: list[str] = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append(f'<svg xmlns="{_SVG_NS}" viewBox="0 0 {w_text} {h_text}" width="{w_text}" height="{h_text}">')

    n_written = 0
    n_skipped = 0
    for geometry in geometries:
        n_skipped += geometry.n_lines
        for polyline_xy in _iter_polylines(geometry):
            n_skipped -= 1
            n_written += 1
            d = _polyline_to_d(polyline_xy, decimals=decimals)
            lines.append(
                (
                    f'  <path d="{d}" fill="none" {stroke_attrs} '
                    f'stroke-width="{width_text}" stroke-linecap="round" '
                    f'stroke-linejoin="round" />'
                )
            )

    lines.append("</svg>")

    if n_skipped:
        _logger.warning("2 点未満の polyline を %d 本スキップしました", n_skipped)

    _path.parent.mkdir(parents=True, exist_ok=True)
    with _path.open("w", encoding="utf-8", newline="\n") as f:
        f.write("\n".join(lines) + "\n")

    _logger.debug("SVG を保存しました: %s (paths=%d)", _path, n_written)
    return _path


__all__ = ["export_svg"]
