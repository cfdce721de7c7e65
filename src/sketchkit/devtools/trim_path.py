"""
どこで: `src/sketchkit/devtools/trim_path.py`。
何を: 頂点列と比率区間を受け取り、トリム済みの点列を表示（任意で SVG 保存）する CLI。
なぜ: スケッチを書かずに、境界値や折り返し時の出力点を手早く確かめるため。
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from pathlib import Path

import numpy as np

from sketchkit.core.realized_geometry import geometry_from_lines
from sketchkit.core.runtime_config import output_root_dir
from sketchkit.core.shapes.polygon import build_path_table, trimmed_points
from sketchkit.export.svg import export_svg

_logger = logging.getLogger(__name__)

_DEFAULT_SVG_NAME = "trim.svg"


def parse_vertices(text: str) -> np.ndarray:
    """`"x,y x,y ..."` 形式の文字列を shape (N,2) の配列へ変換する。

    Raises
    ------
    ValueError
        書式が不正な場合、または頂点が 2 未満の場合。
    """
    rows: list[tuple[float, float]] = []
    for token in str(text).split():
        parts = token.split(",")
        if len(parts) != 2:
            raise ValueError(f"頂点は 'x,y' 形式である必要があります: got={token!r}")
        try:
            rows.append((float(parts[0]), float(parts[1])))
        except ValueError as exc:
            raise ValueError(f"頂点の座標は数値である必要があります: got={token!r}") from exc
    if len(rows) < 2:
        raise ValueError(f"頂点は 2 つ以上必要です: got={len(rows)}")
    return np.asarray(rows, dtype=np.float64)


def _check_ratios(start: float, end: float) -> None:
    if not (0.0 <= start <= end <= 1.0):
        raise ValueError(f"0 <= start <= end <= 1 である必要があります: start={start}, end={end}")


def _default_canvas_size(vertices: np.ndarray) -> tuple[int, int]:
    w = max(1, int(math.ceil(float(vertices[:, 0].max()))))
    h = max(1, int(math.ceil(float(vertices[:, 1].max()))))
    return w, h


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="python -m sketchkit trim")
    p.add_argument("--vertices", required=True, help='閉多角形の頂点列（例: "0,0 10,0 10,10 0,10"）')
    p.add_argument("--start", type=float, default=0.0, help="開始比率（0..1）")
    p.add_argument("--end", type=float, default=1.0, help="終了比率（0..1）")
    p.add_argument(
        "--svg",
        nargs="?",
        const="",
        default=None,
        help=f"SVG を保存する（パス省略時: <paths.output_dir>/{_DEFAULT_SVG_NAME}）",
    )
    p.add_argument(
        "--canvas-size",
        nargs=2,
        type=int,
        metavar=("W", "H"),
        default=None,
        help="SVG のキャンバス寸法（省略時: 頂点の最大座標）",
    )
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    args = _parse_args(argv)
    try:
        vertices = parse_vertices(args.vertices)
        start = float(args.start)
        end = float(args.end)
        _check_ratios(start, end)
        if np.all(vertices == vertices[0]):
            raise ValueError("周長 0 の多角形はトリムできません")
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    table = build_path_table(vertices)
    points = trimmed_points(start, end, table)
    for x, y in points:
        print(f"{float(x):g} {float(y):g}")

    if args.svg is not None:
        path = Path(args.svg) if args.svg else output_root_dir() / _DEFAULT_SVG_NAME
        canvas = tuple(args.canvas_size) if args.canvas_size else _default_canvas_size(vertices)
        saved = export_svg([geometry_from_lines([points])], path, canvas_size=canvas)
        _logger.info("SVG を保存しました: %s", saved)
        print(f"saved: {saved}")

    return 0
