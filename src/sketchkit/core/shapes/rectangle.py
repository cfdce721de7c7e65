"""矩形/正方形のトリム描画ハンドル（多角形パス表のショートカット）。"""

from __future__ import annotations

from sketchkit.core.shapes.polygon import TrimmedPolygon, Vertex, create_polygon


def create_rectangle_corner(x: float, y: float, width: float, height: float) -> TrimmedPolygon:
    """左上隅 (x, y) 基準の矩形。頂点は左上 → 右上 → 右下 → 左下。"""
    x1 = float(x)
    y1 = float(y)
    x2 = x1 + float(width)
    y2 = y1 + float(height)
    return create_polygon([Vertex(x1, y1), Vertex(x2, y1), Vertex(x2, y2), Vertex(x1, y2)])


def create_rectangle_center(x: float, y: float, width: float, height: float) -> TrimmedPolygon:
    """中心 (x, y) 基準の矩形。頂点順は `create_rectangle_corner` と同じ。"""
    half_w = 0.5 * float(width)
    half_h = 0.5 * float(height)
    return create_rectangle_corner(float(x) - half_w, float(y) - half_h, width, height)


def create_square_corner(x: float, y: float, size: float) -> TrimmedPolygon:
    return create_rectangle_corner(x, y, size, size)


def create_square_center(x: float, y: float, size: float) -> TrimmedPolygon:
    return create_rectangle_center(x, y, size, size)


__all__ = [
    "create_rectangle_center",
    "create_rectangle_corner",
    "create_square_center",
    "create_square_corner",
]
