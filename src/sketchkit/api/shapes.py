"""
どこで: `src/sketchkit/api/shapes.py`。
何を: トリム描画ハンドルの生成関数を名前付きで集約する。
なぜ: ユーザーコードと CLI（`python -m sketchkit list shapes`）が同じ一覧を参照するため。
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Mapping

from sketchkit.core.shapes.ellipse import create_circle, create_ellipse
from sketchkit.core.shapes.line import create_line
from sketchkit.core.shapes.polygon import create_polygon
from sketchkit.core.shapes.rectangle import (
    create_rectangle_center,
    create_rectangle_corner,
    create_square_center,
    create_square_corner,
)

SHAPE_FACTORIES: Mapping[str, Callable[..., Any]] = MappingProxyType(
    {
        "circle": create_circle,
        "ellipse": create_ellipse,
        "line": create_line,
        "polygon": create_polygon,
        "rectangle_center": create_rectangle_center,
        "rectangle_corner": create_rectangle_corner,
        "square_center": create_square_center,
        "square_corner": create_square_corner,
    }
)


def shape_names() -> list[str]:
    return sorted(SHAPE_FACTORIES)


__all__ = ["SHAPE_FACTORIES", "shape_names"]
