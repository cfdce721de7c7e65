# どこで: `src/sketchkit/__init__.py`。
# 何を: ルート `sketchkit` パッケージを定義する。
# なぜ: import 起点を `sketchkit` に統一するため。

from __future__ import annotations

from sketchkit.api import (
    create_circle,
    create_ellipse,
    create_line,
    create_polygon,
    create_random_functions,
    easing,
    export_svg,
)

__all__ = [
    "create_circle",
    "create_ellipse",
    "create_line",
    "create_polygon",
    "create_random_functions",
    "easing",
    "export_svg",
]
