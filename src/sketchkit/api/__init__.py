# どこで: `src/sketchkit/api/__init__.py`。
# 何を: トリム描画・イージング・乱数・ピクセル操作などの公開 API を再エクスポートする。
# なぜ: ユーザーコードが `from sketchkit.api import ...` の 1 行で道具を揃えられるようにするため。

from __future__ import annotations

from sketchkit.api.shapes import SHAPE_FACTORIES, shape_names
from sketchkit.core import easing
from sketchkit.core.color import Color, color_with_alpha, lerp_color, parse_color, reverse_color
from sketchkit.core.curve import curve_control_points, curve_geometry, sample_curve
from sketchkit.core.joins import nested_loop_join, round_robin
from sketchkit.core.noise import noise2, noise_grid
from sketchkit.core.path_sink import PathSink, PolylineRecorder
from sketchkit.core.pixels import (
    PixelBuffer,
    create_texture,
    create_texture_row_by_row,
    draw_texture,
    draw_texture_row_by_row,
    gradation_texture,
    noise_texture,
    random_texture,
    set_pixel,
    set_pixel_row,
    store_pixels,
)
from sketchkit.core.random_functions import RandomFunctions, create_random_functions
from sketchkit.core.realized_geometry import RealizedGeometry, concat_realized_geometries
from sketchkit.core.runtime_config import runtime_config, set_config_path
from sketchkit.core.scaled_canvas import ScaledCanvas, Size, calculate_scale_factor
from sketchkit.core.shapes.ellipse import ArcMode, create_circle, create_ellipse
from sketchkit.core.shapes.line import create_line
from sketchkit.core.shapes.polygon import (
    PathTable,
    Vertex,
    build_path_table,
    create_polygon,
    locate_end,
    locate_start,
    render_trimmed,
    trimmed_points,
)
from sketchkit.core.shapes.rectangle import (
    create_rectangle_center,
    create_rectangle_corner,
    create_square_center,
    create_square_corner,
)
from sketchkit.core.shapes.trimmed_shape import TrimmedShape, realize_shape
from sketchkit.core.timer import Timer, step_timers
from sketchkit.export.svg import export_svg

__all__ = [
    "ArcMode",
    "Color",
    "PathSink",
    "PathTable",
    "PixelBuffer",
    "PolylineRecorder",
    "RandomFunctions",
    "RealizedGeometry",
    "SHAPE_FACTORIES",
    "ScaledCanvas",
    "Size",
    "Timer",
    "TrimmedShape",
    "Vertex",
    "build_path_table",
    "calculate_scale_factor",
    "color_with_alpha",
    "concat_realized_geometries",
    "create_circle",
    "create_ellipse",
    "create_line",
    "create_polygon",
    "create_random_functions",
    "create_rectangle_center",
    "create_rectangle_corner",
    "create_square_center",
    "create_square_corner",
    "create_texture",
    "create_texture_row_by_row",
    "curve_control_points",
    "curve_geometry",
    "draw_texture",
    "draw_texture_row_by_row",
    "easing",
    "export_svg",
    "gradation_texture",
    "lerp_color",
    "locate_end",
    "locate_start",
    "nested_loop_join",
    "noise2",
    "noise_grid",
    "noise_texture",
    "parse_color",
    "random_texture",
    "realize_shape",
    "render_trimmed",
    "reverse_color",
    "round_robin",
    "runtime_config",
    "sample_curve",
    "set_config_path",
    "set_pixel",
    "set_pixel_row",
    "shape_names",
    "step_timers",
    "store_pixels",
    "trimmed_points",
]
