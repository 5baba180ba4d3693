from .backend import DEFAULT_BACKGROUND, RasterBackend
from .canvas import draw_pixel, new_canvas
from .compile import compile_frame_tensor
from .draw_lines import draw_polyline
from .draw_markers import draw_circle

__all__ = [
    "DEFAULT_BACKGROUND",
    "RasterBackend",
    "compile_frame_tensor",
    "draw_circle",
    "draw_pixel",
    "draw_polyline",
    "new_canvas",
]
