from __future__ import annotations

import numpy as np

from lineseries.raster.canvas import draw_pixel
from lineseries.style import RGBA


def draw_circle(dst: np.ndarray, x: int, y: int, radius: int, color: RGBA, *, filled: bool, width: int = 1) -> None:
    """Draw a disc (filled) or a ring of ``width`` pixels centred on (x, y)."""
    if radius <= 0 or (not filled and width <= 0):
        return
    outer = radius * radius
    inner = max(0, radius - width) ** 2
    for yy in range(y - radius, y + radius + 1):
        for xx in range(x - radius, x + radius + 1):
            d2 = (xx - x) ** 2 + (yy - y) ** 2
            if d2 > outer:
                continue
            if not filled and d2 < inner:
                continue
            draw_pixel(dst, xx, yy, color)
