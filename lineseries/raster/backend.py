from __future__ import annotations

import logging
import math
from typing import Sequence

import numpy as np
import torch

from lineseries.raster.canvas import new_canvas
from lineseries.raster.compile import compile_frame_tensor
from lineseries.raster.draw_lines import draw_polyline
from lineseries.raster.draw_markers import draw_circle
from lineseries.style import RGBA, WHITE, ShapeStyle


LOGGER = logging.getLogger(__name__)

DEFAULT_BACKGROUND: RGBA = WHITE

Number = float | int


class RasterBackend:
    """RGBA pixel backend; sample coordinates are taken as pixel positions."""

    def __init__(self, width: int, height: int, background: RGBA = DEFAULT_BACKGROUND) -> None:
        self.width = width
        self.height = height
        self.background = background
        self._canvas = new_canvas(width, height, background)
        self.draw_count = 0

    def draw_circle(self, center: tuple[Number, Number], radius: int, style: ShapeStyle) -> None:
        x, y = _to_pixel(center)
        if x is None or y is None:
            LOGGER.warning("RasterBackend skipped marker with non-finite center %r", center)
            return
        draw_circle(self._canvas, x, y, radius, style.color, filled=style.filled, width=style.stroke_width)
        self.draw_count += 1

    def draw_path(self, points: Sequence[tuple[Number, Number]], style: ShapeStyle) -> None:
        # Non-finite samples split the path into separately stroked runs.
        run_x: list[int] = []
        run_y: list[int] = []
        skipped = 0
        for point in points:
            x, y = _to_pixel(point)
            if x is None or y is None:
                skipped += 1
                self._flush_run(run_x, run_y, style)
                run_x, run_y = [], []
                continue
            run_x.append(x)
            run_y.append(y)
        self._flush_run(run_x, run_y, style)
        if skipped:
            LOGGER.warning("RasterBackend skipped %d non-finite path points", skipped)
        self.draw_count += 1

    def _flush_run(self, run_x: list[int], run_y: list[int], style: ShapeStyle) -> None:
        if not run_x:
            return
        draw_polyline(
            self._canvas,
            np.asarray(run_x, dtype=np.int64),
            np.asarray(run_y, dtype=np.int64),
            color=style.color,
            width=style.stroke_width,
        )

    def clear(self) -> None:
        self._canvas = new_canvas(self.width, self.height, self.background)
        self.draw_count = 0

    def to_rgba(self) -> np.ndarray:
        return self._canvas.copy()

    def to_tensor(self) -> torch.Tensor:
        return compile_frame_tensor(self._canvas)


def _to_pixel(point: tuple[Number, Number]) -> tuple[int | None, int | None]:
    x, y = float(point[0]), float(point[1])
    if not (math.isfinite(x) and math.isfinite(y)):
        return (None, None)
    return (int(round(x)), int(round(y)))
