from __future__ import annotations

from typing import Iterator

import numpy as np

from lineseries.style import RGBA


def draw_polyline(dst: np.ndarray, xs: np.ndarray, ys: np.ndarray, color: RGBA, width: int = 1) -> None:
    """Stroke the path through (xs, ys) with a square brush of ``width`` pixels.

    A single point is stamped as one brush; shared segment joints are stamped once.
    """

    if width <= 0 or xs.size == 0:
        return
    radius = width // 2
    last: tuple[int, int] | None = None
    for x, y in _path_pixels(xs.astype(np.int64).tolist(), ys.astype(np.int64).tolist()):
        if (x, y) == last:
            continue
        _stamp_brush(dst, x, y, radius, color)
        last = (x, y)


def _path_pixels(xs: list[int], ys: list[int]) -> Iterator[tuple[int, int]]:
    yield (xs[0], ys[0])
    for i in range(len(xs) - 1):
        yield from _segment_pixels(xs[i], ys[i], xs[i + 1], ys[i + 1])


def _segment_pixels(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    # Bresenham, all octants.
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    x, y = x0, y0
    while (x, y) != (x1, y1):
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy
        yield (x, y)


def _stamp_brush(dst: np.ndarray, x: int, y: int, radius: int, color: RGBA) -> None:
    y0 = max(0, y - radius)
    y1 = min(dst.shape[0], y + radius + 1)
    x0 = max(0, x - radius)
    x1 = min(dst.shape[1], x + radius + 1)
    if y0 >= y1 or x0 >= x1:
        return
    a = color[3] / 255.0
    if a <= 0.0:
        return
    patch = dst[y0:y1, x0:x1]
    src = np.asarray(color[0:3], dtype=np.float32)
    patch[:, :, :3] = (src * a + patch[:, :, :3].astype(np.float32) * (1.0 - a)).astype(np.uint8)
    patch[:, :, 3] = 255
