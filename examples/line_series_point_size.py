from __future__ import annotations

import argparse
from pathlib import Path

import numpy as np
from PIL import Image

from lineseries import BLACK, BLUE, RED, LineSeries, ShapeStyle, draw_series
from lineseries.raster import RasterBackend


WIDTH = 300
HEIGHT = 200


def _to_pixels(x: np.ndarray, y: np.ndarray) -> list[tuple[float, float]]:
    # Data window is x in [0, 4], y in [0, 3]; pixel y grows downward.
    px = 10.0 + x * (WIDTH - 20) / 4.0
    py = (HEIGHT - 10) - y * (HEIGHT - 20) / 3.0
    return list(zip(px.tolist(), py.tolist()))


def render() -> np.ndarray:
    backend = RasterBackend(WIDTH, HEIGHT)
    x = np.asarray([0.0, 1.0, 2.0, 3.0, 4.0], dtype=np.float64)

    draw_series(backend, LineSeries.new(_to_pixels(x, 0.3 * x), BLACK))
    draw_series(backend, LineSeries.new(_to_pixels(x, 2.5 - 0.05 * x * x), RED).point_size(5))
    draw_series(backend, LineSeries.new(_to_pixels(x, 2.0 - 0.1 * x * x), ShapeStyle(color=BLUE).fill()).point_size(4))
    return backend.to_rgba()


def main() -> None:
    parser = argparse.ArgumentParser(description="Render three line series with and without point markers.")
    parser.add_argument("--out", type=Path, default=Path("line_series_point_size.png"))
    args = parser.parse_args()

    Image.fromarray(render()).save(args.out)
    print(f"wrote {args.out}")


if __name__ == "__main__":
    main()
