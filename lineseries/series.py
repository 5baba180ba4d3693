from __future__ import annotations

import logging
from numbers import Integral
from typing import Any, Generic, Iterable, Iterator, TypeVar

from lineseries.backend import DrawingBackend
from lineseries.elements import Circle, Element, PathElement
from lineseries.errors import SeriesConsumedError
from lineseries.integers import DEFAULT_INDEX_KIND, IndexKindLike, index_axis
from lineseries.style import DEFAULT_STYLE, ShapeStyle, StyleLike, coerce_style


LOGGER = logging.getLogger(__name__)

DEFAULT_POINT_SIZE = 0

DB = TypeVar("DB", bound=DrawingBackend[Any, Any])
X = TypeVar("X")
Y = TypeVar("Y")


class LineSeries(Generic[DB, X, Y]):
    """Line series that turns data samples into drawable primitives.

    Iterating the series yields one ``Circle`` per sample when a point size
    is set, then a single ``PathElement`` through all samples. Iteration
    drains the stored samples, so a series can be emitted only once::

        series = LineSeries.from_y([1.0, 4.0, 9.0], x_kind="u8").point_size(3)
        draw_series(backend, series)

    ``DB`` names the backend the primitives are meant for and only matters to
    type checkers.
    """

    def __init__(
        self,
        xs: list[X],
        ys: list[Y],
        *,
        style: StyleLike = DEFAULT_STYLE,
        point_size: int = DEFAULT_POINT_SIZE,
    ) -> None:
        if len(xs) != len(ys):
            raise ValueError(f"x and y length mismatch: {len(xs)} != {len(ys)}")
        self._xs = xs
        self._ys = ys
        self._style = coerce_style(style)
        self._point_size = _validate_point_size(point_size)
        self._consumed = False

    @classmethod
    def from_xy(cls, x_values: Iterable[X], y_values: Iterable[Y]) -> "LineSeries[DB, X, Y]":
        xs = list(x_values)
        ys = list(y_values)
        if len(xs) != len(ys):
            LOGGER.debug("truncating line series to %d samples (x=%d, y=%d)", min(len(xs), len(ys)), len(xs), len(ys))
        n = min(len(xs), len(ys))
        return cls(xs[:n], ys[:n])

    @classmethod
    def from_y(
        cls,
        y_values: Iterable[Y],
        x_kind: IndexKindLike = DEFAULT_INDEX_KIND,
    ) -> "LineSeries[DB, int, Y]":
        ys = list(y_values)
        xs = index_axis(len(ys), x_kind).tolist()
        return cls(xs, ys)  # type: ignore[arg-type]

    @classmethod
    def new(cls, points: Iterable[tuple[X, Y]], style: StyleLike = DEFAULT_STYLE) -> "LineSeries[DB, X, Y]":
        xs: list[X] = []
        ys: list[Y] = []
        for x, y in points:
            xs.append(x)
            ys.append(y)
        return cls(xs, ys, style=style)

    def point_size(self, size: int) -> "LineSeries[DB, X, Y]":
        """Set the marker radius in pixels; 0 disables markers."""
        self._point_size = _validate_point_size(size)
        return self

    def with_style(self, style: StyleLike) -> "LineSeries[DB, X, Y]":
        self._style = coerce_style(style)
        return self

    @property
    def style(self) -> ShapeStyle:
        return self._style

    @property
    def marker_radius(self) -> int:
        return self._point_size

    @property
    def consumed(self) -> bool:
        return self._consumed

    @property
    def xs(self) -> tuple[X, ...]:
        return tuple(self._xs)

    @property
    def ys(self) -> tuple[Y, ...]:
        return tuple(self._ys)

    @property
    def data(self) -> list[tuple[X, Y]]:
        return list(zip(self._xs, self._ys))

    def __len__(self) -> int:
        return len(self._xs)

    def __iter__(self) -> Iterator[Element[X, Y]]:
        if self._consumed:
            raise SeriesConsumedError("line series has already been emitted")
        self._consumed = True
        xs, self._xs = self._xs, []
        ys, self._ys = self._ys, []
        return _emit(xs, ys, self._style, self._point_size)

    def emit(self) -> list[Element[X, Y]]:
        return list(self)

    def __repr__(self) -> str:
        state = "consumed" if self._consumed else f"{len(self)} samples"
        return f"LineSeries({state}, point_size={self._point_size}, style={self._style!r})"


def _emit(xs: list[X], ys: list[Y], style: ShapeStyle, point_size: int) -> Iterator[Element[X, Y]]:
    if not xs:
        return
    points = tuple(zip(xs, ys))
    if point_size > 0:
        for center in points:
            yield Circle(center=center, radius=point_size, style=style)
    LOGGER.debug("emitting path with %d samples (markers=%s)", len(points), point_size > 0)
    yield PathElement(points=points, style=style)


def _validate_point_size(size: int) -> int:
    if isinstance(size, bool) or not isinstance(size, Integral):
        raise TypeError(f"point_size must be an integer, got {type(size).__name__}")
    size = int(size)
    if size < 0:
        raise ValueError("point_size must be >= 0")
    return size
