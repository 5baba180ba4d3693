from lineseries.backend import DrawCall, DrawingBackend, RecordingBackend, draw_series
from lineseries.elements import Circle, Element, PathElement
from lineseries.errors import LineSeriesError, SeriesConsumedError
from lineseries.integers import (
    DEFAULT_INDEX_KIND,
    I8,
    I16,
    I32,
    I64,
    I128,
    INDEX_KINDS,
    ISIZE,
    U8,
    U16,
    U32,
    U64,
    U128,
    USIZE,
    BoundedIntKind,
    index_axis,
    resolve_index_kind,
)
from lineseries.series import DEFAULT_POINT_SIZE, LineSeries
from lineseries.style import (
    BLACK,
    BLUE,
    CYAN,
    DEFAULT_STYLE,
    GREEN,
    MAGENTA,
    RED,
    TRANSPARENT,
    WHITE,
    YELLOW,
    ShapeStyle,
)

__all__ = [
    "BLACK",
    "BLUE",
    "BoundedIntKind",
    "CYAN",
    "Circle",
    "DEFAULT_INDEX_KIND",
    "DEFAULT_POINT_SIZE",
    "DEFAULT_STYLE",
    "DrawCall",
    "DrawingBackend",
    "Element",
    "GREEN",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "INDEX_KINDS",
    "ISIZE",
    "LineSeries",
    "LineSeriesError",
    "MAGENTA",
    "PathElement",
    "RED",
    "RecordingBackend",
    "SeriesConsumedError",
    "ShapeStyle",
    "TRANSPARENT",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "USIZE",
    "WHITE",
    "YELLOW",
    "draw_series",
    "index_axis",
    "resolve_index_kind",
]
