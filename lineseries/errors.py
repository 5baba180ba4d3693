from __future__ import annotations


class LineSeriesError(Exception):
    """Base error for the lineseries package."""


class SeriesConsumedError(LineSeriesError):
    """Raised when a series is emitted more than once."""
