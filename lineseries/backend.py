from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any, Iterable, Protocol, Sequence, TypeVar

from lineseries.elements import Circle, PathElement
from lineseries.style import ShapeStyle


LOGGER = logging.getLogger(__name__)

X_contra = TypeVar("X_contra", contravariant=True)
Y_contra = TypeVar("Y_contra", contravariant=True)


class DrawingBackend(Protocol[X_contra, Y_contra]):
    """Capability a backend must offer to receive line series primitives."""

    def draw_circle(self, center: tuple[X_contra, Y_contra], radius: int, style: ShapeStyle) -> None: ...

    def draw_path(self, points: Sequence[tuple[X_contra, Y_contra]], style: ShapeStyle) -> None: ...


def draw_series(backend: DrawingBackend[Any, Any], series: Iterable[Circle[Any, Any] | PathElement[Any, Any]]) -> int:
    """Replay primitives onto ``backend`` in emission order.

    Returns the number of draw calls issued. Backend errors propagate.
    """

    count = 0
    for element in series:
        element.draw(backend)
        count += 1
    LOGGER.debug("draw_series issued %d draw calls on %s", count, type(backend).__name__)
    return count


@dataclass(frozen=True)
class DrawCall:
    kind: str
    points: tuple[tuple[Any, Any], ...]
    style: ShapeStyle
    radius: int = 0


@dataclass
class RecordingBackend:
    """Backend that records draw calls instead of rasterizing them."""

    calls: list[DrawCall] = field(default_factory=list)
    num_draw_circle_call: int = 0
    num_draw_path_call: int = 0

    @property
    def draw_count(self) -> int:
        return len(self.calls)

    def draw_circle(self, center: tuple[Any, Any], radius: int, style: ShapeStyle) -> None:
        self.num_draw_circle_call += 1
        self.calls.append(DrawCall(kind="circle", points=(tuple(center),), style=style, radius=radius))

    def draw_path(self, points: Sequence[tuple[Any, Any]], style: ShapeStyle) -> None:
        self.num_draw_path_call += 1
        self.calls.append(DrawCall(kind="path", points=tuple(tuple(p) for p in points), style=style))

    def reset(self) -> None:
        self.calls.clear()
        self.num_draw_circle_call = 0
        self.num_draw_path_call = 0
