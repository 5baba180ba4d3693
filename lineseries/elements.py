from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar, Union

from lineseries.style import ShapeStyle

if TYPE_CHECKING:
    from lineseries.backend import DrawingBackend


X = TypeVar("X")
Y = TypeVar("Y")


@dataclass(frozen=True)
class Circle(Generic[X, Y]):
    """Point marker centred on one data sample."""

    center: tuple[X, Y]
    radius: int
    style: ShapeStyle

    def draw(self, backend: "DrawingBackend[Any, Any]") -> None:
        backend.draw_circle(self.center, self.radius, self.style)


@dataclass(frozen=True)
class PathElement(Generic[X, Y]):
    """Connected path through every data sample, in order."""

    points: tuple[tuple[X, Y], ...]
    style: ShapeStyle

    def __len__(self) -> int:
        return len(self.points)

    def draw(self, backend: "DrawingBackend[Any, Any]") -> None:
        backend.draw_path(self.points, self.style)


Element = Union[Circle[X, Y], PathElement[X, Y]]
