from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union


RGBA = tuple[int, int, int, int]
ColorLike = Union[tuple[int, int, int], tuple[int, int, int, int]]

BLACK: RGBA = (0, 0, 0, 255)
WHITE: RGBA = (255, 255, 255, 255)
RED: RGBA = (255, 0, 0, 255)
GREEN: RGBA = (0, 255, 0, 255)
BLUE: RGBA = (0, 0, 255, 255)
CYAN: RGBA = (0, 255, 255, 255)
MAGENTA: RGBA = (255, 0, 255, 255)
YELLOW: RGBA = (255, 255, 0, 255)
TRANSPARENT: RGBA = (0, 0, 0, 0)


def coerce_color(color: ColorLike) -> RGBA:
    if len(color) == 3:
        r, g, b = color
        a = 255
    elif len(color) == 4:
        r, g, b, a = color
    else:
        raise ValueError(f"color must have 3 or 4 channels, got {len(color)}")
    out = (int(r), int(g), int(b), int(a))
    for channel in out:
        if channel < 0 or channel > 255:
            raise ValueError(f"color channel out of range: {channel}")
    return out


@dataclass(frozen=True)
class ShapeStyle:
    """Stroke/fill descriptor handed through to drawn primitives untouched."""

    color: RGBA = BLACK
    filled: bool = False
    stroke_width: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "color", coerce_color(self.color))
        if self.stroke_width < 0:
            raise ValueError("stroke_width must be >= 0")

    def fill(self) -> "ShapeStyle":
        return replace(self, filled=True)

    def stroke(self) -> "ShapeStyle":
        return replace(self, filled=False)

    def with_stroke_width(self, width: int) -> "ShapeStyle":
        return replace(self, stroke_width=int(width))

    def mix(self, alpha: float) -> "ShapeStyle":
        r, g, b, a = self.color
        out_a = int(max(0.0, min(1.0, alpha)) * a)
        return replace(self, color=(r, g, b, out_a))


StyleLike = Union[ShapeStyle, tuple[int, int, int], tuple[int, int, int, int]]


def coerce_style(style: StyleLike) -> ShapeStyle:
    """Accept a ShapeStyle or a bare color; bare colors become a 1px stroke."""
    if isinstance(style, ShapeStyle):
        return style
    if isinstance(style, tuple):
        return ShapeStyle(color=coerce_color(style))
    raise TypeError(f"unsupported style: {type(style)!r}")


DEFAULT_STYLE = ShapeStyle(color=BLACK)
