"""Point markers drawn on lines."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional

from .padding import format_number as _fmt

# Scales a marker (drawn -1 to 1) to a 1.0 line width
WIDTH_TO_MARKER = 8.0


class MarkerShape(Enum):
    """Shape of a line marker."""

    NONE = "None"
    CIRCLE = "Circle"
    SQUARE = "Square"
    DIAMOND = "Diamond"
    TRIANGLE = "Triangle"
    PLUS = "Plus"
    CROSS = "Cross"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> MarkerShape:
        lowered = text.lower()
        for shape in cls:
            if shape.value.lower() == lowered:
                return shape
        raise ValueError("unknown marker")


@dataclass(frozen=True)
class Marker:
    """How each point on a line is marked."""

    shape: MarkerShape = MarkerShape.NONE
    colour: Optional[Any] = None
    scale: float = 1.0
    border: Optional[Any] = None
    border_width: float = 0.0

    @classmethod
    def from_shape(cls, shape: MarkerShape) -> Marker:
        return cls(shape=shape)

    def with_colour(self, colour: Optional[Any]) -> Marker:
        return replace(self, colour=colour)

    def with_scale(self, scale: float) -> Marker:
        return replace(self, scale=float(scale))

    def with_border(self, border: Optional[Any]) -> Marker:
        return replace(self, border=border)

    def with_border_width(self, border_width: float) -> Marker:
        return replace(self, border_width=float(border_width))

    def effective_border_width(self) -> float:
        """Border width in use: none when there is no marker."""
        return 0.0 if self.shape is MarkerShape.NONE else self.border_width

    def fill_colour(self, line_colour: Any) -> Any:
        return line_colour if self.colour is None else self.colour

    def stroke_colour(self, line_colour: Any) -> Any:
        return line_colour if self.border is None else self.border


def marker_diameter(line_width: float, scale: float) -> float:
    """Marker size, proportionate to the line width."""
    return line_width * WIDTH_TO_MARKER * scale


def _diamond(x: float, y: float, radius: float, rotate: float = 0.0) -> str:
    points = " ".join(
        f"{_fmt(px)},{_fmt(py)}"
        for px, py in ((x, y - radius), (x - radius, y), (x, y + radius), (x + radius, y))
    )
    return (
        f'<polygon transform="rotate({_fmt(rotate)} {_fmt(x)} {_fmt(y)})" '
        f'paint-order="stroke fill" points="{points}"/>'
    )


def _plus_path(x: float, y: float, diameter: float, leg: float, rotate: float = 0.0) -> str:
    # Outline of a big plus up against the edge of the marker's square
    radius = diameter / 2.0
    half_leg = leg / 2.0
    to_inner = radius - half_leg
    steps = [
        ("h", leg),
        ("v", to_inner),
        ("h", to_inner),
        ("v", leg),
        ("h", -to_inner),
        ("v", to_inner),
        ("h", -leg),
        ("v", -to_inner),
        ("h", -to_inner),
        ("v", -leg),
        ("h", to_inner),
    ]
    moves = " ".join(f"{cmd} {_fmt(dist)}" for cmd, dist in steps)
    d = f"M {_fmt(x - half_leg)} {_fmt(y - radius)} {moves} Z"
    return (
        f'<path transform="rotate({_fmt(rotate)} {_fmt(x)} {_fmt(y)})" '
        f'paint-order="stroke fill" d="{d}"/>'
    )


def marker_svg(shape: MarkerShape, x: float, y: float, diameter: float, line_width: float) -> str:
    """SVG element drawing one marker centred on (x, y); empty for no marker."""
    radius = diameter / 2.0
    if shape is MarkerShape.NONE:
        return ""
    if shape is MarkerShape.CIRCLE:
        # Radius to fit inside the square / diamond
        r = math.sin(math.radians(45.0)) * radius
        return (
            f'<circle cx="{_fmt(x)}" cy="{_fmt(y)}" r="{_fmt(r)}" '
            f'paint-order="stroke fill"/>'
        )
    if shape is MarkerShape.SQUARE:
        return _diamond(x, y, radius, 45.0)
    if shape is MarkerShape.DIAMOND:
        return _diamond(x, y, radius)
    if shape is MarkerShape.TRIANGLE:
        points = " ".join(
            f"{_fmt(px)},{_fmt(py)}"
            for px, py in ((x, y - radius), (x - radius, y + radius), (x + radius, y + radius))
        )
        return f'<polygon points="{points}" paint-order="stroke fill"/>'
    if shape is MarkerShape.PLUS:
        return _plus_path(x, y, diameter, line_width)
    return _plus_path(x, y, diameter, line_width, 45.0)