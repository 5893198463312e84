"""Axis markers: lines marking a boundary around the inner chart area."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional, Tuple

from .projection import Rect

# Default colour for axis markers.
AXIS_MARKER_COLOUR = "#d2d2d2"

_ARROW_MARKER = "url(#marker_axis_arrow)"

Coords = Tuple[float, float, float, float]


class AxisPlacement(Enum):
    """Placement of an axis marker around the inner chart area."""

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"
    HORIZONTAL_ZERO = "horizontal zero"
    VERTICAL_ZERO = "vertical zero"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> AxisPlacement:
        try:
            return cls(text.lower())
        except ValueError:
            raise ValueError(f"unknown axis placement: `{text}`") from None


@dataclass(frozen=True)
class AxisMarker:
    """Marks a boundary (an edge or a zero line) of the inner chart area."""

    placement: AxisPlacement
    colour: Any = AXIS_MARKER_COLOUR
    arrow: bool = True
    width: float = 1.0

    @classmethod
    def top_edge(cls) -> AxisMarker:
        return cls(AxisPlacement.TOP)

    @classmethod
    def right_edge(cls) -> AxisMarker:
        return cls(AxisPlacement.RIGHT)

    @classmethod
    def bottom_edge(cls) -> AxisMarker:
        return cls(AxisPlacement.BOTTOM)

    @classmethod
    def left_edge(cls) -> AxisMarker:
        return cls(AxisPlacement.LEFT)

    @classmethod
    def horizontal_zero(cls) -> AxisMarker:
        return cls(AxisPlacement.HORIZONTAL_ZERO)

    @classmethod
    def vertical_zero(cls) -> AxisMarker:
        return cls(AxisPlacement.VERTICAL_ZERO)

    def with_arrow(self, arrow: bool) -> AxisMarker:
        return replace(self, arrow=bool(arrow))

    def with_colour(self, colour: Any) -> AxisMarker:
        return replace(self, colour=colour)

    def coords(self, inner: Rect, zero: Tuple[float, float]) -> Optional[Coords]:
        """Line (x1, y1, x2, y2) for the marker, or None when it falls outside `inner`.

        `zero` is the SVG position of the data origin.
        """
        top, right, bottom, left = inner.top_y, inner.right_x, inner.bottom_y, inner.left_x
        zero_x, zero_y = zero
        placement = self.placement
        if placement is AxisPlacement.TOP:
            line = (left, top, right, top)
        elif placement is AxisPlacement.BOTTOM:
            line = (left, bottom, right, bottom)
        elif placement is AxisPlacement.LEFT:
            line = (left, bottom, left, top)
        elif placement is AxisPlacement.RIGHT:
            line = (right, bottom, right, top)
        elif placement is AxisPlacement.HORIZONTAL_ZERO:
            line = (left, zero_y, right, zero_y)
        else:
            line = (zero_x, bottom, zero_x, top)
        x1, y1, x2, y2 = line
        if inner.contains(x1, y1) and inner.contains(x2, y2):
            return line
        return None

    def marker_end(self) -> str:
        """SVG marker-end value: an arrow reference, or empty without an arrow."""
        return _ARROW_MARKER if self.arrow else ""