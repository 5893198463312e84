"""Rectangular bounds and the projection between data space and SVG space."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

Point = Tuple[float, float]


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in SVG coordinates (zero at the top left)."""

    left_x: float
    top_y: float
    right_x: float
    bottom_y: float

    @classmethod
    def from_points(cls, left_x: float, top_y: float, right_x: float, bottom_y: float) -> Rect:
        """Build a rectangle from its top-left and bottom-right corners."""
        return cls(left_x, top_y, right_x, bottom_y)

    @classmethod
    def sized(cls, width: float, height: float) -> Rect:
        """Build a rectangle of the given size anchored at the origin."""
        return cls(0.0, 0.0, width, height)

    def width(self) -> float:
        return self.right_x - self.left_x

    def height(self) -> float:
        return self.bottom_y - self.top_y

    def centre_x(self) -> float:
        return self.left_x + self.width() / 2.0

    def centre_y(self) -> float:
        return self.top_y + self.height() / 2.0

    def shrink(self, top: float, right: float, bottom: float, left: float) -> Rect:
        """Return a rectangle moved inwards by the given amount on each side."""
        return Rect(
            self.left_x + left,
            self.top_y + top,
            self.right_x - right,
            self.bottom_y - bottom,
        )

    def contains(self, x: float, y: float) -> bool:
        """Whether the point lies inside the rectangle, edges included."""
        return self.left_x <= x <= self.right_x and self.top_y <= y <= self.bottom_y


class Projection:
    """Converts between data coordinates (zero at bottom left) and SVG coordinates (zero at top left)."""

    __slots__ = ("bounds", "left_x", "bottom_y", "x_mult", "y_mult")

    def __init__(
        self,
        bounds: Rect,
        range_x: Optional[Point] = None,
        range_y: Optional[Point] = None,
    ) -> None:
        left_x, right_x = range_x if range_x is not None else (0.0, 0.0)
        bottom_y, top_y = range_y if range_y is not None else (0.0, 0.0)
        # A zero-sized range would divide by zero; fall back to a nominal span
        width = right_x - left_x
        height = top_y - bottom_y
        self.bounds = bounds
        self.left_x = left_x
        self.bottom_y = bottom_y
        self.x_mult = bounds.width() / (0.5 if width == 0.0 else width)
        self.y_mult = bounds.height() / (0.5 if height == 0.0 else height)

    def _key(self) -> tuple:
        return (self.bounds, self.left_x, self.bottom_y, self.x_mult, self.y_mult)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Projection):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"Projection(bounds={self.bounds!r}, left_x={self.left_x!r}, "
            f"bottom_y={self.bottom_y!r}, x_mult={self.x_mult!r}, y_mult={self.y_mult!r})"
        )

    def position_to_svg(self, x: float, y: float) -> Point:
        """Convert a data point to SVG view coordinates."""
        svg_x = self.bounds.left_x + (x - self.left_x) * self.x_mult
        svg_y = self.bounds.bottom_y - (y - self.bottom_y) * self.y_mult
        return (svg_x, svg_y)

    def svg_to_position(self, x: float, y: float) -> Point:
        """Convert an SVG point to data coordinates."""
        pos_x = self.left_x + (x - self.bounds.left_x) / self.x_mult
        pos_y = self.bottom_y - (y - self.bounds.bottom_y) / self.y_mult
        return (pos_x, pos_y)

    def svg_zero(self) -> Point:
        """SVG coordinates of the data origin."""
        return self.position_to_svg(0.0, 0.0)