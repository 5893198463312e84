"""Chart edges, anchors and labels rotated to match their edge."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .padding import Padding
from .projection import Rect


class Edge(Enum):
    """An edge of the chart."""

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"

    def __str__(self) -> str:
        return self.value

    def is_horizontal(self) -> bool:
        return self in (Edge.TOP, Edge.BOTTOM)

    def is_vertical(self) -> bool:
        return not self.is_horizontal()


class Anchor(Enum):
    """Placement along the main axis, which runs parallel to the edge."""

    START = "start"
    MIDDLE = "middle"
    END = "end"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> Anchor:
        try:
            return cls(text.lower())
        except ValueError:
            raise ValueError(f"unknown anchor: `{text}`") from None

    def map_points(self, start: float, middle: float, end: float) -> float:
        """Pick the point matching this anchor."""
        if self is Anchor.START:
            return start
        if self is Anchor.MIDDLE:
            return middle
        return end

    def css_justify_content(self) -> str:
        if self is Anchor.START:
            return "flex-start"
        if self is Anchor.MIDDLE:
            return "center"
        return "flex-end"


@dataclass(frozen=True)
class RotatedLabel:
    """A label rotated to match the orientation of its edge. Text is not wrapped."""

    text: str
    anchor: Anchor = Anchor.MIDDLE

    @classmethod
    def start(cls, text: str) -> RotatedLabel:
        return cls(str(text), Anchor.START)

    @classmethod
    def middle(cls, text: str) -> RotatedLabel:
        return cls(str(text), Anchor.MIDDLE)

    @classmethod
    def end(cls, text: str) -> RotatedLabel:
        return cls(str(text), Anchor.END)

    def size(self, font_height: float, padding: Padding) -> float:
        """Size across the edge: height on horizontal edges, width on vertical ones."""
        if not self.text:
            return 0.0
        return font_height + padding.height()

    def position(self, edge: Edge, bounds: Rect, padding: Padding) -> Tuple[int, float, float]:
        """Rotation in degrees and the (x, y) text position within the padded bounds."""
        content = padding.apply(bounds)
        top, right, bottom, left = content.top_y, content.right_x, content.bottom_y, content.left_x
        centre_x, centre_y = content.centre_x(), content.centre_y()
        if edge.is_horizontal():
            return (0, self.anchor.map_points(left, centre_x, right), centre_y)
        if edge is Edge.LEFT:
            return (270, centre_x, self.anchor.map_points(bottom, centre_y, top))
        # Right rotates the opposite way to left, inverting the anchor points
        return (90, centre_x, self.anchor.map_points(top, centre_y, bottom))