"""Composing chart bounds from edge components, and series legends."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from .labels import Anchor, Edge
from .lines import snippet_width
from .padding import Padding
from .projection import Rect


@dataclass(frozen=True)
class Legend:
    """A legend for the chart series, laid out along the axis of its edge."""

    anchor: Anchor = Anchor.MIDDLE

    @classmethod
    def start(cls) -> Legend:
        return cls(Anchor.START)

    @classmethod
    def middle(cls) -> Legend:
        return cls(Anchor.MIDDLE)

    @classmethod
    def end(cls) -> Legend:
        return cls(Anchor.END)

    @staticmethod
    def width(
        names: Iterable[str],
        font_height: float,
        font_width: float,
        padding: Padding,
    ) -> float:
        """Width needed to show every series snippet and its name."""
        max_chars = max((len(name) * font_width for name in names), default=0.0)
        return snippet_width(font_height, font_width) + max_chars + padding.width()

    def fixed_height(self, font_height: float, padding: Padding) -> float:
        """Height of the legend on a horizontal edge."""
        return font_height + padding.height()

    @staticmethod
    def edge_padding(edge: Edge, padding: Padding) -> Padding:
        """Padding applied across the edge only, so the legend extends fully along it."""
        if edge.is_horizontal():
            return Padding.sides(padding.top, 0.0, padding.bottom, 0.0)
        return Padding.sides(0.0, padding.right, 0.0, padding.left)


@dataclass(frozen=True)
class InsetLegend:
    """A legend placed inside the inner chart area against one of its edges."""

    edge: Edge
    legend: Legend = field(default_factory=Legend)

    @classmethod
    def top_left(cls) -> InsetLegend:
        return cls(Edge.TOP, Legend(Anchor.START))

    @classmethod
    def top(cls) -> InsetLegend:
        return cls(Edge.TOP, Legend(Anchor.MIDDLE))

    @classmethod
    def top_right(cls) -> InsetLegend:
        return cls(Edge.TOP, Legend(Anchor.END))

    @classmethod
    def bottom_left(cls) -> InsetLegend:
        return cls(Edge.BOTTOM, Legend(Anchor.START))

    @classmethod
    def bottom(cls) -> InsetLegend:
        return cls(Edge.BOTTOM, Legend(Anchor.MIDDLE))

    @classmethod
    def bottom_right(cls) -> InsetLegend:
        return cls(Edge.BOTTOM, Legend(Anchor.END))

    @classmethod
    def left(cls) -> InsetLegend:
        return cls(Edge.LEFT, Legend(Anchor.MIDDLE))

    @classmethod
    def right(cls) -> InsetLegend:
        return cls(Edge.RIGHT, Legend(Anchor.MIDDLE))

    def bounds(self, inner: Rect, width: float, height: float) -> Rect:
        """Legend bounds as an inset of the inner chart area."""
        if self.edge is Edge.TOP:
            return inner.shrink(0.0, 0.0, inner.height() - height, 0.0)
        if self.edge is Edge.BOTTOM:
            return inner.shrink(inner.height() - height, 0.0, 0.0, 0.0)
        if self.edge is Edge.LEFT:
            return inner.shrink(0.0, inner.width() - width, 0.0, 0.0)
        return inner.shrink(0.0, 0.0, 0.0, inner.width() - width)


def option_bounds(edge: Edge, outer: Rect, sizes: Iterable[float]) -> List[Rect]:
    """Bounds of each component on an edge, stacked outwards from the inner area.

    `outer` is the whole edge area and `sizes` the size of each component
    across the edge, nearest to the inner area first.
    """
    width = outer.width()
    height = outer.height()
    result: List[Rect] = []
    proximal = 0.0
    for size in sizes:
        distal = proximal + size
        if edge is Edge.TOP:
            rect = outer.shrink(height - distal, 0.0, proximal, 0.0)
        elif edge is Edge.BOTTOM:
            rect = outer.shrink(proximal, 0.0, height - distal, 0.0)
        elif edge is Edge.LEFT:
            rect = outer.shrink(0.0, proximal, 0.0, width - distal)
        else:
            rect = outer.shrink(0.0, width - distal, 0.0, proximal)
        result.append(rect)
        proximal = distal
    return result


def _per_item(width: float, count: int) -> float:
    if count == 0:
        return math.nan if width == 0.0 or math.isnan(width) else math.copysign(math.inf, width)
    return width / count


@dataclass(frozen=True)
class Layout:
    """Bounds of the whole chart, its inner area and each edge component."""

    outer: Rect
    top: List[Rect]
    right: List[Rect]
    bottom: List[Rect]
    left: List[Rect]
    inner: Rect
    x_width: float

    @classmethod
    def compose(
        cls,
        top: Sequence[float],
        right: Sequence[float],
        bottom: Sequence[float],
        left: Sequence[float],
        inner_width: float,
        inner_height: float,
        data_len: int,
    ) -> Layout:
        """Lay out edge components of the given sizes around an inner area.

        Top and bottom sizes are heights, left and right sizes are widths,
        each listed nearest to the inner area first. `data_len` is the number
        of X values sharing the inner width.
        """
        top_height = sum(top, 0.0)
        bottom_height = sum(bottom, 0.0)
        left_width = sum(left, 0.0)
        right_width = sum(right, 0.0)

        outer = Rect.sized(
            left_width + inner_width + right_width,
            top_height + inner_height + bottom_height,
        )
        inner = outer.shrink(top_height, right_width, bottom_height, left_width)

        top_bounds = Rect.from_points(inner.left_x, outer.top_y, inner.right_x, inner.top_y)
        right_bounds = Rect.from_points(inner.right_x, inner.top_y, outer.right_x, inner.bottom_y)
        bottom_bounds = Rect.from_points(
            inner.left_x, inner.bottom_y, inner.right_x, outer.bottom_y
        )
        left_bounds = Rect.from_points(outer.left_x, inner.top_y, inner.left_x, inner.bottom_y)

        return cls(
            outer=outer,
            top=option_bounds(Edge.TOP, top_bounds, top),
            right=option_bounds(Edge.RIGHT, right_bounds, right),
            bottom=option_bounds(Edge.BOTTOM, bottom_bounds, bottom),
            left=option_bounds(Edge.LEFT, left_bounds, left),
            inner=inner,
            x_width=_per_item(inner.width(), data_len),
        )