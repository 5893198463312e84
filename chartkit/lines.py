"""Lines and bars that draw a series' Y values, and the resolved series items."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Hashable, Iterable, List, Optional, Tuple, Union

from .interpolation import Interpolation
from .markers import Marker, MarkerShape
from .projection import Rect

Point = Tuple[float, float]

# Default gap ratio between bars.
BAR_GAP = 0.1
# Default gap ratio inside a group of bars.
BAR_GAP_INNER = 0.05


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass(frozen=True)
class Line:
    """A line drawn through a series' Y values.

    `get_y` extracts the Y value from a user item. Y values may be NaN to
    indicate missing data.
    """

    get_y: Callable[[Any], Any]
    name: str = ""
    colour: Optional[Any] = None
    gradient: Optional[Any] = None
    width: float = 1.0
    interpolation: Interpolation = Interpolation.MONOTONE
    marker: Marker = field(default_factory=Marker)

    def with_name(self, name: str) -> Line:
        """Set the name used in the legend and tooltip."""
        return replace(self, name=str(name))

    def with_colour(self, colour: Optional[Any]) -> Line:
        """Set the line colour. None uses the next colour of the series."""
        return replace(self, colour=colour)

    def with_gradient(self, scheme: Any) -> Line:
        """Draw the line with a colour scheme; overrides the colour."""
        return replace(self, gradient=scheme)

    def with_width(self, width: float) -> Line:
        return replace(self, width=float(width))

    def with_interpolation(self, interpolation: Union[Interpolation, str]) -> Line:
        if isinstance(interpolation, str):
            interpolation = Interpolation.parse(interpolation)
        return replace(self, interpolation=interpolation)

    def with_marker(self, marker: Union[Marker, MarkerShape]) -> Line:
        if isinstance(marker, MarkerShape):
            marker = Marker.from_shape(marker)
        return replace(self, marker=marker)

    def value(self, item: Any) -> Any:
        return self.get_y(item)

    def stacked_value(self, item: Any) -> Any:
        return self.get_y(item)

    def resolved_colour(self, colour: Any) -> Any:
        """The line's own colour if set, otherwise the given series colour."""
        return colour if self.colour is None else self.colour

    def stroke(self, series_id: Hashable, colour: Any) -> str:
        """SVG stroke value: a gradient reference takes precedence over the colour."""
        if self.gradient is not None:
            return f"url(#line_{series_id}_gradient)"
        return str(self.resolved_colour(colour))

    def path(self, positions: Iterable[Point]) -> str:
        """SVG path data for the line through the given SVG positions."""
        return self.interpolation.path(list(positions))


class BarPlacement(Enum):
    """Where a bar extends from."""

    ZERO = "zero"
    EDGE = "edge"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> BarPlacement:
        try:
            return cls(text.lower())
        except ValueError:
            raise ValueError(f"unknown bar placement: `{text}`") from None


@dataclass(frozen=True)
class Bar:
    """A bar drawn for each of a series' Y values.

    `gap` is the ratio of the width available to an X value left empty
    between groups; `group_gap` is the ratio of a single bar's width left
    empty inside a group. Both are clamped to 0.0 and 1.0 when drawn.
    """

    get_y: Callable[[Any], Any]
    name: str = ""
    colour: Optional[Any] = None
    placement: BarPlacement = BarPlacement.ZERO
    gap: float = BAR_GAP
    group_gap: float = BAR_GAP_INNER

    def with_name(self, name: str) -> Bar:
        return replace(self, name=str(name))

    def with_colour(self, colour: Optional[Any]) -> Bar:
        return replace(self, colour=colour)

    def with_placement(self, placement: Union[BarPlacement, str]) -> Bar:
        if isinstance(placement, str):
            placement = BarPlacement.parse(placement)
        return replace(self, placement=placement)

    def with_gap(self, gap: float) -> Bar:
        return replace(self, gap=float(gap))

    def with_group_gap(self, group_gap: float) -> Bar:
        return replace(self, group_gap=float(group_gap))

    def value(self, item: Any) -> Any:
        return self.get_y(item)

    def stacked_value(self, item: Any) -> Any:
        return self.get_y(item)

    def resolved_colour(self, colour: Any) -> Any:
        """The bar's own colour if set, otherwise the given series colour."""
        return colour if self.colour is None else self.colour


def bar_rects(
    positions: Iterable[Point],
    bottom_y: float,
    x_width: float,
    gap: float,
    group_gap: float,
    bar_count: int,
    group_id: int,
) -> List[Rect]:
    """Rectangles for one bar series at the given SVG positions.

    `bottom_y` is where bars extend from, `x_width` the width given to each
    X value, `bar_count` the number of bar series sharing that width and
    `group_id` this bar's place among them.
    """
    if bar_count < 1:
        raise ValueError("bar_count must be at least 1")
    gap = _clamp(gap, 0.0, 1.0)
    width = x_width * (1.0 - gap)
    group_gap = _clamp(group_gap, 0.0, 1.0)
    group_width = width / bar_count
    group_width_inner = group_width * (1.0 - group_gap)
    group_space = group_width * group_gap
    offset = group_space / 2.0 - width / 2.0

    rects: List[Rect] = []
    for x, y in positions:
        height = bottom_y - y
        if math.copysign(1.0, height) < 0:
            # Negative data point: extend downwards from the bottom
            y, height = bottom_y, -height
        left = x + group_width * group_id + offset
        rects.append(Rect.from_points(left, y, left + group_width_inner, y + height))
    return rects


@dataclass(frozen=True)
class SeriesItem:
    """A line or bar of a series, with its identity and resolved colour."""

    id: int
    name: str
    colour: Any
    style: Union[Line, Bar]
    group_id: Optional[int] = None

    def is_bar(self) -> bool:
        return isinstance(self.style, Bar)


def taster_bounds(font_height: float, font_width: float) -> Rect:
    """Bounds of the small sample drawing shown beside a series name."""
    return Rect.sized(font_width * 2.5, font_height)


def snippet_width(font_height: float, font_width: float) -> float:
    """Width of a series snippet excluding its name."""
    return taster_bounds(font_height, font_width).width() + font_width