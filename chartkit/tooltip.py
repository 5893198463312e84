"""A mouse tooltip showing the X and Y values of the nearest data."""

from __future__ import annotations

import struct
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence, Tuple, Union

from .ranges import tick_position

# Default gap distance from cursor to tooltip when shown.
TOOLTIP_CURSOR_DISTANCE = 10.0


class TooltipPlacement(Enum):
    """Where the tooltip is placed when shown."""

    HIDE = "Hide"
    LEFT_CURSOR = "Left cursor"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> TooltipPlacement:
        lowered = text.lower()
        for placement in cls:
            if placement.value.lower() == lowered:
                return placement
        raise ValueError(f"invalid TooltipPlacement: `{text}`")


def _total_order(value: float) -> int:
    """Integer key ordering floats totally: -NaN < -inf < ... < -0 < +0 < ... < inf < NaN."""
    bits = struct.unpack("<q", struct.pack("<d", value))[0]
    if bits < 0:
        bits ^= 0x7FFFFFFFFFFFFFFF
    return bits


def _value_key(y: Optional[Any]) -> Tuple[int, int]:
    # Missing values sort before any present value
    if y is None:
        return (0, 0)
    return (1, _total_order(tick_position(y)))


class TooltipSortBy(Enum):
    """How the tooltip's Y value table is sorted."""

    LINES = "Lines"
    ASCENDING = "Ascending"
    DESCENDING = "Descending"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> TooltipSortBy:
        lowered = text.lower()
        for sort_by in cls:
            if sort_by.value.lower() == lowered:
                return sort_by
        raise ValueError(f"invalid SortBy: `{text}`")

    def sort_values(self, values: Sequence[Tuple[Any, Optional[Any]]]) -> List[Tuple[Any, Optional[Any]]]:
        """Return (series item, Y value) pairs sorted; equal keys keep their order."""
        if self is TooltipSortBy.LINES:
            return sorted(values, key=lambda pair: pair[0].name)
        return sorted(
            values,
            key=lambda pair: _value_key(pair[1]),
            reverse=self is TooltipSortBy.DESCENDING,
        )


@dataclass(frozen=True)
class Tooltip:
    """Tooltip settings: placement, row order and what to show."""

    placement: TooltipPlacement = TooltipPlacement.HIDE
    sort_by: TooltipSortBy = TooltipSortBy.LINES
    cursor_distance: float = TOOLTIP_CURSOR_DISTANCE
    skip_missing: bool = False
    show_x_ticks: bool = True

    @classmethod
    def from_placement(cls, placement: Union[TooltipPlacement, str]) -> Tooltip:
        if isinstance(placement, str):
            placement = TooltipPlacement.parse(placement)
        return cls(placement=placement)

    @classmethod
    def left_cursor(cls) -> Tooltip:
        return cls.from_placement(TooltipPlacement.LEFT_CURSOR)

    def with_sort_by(self, sort_by: Union[TooltipSortBy, str]) -> Tooltip:
        if isinstance(sort_by, str):
            sort_by = TooltipSortBy.parse(sort_by)
        return replace(self, sort_by=sort_by)

    def with_cursor_distance(self, distance: float) -> Tooltip:
        return replace(self, cursor_distance=float(distance))

    def with_skip_missing(self, skip_missing: bool) -> Tooltip:
        return replace(self, skip_missing=bool(skip_missing))

    def with_show_x_ticks(self, show_x_ticks: bool) -> Tooltip:
        return replace(self, show_x_ticks=bool(show_x_ticks))

    def visible(self, hover_inner: bool) -> bool:
        """Shown while hovering the inner area unless hidden."""
        return bool(hover_inner) and self.placement is not TooltipPlacement.HIDE

    def rows(
        self,
        values: Sequence[Tuple[Any, Optional[Any]]],
        format_y: Callable[[Any], str],
    ) -> List[Tuple[Any, str]]:
        """Table rows of (series item, formatted Y value); missing values show "-"."""
        if self.skip_missing:
            values = [pair for pair in values if pair[1] is not None]
        return [
            (item, "-" if y is None else format_y(y))
            for item, y in self.sort_by.sort_values(values)
        ]

    def heading(self, x_value: Optional[Any], format_x: Callable[[Any], str]) -> str:
        """The X value heading: empty when X ticks are hidden, "no data" without data."""
        if not self.show_x_ticks:
            return ""
        if x_value is None:
            return "no data"
        return format_x(x_value)