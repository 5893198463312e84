"""Series of lines, bars and stacks sharing X and Y axes, and the data they chart."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple, Union

from .data import Data
from .lines import Bar, Line, SeriesItem
from .ranges import Range

Point = Tuple[float, float]

# A brighter palette used for series lines and bars, in order.
SERIES_COLOUR_SCHEME: Tuple[str, ...] = (
    "#12a5ed",  # Blue
    "#f5325b",  # Red
    "#71c614",  # Green
    "#ff8400",  # Orange
    "#7b4dff",  # Purple
    "#db4cb2",  # Magenta
    "#92b42c",  # Darker green
    "#ffca00",  # Yellow
    "#22d2ba",  # Turquoise
    "#ea60df",  # Pink
)


def _scheme(colours: Iterable[Any]) -> Tuple[Any, ...]:
    scheme = tuple(colours)
    if not scheme:
        raise ValueError("a colour scheme needs at least one colour")
    return scheme


def _by_index(scheme: Sequence[Any], index: int) -> Any:
    """Colour for the index; colours repeat when there are more items than colours."""
    return scheme[index % len(scheme)]


def _spread(scheme: Sequence[Any], index: int, total: int) -> Any:
    """Colour for the index, spread evenly across the whole scheme."""
    if total <= 1:
        return scheme[0]
    return scheme[round(index * (len(scheme) - 1) / (total - 1))]


def _is_normal(value: float) -> bool:
    return math.isfinite(value) and abs(value) >= sys.float_info.min


def _as_line(line: Union[Line, Callable[[Any], Any]]) -> Line:
    return line if isinstance(line, Line) else Line(line)


def _as_bar(bar: Union[Bar, Callable[[Any], Any]]) -> Bar:
    return bar if isinstance(bar, Bar) else Bar(bar)


@dataclass(frozen=True)
class StackedValue:
    """Y getter for a stacked line: its own value on top of the lines below it."""

    line: Any
    previous: Tuple[Any, ...] = ()

    def value(self, item: Any) -> float:
        return self.line.value(item)

    def stacked_value(self, item: Any) -> float:
        """Sum of this and all previous values, skipping zero, NaN and infinite ones."""
        values = (getter.value(item) for getter in (*self.previous, self.line))
        return sum((v for v in values if _is_normal(v)), 0.0)


@dataclass(frozen=True)
class Stack:
    """Lines drawn on top of each other.

    `colours` is spread across the stack's lines; when None the series'
    colour scheme is used instead.
    """

    lines: Tuple[Line, ...] = ()
    colours: Optional[Tuple[Any, ...]] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(_as_line(line) for line in self.lines))

    def line(self, line: Union[Line, Callable[[Any], Any]]) -> Stack:
        return replace(self, lines=(*self.lines, _as_line(line)))

    def __len__(self) -> int:
        return len(self.lines)

    def with_colours(self, colours: Iterable[Any]) -> Stack:
        return replace(self, colours=_scheme(colours))


class _SeriesAcc:
    """Hands out ids and colours while a series resolves its items."""

    def __init__(self, colours: Tuple[Any, ...]) -> None:
        self.colours = colours
        self.colour_id = 0
        self.next_id = 0
        self.next_group_id = 0
        self.lines: List[Tuple[SeriesItem, Any]] = []

    def next_colour(self) -> Any:
        colour = _by_index(self.colours, self.colour_id)
        self.colour_id += 1
        return colour

    def push_line(self, colour: Any, line: Line, getter: Any) -> Any:
        item = SeriesItem(self.next_id, line.name, line.resolved_colour(colour), line)
        self.next_id += 1
        self.lines.append((item, getter))
        return getter

    def push_bar(self, colour: Any, bar: Bar) -> Any:
        item = SeriesItem(
            self.next_id, bar.name, bar.resolved_colour(colour), bar, self.next_group_id
        )
        self.next_id += 1
        self.next_group_id += 1
        self.lines.append((item, bar))
        return bar


@dataclass(frozen=True)
class Series:
    """How to draw user data: an X getter plus lines, bars and stacks for Y.

    The optional minimum and maximum values extend the axes' ranges.
    """

    get_x: Callable[[Any], Any]
    items: Tuple[Union[Line, Bar, Stack], ...] = ()
    min_x: Optional[Any] = None
    max_x: Optional[Any] = None
    min_y: Optional[Any] = None
    max_y: Optional[Any] = None
    colours: Tuple[Any, ...] = field(default=SERIES_COLOUR_SCHEME)

    def with_colours(self, colours: Iterable[Any]) -> Series:
        return replace(self, colours=_scheme(colours))

    def with_min_x(self, min_x: Optional[Any]) -> Series:
        return replace(self, min_x=min_x)

    def with_max_x(self, max_x: Optional[Any]) -> Series:
        return replace(self, max_x=max_x)

    def with_min_y(self, min_y: Optional[Any]) -> Series:
        return replace(self, min_y=min_y)

    def with_max_y(self, max_y: Optional[Any]) -> Series:
        return replace(self, max_y=max_y)

    def with_x_range(self, min_x: Optional[Any], max_x: Optional[Any]) -> Series:
        return self.with_min_x(min_x).with_max_x(max_x)

    def with_y_range(self, min_y: Optional[Any], max_y: Optional[Any]) -> Series:
        return self.with_min_y(min_y).with_max_y(max_y)

    def line(self, line: Union[Line, Callable[[Any], Any]]) -> Series:
        return replace(self, items=(*self.items, _as_line(line)))

    def lines(self, lines: Iterable[Union[Line, Callable[[Any], Any]]]) -> Series:
        return replace(self, items=(*self.items, *(_as_line(line) for line in lines)))

    def bar(self, bar: Union[Bar, Callable[[Any], Any]]) -> Series:
        return replace(self, items=(*self.items, _as_bar(bar)))

    def bars(self, bars: Iterable[Union[Bar, Callable[[Any], Any]]]) -> Series:
        return replace(self, items=(*self.items, *(_as_bar(bar) for bar in bars)))

    def stack(self, stack: Union[Stack, Iterable[Line]]) -> Series:
        if not isinstance(stack, Stack):
            stack = Stack(tuple(stack))
        return replace(self, items=(*self.items, stack))

    def __len__(self) -> int:
        """Number of lines, bars and stacks added."""
        return len(self.items)

    def to_use_lines(self) -> List[Tuple[SeriesItem, Any]]:
        """Resolve every line and bar into a series item paired with its Y getter."""
        acc = _SeriesAcc(self.colours)
        for entry in self.items:
            if isinstance(entry, Line):
                acc.push_line(acc.next_colour(), entry, entry)
            elif isinstance(entry, Bar):
                acc.push_bar(acc.next_colour(), entry)
            else:
                scheme = entry.colours if entry.colours is not None else self.colours
                total = len(entry.lines)
                previous: List[Any] = []
                for index, line in enumerate(entry.lines):
                    colour = _spread(scheme, index, total)
                    getter = StackedValue(line, tuple(previous))
                    previous.append(acc.push_line(colour, line, getter))
        return acc.lines

    def use_data(self, data: Iterable[Any]) -> ChartData:
        """Extract the data this series charts."""
        return ChartData(self, data)


class ChartData:
    """A series applied to user data: values, ranges and items sorted by name."""

    def __init__(self, series: Series, data: Iterable[Any]) -> None:
        lines = series.to_use_lines()
        self.data = Data(series.get_x, {item.id: getter for item, getter in lines}, data)
        self.range_x: Range = self.data.range_x.maybe_update([series.min_x, series.max_x])
        self.range_y: Range = self.data.range_y.maybe_update([series.min_y, series.max_y])
        self.series: List[SeriesItem] = sorted((item for item, _ in lines), key=lambda i: i.name)
        self.includes_bars: bool = any(item.is_bar() for item in self.series)

    def __len__(self) -> int:
        return len(self.data)

    def nearest_data_x(self, pos_x: float) -> Optional[Any]:
        return self.data.nearest_data_x(pos_x)

    def nearest_position_x(self, pos_x: float) -> Optional[float]:
        return self.data.nearest_position_x(pos_x)

    def nearest_data_y(self, pos_x: float) -> List[Tuple[SeriesItem, Optional[Any]]]:
        """Each series item with its Y value at the nearest datum, in legend order."""
        values = self.data.nearest_data_y(pos_x)
        return [(item, values.get(item.id)) for item in self.series]

    def series_positions(self, series_id: int) -> List[Point]:
        return self.data.series_positions(series_id)