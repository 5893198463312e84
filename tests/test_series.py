import math
from dataclasses import dataclass

import pytest

from chartkit.lines import Bar, Line
from chartkit.series import SERIES_COLOUR_SCHEME, Series, Stack, StackedValue


@dataclass
class Row:
    x: float
    y1: float
    y2: float


ROWS = [Row(1.0, 2.0, 3.0), Row(4.0, 5.0, 6.0), Row(7.0, 8.0, 9.0)]


def two_lines():
    return (
        Series(lambda r: r.x)
        .line(Line(lambda r: r.y1).with_name("b"))
        .line(Line(lambda r: r.y2).with_name("a"))
    )


def test_len_counts_entries():
    series = two_lines().bar(lambda r: r.y1).stack([Line(lambda r: r.y1), Line(lambda r: r.y2)])
    assert len(series) == 4
    assert len(Series(lambda r: r.x)) == 0


def test_first_colour_is_scheme_blue():
    items = [item for item, _ in two_lines().to_use_lines()]
    assert items[0].colour == "#12a5ed"
    assert items[1].colour == SERIES_COLOUR_SCHEME[1]
    assert [item.id for item in items] == [0, 1]


def test_colours_repeat():
    series = Series(lambda r: r.x).lines([lambda r: r.y1] * 11)
    items = [item for item, _ in series.to_use_lines()]
    assert items[10].colour == items[0].colour


def test_explicit_colour_overrides():
    series = Series(lambda r: r.x).line(Line(lambda r: r.y1).with_colour("black"))
    item, _ = series.to_use_lines()[0]
    assert item.colour == "black"


def test_custom_scheme_and_empty_scheme():
    series = Series(lambda r: r.x).with_colours(["red", "green"]).lines([lambda r: r.y1] * 3)
    colours = [item.colour for item, _ in series.to_use_lines()]
    assert colours == ["red", "green", "red"]
    with pytest.raises(ValueError):
        Series(lambda r: r.x).with_colours([])


def test_bar_group_ids():
    series = (
        Series(lambda r: r.x)
        .line(lambda r: r.y1)
        .bar(lambda r: r.y1)
        .bars([lambda r: r.y2])
    )
    items = [item for item, _ in series.to_use_lines()]
    assert [item.id for item in items] == [0, 1, 2]
    assert [item.group_id for item in items] == [None, 0, 1]
    assert [item.is_bar() for item in items] == [False, True, True]


def test_stacked_value_sums_and_skips_missing():
    lower = Line(lambda r: r.y1)
    upper = StackedValue(Line(lambda r: r.y2), (StackedValue(lower),))
    row = Row(0.0, 2.0, 3.0)
    assert upper.value(row) == 3.0
    assert upper.stacked_value(row) == 5.0
    missing = Row(0.0, math.nan, 3.0)
    assert upper.stacked_value(missing) == 3.0


def test_stack_does_not_use_series_colours():
    series = (
        Series(lambda r: r.x)
        .stack(Stack().line(lambda r: r.y1).line(lambda r: r.y2).with_colours(["s1", "s2", "s3"]))
        .line(lambda r: r.y1)
    )
    items = [item for item, _ in series.to_use_lines()]
    assert items[0].colour == "s1"
    assert items[1].colour == "s3"
    assert items[2].colour == SERIES_COLOUR_SCHEME[0]


def test_stack_len_and_builder():
    stack = Stack([lambda r: r.y1]).line(lambda r: r.y2)
    assert len(stack) == 2
    assert len(Stack()) == 0


def test_stack_range_uses_stacked_values():
    series = Series(lambda r: r.x).stack([Line(lambda r: r.y1), Line(lambda r: r.y2)])
    chart = series.use_data(ROWS)
    assert chart.range_y.range() == (2.0, 17.0)
    assert chart.series_positions(1) == [(1.0, 5.0), (4.0, 11.0), (7.0, 17.0)]
    assert chart.series_positions(0) == [(1.0, 2.0), (4.0, 5.0), (7.0, 8.0)]


def test_use_data_ranges_and_positions():
    chart = two_lines().use_data(ROWS)
    assert len(chart) == 3
    assert chart.range_x.range() == (1.0, 7.0)
    assert chart.range_y.positions() == (2.0, 9.0)
    assert chart.series_positions(0) == [(1.0, 2.0), (4.0, 5.0), (7.0, 8.0)]
    assert chart.nearest_data_x(3.0) == 4.0
    assert chart.nearest_position_x(8.0) == 7.0


def test_min_max_extend_ranges():
    chart = two_lines().with_y_range(0.0, 20.0).with_x_range(-1.0, None).use_data(ROWS)
    assert chart.range_y.range() == (0.0, 20.0)
    assert chart.range_x.range() == (-1.0, 7.0)


def test_series_sorted_by_name_with_nearest_y():
    chart = two_lines().use_data(ROWS)
    assert [item.name for item in chart.series] == ["a", "b"]
    pairs = [(item.name, y) for item, y in chart.nearest_data_y(4.0)]
    assert pairs == [("a", 6.0), ("b", 5.0)]
    assert chart.includes_bars is False


def test_empty_data():
    chart = two_lines().bar(lambda r: r.y1).use_data([])
    assert len(chart) == 0
    assert chart.includes_bars is True
    assert chart.nearest_data_x(1.0) is None
    assert [y for _, y in chart.nearest_data_y(1.0)] == [None, None, None]
    assert chart.range_x.range() is None