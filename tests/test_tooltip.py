import math

import pytest

from chartkit.lines import Line, SeriesItem
from chartkit.tooltip import (
    TOOLTIP_CURSOR_DISTANCE,
    Tooltip,
    TooltipPlacement,
    TooltipSortBy,
)


def _item(item_id, name):
    return SeriesItem(item_id, name, "#000000", Line(lambda d: d))


A = _item(0, "alpha")
B = _item(1, "beta")
C = _item(2, "gamma")


def test_placement_parse_and_display():
    assert TooltipPlacement.parse("hide") is TooltipPlacement.HIDE
    assert TooltipPlacement.parse("LEFT CURSOR") is TooltipPlacement.LEFT_CURSOR
    for placement in TooltipPlacement:
        assert TooltipPlacement.parse(str(placement)) is placement
    assert str(TooltipPlacement.LEFT_CURSOR) == "Left cursor"


def test_placement_parse_invalid():
    with pytest.raises(ValueError, match="invalid TooltipPlacement: `right`"):
        TooltipPlacement.parse("right")


def test_sort_by_parse_and_display():
    assert TooltipSortBy.parse("ascending") is TooltipSortBy.ASCENDING
    for sort_by in TooltipSortBy:
        assert TooltipSortBy.parse(str(sort_by)) is sort_by
    with pytest.raises(ValueError, match="invalid SortBy: `sideways`"):
        TooltipSortBy.parse("sideways")


def test_sort_by_lines():
    values = [(C, 1.0), (A, 3.0), (B, None)]
    assert TooltipSortBy.LINES.sort_values(values) == [(A, 3.0), (B, None), (C, 1.0)]


def test_sort_ascending_missing_first():
    values = [(A, 3.0), (B, None), (C, 1.0)]
    assert TooltipSortBy.ASCENDING.sort_values(values) == [(B, None), (C, 1.0), (A, 3.0)]


def test_sort_descending_missing_last():
    values = [(A, 3.0), (B, None), (C, 1.0)]
    assert TooltipSortBy.DESCENDING.sort_values(values) == [(A, 3.0), (C, 1.0), (B, None)]


def test_sort_total_order_nan_and_signed_zero():
    values = [(A, math.nan), (B, 0.0), (C, -0.0)]
    result = TooltipSortBy.ASCENDING.sort_values(values)
    assert [item for item, _ in result] == [C, B, A]


def test_sort_is_stable_for_equal_values():
    values = [(A, 2.0), (B, 2.0), (C, 2.0)]
    assert TooltipSortBy.ASCENDING.sort_values(values) == values
    assert TooltipSortBy.DESCENDING.sort_values(values) == values


def test_sort_does_not_mutate_input():
    values = [(C, 1.0), (A, 3.0)]
    TooltipSortBy.LINES.sort_values(values)
    assert values == [(C, 1.0), (A, 3.0)]


def test_defaults_and_builders():
    tooltip = Tooltip()
    assert tooltip.placement is TooltipPlacement.HIDE
    assert tooltip.sort_by is TooltipSortBy.LINES
    assert tooltip.cursor_distance == TOOLTIP_CURSOR_DISTANCE
    assert tooltip.skip_missing is False
    assert tooltip.show_x_ticks is True
    built = (
        Tooltip.left_cursor()
        .with_sort_by("descending")
        .with_cursor_distance(4)
        .with_skip_missing(True)
        .with_show_x_ticks(False)
    )
    assert built.placement is TooltipPlacement.LEFT_CURSOR
    assert built.sort_by is TooltipSortBy.DESCENDING
    assert built.cursor_distance == 4.0
    assert built.skip_missing is True
    assert built.show_x_ticks is False


def test_visible():
    assert Tooltip.left_cursor().visible(True) is True
    assert Tooltip.left_cursor().visible(False) is False
    assert Tooltip.from_placement("hide").visible(True) is False


def test_rows_formats_and_marks_missing():
    tooltip = Tooltip.left_cursor().with_sort_by(TooltipSortBy.ASCENDING)
    rows = tooltip.rows([(A, 3.0), (B, None), (C, 1.0)], lambda y: f"<{y}>")
    assert rows == [(B, "-"), (C, "<1.0>"), (A, "<3.0>")]


def test_rows_skip_missing():
    tooltip = Tooltip.left_cursor().with_skip_missing(True)
    rows = tooltip.rows([(A, 3.0), (B, None)], str)
    assert rows == [(A, "3.0")]


def test_heading():
    tooltip = Tooltip.left_cursor()
    assert tooltip.heading(None, str) == "no data"
    assert tooltip.heading(7.5, lambda x: f"x={x}") == "x=7.5"
    assert tooltip.with_show_x_ticks(False).heading(7.5, str) == ""