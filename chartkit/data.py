"""Tabulated chart data: X values, per-series Y values and their positions."""

from __future__ import annotations

from bisect import bisect_left
from typing import Any, Callable, Dict, Hashable, Iterable, List, Mapping, Optional, Tuple

from .ranges import Range, tick_position

Point = Tuple[float, float]
_Getter = Callable[[Any], Any]


def _y_getters(get_y: Any) -> Tuple[_Getter, _Getter]:
    """Split a Y getter into its plain and stacked value functions."""
    value = getattr(get_y, "value", None)
    stacked = getattr(get_y, "stacked_value", None)
    if callable(value) and callable(stacked):
        return value, stacked
    if callable(get_y):
        return get_y, get_y
    raise TypeError(f"not a Y value getter: {get_y!r}")


class Data:
    """Data extracted from user items, indexed for lookups by X position."""

    def __init__(
        self,
        get_x: _Getter,
        get_ys: Mapping[Hashable, Any],
        data: Iterable[Any],
    ) -> None:
        self.data_x: List[Any] = []
        self.data_y: List[Dict[Hashable, Any]] = []
        # X position of each datum, in data order
        self.x_to_data: List[float] = []
        # Rendering positions per series
        self.coords: Dict[Hashable, List[Point]] = {}
        self._range_x = Range()
        self._range_y = Range()

        getters = {series_id: _y_getters(get_y) for series_id, get_y in get_ys.items()}
        for datum in data:
            x = get_x(datum)
            x_position = tick_position(x)
            self._range_x.update(x)
            self.x_to_data.append(x_position)

            y_data: Dict[Hashable, Any] = {}
            for series_id, (value, stacked_value) in getters.items():
                y = value(datum)
                # The stacked value can differ from Y when lines are stacked
                y_stacked = stacked_value(datum)
                self._range_y.update(y_stacked)
                y_data[series_id] = y
                self.coords.setdefault(series_id, []).append(
                    (x_position, tick_position(y_stacked))
                )

            self.data_x.append(x)
            self.data_y.append(y_data)

    def __len__(self) -> int:
        return len(self.data_x)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Data):
            return NotImplemented
        return (
            self.data_x == other.data_x
            and self.data_y == other.data_y
            and self.x_to_data == other.x_to_data
            and self.coords == other.coords
            and self._range_x == other._range_x
            and self._range_y == other._range_y
        )

    def __repr__(self) -> str:
        return f"Data(data_x={self.data_x!r}, data_y={self.data_y!r})"

    @property
    def range_x(self) -> Range:
        """A copy of the range of X values."""
        return Range(self._range_x.low, self._range_x.high)

    @property
    def range_y(self) -> Range:
        """A copy of the range of (stacked) Y values."""
        return Range(self._range_y.low, self._range_y.high)

    def nearest_index(self, pos_x: float) -> Optional[int]:
        """Index of the datum nearest to the X position, or None without data."""
        if not self.x_to_data:
            return None
        index = bisect_left(self.x_to_data, pos_x)
        if index == 0:
            return 0
        if index == len(self.x_to_data):
            return index - 1
        ahead = self.x_to_data[index] - pos_x
        before = pos_x - self.x_to_data[index - 1]
        return index if ahead < before else index - 1

    def nearest_data_x(self, pos_x: float) -> Optional[Any]:
        index = self.nearest_index(pos_x)
        return None if index is None else self.data_x[index]

    def nearest_data_y(self, pos_x: float) -> Dict[Hashable, Any]:
        index = self.nearest_index(pos_x)
        return {} if index is None else dict(self.data_y[index])

    def nearest_position_x(self, pos_x: float) -> Optional[float]:
        """The data-aligned X position nearest to an arbitrary one."""
        index = self.nearest_index(pos_x)
        return None if index is None else self.x_to_data[index]

    def series_positions(self, series_id: Hashable) -> List[Point]:
        return list(self.coords.get(series_id, []))