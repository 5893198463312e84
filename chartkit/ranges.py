"""Tracking the minimum and maximum of tick values."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Optional, Tuple


def tick_position(value: Any) -> float:
    """Position of a tick value on its axis as a float."""
    if isinstance(value, numbers.Real):
        return float(value)
    if isinstance(value, datetime):
        return value.timestamp()
    position = getattr(value, "position", None)
    if callable(position):
        return float(position())
    raise TypeError(f"cannot position tick value of type {type(value).__name__}")


@dataclass
class Range:
    """Smallest and largest values seen so far, each paired with its position."""

    low: Optional[Tuple[Any, float]] = None
    high: Optional[Tuple[Any, float]] = None

    def update(self, value: Any) -> None:
        """Extend the range to include `value`. Values positioned at NaN are ignored."""
        pos = tick_position(value)
        if math.isnan(pos):
            return
        if self.low is None or self.high is None:
            self.low = (value, pos)
            self.high = (value, pos)
        elif value < self.low[0]:
            self.low = (value, pos)
        elif value > self.high[0]:
            self.high = (value, pos)

    def maybe_update(self, values: Iterable[Optional[Any]]) -> Range:
        """Return a copy extended by each value that is not None."""
        result = Range(self.low, self.high)
        for value in values:
            if value is not None:
                result.update(value)
        return result

    def range(self) -> Optional[Tuple[Any, Any]]:
        """The (min, max) values, or None when empty."""
        if self.low is None or self.high is None:
            return None
        return (self.low[0], self.high[0])

    def positions(self) -> Optional[Tuple[float, float]]:
        """The (min, max) positions, or None when empty."""
        if self.low is None or self.high is None:
            return None
        return (self.low[1], self.high[1])