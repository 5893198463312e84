"""Padding around chart components."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal


def format_number(value: float) -> str:
    """Format a number the shortest way that round-trips, never in exponent form."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


@dataclass(frozen=True)
class Padding:
    """Padding on each side of a component, clockwise from the top."""

    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0

    @classmethod
    def zero(cls) -> Padding:
        return cls.sides(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def sides(cls, top: float, right: float, bottom: float, left: float) -> Padding:
        return cls(top, right, bottom, left)

    @classmethod
    def hv(cls, h: float, v: float) -> Padding:
        """Padding with `h` on top and bottom and `v` on left and right."""
        return cls.sides(h, v, h, v)

    @classmethod
    def uniform(cls, v: float) -> Padding:
        return cls.sides(v, v, v, v)

    def height(self) -> float:
        return self.top + self.bottom

    def width(self) -> float:
        return self.left + self.right

    def apply(self, outer):
        """Shrink the given bounds by this padding."""
        return outer.shrink(self.top, self.right, self.bottom, self.left)

    def to_css_style(self) -> str:
        return " ".join(
            f"{format_number(side)}px" for side in (self.top, self.right, self.bottom, self.left)
        )