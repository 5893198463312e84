"""Building SVG path data for lines drawn through points."""

from __future__ import annotations

import math
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

from .padding import format_number as _fmt

Point = Tuple[float, float]
_NAN_POINT: Point = (math.nan, math.nan)


class Step(Enum):
    """Where the corner of a step goes."""

    HORIZONTAL = "horizontal"
    HORIZONTAL_MIDDLE = "horizontal-middle"
    VERTICAL = "vertical"
    VERTICAL_MIDDLE = "vertical-middle"


class Interpolation(Enum):
    """How a line is drawn between points."""

    LINEAR = "linear"
    STEP_HORIZONTAL = "step-horizontal"
    STEP_HORIZONTAL_MIDDLE = "step-horizontal-middle"
    STEP_VERTICAL = "step-vertical"
    STEP_VERTICAL_MIDDLE = "step-vertical-middle"
    MONOTONE = "monotone"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> Interpolation:
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"unknown line interpolation: `{text}`") from None

    @classmethod
    def from_step(cls, step: Step) -> Interpolation:
        return cls(f"step-{step.value}")

    @property
    def step(self) -> Optional[Step]:
        """The step kind for step interpolations, otherwise None."""
        if self.value.startswith("step-"):
            return Step(self.value[len("step-"):])
        return None

    def path(self, points: Sequence[Point]) -> str:
        """SVG path data drawing the line through the points."""
        if self is Interpolation.LINEAR:
            return linear_path(points)
        if self is Interpolation.MONOTONE:
            return monotone_path(points)
        step = self.step
        assert step is not None
        return step_path(step, points)


def _is_gap(x: float, y: float) -> bool:
    return math.isnan(x) or math.isnan(y)


def linear_path(points: Iterable[Point]) -> str:
    """Straight segments; NaN points split the line."""
    parts: List[str] = []
    need_move = True
    for x, y in points:
        if _is_gap(x, y):
            need_move = True
        elif need_move:
            need_move = False
            parts.append(f"M {_fmt(x)} {_fmt(y)} ")
        else:
            parts.append(f"L {_fmt(x)} {_fmt(y)} ")
    return "".join(parts)


def step_path(step: Step, points: Iterable[Point]) -> str:
    """Horizontal and vertical segments only; NaN points split the line."""
    parts: List[str] = []
    prev: Optional[Point] = None
    for x, y in points:
        if _is_gap(x, y):
            prev = None
            continue
        if prev is None:
            parts.append(f"M {_fmt(x)} {_fmt(y)} ")
        else:
            prev_x, prev_y = prev
            if step is Step.HORIZONTAL:
                parts.append(f"H {_fmt(x)} V {_fmt(y)} ")
            elif step is Step.HORIZONTAL_MIDDLE:
                parts.append(f"H {_fmt((x + prev_x) / 2.0)} V {_fmt(y)} H {_fmt(x)} ")
            elif step is Step.VERTICAL:
                parts.append(f"V {_fmt(y)} H {_fmt(x)} ")
            else:
                parts.append(f"V {_fmt((y + prev_y) / 2.0)} H {_fmt(x)} V {_fmt(y)} ")
        prev = (x, y)
    return "".join(parts)


def _div(a: float, b: float) -> float:
    """IEEE division: zero denominators give infinities or NaN."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _signum(v: float) -> float:
    return v if math.isnan(v) else math.copysign(1.0, v)


def _fmin(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return min(a, b)


def _slope(x: float, y: float, x_next: float, y_next: float) -> float:
    return _div(y_next - y, x_next - x)


def _tangent(x_prev: float, x: float, x_next: float, y_prev: float, y: float, y_next: float) -> float:
    slope_prev = _slope(x_prev, y_prev, x, y)
    slope = _slope(x, y, x_next, y_next)
    dist_prev = x - x_prev
    dist = x_next - x
    para = _div(slope_prev * dist + slope * dist_prev, dist_prev + dist)
    return (_signum(slope_prev) + _signum(slope)) * _fmin(abs(slope_prev), 0.5 * abs(para))


def monotone_path(points: Sequence[Point]) -> str:
    """Smooth monotone cubic curve (Steffen's method); NaN points split the line."""
    pts = list(points)
    if not pts:
        return ""
    prevs = [_NAN_POINT, *pts[:-1]]
    nexts = [*pts[1:], _NAN_POINT]
    parts: List[str] = []
    for (x_prev, y_prev), (x, y), (x_next, y_next) in zip(prevs, pts, nexts):
        if _is_gap(x, y):
            continue
        if _is_gap(x_prev, y_prev):
            parts.append(f"M {_fmt(x)},{_fmt(y)} ")
        elif _is_gap(x_next, y_next):
            parts.append(f"L {_fmt(x)},{_fmt(y)} ")
        else:
            tangent = _tangent(x_prev, x, x_next, y_prev, y, y_next)
            dx = (x - x_prev) / 3.0
            x_c = x - dx
            y_c = y - dx * tangent
            parts.append(f"S {_fmt(x_c)},{_fmt(y_c)} {_fmt(x)},{_fmt(y)} ")
    return "".join(parts)