"""Guide lines that follow the mouse over the inner chart area."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional

from .projection import Rect

GUIDE_LINE_COLOUR = "#9a9a9a"


class AlignOver(Enum):
    """Align a guide over the mouse or the nearest data."""

    MOUSE = "mouse"
    DATA = "data"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> AlignOver:
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"invalid align over: `{text}`") from None


@dataclass(frozen=True)
class GuideLine:
    """A mouse guide line. Aligned over the mouse position or nearest data."""

    align: AlignOver = AlignOver.MOUSE
    width: float = 1.0
    colour: Any = GUIDE_LINE_COLOUR

    @classmethod
    def over_mouse(cls) -> GuideLine:
        return cls(align=AlignOver.MOUSE)

    @classmethod
    def over_data(cls) -> GuideLine:
        return cls(align=AlignOver.DATA)

    def with_colour(self, colour: Any) -> GuideLine:
        return replace(self, colour=colour)


@dataclass(frozen=True)
class XGuideLine(GuideLine):
    """A vertical line tracking the X position."""

    def position(self, mouse_x: float, nearest_svg_x: Optional[float], inner: Rect) -> Rect:
        """Line from the top to the bottom of the inner area."""
        if self.align is AlignOver.DATA and nearest_svg_x is not None:
            x = nearest_svg_x
        else:
            x = mouse_x
        return Rect.from_points(x, inner.top_y, x, inner.bottom_y)


@dataclass(frozen=True)
class YGuideLine(GuideLine):
    """A horizontal line tracking the mouse's Y position."""

    def position(self, mouse_y: float, inner: Rect) -> Rect:
        return Rect.from_points(inner.left_x, mouse_y, inner.right_x, mouse_y)


def guide_visible(hover_inner: bool, line: Rect) -> bool:
    """A guide shows while hovering the inner area and all its coordinates are known."""
    have_data = not any(
        math.isnan(v) for v in (line.left_x, line.top_y, line.right_x, line.bottom_y)
    )
    return bool(hover_inner) and have_data