"""Board coordinates and the findings of a hero's scan."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Point2d:
    """A mutable position on the board (row ``x``, column ``y``)."""

    x: int
    y: int

    def distance(self, x: float, y: float) -> float:
        """Euclidean distance from this point to ``(x, y)``."""
        return math.hypot(self.x - x, self.y - y)

    def __str__(self) -> str:
        return f"(Point2d:)({self.x},{self.y})"


@dataclass(frozen=True)
class SearchConclusion:
    """Something a hero noticed: where it is and what symbol it carries."""

    point: Point2d
    symbol: str

    def __str__(self) -> str:
        return f"(SearchConclusion:)(Point2d:)({self.point.x},{self.point.y})"