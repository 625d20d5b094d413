"""Module: geometry.py

Author: Michael Economou
Date: 2026-10-03

Integer geometry value types used by the reorder engine.

Pure domain layer - no Qt dependencies. Coordinates follow the usual
widget convention: origin at the top-left, y grows downward.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point in container coordinates."""

    x: int
    y: int

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left corner and size."""

    x: int
    y: int
    width: int
    height: int

    @property
    def bottom(self) -> int:
        """First y coordinate below the rectangle."""
        return self.y + self.height

    @property
    def right(self) -> int:
        """First x coordinate to the right of the rectangle."""
        return self.x + self.width

    @property
    def top_center(self) -> Point:
        """Horizontal center projected onto the top edge."""
        return Point(self.x + self.width // 2, self.y)

    @property
    def bottom_center(self) -> Point:
        """Horizontal center projected onto the bottom edge."""
        return Point(self.x + self.width // 2, self.bottom)

    @property
    def mid_y(self) -> int:
        """Vertical midpoint, rounded down."""
        return self.y + self.height // 2

    def contains(self, point: Point) -> bool:
        """Check whether the point lies inside the rectangle.

        The rectangle is half-open: the left and top edges are inside,
        the right and bottom edges are not. Empty rectangles contain nothing.
        """
        return self.x <= point.x < self.right and self.y <= point.y < self.bottom

    def moved_to(self, x: int, y: int) -> Rect:
        """Return a copy of this rectangle with a new top-left corner."""
        return Rect(x, y, self.width, self.height)
