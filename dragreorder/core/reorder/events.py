"""Module: events.py

Author: Michael Economou
Date: 2026-10-03

Pointer events delivered to the reorder engine by an input adapter.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from dragreorder.core.reorder.geometry import Point


class PointerEventType(Enum):
    """Kind of pointer event."""

    PRESS = "press"
    MOVE = "move"
    RELEASE = "release"


@dataclass(frozen=True)
class PointerEvent:
    """A single pointer event in container coordinates.

    Attributes:
        kind: Press, move or release
        point: Pointer position
        primary: True when the primary (left) button is involved. For moves
            this means the primary button is held down.

    """

    kind: PointerEventType
    point: Point
    primary: bool = True

    @classmethod
    def press(cls, x: int, y: int, primary: bool = True) -> PointerEvent:
        return cls(PointerEventType.PRESS, Point(x, y), primary)

    @classmethod
    def move(cls, x: int, y: int, primary: bool = True) -> PointerEvent:
        return cls(PointerEventType.MOVE, Point(x, y), primary)

    @classmethod
    def release(cls, x: int, y: int, primary: bool = True) -> PointerEvent:
        return cls(PointerEventType.RELEASE, Point(x, y), primary)
