"""Module: item.py

Author: Michael Economou
Date: 2026-10-03

Item record tracked by the reorder engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from dragreorder.core.reorder.geometry import Rect


class RenderLayer(Enum):
    """Rendering priority of an item inside the container."""

    NORMAL = "normal"  # Stacked with its siblings
    ELEVATED = "elevated"  # Drawn above all siblings while dragged


@dataclass(eq=False)
class ReorderItem:
    """One entry of the container.

    Attributes:
        payload: Caller object the item stands for (a QWidget in the pane)
        height: Preferred height used by the stack layout
        rect: Current geometry, updated by layout passes and by dragging
        layer: Current render layer

    Items compare by identity so that two payloads with equal values
    never alias each other.
    """

    payload: Any
    height: int
    rect: Rect = field(default_factory=lambda: Rect(0, 0, 0, 0))
    layer: RenderLayer = RenderLayer.NORMAL

    @property
    def is_elevated(self) -> bool:
        """Check if the item is currently detached from normal stacking."""
        return self.layer is RenderLayer.ELEVATED
