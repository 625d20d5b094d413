"""
Drag & drop reorder module.

This module provides the toolkit-agnostic reorder machinery:
- ReorderEngine: Container order plus the press/drag/release state machine
- compute_drag_index: Placement algorithm deciding the candidate index
- StackLayout: Top-to-bottom layout with drag-time overrides
- PointerEvent: Input events delivered by an adapter

Author: Michael Economou
Date: 2026-10-04
"""

from __future__ import annotations

from dragreorder.core.reorder.events import PointerEvent, PointerEventType
from dragreorder.core.reorder.geometry import Point, Rect
from dragreorder.core.reorder.item import RenderLayer, ReorderItem
from dragreorder.core.reorder.placement import compute_drag_index, find_rect_at
from dragreorder.core.reorder.reorder_engine import DragSession, DragState, ReorderEngine
from dragreorder.core.reorder.stack_layout import StackLayout

__all__ = [
    "DragSession",
    "DragState",
    "Point",
    "PointerEvent",
    "PointerEventType",
    "Rect",
    "RenderLayer",
    "ReorderEngine",
    "ReorderItem",
    "StackLayout",
    "compute_drag_index",
    "find_rect_at",
]
