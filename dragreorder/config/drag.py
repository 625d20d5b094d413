"""Module: dragreorder.config.drag

Author: Michael Economou
Date: 2026-10-02

Drag & drop reorder settings.
"""

# Pixels the pointer must travel (strictly more) before a press becomes a drag.
# The Qt pane prefers QApplication.startDragDistance() when an app is running.
DEFAULT_DRAG_THRESHOLD = 5

# Lower bound for an item's preferred height in the reorder pane
MIN_ITEM_HEIGHT = 1
