"""Qt widgets.

Author: Michael Economou
Date: 2026-10-05
"""

from dragreorder.ui.widgets.drag_reorder_pane import DragReorderPane

__all__ = [
    "DragReorderPane",
]
