#!/usr/bin/env python3
"""
Module: dragreorder.__main__

Author: Michael Economou
Date: 2026-10-06

Demo window for the reorder pane, run with:
    python -m dragreorder

Shows a column of labels with mixed heights that can be reordered by
dragging them with the left mouse button.
"""

import sys

from dragreorder.config import APP_NAME, WINDOW_TITLE
from dragreorder.core.pyqt_imports import (
    QApplication,
    QColor,
    QLabel,
    QMainWindow,
    QPalette,
    QScrollArea,
    Qt,
)
from dragreorder.ui.widgets import DragReorderPane
from dragreorder.utils.logging.init_logging import init_logging

DEMO_ITEMS = [
    ("Intro", 40, "#4e79a7"),
    ("Verse", 80, "#f28e2b"),
    ("Chorus", 60, "#e15759"),
    ("Bridge", 120, "#76b7b2"),
    ("Solo", 40, "#59a14f"),
    ("Outro", 60, "#edc948"),
]


def _make_label(text: str, height: int, color: str) -> QLabel:
    label = QLabel(f"{text} ({height}px)")
    label.setAlignment(Qt.AlignCenter)
    label.setMinimumHeight(height)
    label.setAutoFillBackground(True)

    palette = label.palette()
    palette.setColor(QPalette.Window, QColor(color))
    palette.setColor(QPalette.WindowText, QColor("#ffffff"))
    label.setPalette(palette)
    return label


def main() -> int:
    """Create the demo window and run the Qt event loop."""
    logger = init_logging(APP_NAME)

    app = QApplication(sys.argv)
    app.setStyle("Fusion")

    pane = DragReorderPane()
    for text, height, color in DEMO_ITEMS:
        pane.add_widget(_make_label(text, height, color))

    pane.order_changed.connect(
        lambda old, new: logger.info(
            "Order: %s", ", ".join(label.text() for label in pane.widgets())
        )
    )

    scroll = QScrollArea()
    scroll.setWidgetResizable(True)
    scroll.setWidget(pane)

    window = QMainWindow()
    window.setWindowTitle(WINDOW_TITLE)
    window.setCentralWidget(scroll)
    window.resize(320, 480)
    window.show()

    logger.info("Demo started with %d items", pane.count())
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
