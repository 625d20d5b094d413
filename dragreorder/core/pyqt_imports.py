"""Module: pyqt_imports.py

Author: Michael Economou
Date: 2026-10-04

Centralized PyQt5 imports to reduce import clutter in widget modules.
Groups related Qt classes together.
"""

# sip wrapper state (deleted C++ objects)
from PyQt5 import sip

# Core Qt classes
from PyQt5.QtCore import (
    QChildEvent,
    QEvent,
    QSize,
    Qt,
    pyqtSignal,
)

# GUI classes for events and painting
from PyQt5.QtGui import (
    QColor,
    QMouseEvent,
    QPalette,
)

# Widget classes for UI components
from PyQt5.QtWidgets import (
    QApplication,
    QLabel,
    QLayout,
    QMainWindow,
    QScrollArea,
    QWidget,
)

__all__ = [
    "sip",
    # Core
    "QChildEvent",
    "QEvent",
    "QSize",
    "Qt",
    "pyqtSignal",
    # GUI
    "QColor",
    "QMouseEvent",
    "QPalette",
    # Widgets
    "QApplication",
    "QLabel",
    "QLayout",
    "QMainWindow",
    "QScrollArea",
    "QWidget",
]
