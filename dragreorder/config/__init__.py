"""Module: dragreorder.config

Author: Michael Economou
Date: 2026-10-02

Configuration package for dragreorder.

This package organizes configuration into logical modules:
- app: Application info, debug flags, logging
- drag: Drag threshold and item sizing for the reorder pane

All settings are re-exported from this module:
    from dragreorder.config import APP_NAME, DEFAULT_DRAG_THRESHOLD
"""

from dragreorder.config.app import *  # noqa: F401, F403
from dragreorder.config.drag import *  # noqa: F401, F403
