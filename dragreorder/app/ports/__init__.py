"""Ports - Protocol interfaces for the reorder engine's collaborators.

Author: Michael Economou
Date: 2026-10-03
"""

from dragreorder.app.ports.layout_host import LayoutHostPort

__all__ = [
    "LayoutHostPort",
]
