"""
Module: mocks.py

Author: Michael Economou
Date: 2026-10-06

Mock objects for testing the reorder engine without Qt.
"""

from dragreorder.core.reorder import RenderLayer


class RecordingHost:
    """LayoutHostPort implementation that records every call."""

    def __init__(self):
        self.geometry = {}
        self.layers = {}
        self.commits = []
        self.geometry_calls = 0

    def apply_geometry(self, payload, rect):
        self.geometry[payload] = rect
        self.geometry_calls += 1

    def apply_layer(self, payload, layer):
        self.layers[payload] = layer

    def order_committed(self, payload, old_index, new_index):
        self.commits.append((payload, old_index, new_index))

    def elevated(self):
        return [payload for payload, layer in self.layers.items() if layer is RenderLayer.ELEVATED]

    def clear(self):
        self.geometry_calls = 0
        self.commits.clear()
