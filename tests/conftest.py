"""
Module: conftest.py

Author: Michael Economou
Date: 2026-10-06

Global pytest configuration and fixtures for the dragreorder test suite.
Includes CI-friendly setup for PyQt5 testing and common fixtures.
"""

import os

import pytest

# Headless environments have no display; let Qt render offscreen unless overridden.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "gui: mark test as requiring GUI")
    config.addinivalue_line("markers", "local_only: mark test as local environment only")


def pytest_collection_modifyitems(session, config, items):
    """Skip GUI and local-only tests on CI."""
    _ = session
    _ = config

    is_ci = "CI" in os.environ or "GITHUB_ACTIONS" in os.environ
    if not is_ci:
        return

    skip_gui = pytest.mark.skip(reason="GUI tests don't work on CI")
    skip_local = pytest.mark.skip(reason="Local-only tests skipped on CI")
    for item in items:
        if "gui" in item.keywords:
            item.add_marker(skip_gui)
        if "local_only" in item.keywords:
            item.add_marker(skip_local)


@pytest.fixture
def recording_host():
    """Fresh RecordingHost for engine tests."""
    from mocks import RecordingHost

    return RecordingHost()


@pytest.fixture
def engine(recording_host):
    """Engine with three 20px items (a, b, c) in a 100x200 container."""
    from dragreorder.core.reorder import ReorderEngine

    engine = ReorderEngine(recording_host, drag_threshold=5)
    engine.resize(100, 200)
    for name in ("a", "b", "c"):
        engine.add_item(name, 20)
    recording_host.clear()
    return engine
