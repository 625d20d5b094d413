"""Tests for DragReorderPane.

Author: Michael Economou
Date: 2026-10-07

Drives the pane with synthetic mouse events and checks child geometry,
stacking, signals and the layout guard.
"""

from __future__ import annotations

import pytest

try:
    from PyQt5.QtCore import QEvent, QPointF, Qt
    from PyQt5.QtGui import QMouseEvent
    from PyQt5.QtWidgets import QApplication, QVBoxLayout, QWidget

    from dragreorder.ui.widgets import DragReorderPane

    PYQT5_AVAILABLE = True
except ImportError:
    PYQT5_AVAILABLE = False

pytestmark = [
    pytest.mark.gui,
    pytest.mark.skipif(not PYQT5_AVAILABLE, reason="PyQt5 not available"),
]


def send_mouse(widget, kind, x, y, button=None, buttons=None):
    """Deliver a mouse event with explicit button state."""
    if button is None:
        button = Qt.NoButton if kind == QEvent.MouseMove else Qt.LeftButton
    if buttons is None:
        buttons = Qt.NoButton if kind == QEvent.MouseButtonRelease else Qt.LeftButton
    event = QMouseEvent(kind, QPointF(x, y), button, buttons, Qt.NoModifier)
    QApplication.sendEvent(widget, event)


def press(widget, x, y, **kwargs):
    send_mouse(widget, QEvent.MouseButtonPress, x, y, **kwargs)


def move(widget, x, y, **kwargs):
    send_mouse(widget, QEvent.MouseMove, x, y, **kwargs)


def release(widget, x, y, **kwargs):
    send_mouse(widget, QEvent.MouseButtonRelease, x, y, **kwargs)


def make_child(height: int) -> QWidget:
    child = QWidget()
    child.setFixedHeight(height)
    return child


@pytest.fixture
def pane(qtbot):
    """Shown pane with three 20px children."""
    pane = DragReorderPane(drag_threshold=5)
    qtbot.addWidget(pane)
    for _ in range(3):
        pane.add_widget(make_child(20))
    pane.resize(120, 200)
    pane.show()
    qtbot.waitExposed(pane)
    return pane


class TestDragReorderPaneLayout:
    """Test stacking of children."""

    def test_children_are_stacked(self, pane):
        assert [w.y() for w in pane.widgets()] == [0, 20, 40]
        assert all(w.x() == 0 and w.width() == pane.width() for w in pane.widgets())

    def test_size_hint_is_sum_of_heights(self, pane):
        assert pane.sizeHint().height() == 60

    def test_set_layout_is_rejected(self, pane):
        with pytest.raises(TypeError):
            pane.setLayout(QVBoxLayout())

    def test_set_layout_none_is_accepted(self, pane):
        pane.setLayout(None)

        assert pane.layout() is None
        assert [w.y() for w in pane.widgets()] == [0, 20, 40]

    def test_insert_widget_at_index(self, pane):
        first = make_child(30)
        pane.insert_widget(0, first)

        assert pane.widgets()[0] is first
        assert [w.y() for w in pane.widgets()] == [0, 30, 50, 70]

    def test_remove_widget(self, pane):
        middle = pane.widgets()[1]
        pane.remove_widget(middle)

        assert pane.count() == 2
        assert middle.parent() is None
        assert [w.y() for w in pane.widgets()] == [0, 20]

    def test_external_reparent_is_forgotten(self, pane):
        last = pane.widgets()[2]
        last.setParent(None)

        assert pane.count() == 2
        assert last not in pane.widgets()


class TestDragReorderPaneDragging:
    """Test mouse-driven reordering."""

    def test_drag_moves_widget_to_end(self, pane, qtbot):
        first, second, third = pane.widgets()

        with qtbot.waitSignal(pane.order_changed, timeout=1000) as blocker:
            press(pane, 10, 5)
            move(pane, 10, 15)
            move(pane, 10, 35)
            move(pane, 10, 55)
            release(pane, 10, 55)

        assert blocker.args == [0, 2]
        assert pane.widgets() == [second, third, first]
        assert [w.y() for w in pane.widgets()] == [0, 20, 40]

    def test_drag_signals(self, pane, qtbot):
        started = []
        changed = []
        pane.drag_started.connect(started.append)
        pane.drag_index_changed.connect(changed.append)

        press(pane, 10, 5)
        move(pane, 10, 15)
        move(pane, 10, 35)

        assert started == [0]
        assert changed == [1]
        assert pane.is_dragging()

    def test_dragged_widget_is_raised(self, pane):
        first = pane.widgets()[0]

        press(pane, 10, 5)
        move(pane, 10, 15)

        assert pane.children()[-1] is first
        assert first.y() == 10

    def test_move_within_threshold_does_not_drag(self, pane):
        press(pane, 10, 5)
        move(pane, 13, 9)

        assert not pane.is_dragging()
        assert pane.widgets()[0].y() == 0

    def test_right_button_is_ignored(self, pane):
        press(pane, 10, 5, button=Qt.RightButton, buttons=Qt.RightButton)
        move(pane, 10, 40, buttons=Qt.RightButton)

        assert not pane.is_dragging()

    def test_remove_during_drag_aborts(self, pane):
        first, second, third = pane.widgets()
        press(pane, 10, 5)
        move(pane, 10, 15)
        move(pane, 10, 35)

        pane.remove_widget(third)
        release(pane, 10, 35)

        assert not pane.is_dragging()
        assert pane.widgets() == [first, second]
        assert [w.y() for w in pane.widgets()] == [0, 20]

    def test_hide_cancels_drag(self, pane):
        press(pane, 10, 5)
        move(pane, 10, 15)
        move(pane, 10, 55)

        pane.hide()

        assert not pane.is_dragging()
        assert [w.y() for w in pane.widgets()] == [0, 20, 40]


def delete_now(widget):
    """Delete a widget through deleteLater and flush the deferred delete."""
    widget.deleteLater()
    QApplication.sendPostedEvents(None, QEvent.DeferredDelete)


class TestDragReorderPaneDeletion:
    """Test widgets deleted while still managed by the pane."""

    def test_deleting_widget_at_rest(self, pane):
        first, second, third = pane.widgets()
        delete_now(second)

        assert pane.count() == 2
        assert pane.widgets() == [first, third]
        assert [w.y() for w in pane.widgets()] == [0, 20]

        pane.add_widget(make_child(20))

        assert pane.count() == 3
        assert [w.y() for w in pane.widgets()] == [0, 20, 40]

    def test_deleting_dragged_widget_aborts_drag(self, pane):
        first, second, third = pane.widgets()
        press(pane, 10, 5)
        move(pane, 10, 15)
        assert pane.is_dragging()

        delete_now(first)

        assert not pane.is_dragging()
        assert pane.widgets() == [second, third]
        assert [w.y() for w in pane.widgets()] == [0, 20]

        move(pane, 10, 40)
        release(pane, 10, 40)

        assert pane.widgets() == [second, third]

    def test_deleting_sibling_during_drag_aborts(self, pane, qtbot):
        first, second, third = pane.widgets()
        press(pane, 10, 5)
        move(pane, 10, 15)
        move(pane, 10, 35)

        with qtbot.assertNotEmitted(pane.order_changed):
            delete_now(third)
            release(pane, 10, 35)

        assert pane.widgets() == [first, second]
        assert [w.y() for w in pane.widgets()] == [0, 20]

    def test_removed_widget_is_not_tracked_after_deletion(self, pane):
        first, second, third = pane.widgets()
        pane.remove_widget(second)
        delete_now(second)

        assert pane.widgets() == [first, third]
