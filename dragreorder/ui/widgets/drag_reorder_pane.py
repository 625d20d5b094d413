"""Module: drag_reorder_pane.py

Author: Michael Economou
Date: 2026-10-05

DragReorderPane - container widget whose children can be reordered
vertically by dragging them with the left mouse button.

The pane is the Qt side of ReorderEngine: it forwards mouse events to the
engine and mirrors the geometry and stacking the engine decides. Children
are positioned directly by the engine, so the pane refuses a QLayout.

Mouse events reach the pane when the child under the cursor does not accept
them (labels, frames, plain widgets); interactive children such as buttons
keep their own clicks.
"""

from functools import partial

from dragreorder.config import MIN_ITEM_HEIGHT
from dragreorder.core.pyqt_imports import (
    QApplication,
    QChildEvent,
    QEvent,
    QLayout,
    QMouseEvent,
    QSize,
    Qt,
    QWidget,
    pyqtSignal,
    sip,
)
from dragreorder.core.reorder import DragState, Point, Rect, RenderLayer, ReorderEngine
from dragreorder.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class DragReorderPane(QWidget):
    """Vertical stack of widgets reorderable by drag and drop.

    Signals:
        drag_started(int): Resting index of the widget that started moving
        drag_index_changed(int): New candidate index while dragging
        order_changed(int, int): Old and new index after a committed move
    """

    drag_started = pyqtSignal(int)
    drag_index_changed = pyqtSignal(int)
    order_changed = pyqtSignal(int, int)

    def __init__(self, parent: QWidget | None = None, drag_threshold: int | None = None):
        """Initialize an empty pane.

        Args:
            parent: Parent widget
            drag_threshold: Pixels before a press turns into a drag,
                defaults to the platform start-drag distance

        """
        super().__init__(parent)
        self.setObjectName("DragReorderPane")

        if drag_threshold is None:
            drag_threshold = QApplication.startDragDistance()
        self._engine = ReorderEngine(self, drag_threshold)
        self._destroyed_slots: dict[int, partial] = {}

    @property
    def engine(self) -> ReorderEngine:
        return self._engine

    def setLayout(self, layout: QLayout | None) -> None:  # noqa: N802
        """Reject layouts; the reorder engine owns child geometry.

        ``None`` asks for no layout manager, which is already the case, and is
        accepted as a no-op.
        """
        if layout is None:
            return
        raise TypeError(
            "DragReorderPane positions its children itself and does not accept "
            f"{type(layout).__name__}"
        )

    # =====================================
    # Widget Management
    # =====================================

    def add_widget(self, widget: QWidget) -> None:
        """Append a widget at the bottom of the stack."""
        self.insert_widget(len(self._engine), widget)

    def insert_widget(self, index: int, widget: QWidget) -> None:
        """Insert a widget at the given resting index.

        Any drag in progress is aborted.
        """
        widget.setParent(self)
        self._engine.add_item(widget, self._preferred_height(widget), index)

        slot = partial(self._on_widget_destroyed, widget)
        widget.destroyed.connect(slot)
        self._destroyed_slots[id(widget)] = slot

        widget.show()
        self._restack()
        self.updateGeometry()
        logger.debug(
            "[DragReorderPane] Widget inserted at %d (%d total)",
            self._engine.index_of(widget),
            len(self._engine),
            extra={"dev_only": True},
        )

    def remove_widget(self, widget: QWidget) -> None:
        """Remove a widget from the pane without deleting it.

        Any drag in progress is aborted.

        Raises:
            KeyError: If the widget is not managed by this pane

        """
        self._engine.remove_item(widget)
        self._disconnect_destroyed(widget)
        widget.hide()
        widget.setParent(None)
        self.updateGeometry()

    def widgets(self) -> list[QWidget]:
        """Managed widgets in resting order."""
        return self._engine.items()

    def count(self) -> int:
        return len(self._engine)

    def is_dragging(self) -> bool:
        return self._engine.state is DragState.DRAGGING

    def cancel_drag(self) -> None:
        """Abort a drag in progress, leaving the order untouched."""
        self._engine.cancel_drag()
        self._restack()

    # =====================================
    # LayoutHostPort
    # =====================================

    # Deleted widgets are skipped: the engine may still report one while it is
    # being dropped from inside its destroyed signal.

    def apply_geometry(self, widget: QWidget, rect: Rect) -> None:
        if not sip.isdeleted(widget):
            widget.setGeometry(rect.x, rect.y, rect.width, rect.height)

    def apply_layer(self, widget: QWidget, layer: RenderLayer) -> None:
        if layer is RenderLayer.ELEVATED:
            if not sip.isdeleted(widget):
                widget.raise_()
        else:
            self._restack()

    def order_committed(self, widget: QWidget, old_index: int, new_index: int) -> None:
        self.order_changed.emit(old_index, new_index)

    # =====================================
    # Qt Overrides
    # =====================================

    def sizeHint(self) -> QSize:  # noqa: N802
        width = max((w.sizeHint().width() for w in self.widgets()), default=0)
        return QSize(width, self._engine.preferred_height())

    def minimumSizeHint(self) -> QSize:  # noqa: N802
        return self.sizeHint()

    def resizeEvent(self, event):  # noqa: N802
        super().resizeEvent(event)
        self._engine.resize(self.width(), self.height())

    def hideEvent(self, event):  # noqa: N802
        if self._engine.state is not DragState.IDLE:
            self.cancel_drag()
        super().hideEvent(event)

    def event(self, event: QEvent) -> bool:
        # Children post LayoutRequest to their parent when their size hint changes
        if event.type() == QEvent.LayoutRequest:
            self._refresh_item_heights()
        return super().event(event)

    def childEvent(self, event: QChildEvent) -> None:  # noqa: N802
        if event.type() == QEvent.ChildRemoved:
            self._forget_child(event.child())
        super().childEvent(event)

    def mousePressEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        if event.button() != Qt.LeftButton:
            super().mousePressEvent(event)
            return
        self._engine.press(Point(event.pos().x(), event.pos().y()))
        event.accept()

    def mouseMoveEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        if not event.buttons() & Qt.LeftButton:
            super().mouseMoveEvent(event)
            return

        was_dragging = self.is_dragging()
        previous_index = self._engine.drag_index

        self._engine.move(Point(event.pos().x(), event.pos().y()))

        if not self.is_dragging():
            return
        if not was_dragging:
            self.drag_started.emit(self._engine.drag_index)
        elif self._engine.drag_index != previous_index:
            self.drag_index_changed.emit(self._engine.drag_index)
        event.accept()

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        if event.button() != Qt.LeftButton:
            super().mouseReleaseEvent(event)
            return
        self._engine.release(Point(event.pos().x(), event.pos().y()))
        event.accept()

    # =====================================
    # Helpers
    # =====================================

    @staticmethod
    def _preferred_height(widget: QWidget) -> int:
        return max(widget.sizeHint().height(), widget.minimumHeight(), MIN_ITEM_HEIGHT)

    def _forget_child(self, child) -> None:
        """Drop managed widgets that were reparented or deleted behind our back."""
        gone = [w for w in self.widgets() if w is child or sip.isdeleted(w)]
        for widget in gone:
            logger.debug(
                "[DragReorderPane] Managed widget left the pane externally",
                extra={"dev_only": True},
            )
            self._engine.remove_item(widget)
            self._disconnect_destroyed(widget)
        if gone:
            self.updateGeometry()

    def _on_widget_destroyed(self, widget: QWidget, *_args) -> None:
        self._destroyed_slots.pop(id(widget), None)
        # Children of a pane that is itself being destroyed need no cleanup
        if sip.isdeleted(self):
            return
        if not any(w is widget for w in self.widgets()):
            return
        logger.debug("[DragReorderPane] Managed widget deleted", extra={"dev_only": True})
        self._engine.remove_item(widget)
        self.updateGeometry()

    def _disconnect_destroyed(self, widget: QWidget) -> None:
        slot = self._destroyed_slots.pop(id(widget), None)
        if slot is not None and not sip.isdeleted(widget):
            widget.destroyed.disconnect(slot)

    def _refresh_item_heights(self) -> None:
        for widget in self.widgets():
            if not sip.isdeleted(widget):
                self._engine.set_item_height(widget, self._preferred_height(widget))
        self.updateGeometry()

    def _restack(self) -> None:
        """Restore z-order to resting order, keeping a dragged widget on top."""
        for widget in self.widgets():
            if not sip.isdeleted(widget):
                widget.raise_()
        dragged = self._engine.dragged_payload
        if dragged is not None and not sip.isdeleted(dragged):
            dragged.raise_()
