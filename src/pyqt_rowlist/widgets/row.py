"""
Row wrapper used by ReorderableRowContainer.

Wraps one content widget with a drag handle on the left and a selection
checkbox on the right. Drag events land on the row under the pointer, so the
row forwards them to whichever container currently owns it.
"""

import logging

from PyQt6.QtCore import QByteArray, QEvent, QMimeData, QObject, QPoint, Qt
from PyQt6.QtGui import QDrag, QMouseEvent
from PyQt6.QtWidgets import QCheckBox, QFrame, QHBoxLayout, QLabel, QWidget

from pyqt_rowlist.core import ROW_MIME_TYPE, encode_row_payload, snap_to_row_edge
from pyqt_rowlist.protocols import RowListConfig, get_row_list_config
from pyqt_rowlist.theming import ColorScheme, StyleSheetGenerator

logger = logging.getLogger(__name__)


class ReorderableRow(QFrame):
    """
    One entry of a reorderable list: handle, content, selection checkbox.

    The row never stores a reference to its container. It is looked up by
    walking the parent chain each time an event needs it, so a row moved to
    another container keeps working.

    Usage:
        row = ReorderableRow(QLabel("Item"))
        container.add_item(row)
    """

    def __init__(
        self,
        content: QWidget,
        config: RowListConfig = None,
        color_scheme: ColorScheme = None,
        parent=None
    ):
        super().__init__(parent)
        self._content = content
        self._config = config or get_row_list_config()
        self._color_scheme = color_scheme or ColorScheme()

        self._setup_ui()
        self.setAcceptDrops(True)

    def _setup_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        style = StyleSheetGenerator(self._color_scheme)
        self.setStyleSheet(style.generate_row_style())

        # Drag handle
        self._handle = QLabel(self._config.handle_text)
        self._handle.setObjectName("handle")
        self._handle.setStyleSheet(style.generate_handle_style(self._config.handle_margin))
        self._handle.setCursor(Qt.CursorShape.OpenHandCursor)
        self._handle.installEventFilter(self)
        layout.addWidget(self._handle)

        # Content, left-aligned in its own lowered frame
        self._content_frame = QFrame()
        self._content_frame.setObjectName("rowContent")
        content_layout = QHBoxLayout(self._content_frame)
        content_layout.setContentsMargins(0, 0, 0, 0)
        content_layout.setSpacing(0)
        content_layout.addWidget(self._content, 0, Qt.AlignmentFlag.AlignLeft)
        content_layout.addStretch()
        layout.addWidget(self._content_frame, 1)

        # Selection checkbox, hidden until the container enables selection
        self._check = QCheckBox()
        self._check.setObjectName("check")
        self._check.setVisible(False)
        layout.addWidget(self._check)

    # -- accessors ----------------------------------------------------------

    @property
    def content(self) -> QWidget:
        return self._content

    @property
    def handle(self) -> QLabel:
        return self._handle

    @property
    def check(self) -> QCheckBox:
        return self._check

    def is_selected(self) -> bool:
        return self._check.isChecked()

    def set_selected(self, selected: bool):
        self._check.setChecked(selected)

    def set_selection_visible(self, visible: bool):
        """Show or hide the checkbox. Hiding also clears the selection."""
        self._check.setVisible(visible)
        if not visible:
            self._check.setChecked(False)

    def release_content(self) -> QWidget:
        """Detach the content widget so it survives this row being deleted."""
        self._content_frame.layout().removeWidget(self._content)
        self._content.setParent(None)
        return self._content

    # -- ownership ----------------------------------------------------------

    def find_owning_container(self):
        """
        Walk up the parent chain to the nearest ReorderableRowContainer.

        Returns:
            The owning container, or None if the row is detached
        """
        from .row_container import ReorderableRowContainer

        widget = self.parentWidget()
        while widget is not None:
            if isinstance(widget, ReorderableRowContainer):
                return widget
            widget = widget.parentWidget()
        return None

    def _snap_y(self, container, local_y: int) -> int:
        """Snap a row-local y to this row's top or bottom edge, in container coordinates."""
        top = self.mapTo(container, QPoint(0, 0)).y()
        return snap_to_row_edge(top, self.height(), local_y)

    # -- drag source --------------------------------------------------------

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if obj is self._handle and event.type() == QEvent.Type.MouseButtonPress:
            return self.start_drag(event)
        return super().eventFilter(obj, event)

    def start_drag(self, event: QMouseEvent) -> bool:
        """
        Begin a drag session from a press on the handle.

        Args:
            event: Mouse press, positioned in handle coordinates

        Returns:
            True if a drag was started
        """
        if event.button() != Qt.MouseButton.LeftButton:
            return False
        if not self._handle.rect().contains(event.position().toPoint()):
            return False

        container = self.find_owning_container()
        if container is None:
            logger.debug("Ignoring handle press on a row with no container")
            return False

        container.begin_drag(self)
        try:
            self._export_drag(container)
        finally:
            # Drop or cancel, the session is over once the drag loop returns
            container.end_drag()
        return True

    def _export_drag(self, container) -> Qt.DropAction:
        mime = QMimeData()
        payload = encode_row_payload(container.drag_token(), container.index_of(self))
        mime.setData(ROW_MIME_TYPE, QByteArray(payload))

        drag = QDrag(self)
        drag.setMimeData(mime)
        pix = self.grab()
        if pix.width() > self._config.drag_pixmap_max_width:
            pix = pix.scaledToWidth(
                self._config.drag_pixmap_max_width,
                Qt.TransformationMode.SmoothTransformation
            )
        drag.setPixmap(pix)
        drag.setHotSpot(self._handle.mapTo(self, self._handle.rect().center()))

        self._handle.setCursor(Qt.CursorShape.ClosedHandCursor)
        try:
            return drag.exec(Qt.DropAction.MoveAction)
        finally:
            self._handle.setCursor(Qt.CursorShape.OpenHandCursor)

    # -- drag target --------------------------------------------------------

    def on_drag_over(self, local_y: int):
        """Show the insertion line at the row edge nearest ``local_y``."""
        container = self.find_owning_container()
        if container is None:
            return
        container.update_insertion_indicator(self._snap_y(container, local_y))

    def on_drop(self, local_y: int) -> bool:
        """Clear the indicator and commit the move at the snapped edge."""
        container = self.find_owning_container()
        if container is None:
            return False
        container.clear_insertion_indicator()
        return container.commit_move(self._snap_y(container, local_y))

    def on_drag_exit(self):
        container = self.find_owning_container()
        if container is not None:
            container.clear_insertion_indicator()

    def _accepts(self, event) -> bool:
        container = self.find_owning_container()
        return container is not None and container.can_import(event.mimeData())

    def dragEnterEvent(self, event):
        if self._accepts(event):
            event.acceptProposedAction()
        else:
            event.ignore()

    def dragMoveEvent(self, event):
        if not self._accepts(event):
            event.ignore()
            return
        self.on_drag_over(int(event.position().y()))
        event.acceptProposedAction()

    def dragLeaveEvent(self, event):
        self.on_drag_exit()
        super().dragLeaveEvent(event)

    def dropEvent(self, event):
        container = self.find_owning_container()
        if container is None:
            event.ignore()
            return

        y = self._snap_y(container, int(event.position().y()))
        container.clear_insertion_indicator()
        if container.import_drop(event.mimeData(), y):
            event.acceptProposedAction()
        else:
            event.ignore()

    def __repr__(self):
        return f"ReorderableRow({self._content!r})"
