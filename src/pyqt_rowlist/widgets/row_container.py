"""
Vertically stacked container of rows that can be reordered by dragging.

Single source of truth for the row order. Rows forward their drag events
here; the container converts pointer positions into insertion indices, draws
the insertion line, and applies exactly one move per completed drag.

All methods must be called from the GUI thread. The row list is only ever
touched from Qt event handlers, so no locking is done.
"""

import logging
from typing import Any, List, Optional

from PyQt6.QtCore import QMimeData, QPoint, Qt, pyqtSignal
from PyQt6.QtGui import QPainter
from PyQt6.QtWidgets import QVBoxLayout, QWidget

from pyqt_rowlist.core import (
    DragSession,
    ReorderEvent,
    ROW_MIME_TYPE,
    RowPayloadError,
    adjust_for_removal,
    compute_drop_index,
    decode_row_payload,
    moved,
)
from pyqt_rowlist.protocols import ChangeListener, RowListConfig, get_row_list_config
from pyqt_rowlist.theming import ColorScheme, StyleSheetGenerator
from .row import ReorderableRow

logger = logging.getLogger(__name__)


class _InsertionLineOverlay(QWidget):
    """Transparent child stacked above the rows that paints the insertion bar."""

    def __init__(self, container: "ReorderableRowContainer"):
        super().__init__(container)
        self._container = container
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)
        self.setAttribute(Qt.WidgetAttribute.WA_NoSystemBackground)

    def paintEvent(self, event):
        y = self._container.indicator_y()
        if y is None:
            return
        thickness = self._container.indicator_thickness()
        painter = QPainter(self)
        painter.fillRect(
            0, y - thickness // 2, self.width(), thickness,
            self._container.color_scheme().to_qcolor(self._container.color_scheme().drop_indicator)
        )
        painter.end()


class ReorderableRowContainer(QWidget):
    """Panel of ReorderableRows reordered by dragging each row's handle.

    Content widgets passed to add_item() are wrapped in a ReorderableRow.
    Listeners registered with add_change_listener() and the items_reordered
    signal both report every applied move.

    Usage:
        container = ReorderableRowContainer()
        container.add_item(QPushButton("Item 1"))
        container.add_item(QPushButton("Item 2"))
        container.items_reordered.connect(on_reordered)

        scroll = QScrollArea()
        scroll.setWidget(container)
        scroll.setWidgetResizable(True)
    """

    items_reordered = pyqtSignal(int, int)  # from_index, to_index

    def __init__(self, config: RowListConfig = None, color_scheme: ColorScheme = None, parent=None):
        """Initialize the container.

        Args:
            config: Behaviour/appearance config (global config if omitted)
            color_scheme: Colors (loaded from config.color_scheme_path if omitted)
            parent: Parent widget
        """
        super().__init__(parent)
        self._config = config or get_row_list_config()
        self._color_scheme = color_scheme or ColorScheme.load_color_scheme_from_config(
            self._config.color_scheme_path
        )
        self._rows: List[ReorderableRow] = []
        self._listeners: List[ChangeListener] = []
        self._session = DragSession()
        self._selection_visible = self._config.selection_visible

        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(self._config.row_spacing)
        self._layout.setAlignment(Qt.AlignmentFlag.AlignTop)

        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground)
        self.setStyleSheet(StyleSheetGenerator(self._color_scheme).generate_container_style())
        self.setAcceptDrops(True)

        self._overlay = _InsertionLineOverlay(self)
        self._overlay.setGeometry(self.rect())

    # -- contents -----------------------------------------------------------

    def add_item(self, content: QWidget, index: Optional[int] = None) -> ReorderableRow:
        """Add content at ``index`` (default: end), wrapping it in a row if needed.

        Adding the same content twice creates two rows. Adding a row that
        already belongs to a container moves it here.

        Returns:
            The row now holding ``content``
        """
        if isinstance(content, ReorderableRow):
            row = content
            previous = row.find_owning_container()
            if previous is not None:
                previous._take_row(row)
        else:
            row = ReorderableRow(content, config=self._config, color_scheme=self._color_scheme)

        if index is None or index < 0 or index > len(self._rows):
            index = len(self._rows)

        row.set_selection_visible(self._selection_visible)
        self._rows.insert(index, row)
        self._layout.insertWidget(index, row)
        self._session.row_inserted(index)
        self._overlay.raise_()
        self.update()
        return row

    def remove_item(self, target: Any) -> bool:
        """Remove the first row matching ``target`` (a row or its content).

        The content widget is detached, not destroyed.

        Returns:
            True if a row was removed, False if nothing matched
        """
        index = self.index_of(target)
        if index < 0:
            return False

        row = self._take_row(self._rows[index])
        row.release_content()
        row.deleteLater()
        return True

    def _take_row(self, row: ReorderableRow) -> ReorderableRow:
        """Unlink ``row`` from this container without deleting it."""
        index = self.index_of(row)
        del self._rows[index]
        self._layout.removeWidget(row)
        row.setParent(None)
        self._session.row_removed(index)
        self.update()
        return row

    def index_of(self, target: Any) -> int:
        """Index of the first row that is, or wraps, ``target``; -1 if absent."""
        for i, row in enumerate(self._rows):
            if row is target or row.content is target:
                return i
        return -1

    def count(self) -> int:
        return len(self._rows)

    def row_at(self, index: int) -> ReorderableRow:
        return self._rows[index]

    def item_at(self, index: int) -> QWidget:
        """Content widget of the row at ``index``."""
        return self._rows[index].content

    def rows(self) -> List[ReorderableRow]:
        return list(self._rows)

    def items(self) -> List[QWidget]:
        return [row.content for row in self._rows]

    # -- selection ----------------------------------------------------------

    def set_selection_visible(self, visible: bool):
        """Show or hide every row's checkbox; hiding clears all selections."""
        self._selection_visible = visible
        for row in self._rows:
            row.set_selection_visible(visible)

    def is_selection_visible(self) -> bool:
        return self._selection_visible

    def selected_items(self) -> List[QWidget]:
        """Content of every selected row, in display order."""
        return [row.content for row in self._rows if row.is_selected()]

    # -- drop index and indicator -------------------------------------------

    def compute_drop_index(self, point: QPoint) -> int:
        """Insertion index for a point in container coordinates."""
        spans = ((row.geometry().top(), row.geometry().height()) for row in self._rows)
        return compute_drop_index(spans, point.y())

    def update_insertion_indicator(self, y: Optional[int]):
        """Place the insertion line at ``y``; None removes it."""
        if self._session.set_indicator(y):
            self._overlay.update()

    def clear_insertion_indicator(self):
        self.update_insertion_indicator(None)

    def indicator_y(self) -> Optional[int]:
        return self._session.indicator_y

    def indicator_thickness(self) -> int:
        return self._config.indicator_thickness

    def color_scheme(self) -> ColorScheme:
        return self._color_scheme

    # -- drag session -------------------------------------------------------

    def drag_token(self) -> str:
        """Identifies this container inside drag payloads."""
        return f"{id(self):x}"

    def begin_drag(self, row: ReorderableRow):
        """Start a drag session for ``row``. Ignored for rows not in this container."""
        index = self.index_of(row)
        if index < 0 or self._rows[index] is not row:
            logger.debug(f"begin_drag for foreign row {row!r} ignored")
            return
        self._session.begin(index)

    def end_drag(self):
        """End the current session and remove the indicator. The order is left alone."""
        self._session.end()
        self._overlay.update()

    def is_dragging(self) -> bool:
        return self._session.dragged_index is not None

    def dragged_index(self) -> Optional[int]:
        return self._session.dragged_index

    def commit_move(self, y: int) -> bool:
        """Move the dragged row to the insertion index for ``y``.

        The raw index is shifted down by one when it lies past the dragged
        row, since the row is taken out before being reinserted. Landing on
        the dragged row's own slot does nothing.

        Returns:
            True if the order changed
        """
        dragged = self._session.dragged_index
        if dragged is None:
            logger.debug(f"commit_move({y}) without an active drag session ignored")
            return False

        drop_index = adjust_for_removal(self.compute_drop_index(QPoint(0, y)), dragged)
        if drop_index == dragged:
            return False

        self._rows = moved(self._rows, dragged, drop_index)
        row = self._rows[drop_index]
        self._layout.removeWidget(row)
        self._layout.insertWidget(drop_index, row)
        self._session.move_to(drop_index)
        self._overlay.raise_()
        self.update()

        logger.debug(f"Moved row from {dragged} to {drop_index}")
        self._fire_reorder(dragged, drop_index)
        return True

    # -- transfer -----------------------------------------------------------

    def _read_payload(self, mime_data: QMimeData):
        return decode_row_payload(mime_data.data(ROW_MIME_TYPE).data())

    def can_import(self, mime_data: Optional[QMimeData]) -> bool:
        """True if ``mime_data`` is a row dragged out of this container's active session."""
        if mime_data is None or not mime_data.hasFormat(ROW_MIME_TYPE) or not self.is_dragging():
            return False
        try:
            token, _ = self._read_payload(mime_data)
        except RowPayloadError as e:
            logger.debug(f"Drag rejected: {e}")
            return False
        return token == self.drag_token()

    def import_drop(self, mime_data: Optional[QMimeData], y: int) -> bool:
        """Complete a drop at container y ``y``.

        Returns:
            False, with the order untouched, for payloads that are not one
            of this container's rows or cannot be read
        """
        if mime_data is None or not mime_data.hasFormat(ROW_MIME_TYPE):
            logger.debug("Drop rejected: unsupported payload")
            return False
        try:
            token, _ = self._read_payload(mime_data)
        except RowPayloadError as e:
            logger.warning(f"Drop rejected: {e}")
            return False
        if token != self.drag_token() or not self.is_dragging():
            logger.debug("Drop rejected: row belongs to another drag session")
            return False

        self.commit_move(y)
        return True

    # -- listeners ----------------------------------------------------------

    def add_change_listener(self, listener: ChangeListener):
        if not isinstance(listener, ChangeListener):
            raise TypeError(f"Expected ChangeListener, got {type(listener).__name__}")
        self._listeners.append(listener)

    def remove_change_listener(self, listener: ChangeListener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _fire_reorder(self, old_index: int, new_index: int):
        event = None
        for listener in list(self._listeners):
            if event is None:
                # Only built when someone is listening
                event = ReorderEvent(self, old_index, new_index)
            listener.contents_changed(event)
        self.items_reordered.emit(old_index, new_index)

    # -- Qt events ----------------------------------------------------------

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._overlay.setGeometry(self.rect())

    def dragEnterEvent(self, event):
        if self.can_import(event.mimeData()):
            event.acceptProposedAction()
        else:
            event.ignore()

    def dragMoveEvent(self, event):
        """Pointer over the gaps between rows; rows handle their own area."""
        if not self.can_import(event.mimeData()):
            event.ignore()
            return
        self.update_insertion_indicator(int(event.position().y()))
        event.acceptProposedAction()

    def dragLeaveEvent(self, event):
        self.clear_insertion_indicator()
        super().dragLeaveEvent(event)

    def dropEvent(self, event):
        y = self.indicator_y()
        if y is None:
            y = int(event.position().y())
        self.clear_insertion_indicator()
        if self.import_drop(event.mimeData(), y):
            event.acceptProposedAction()
        else:
            event.ignore()
