"""Small interactive demo: three buttons that can be reordered by their handles."""

import logging
import sys

from PyQt6.QtWidgets import QApplication, QMainWindow, QPushButton, QScrollArea

from pyqt_rowlist.protocols import CallbackListener
from .row_container import ReorderableRowContainer

logger = logging.getLogger(__name__)


def build_demo_window() -> QMainWindow:
    """Create the demo window without showing it."""
    container = ReorderableRowContainer()
    for i in range(1, 4):
        container.add_item(QPushButton(f"Item {i}"))
    container.add_change_listener(CallbackListener(
        lambda e: logger.info(f"Reordered: {e.old_index} -> {e.new_index}")
    ))

    scroll = QScrollArea()
    scroll.setWidgetResizable(True)
    scroll.setWidget(container)

    window = QMainWindow()
    window.setWindowTitle("Drag-and-Drop Rows with Buttons")
    window.setCentralWidget(scroll)
    window.resize(200, 160)
    return window


def main() -> int:
    logging.basicConfig(level=logging.INFO)
    app = QApplication.instance() or QApplication(sys.argv)
    window = build_demo_window()
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
