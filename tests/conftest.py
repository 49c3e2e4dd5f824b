"""pytest configuration and fixtures for pyqt-rowlist tests."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture
def reset_config():
    """Restore the global row list config after a test changes it."""
    from pyqt_rowlist.protocols import set_row_list_config

    yield
    set_row_list_config(None)


@pytest.fixture
def make_container(qapp):
    """Build a container of QLabels stacked at the given row heights.

    Row geometry is assigned directly so drop index tests do not depend on
    the layout having run.
    """
    from PyQt6.QtWidgets import QLabel
    from pyqt_rowlist.widgets import ReorderableRowContainer

    def _make(names, heights=None, width=200):
        container = ReorderableRowContainer()
        labels = {name: QLabel(name) for name in names}
        for name in names:
            container.add_item(labels[name])
        top = 0
        for row, height in zip(container.rows(), heights or [30] * len(names)):
            row.setGeometry(0, top, width, height)
            top += height
        return container, labels

    return _make
