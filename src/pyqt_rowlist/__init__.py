"""
pyqt-rowlist: drag-to-reorder row container for PyQt6.

A panel of rows, each wrapping one content widget with a drag handle and an
optional selection checkbox. Dragging a handle shows an insertion line and
moves the row on drop, notifying change listeners.

Architecture:
- Tier 1 (Core): Pure Python drop-index math, drag session, events
- Tier 2 (Protocols): Listener ABC and global configuration
- Tier 3 (Theming): Color scheme and stylesheet generation
- Tier 4 (Widgets): ReorderableRow and ReorderableRowContainer
"""

__version__ = "0.1.0"

from pyqt_rowlist.core import ReorderEvent, ChangeKind
from pyqt_rowlist.protocols import ChangeListener, CallbackListener, RowListConfig
from pyqt_rowlist.widgets import ReorderableRow, ReorderableRowContainer

__all__ = [
    "__version__",
    "ReorderEvent",
    "ChangeKind",
    "ChangeListener",
    "CallbackListener",
    "RowListConfig",
    "ReorderableRow",
    "ReorderableRowContainer",
]
