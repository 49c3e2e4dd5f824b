"""
Row list widgets.

ReorderableRowContainer holds the ordered rows; ReorderableRow wraps each
content widget with a drag handle and a selection checkbox.
"""

from .row import ReorderableRow
from .row_container import ReorderableRowContainer

__all__ = [
    "ReorderableRow",
    "ReorderableRowContainer",
]
