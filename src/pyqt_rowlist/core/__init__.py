"""
Core row list logic.

Pure Python with no widget dependencies: drop index arithmetic, the drag
session state machine, change events, and the drag payload codec.
"""

from .drop_index import compute_drop_index, snap_to_row_edge, adjust_for_removal, moved
from .drag_session import DragSession, DragState
from .reorder_event import ReorderEvent, ChangeKind
from .row_payload import ROW_MIME_TYPE, encode_row_payload, decode_row_payload
from .exceptions import RowListError, RowPayloadError

__all__ = [
    "compute_drop_index",
    "snap_to_row_edge",
    "adjust_for_removal",
    "moved",
    "DragSession",
    "DragState",
    "ReorderEvent",
    "ChangeKind",
    "ROW_MIME_TYPE",
    "encode_row_payload",
    "decode_row_payload",
    "RowListError",
    "RowPayloadError",
]
