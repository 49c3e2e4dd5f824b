"""
Drag session state machine.

A session is IDLE until a handle press records the dragged row's index, and
returns to IDLE when the drag loop ends (drop or cancel). The insertion
indicator position lives here too so the container can be driven without a
real pointer device.

All access happens on the GUI thread; no locking.
"""

import logging
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class DragState(Enum):
    """Lifecycle states of a drag gesture."""
    IDLE = "idle"
    DRAGGING = "dragging"


class DragSession:
    """Transient drag state owned by one container."""

    def __init__(self):
        self._dragged_index: Optional[int] = None
        self._indicator_y: Optional[int] = None

    @property
    def state(self) -> DragState:
        if self._dragged_index is None:
            return DragState.IDLE
        return DragState.DRAGGING

    @property
    def dragged_index(self) -> Optional[int]:
        return self._dragged_index

    @property
    def indicator_y(self) -> Optional[int]:
        return self._indicator_y

    def begin(self, index: int) -> None:
        """Enter DRAGGING with ``index`` as the dragged row."""
        if index < 0:
            raise ValueError(f"Dragged index must be non-negative, got {index}")
        self._dragged_index = index
        logger.debug(f"Drag session started at index {index}")

    def move_to(self, index: int) -> None:
        """Track the dragged row after it has been reinserted."""
        if self._dragged_index is not None:
            self._dragged_index = index

    def set_indicator(self, y: Optional[int]) -> bool:
        """Store the indicator position. Returns True if it changed."""
        if y == self._indicator_y:
            return False
        self._indicator_y = y
        return True

    def row_inserted(self, index: int) -> None:
        """Keep the dragged index valid after a row is inserted at ``index``."""
        if self._dragged_index is not None and index <= self._dragged_index:
            self._dragged_index += 1

    def row_removed(self, index: int) -> None:
        """Keep the dragged index valid after the row at ``index`` is removed."""
        if self._dragged_index is None:
            return
        if index == self._dragged_index:
            # The dragged row itself is gone; nothing left to drop
            logger.debug(f"Dragged row {index} removed, ending drag session")
            self.end()
        elif index < self._dragged_index:
            self._dragged_index -= 1

    def end(self) -> None:
        """Return to IDLE and forget the indicator."""
        if self._dragged_index is not None:
            logger.debug(f"Drag session ended (dragged index {self._dragged_index})")
        self._dragged_index = None
        self._indicator_y = None
