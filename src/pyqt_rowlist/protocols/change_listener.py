"""
Change listener contract for reorderable containers.

Listeners must inherit from ChangeListener; the container rejects anything
else at registration time instead of failing later during a drop.
"""

from abc import ABC, abstractmethod
from typing import Callable

from pyqt_rowlist.core import ReorderEvent


class ChangeListener(ABC):
    """
    ABC for observers of container order changes.

    Called synchronously on the GUI thread after the sequence has been
    mutated, in registration order.
    """

    @abstractmethod
    def contents_changed(self, event: ReorderEvent) -> None:
        """
        Handle an applied reorder.

        Args:
            event: Source container plus old and new index of the moved row
        """
        pass


class CallbackListener(ChangeListener):
    """Adapter turning a plain callable into a ChangeListener."""

    def __init__(self, callback: Callable[[ReorderEvent], None]):
        self._callback = callback

    def contents_changed(self, event: ReorderEvent) -> None:
        self._callback(event)
