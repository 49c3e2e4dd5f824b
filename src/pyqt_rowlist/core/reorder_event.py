"""Change notification value object delivered to container listeners."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ChangeKind(Enum):
    """Kinds of change a container reports."""
    REORDER = "reorder"


@dataclass(frozen=True)
class ReorderEvent:
    """
    A single applied move.

    Attributes:
        source: The container whose sequence changed
        old_index: Index the row occupied before the move
        new_index: Index the row occupies after the move
        kind: Always ChangeKind.REORDER for moves
    """
    source: Any
    old_index: int
    new_index: int
    kind: ChangeKind = ChangeKind.REORDER
