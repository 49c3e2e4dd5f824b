"""
Drop index arithmetic for vertically stacked rows.

Pure functions with no Qt dependency. Rows are described by their top edge
and height in container coordinates; all values are integer pixels.
"""

from typing import Iterable, List, Sequence, Tuple, TypeVar

T = TypeVar("T")

# (top, height) of one row in container coordinates
RowSpan = Tuple[int, int]


def compute_drop_index(spans: Iterable[RowSpan], y: int) -> int:
    """
    Convert a pointer y-coordinate into an insertion index.

    Returns the index of the first row whose vertical midpoint lies below
    ``y``. Dropping in the top half of a row inserts before it, dropping in
    the bottom half inserts after it. An exact midpoint hit resolves to
    "after" because the test is strict.

    Args:
        spans: (top, height) for each row in display order
        y: Pointer y in the same coordinate space as the spans

    Returns:
        Insertion index in ``[0, len(spans)]``
    """
    count = 0
    for index, (top, height) in enumerate(spans):
        if y < top + height // 2:
            return index
        count = index + 1
    return count


def snap_to_row_edge(row_top: int, row_height: int, local_y: int) -> int:
    """
    Round a pointer offset inside a row to that row's top or bottom edge.

    Args:
        row_top: Row top edge in container coordinates
        row_height: Row height
        local_y: Pointer y relative to the row's own top edge

    Returns:
        ``row_top`` for the upper half, ``row_top + row_height`` otherwise
    """
    if local_y < row_height // 2:
        return row_top
    return row_top + row_height


def adjust_for_removal(drop_index: int, dragged_index: int) -> int:
    """Account for the index shift caused by taking the dragged row out first."""
    return drop_index - 1 if drop_index > dragged_index else drop_index


def moved(items: Sequence[T], old_index: int, new_index: int) -> List[T]:
    """Return a copy of ``items`` with one element moved from old to new index."""
    result = list(items)
    result.insert(new_index, result.pop(old_index))
    return result
