"""
Row selection over a list that gets re-sorted on every refresh.

A selection is ``None`` or an index into the current rows. After a refresh
the index is recomputed from the pilot's CID so the highlight follows the
pilot rather than the row position.
"""
from typing import Optional, Sequence

from vatsim_online.models import RankedPilot


def selected_cid(index: Optional[int], rows: Sequence[RankedPilot]) -> Optional[int]:
    if index is None or not 0 <= index < len(rows):
        return None
    return rows[index].cid


def index_of(cid: Optional[int], rows: Sequence[RankedPilot]) -> Optional[int]:
    if cid is None:
        return None
    for i, row in enumerate(rows):
        if row.cid == cid:
            return i
    return None


def reanchor(previous_index: Optional[int],
             previous_rows: Sequence[RankedPilot],
             new_rows: Sequence[RankedPilot]) -> Optional[int]:
    """
    Find the previously selected pilot in ``new_rows``.

    No selection stays no selection. If the pilot is gone (out of range, or
    its ratings lookup failed) the result is ``None``, never a neighbour.
    """
    return index_of(selected_cid(previous_index, previous_rows), new_rows)


def move_up(index: Optional[int], rows: int) -> Optional[int]:
    """Select the previous row, wrapping from the top (or from nothing) to the last row."""
    if rows <= 0:
        return None
    if index is None or index <= 0 or index >= rows:
        return rows - 1
    return index - 1


def move_down(index: Optional[int], rows: int) -> Optional[int]:
    """Select the next row, wrapping from the last row (or from nothing) to the first."""
    if rows <= 0:
        return None
    if index is None or index >= rows - 1 or index < 0:
        return 0
    return index + 1
