from datetime import datetime
from typing import Optional, Tuple

from vatsim_online.models import RankedPilot
from vatsim_online.selection import move_down, move_up, selected_cid


class ViewState:
    """
    What the dashboard shows, carried from one refresh cycle to the next.

    Only the scheduler mutates this: ``apply`` after a good cycle,
    ``record_failure`` after a bad one, and the ``select_*`` helpers on key
    presses.
    """

    def __init__(self):
        self.rows: Tuple[RankedPilot, ...] = ()
        self.selected: Optional[int] = None
        self.last_updated: Optional[datetime] = None
        self.last_error: Optional[str] = None

    def apply(self, rows, selected, when):
        rows = tuple(rows)
        if selected is not None and not 0 <= selected < len(rows):
            selected = None
        self.rows = rows
        self.selected = selected
        self.last_updated = when
        self.last_error = None

    def record_failure(self, error):
        # previous rows and selection stay on screen
        self.last_error = str(error) or type(error).__name__

    def select_up(self):
        self.selected = move_up(self.selected, len(self.rows))

    def select_down(self):
        self.selected = move_down(self.selected, len(self.rows))

    def clear_selection(self):
        self.selected = None

    def selected_cid(self):
        return selected_cid(self.selected, self.rows)

    def selected_pilot(self) -> Optional[RankedPilot]:
        if self.selected is None or not 0 <= self.selected < len(self.rows):
            return None
        return self.rows[self.selected]
