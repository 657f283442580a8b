from typing import Dict, Optional

from vatsim_online.models import ExperienceStat


class ExperienceCache:
    """
    Last known experience stat per CID, kept for the life of the process.

    Entries are never evicted: a pilot who leaves range and comes back reuses
    the old value instead of costing another ratings request. Not thread-safe;
    only the refresh engine writes, after its fetches have joined.
    """

    def __init__(self):
        self._entries: Dict[int, ExperienceStat] = {}

    def get(self, cid: int) -> Optional[ExperienceStat]:
        return self._entries.get(cid)

    def put(self, cid: int, stat: ExperienceStat) -> None:
        self._entries[cid] = stat

    def __contains__(self, cid):
        return cid in self._entries

    def __len__(self):
        return len(self._entries)
