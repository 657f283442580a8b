import asyncio
import logging
import math
from typing import Callable, List, Optional, Sequence, Tuple

from vatsim_online.cache import ExperienceCache
from vatsim_online.config import MAX_CONCURRENT_FETCHES
from vatsim_online.errors import FetchError
from vatsim_online.geo import filter_pilots
from vatsim_online.models import ExperienceStat, Pilot, RankedPilot
from vatsim_online.selection import index_of

logger = logging.getLogger(__name__)


def experience_sort_key(row: RankedPilot):
    # NaN compares false against everything, so push it to the end explicitly
    hours = row.experience.pilot
    if hours is None or math.isnan(hours):
        return (1, 0.0)
    return (0, hours)


class RefreshEngine:
    """
    Runs one fetch -> filter -> resolve -> sort -> reanchor cycle.

    ``fetch_online_pilots`` and ``fetch_experience`` are blocking callables
    (the ``requests`` based client in practice); they are pushed onto worker
    threads so the event loop keeps handling keys while a cycle is running.
    """

    def __init__(self,
                 fetch_online_pilots: Callable[[], List[Pilot]],
                 fetch_experience: Callable[[int], ExperienceStat],
                 cache: Optional[ExperienceCache] = None,
                 max_concurrent: int = MAX_CONCURRENT_FETCHES):
        self.fetch_online_pilots = fetch_online_pilots
        self.fetch_experience = fetch_experience
        self.cache = cache if cache is not None else ExperienceCache()
        self.max_concurrent = max(1, max_concurrent)
        self.fetch_count = 0
        self.last_cycle_fetches = 0

    async def refresh(self, previous_selection_key: Optional[int], center,
                      radius_nm: float) -> Tuple[Tuple[RankedPilot, ...], Optional[int]]:
        """
        Build the new ordered rows and re-anchor the selection by CID.

        A failing live fetch raises ``FetchError`` before anything is touched,
        so the caller can keep showing the previous rows.
        """
        pilots = await asyncio.to_thread(self.fetch_online_pilots)
        in_range = filter_pilots(pilots, center, radius_nm)

        # every cache read happens before any request goes out
        resolved = {}
        misses = []
        for pilot in in_range:
            stat = self.cache.get(pilot.cid)
            if stat is not None:
                resolved[pilot.cid] = stat
            elif pilot.cid not in misses:
                misses.append(pilot.cid)

        fetched = await self._fetch_missing(misses)
        for cid, stat in fetched.items():
            self.cache.put(cid, stat)
        resolved.update(fetched)

        rows = [
            RankedPilot(pilot, resolved[pilot.cid])
            for pilot in in_range
            if pilot.cid in resolved
        ]
        rows.sort(key=experience_sort_key)
        rows = tuple(rows)

        logger.info(
            "Cycle done: %d online, %d in range, %d fetched, %d shown",
            len(pilots), len(in_range), len(fetched), len(rows),
        )
        return rows, index_of(previous_selection_key, rows)

    async def _fetch_missing(self, cids: Sequence[int]):
        self.last_cycle_fetches = len(cids)
        if not cids:
            return {}
        semaphore = asyncio.Semaphore(min(self.max_concurrent, len(cids)))

        async def fetch_one(cid):
            async with semaphore:
                self.fetch_count += 1
                return await asyncio.to_thread(self.fetch_experience, cid)

        results = await asyncio.gather(*(fetch_one(cid) for cid in cids), return_exceptions=True)

        fetched = {}
        for cid, result in zip(cids, results):
            if isinstance(result, FetchError):
                logger.warning("⚠️ Dropping CID %s this cycle: %s", cid, result)
            elif isinstance(result, BaseException):
                raise result
            else:
                fetched[cid] = result
        return fetched
