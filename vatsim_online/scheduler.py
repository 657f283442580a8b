import asyncio
import logging
from datetime import datetime, timezone

from vatsim_online.config import REFRESH_INTERVAL_SECONDS
from vatsim_online.errors import FetchError
from vatsim_online.selection import index_of
from vatsim_online.state import ViewState

logger = logging.getLogger(__name__)

UP = "up"
DOWN = "down"
OPEN = "open"
CLEAR = "clear"
QUIT = "quit"


def utcnow():
    return datetime.now(timezone.utc)


class Scheduler:
    """
    Drives the refresh engine on a fixed period while handling keys.

    One cycle at a time runs as a task; keys from ``keys`` are handled while
    it is in flight and while waiting for the next tick, so nothing the user
    does waits on the network. The next cycle is due ``interval`` seconds
    after the previous one finished.
    """

    def __init__(self, engine, center, radius_nm, keys=None, view=None,
                 interval=REFRESH_INTERVAL_SECONDS, on_change=None, on_open=None):
        self.engine = engine
        self.center = center
        self.radius_nm = radius_nm
        self.keys = keys if keys is not None else asyncio.Queue()
        self.view = view if view is not None else ViewState()
        self.interval = interval
        self.on_change = on_change
        self.on_open = on_open
        self.stopped = False
        self.cycles = 0

    def _changed(self):
        if self.on_change is not None:
            self.on_change(self.view)

    async def run_cycle(self):
        """One refresh; a failure keeps the rows already on screen."""
        view = self.view
        key = view.selected_cid()
        try:
            rows, selected = await self.engine.refresh(key, self.center, self.radius_nm)
        except FetchError as e:
            logger.error("❌ Refresh failed, keeping previous data: %s", e)
            view.record_failure(e)
        else:
            current = view.selected_cid()
            if current != key:
                # the user moved while we were fetching
                selected = index_of(current, rows)
            view.apply(rows, selected, utcnow())
        finally:
            self.cycles += 1
        self._changed()

    def handle_key(self, key):
        """Handle a named key, return True to quit."""
        view = self.view
        if key == QUIT:
            self.stopped = True
            return True
        if key == UP:
            view.select_up()
        elif key == DOWN:
            view.select_down()
        elif key == CLEAR:
            view.clear_selection()
        elif key == OPEN:
            row = view.selected_pilot()
            if row is not None and self.on_open is not None:
                self.on_open(row)
        else:
            return False
        self._changed()
        return False

    async def run(self):
        loop = asyncio.get_running_loop()
        next_refresh = loop.time()
        cycle = None
        key_waiter = None
        try:
            while not self.stopped:
                if cycle is None and loop.time() >= next_refresh:
                    cycle = asyncio.create_task(self.run_cycle())
                if key_waiter is None:
                    key_waiter = asyncio.create_task(self.keys.get())

                waiting = {key_waiter}
                timeout = None
                if cycle is not None:
                    waiting.add(cycle)
                else:
                    timeout = max(0.0, next_refresh - loop.time())
                done, _ = await asyncio.wait(waiting, timeout=timeout,
                                             return_when=asyncio.FIRST_COMPLETED)

                if cycle is not None and cycle in done:
                    finished, cycle = cycle, None
                    finished.result()
                    next_refresh = loop.time() + self.interval
                if key_waiter in done:
                    key = key_waiter.result()
                    key_waiter = None
                    self.handle_key(key)
        finally:
            self.stopped = True
            if key_waiter is not None:
                key_waiter.cancel()
            if cycle is not None:
                # let an in-flight cycle finish rather than cancel it halfway
                await cycle
