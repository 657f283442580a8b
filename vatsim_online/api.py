"""
Thin ``requests`` client for the two VATSIM endpoints the watcher needs.

The v3 data feed is load-balanced: the status document lists one or more
URLs and we pick one at random, once, the first time it is needed.
"""
import logging
import random

import requests

from vatsim_online.config import RATINGS_URL, REQUEST_TIMEOUT_SECONDS, STATS_URL, STATUS_URL, USER_AGENT
from vatsim_online.errors import DecodeFailure, FetchError, PerPilotFetchFailure, ServiceUnreachable
from vatsim_online.models import ExperienceStat, Pilot

logger = logging.getLogger(__name__)


def stats_url(cid):
    return STATS_URL.format(cid=cid)


class VatsimClient:

    def __init__(self, session=None, timeout=REQUEST_TIMEOUT_SECONDS):
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})
        self.timeout = timeout
        self.v3_url = None

    def _get_json(self, url):
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise ServiceUnreachable(f"Request to {url} failed: {e}") from e
        if response.status_code != 200:
            raise ServiceUnreachable(f"Got status {response.status_code} from {url}")
        try:
            return response.json()
        except ValueError as e:
            raise DecodeFailure(f"Malformed JSON from {url}: {e}") from e

    def resolve_v3_url(self):
        """Ask the status endpoint where the live data feed currently lives."""
        data = self._get_json(STATUS_URL)
        try:
            urls = data["data"]["v3"]
        except (KeyError, TypeError) as e:
            raise DecodeFailure(f"Status document has no v3 URLs: {e}") from e
        if not urls:
            raise DecodeFailure("No V3 URLs returned")
        self.v3_url = random.choice(urls)
        logger.debug("Using v3 data URL %s", self.v3_url)
        return self.v3_url

    def fetch_online_pilots(self):
        if self.v3_url is None:
            self.resolve_v3_url()
        try:
            data = self._get_json(self.v3_url)
            try:
                return [Pilot.from_json(p) for p in data["pilots"]]
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                raise DecodeFailure(f"Unexpected pilot data: {e}") from e
        except ServiceUnreachable:
            # pick a mirror again next cycle
            logger.debug("Dropping v3 data URL %s", self.v3_url)
            self.v3_url = None
            raise

    def fetch_experience(self, cid):
        """Hours piloting and controlling for one CID."""
        url = RATINGS_URL.format(cid=cid)
        try:
            return ExperienceStat.from_json(self._get_json(url))
        except FetchError as e:
            raise PerPilotFetchFailure(cid, str(e)) from e
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise PerPilotFetchFailure(cid, f"unexpected ratings data: {e}") from e
