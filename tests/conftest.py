import pytest

from vatsim_online.errors import PerPilotFetchFailure
from vatsim_online.models import ExperienceStat, Pilot, RankedPilot

KSAN = (32.7338, -117.1933)


def make_pilot(cid, lat=KSAN[0], lon=KSAN[1], callsign=None, aircraft="B738"):
    return Pilot(cid=cid, callsign=callsign or f"TST{cid}", latitude=lat, longitude=lon, aircraft=aircraft)


def make_row(cid, hours=10.0, atc=0.0):
    return RankedPilot(make_pilot(cid), ExperienceStat(pilot=hours, atc=atc))


class FakeVatsim:
    """Stands in for VatsimClient: canned pilots and hours, counts calls."""

    def __init__(self, pilots=(), hours=None, failing=()):
        self.pilots = list(pilots)
        self.hours = dict(hours or {})
        self.failing = set(failing)
        self.live_error = None
        self.live_calls = 0
        self.experience_calls = []

    def fetch_online_pilots(self):
        self.live_calls += 1
        if self.live_error is not None:
            raise self.live_error
        return list(self.pilots)

    def fetch_experience(self, cid):
        self.experience_calls.append(cid)
        if cid in self.failing:
            raise PerPilotFetchFailure(cid, "Got status 500")
        return ExperienceStat(pilot=self.hours[cid], atc=self.hours[cid] / 10)


@pytest.fixture
def center():
    return KSAN


@pytest.fixture
def fake_vatsim():
    return FakeVatsim()
