"""Value types passed between the API client, the refresh engine and the dashboard."""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Pilot:
    """A connected pilot as seen in one v3 data snapshot."""
    cid: int
    callsign: str
    latitude: float
    longitude: float
    aircraft: Optional[str] = None

    @classmethod
    def from_json(cls, data: dict) -> "Pilot":
        # prefer the FAA aircraft code, fall back to the short ICAO one
        fp = data.get("flight_plan") or {}
        aircraft = fp.get("aircraft_faa") or fp.get("aircraft_short") or None
        return cls(
            cid=int(data["cid"]),
            callsign=str(data["callsign"]).strip(),
            latitude=float(data["latitude"]),
            longitude=float(data["longitude"]),
            aircraft=aircraft,
        )


@dataclass(frozen=True)
class ExperienceStat:
    """Cumulative hours on the network, from the ratings endpoint."""
    pilot: float
    atc: float

    @classmethod
    def from_json(cls, data: dict) -> "ExperienceStat":
        return cls(pilot=float(data["pilot"]), atc=float(data["atc"]))


@dataclass(frozen=True)
class RankedPilot:
    pilot: Pilot
    experience: ExperienceStat

    @property
    def cid(self) -> int:
        return self.pilot.cid
