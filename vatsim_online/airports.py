"""Supported airports and their reference coordinates."""
from vatsim_online.errors import UnknownAirport

AIRPORT_LOCATIONS = {
    "KSAN": (32.7338, -117.1933),
    "KLAX": (33.9416, -118.4085),
    "KSNA": (33.6762, -117.8675),
    "KLAS": (36.084, -115.1537),
    "KSFO": (37.6213, -122.3790),
    "KSEA": (47.4502, -122.3088),
    "KDEN": (39.8561, -104.6737),
    "KORD": (41.9742, -87.9073),
    "KATL": (33.6407, -84.4277),
    "KJFK": (40.6413, -73.7781),
    "EGLL": (51.4700, -0.4543),
}

AIRPORTS = sorted(AIRPORT_LOCATIONS)


def lookup_airport(identifier):
    """Return ``(lat, lon)`` for an airport identifier, case-insensitive."""
    key = (identifier or "").strip().upper()
    try:
        return AIRPORT_LOCATIONS[key]
    except KeyError:
        raise UnknownAirport(identifier) from None
