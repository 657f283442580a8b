from math import radians, cos, sin, sqrt, atan2

from vatsim_online.config import EARTH_RADIUS_KM, KM_PER_NM


def haversine_nm(lat1, lon1, lat2, lon2):
    """Great-circle distance between two points, in nautical miles."""
    dlat = radians(lat2 - lat1)
    dlon = radians(lon2 - lon1)
    a = sin(dlat / 2)**2 + cos(radians(lat1)) * cos(radians(lat2)) * sin(dlon / 2)**2
    # rounding can push a slightly above 1 for antipodal points
    a = min(1.0, a)
    return EARTH_RADIUS_KM * 2 * atan2(sqrt(a), sqrt(1 - a)) / KM_PER_NM


def filter_pilots(pilots, center, radius_nm):
    """Keep the pilots strictly closer than ``radius_nm`` to ``center``, in input order."""
    lat, lon = center
    return [
        p for p in pilots
        if haversine_nm(lat, lon, p.latitude, p.longitude) < radius_nm
    ]
