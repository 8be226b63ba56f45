"""Great-circle distance between two points."""

import math


def distance_nm(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Distance in nautical miles using the spherical law of cosines.

    Args:
        lat1: Latitude of the first point in degrees.
        lon1: Longitude of the first point in degrees.
        lat2: Latitude of the second point in degrees.
        lon2: Longitude of the second point in degrees.

    Returns:
        Distance in nautical miles, 0 for identical points.
    """
    if lat1 == lat2 and lon1 == lon2:
        return 0.0

    radlat1 = math.pi * lat1 / 180
    radlat2 = math.pi * lat2 / 180
    radtheta = math.pi * (lon1 - lon2) / 180

    dist = math.sin(radlat1) * math.sin(radlat2) + math.cos(radlat1) * math.cos(
        radlat2
    ) * math.cos(radtheta)
    # Rounding can push the cosine just outside acos' domain
    dist = max(-1.0, min(1.0, dist))

    dist = math.acos(dist) * 180 / math.pi
    # Statute miles per degree of arc, then statute to nautical miles
    dist = dist * 60 * 1.1515
    return dist * 0.8684
