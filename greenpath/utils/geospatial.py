"""
Geospatial utility functions for distance calculations and coordinate parsing
"""

import math

EARTH_RADIUS_KM = 6371.0


def haversine_distance(lat1, lon1, lat2, lon2):
    """Calculate the great circle distance between two points on Earth in kilometers"""
    if any(v is None for v in (lat1, lon1, lat2, lon2)):
        return float('inf')

    # Convert decimal degrees to radians
    lat1, lon1, lat2, lon2 = map(math.radians, [lat1, lon1, lat2, lon2])

    # Haversine formula
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    a = math.sin(dlat/2)**2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon/2)**2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return c * EARTH_RADIUS_KM


def parse_coordinate(value, limit):
    """Parse a latitude/longitude from JSON or a query string.

    Returns None when the value is missing, not a finite number, or outside
    [-limit, limit].
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or abs(number) > limit:
        return None
    return number


def parse_lat_lng(lat, lng):
    """Parse a (lat, lng) pair, returning (None, None) if either is invalid"""
    parsed_lat = parse_coordinate(lat, 90.0)
    parsed_lng = parse_coordinate(lng, 180.0)
    if parsed_lat is None or parsed_lng is None:
        return None, None
    return parsed_lat, parsed_lng
