"""
Carpool matching: radius filter over published ride requests
"""

from ..utils.geospatial import haversine_distance

DEFAULT_SEARCH_RADIUS_KM = 10.0


def find_nearby_rides(rides, lat, lng, user_id=None, radius_km=DEFAULT_SEARCH_RADIUS_KM):
    """Return (ride, distance_km) pairs within radius_km of (lat, lng).

    Rides owned by user_id are skipped. Input order is preserved.
    """
    matches = []
    for ride in rides:
        if user_id and ride.user_id == user_id:
            continue

        distance = haversine_distance(lat, lng, ride.lat, ride.lng)
        if distance <= radius_km:
            matches.append((ride, distance))
    return matches


def serialize_match(ride, distance_km):
    return {
        "transportMode": ride.transport_mode,
        "destination": ride.destination,
        "passengers": ride.passengers,
        "distanceKm": round(distance_km, 2),
    }
