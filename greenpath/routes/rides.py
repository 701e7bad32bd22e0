from flask import Blueprint, current_app, request, jsonify
from sqlalchemy.exc import SQLAlchemyError
from ..models import db, RideRequest, MAX_PASSENGERS, TRANSPORT_MODES
from ..services.matching import find_nearby_rides, serialize_match
from ..utils.geospatial import parse_lat_lng

rides_bp = Blueprint("rides", __name__)


def _token(value):
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        value = str(value)
    if not isinstance(value, str) or not value.strip():
        return None
    return value.strip()


def _is_blank(value):
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_passengers(value):
    if _is_blank(value):
        return 1
    if isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)
    try:
        passengers = int(value)
    except (TypeError, ValueError):
        return None
    return passengers if 0 < passengers <= MAX_PASSENGERS else None


@rides_bp.route("/rides", methods=["POST"])
def publish_ride():
    data = request.get_json(silent=True) or {}

    token = _token(data.get("token"))
    if not token or _is_blank(data.get("lat")) or _is_blank(data.get("lng")):
        return jsonify({"error": "Missing ride details (location or user token)."}), 400

    lat, lng = parse_lat_lng(data.get("lat"), data.get("lng"))
    if lat is None:
        return jsonify({"error": "Latitude and longitude must be valid coordinates."}), 400

    transport_mode = data.get("transportMode")
    if not _is_blank(transport_mode):
        transport_mode = str(transport_mode).strip().upper()
        if transport_mode not in TRANSPORT_MODES:
            return jsonify({"error": f"transportMode must be one of: {', '.join(TRANSPORT_MODES)}"}), 400
    else:
        transport_mode = None

    passengers = _parse_passengers(data.get("passengers"))
    if passengers is None:
        return jsonify({"error": f"passengers must be an integer between 1 and {MAX_PASSENGERS}."}), 400

    destination = data.get("destination")
    if destination is not None:
        destination = str(destination)

    ride = RideRequest(
        user_id=token,
        lat=lat,
        lng=lng,
        destination=destination,
        transport_mode=transport_mode,
        passengers=passengers,
    )
    db.session.add(ride)
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("Failed to publish ride for %s", token)
        return jsonify({"error": "Failed to publish ride"}), 500

    current_app.logger.info("New request: %s at [%s, %s]", transport_mode, lat, lng)
    return jsonify({"message": "Ride request published successfully", "rideId": ride.id}), 201


@rides_bp.route("/rides/search", methods=["GET"])
def search_rides():
    raw_lat = request.args.get("lat")
    raw_lng = request.args.get("lng")
    if _is_blank(raw_lat) or _is_blank(raw_lng):
        return jsonify({"error": "Latitude and Longitude required for search."}), 400

    lat, lng = parse_lat_lng(raw_lat, raw_lng)
    if lat is None:
        return jsonify({"error": "Latitude and longitude must be valid coordinates."}), 400

    user_id = _token(request.args.get("userId"))
    radius_km = current_app.config.get("SEARCH_RADIUS_KM", 10.0)

    rides = RideRequest.query.order_by(RideRequest.seq).all()
    matches = find_nearby_rides(rides, lat, lng, user_id=user_id, radius_km=radius_km)

    current_app.logger.info("Search at [%s, %s] returned %d matches", lat, lng, len(matches))
    return jsonify({"matches": [serialize_match(ride, distance) for ride, distance in matches]})
