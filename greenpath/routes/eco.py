import math
from flask import Blueprint, request, jsonify
from ..services.emissions import EMISSION_FACTORS, UnknownTravelMode, estimate_footprint

eco_bp = Blueprint("eco", __name__)


@eco_bp.route("/eco/footprint", methods=["POST"])
def footprint():
    """Estimate CO2 for a route distance already computed by the mapping client"""
    data = request.get_json(silent=True) or {}

    raw_distance = data.get("distanceKm")
    if isinstance(raw_distance, bool):
        raw_distance = None
    try:
        distance_km = float(raw_distance)
    except (TypeError, ValueError):
        return jsonify({"error": "distanceKm must be a number."}), 400
    if not math.isfinite(distance_km) or distance_km < 0:
        return jsonify({"error": "distanceKm must be a non-negative number."}), 400

    try:
        result = estimate_footprint(distance_km, data.get("mode"))
    except UnknownTravelMode:
        return jsonify({"error": f"mode must be one of: {', '.join(EMISSION_FACTORS)}"}), 400

    return jsonify(result)
