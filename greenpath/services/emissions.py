"""
CO2 footprint estimates per travel mode
"""

# kg CO2 per km (ISO 14083 / UK government conversion factors)
EMISSION_FACTORS = {
    "DRIVING": 0.192,
    "TRANSIT": 0.05,  # per passenger
    "BICYCLING": 0.0,
    "WALKING": 0.0,
}


class UnknownTravelMode(ValueError):
    pass


def estimate_footprint(distance_km, mode):
    """Estimate kg of CO2 for travelling distance_km in the given mode."""
    mode = str(mode).strip().upper() if mode is not None else ""
    factor = EMISSION_FACTORS.get(mode)
    if factor is None:
        raise UnknownTravelMode(mode)
    if distance_km < 0:
        raise ValueError("distance must not be negative")

    co2 = distance_km * factor
    result = {
        "distanceKm": distance_km,
        "mode": mode,
        "co2Kg": round(co2, 2),
    }

    if mode == "DRIVING":
        bus = distance_km * EMISSION_FACTORS["TRANSIT"]
        saving = round((co2 - bus) / co2 * 100) if co2 else None
        result["comparison"] = {
            "alternative": "TRANSIT",
            "savingPercent": saving,
            "message": f"Could save {saving}% by Bus" if saving is not None else None,
        }
    else:
        result["comparison"] = {
            "alternative": None,
            "savingPercent": None,
            "message": "Excellent Choice!",
        }
    return result
