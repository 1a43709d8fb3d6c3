# Qualitative ratings of fleet metrics. Thresholds and their inclusivity are fixed acceptance criteria.

from .models.metrics import NO_DATA


def carbon_footprint_rating(total_co2_kg: float) -> str:
    if total_co2_kg < 100:
        return "Low"
    if total_co2_kg < 500:
        return "Moderate"
    return "High"


def fuel_efficiency_rating(avg_fuel_per_100km: float) -> str:
    if avg_fuel_per_100km <= 6:
        return "Good"
    if avg_fuel_per_100km <= 8:
        return "Moderate"
    return "Poor"


def emission_level(avg_co2_g_per_km: float) -> str:
    if avg_co2_g_per_km <= 50:
        return "Excellent"
    if avg_co2_g_per_km <= 100:
        return "Good"
    if avg_co2_g_per_km <= 150:
        return "Moderate"
    if avg_co2_g_per_km <= 200:
        return "High"
    return "Very High"


def no_data_ratings() -> dict:
    return {
        "fuel_efficiency_rating": NO_DATA,
        "carbon_footprint_rating": NO_DATA,
        "emission_level": NO_DATA,
    }
