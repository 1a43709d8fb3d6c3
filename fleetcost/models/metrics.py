# Defines FleetMetrics, the aggregated, derived and classified summary of a filtered trip set.

from pydantic import BaseModel

NO_DATA = "No Data"                                    # Rating of an empty trip set


class FleetMetrics(BaseModel):
    trip_count: int = 0                                # Trips in the filtered set
    has_data: bool = False                             # False only for an empty filtered set

    total_distance_km: float = 0.0
    total_fuel_liters: float = 0.0                     # Σ distance × consumption / 100, per trip
    total_duration_seconds: int = 0
    total_cost_czk: float = 0.0
    total_co2_kg: float = 0.0

    avg_fuel_per_100km: float = 0.0                    # L/100km
    avg_co2_per_km: float = 0.0                        # g/km
    avg_speed_kmh: float = 0.0
    cost_per_km: float = 0.0                           # CZK/km
    trees_to_offset: int = 0

    fuel_efficiency_rating: str = NO_DATA              # Good / Moderate / Poor
    carbon_footprint_rating: str = NO_DATA             # Low / Moderate / High
    emission_level: str = NO_DATA                      # Excellent / Good / Moderate / High / Very High

    fuel_fallback_trips: int = 0                       # Trips whose consumption is the fallback constant
