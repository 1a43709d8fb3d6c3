""" TripAgent provides a numeric view over one persisted TripRecord:

distance (km), duration (s), CO₂ (kg), cost (CZK) and fuel consumption (L/100km) parsed from the record's labels.
Malformed labels degrade to 0 (or, for consumption, the documented fallback constant) instead of raising, so the fleet
aggregation keeps going past bad historical data. """

from typing import Optional                        # Optional config
from ..models import EngineConfig, Estimate, TripRecord
from ..parsing import (
    parse_distance, parse_duration, parse_co2, parse_cost, parse_fuel_consumption,
)


class TripAgent:                                   # Lightweight wrapper around a TripRecord
    def __init__(self, t: TripRecord, cfg: Optional[EngineConfig] = None):
        self.t = t                                 # Raw record
        self.cfg = cfg or EngineConfig()           # Exchange rate / consumption fallback

    @property
    def distance_km(self) -> float:
        return parse_distance(self.t.distance)

    @property
    def duration_seconds(self) -> int:
        return parse_duration(self.t.duration)

    @property
    def co2_kg(self) -> float:
        return parse_co2(self.t.co2)

    @property
    def cost_czk(self) -> float:
        return parse_cost(self.t.cost, self.cfg.usd_to_czk)

    @property
    def fuel_consumption(self) -> Estimate:        # L/100km of this trip's own vehicle
        return parse_fuel_consumption(self.t.car_efficiency, self.cfg.default_fuel_l_per_100km)
