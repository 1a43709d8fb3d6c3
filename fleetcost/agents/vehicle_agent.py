""" VehicleAgent prices and scores trips for one fleet vehicle:

Cost: distance × (efficiency / 100) × unit price of the vehicle's fuel, or "unavailable" when the price or efficiency is missing.
Emissions: segment × fuel-type factor × distance, or "unavailable" when the factor table has no entry.
Eco flag: hybrids and every electric variant count as eco-friendly for driving.

It uses the static price and emission-factor tables by default; both can be swapped for tests or other markets. """

from typing import Mapping, Optional                 # Type hints for lookup tables
from ..models import Estimate, FuelType, MarketSegment, VehicleProfile
from ..costing import car_trip_cost
from ..emissions import car_trip_emissions
from ..tables import FUEL_PRICES_CZK, EMISSION_FACTORS


class VehicleAgent:                                  # Agent responsible for the car-mode figures of one vehicle
    def __init__(self, v: Optional[VehicleProfile],
                 prices: Mapping[FuelType, float] = FUEL_PRICES_CZK,
                 factors: Mapping[MarketSegment, Mapping[FuelType, float]] = EMISSION_FACTORS):
        self.v = v                                   # Raw vehicle profile (None = no vehicle selected)
        self.prices = prices                         # Price per energy unit by fuel type
        self.factors = factors                       # kg CO₂/km by segment and fuel type

    @property
    def is_eco_friendly(self) -> bool:               # Hybrid / PHEV / BEV
        return self.v is not None and self.v.fuel_type.is_eco

    def trip_cost(self, distance_km: float) -> Estimate:
        if self.v is None:                           # No vehicle → nothing to price
            return Estimate.unavailable()
        return car_trip_cost(distance_km, self.v, self.prices)

    def trip_emissions(self, distance_km: float) -> Estimate:
        if self.v is None:
            return Estimate.unavailable()
        return car_trip_emissions(distance_km, self.v.fuel_type, self.v.market_segment, self.factors)
