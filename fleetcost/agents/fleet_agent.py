""" FleetAgent folds an already-filtered set of trips into FleetMetrics: it wraps each TripRecord into a TripAgent, sums the
parsed totals (distance, duration, CO₂, cost, and fuel litres computed per trip from that trip's own consumption), derives the
rates (L/100km, g CO₂/km, km/h, CZK/km, trees to offset) and classifies them into ratings.

An empty set yields the distinguishable "No Data" metrics (has_data=False), never a row of plain zeros with real-looking ratings. """

from __future__ import annotations
import logging
import math
from typing import Iterable, List, Optional

from ..costing import cost_per_km
from ..models import EngineConfig, FleetMetrics, TripRecord
from ..ratings import (
    carbon_footprint_rating, fuel_efficiency_rating, emission_level, no_data_ratings,
)
from .trip_agent import TripAgent

log = logging.getLogger(__name__)


class FleetAgent:
    def __init__(self, trips: Iterable[TripRecord], cfg: Optional[EngineConfig] = None):
        self.cfg: EngineConfig = cfg or EngineConfig()
        self.trips: List[TripAgent] = [TripAgent(t, self.cfg) for t in trips]

    def evaluate(self) -> FleetMetrics:
        if not self.trips:
            return FleetMetrics(trip_count=0, has_data=False, **no_data_ratings())

        distance = fuel = co2 = cost = 0.0
        duration = 0
        fallback_trips = 0

        for trip in self.trips:
            d = trip.distance_km
            consumption = trip.fuel_consumption
            if consumption.is_fallback:
                fallback_trips += 1
            distance += d
            fuel += d * consumption.value / 100.0
            duration += trip.duration_seconds
            co2 += trip.co2_kg
            cost += trip.cost_czk

        if fallback_trips:
            log.info("%d of %d trips use the fallback fuel consumption", fallback_trips, len(self.trips))

        avg_fuel = (fuel / distance) * 100.0 if distance > 0 else 0.0
        avg_co2 = (co2 * 1000.0) / distance if distance > 0 else 0.0       # g/km
        avg_speed = distance / (duration / 3600.0) if duration > 0 else 0.0
        per_km = cost_per_km(cost, distance)
        trees = math.ceil(co2 / self.cfg.tree_absorption_kg_per_year)

        return FleetMetrics(
            trip_count=len(self.trips),
            has_data=True,
            total_distance_km=distance,
            total_fuel_liters=fuel,
            total_duration_seconds=duration,
            total_cost_czk=cost,
            total_co2_kg=co2,
            avg_fuel_per_100km=avg_fuel,
            avg_co2_per_km=avg_co2,
            avg_speed_kmh=avg_speed,
            cost_per_km=per_km,
            trees_to_offset=trees,
            fuel_efficiency_rating=fuel_efficiency_rating(avg_fuel),
            carbon_footprint_rating=carbon_footprint_rating(co2),
            emission_level=emission_level(avg_co2),
            fuel_fallback_trips=fallback_trips,
        )
