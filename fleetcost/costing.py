# Monetary cost of a trip per travel mode:
# - car_trip_cost: distance × (efficiency / 100) × unit price of the vehicle's fuel (kWh price for electric cars).
# - transit_fare: flat per-km rail pricing when a train is involved, otherwise duration-tiered fares.
# - walking_cost: always zero, never routed through the car or transit paths.

from __future__ import annotations
import logging
import math
from typing import Iterable, Mapping, Optional, Sequence

from .models import Estimate, FuelType, TripRecord, VehicleProfile
from .models.route import coerce_transit_kind
from .parsing import parse_distance
from .tables import (
    CURRENCY, FUEL_PRICES_CZK, RAIL_FARE_PER_KM,
    SHORT_FARE_MAX_MINUTES, MEDIUM_FARE_MAX_MINUTES,
    SHORT_FARE, MEDIUM_FARE, LONG_FARE,
)

log = logging.getLogger(__name__)

UNAVAILABLE_LABEL = "N/A"


def round_half_up(x: float) -> int:
    # round() is banker's rounding; fares and labels round .5 up
    return int(math.floor(x + 0.5))


def car_trip_cost(distance_km: float, vehicle: VehicleProfile,
                  prices: Mapping[FuelType, float] = FUEL_PRICES_CZK) -> Estimate:
    if distance_km is None or not distance_km > 0:
        return Estimate.unavailable()

    unit_price = prices.get(vehicle.fuel_type)
    if not unit_price:
        log.debug("No price for fuel type %s", vehicle.fuel_type.value)
        return Estimate.unavailable()

    eff = vehicle.efficiency_value
    if not eff:
        log.debug("Unparsable efficiency %r for %s", vehicle.efficiency, vehicle.key)
        return Estimate.unavailable()

    cost = distance_km * (eff / 100.0) * unit_price
    return Estimate.measured(round(cost, 2))


def transit_fare(distance_km: float, duration_minutes: float,
                 transit_kinds: Sequence = ()) -> float:
    # Rail pricing wins regardless of duration
    if any(coerce_transit_kind(k).is_rail for k in transit_kinds):
        return float(round_half_up(distance_km * RAIL_FARE_PER_KM))
    if duration_minutes < SHORT_FARE_MAX_MINUTES:
        return SHORT_FARE
    if duration_minutes <= MEDIUM_FARE_MAX_MINUTES:
        return MEDIUM_FARE
    return LONG_FARE


def walking_cost() -> Estimate:
    return Estimate.measured(0.0)


def format_cost(cost: Estimate) -> str:
    if not cost.is_available:
        return UNAVAILABLE_LABEL
    return f"{round_half_up(cost.value)} {CURRENCY}"


def total_car_cost(trips: Iterable[TripRecord], catalog,
                   prices: Mapping[FuelType, float] = FUEL_PRICES_CZK) -> float:
    """
    Sum of recomputed car costs over trips, looking each vehicle up in the catalog by
    "carBrand carModel". Trips whose vehicle or cost is unavailable contribute nothing.
    """
    total = 0.0
    for trip in trips:
        vehicle: Optional[VehicleProfile] = catalog.find(f"{trip.car_brand} {trip.car_model}")
        if vehicle is None:
            continue
        cost = car_trip_cost(parse_distance(trip.distance), vehicle, prices)
        if cost.is_available:
            total += cost.value
    return total


def cost_per_km(total_cost: float, total_distance_km: float) -> float:
    return total_cost / total_distance_km if total_distance_km > 0 else 0.0

