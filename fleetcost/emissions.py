# Tailpipe CO₂ of a trip per travel mode. Car emissions come from the segment × fuel-type factor table;
# transit uses a fixed illustrative figure (flagged as a fallback) and walking is zero.

from __future__ import annotations
import logging
from typing import Mapping, Optional

from .models import Estimate, FuelType, MarketSegment
from .models.vehicle import coerce_fuel_type, coerce_market_segment
from .tables import EMISSION_FACTORS

log = logging.getLogger(__name__)

UNAVAILABLE_LABEL = "N/A"


def car_trip_emissions(distance_km: float, fuel_type, market_segment,
                       factors: Mapping[MarketSegment, Mapping[FuelType, float]] = EMISSION_FACTORS) -> Estimate:
    """
    kg CO₂ = factor[segment][fuel] × distance_km.
    Either key missing from the table -> unavailable, never a guessed factor.
    """
    segment: Optional[MarketSegment] = coerce_market_segment(market_segment)
    fuel: Optional[FuelType] = coerce_fuel_type(fuel_type)
    seg_factors = factors.get(segment) if segment is not None else None
    if seg_factors is None or fuel is None or fuel not in seg_factors:
        log.debug("No emission factor for segment=%r fuel=%r", market_segment, fuel_type)
        return Estimate.unavailable()
    return Estimate.measured(seg_factors[fuel] * max(0.0, float(distance_km or 0.0)))


def transit_emissions(per_trip_kg: float = 0.3) -> Estimate:
    # Illustrative constant, not an emission model
    return Estimate.fallback(per_trip_kg)


def walking_emissions() -> Estimate:
    return Estimate.measured(0.0)


def format_emissions(emissions: Estimate) -> str:
    if not emissions.is_available:
        return UNAVAILABLE_LABEL
    return f"{emissions.value:.1f}kg CO₂"
