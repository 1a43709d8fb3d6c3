# Trip confirmation: turns the chosen TransportOption plus who/what/where into a TripRecord and appends it to the trip log.

from __future__ import annotations
import logging

from .errors import PersistenceError
from .models import TransportOption, TripContext, TripRecord
from .store import TripLog

log = logging.getLogger(__name__)


def build_trip_record(option: TransportOption, ctx: TripContext) -> TripRecord:
    v = ctx.vehicle
    return TripRecord(
        driver_id=ctx.driver_id or "guest",
        department=ctx.department,
        driver_fuel_type=ctx.driver_fuel_type,
        driver_market_segment=ctx.driver_market_segment,
        car_brand=v.brand if v else "",
        car_model=v.model if v else "",
        car_fuel_type=v.fuel_type.value if v else "",
        car_efficiency=v.efficiency if v else "",
        distance=f"{option.distance_km:.1f}",
        duration=option.time_label,
        co2=option.emission_label,
        transport_type=option.display_type,
        cost=option.cost_label,
        origin=ctx.origin,
        destination=ctx.destination,
        scheduled_at=ctx.scheduled_at,
    )


def confirm_trip(option: TransportOption, ctx: TripContext, trip_log: TripLog) -> TripRecord:
    """
    Persist the trip and return the stored record (with its tripTimestamp).
    PersistenceError propagates; the option itself stays valid for a retry.
    """
    record = build_trip_record(option, ctx)
    try:
        return trip_log.append(record)
    except PersistenceError:
        log.error("Trip confirmation failed for driver %s (%s)", record.driver_id, option.mode.value)
        raise
