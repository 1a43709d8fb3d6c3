# Fleet analytics over a snapshot of the trip log:
# - filter_trips: period window + department / driver / vehicle-model equality.
# - aggregate: filter, then fold into FleetMetrics (see agents.fleet_agent).
# - available_filter_values / reconcile_filters: dropdown values and the cross-filter reset rule.
# All functions are pure over their inputs; `now` is a parameter so results are reproducible.

from __future__ import annotations
import logging
from datetime import datetime, time, timedelta
from typing import Iterable, List, Optional

from .agents.fleet_agent import FleetAgent
from .models import EngineConfig, FilterCriteria, FilterValues, FleetMetrics, Period, TripRecord

log = logging.getLogger(__name__)


def _align(trip_dt: datetime, now: datetime) -> datetime:
    # Express the trip timestamp in now's clock so calendar comparisons line up
    if trip_dt.tzinfo is None:
        return trip_dt.replace(tzinfo=now.tzinfo)
    if now.tzinfo is None:
        return trip_dt.astimezone().replace(tzinfo=None)
    return trip_dt.astimezone(now.tzinfo)


def in_period(trip_dt: Optional[datetime], period: Period, now: Optional[datetime] = None) -> bool:
    if trip_dt is None:
        return False
    now = now or datetime.now().astimezone()
    t = _align(trip_dt, now)

    if period == Period.TODAY:
        return t.date() == now.date()
    if period == Period.WEEK:
        # From the start of today minus 7 days through now, both ends inclusive
        week_ago = datetime.combine(now.date(), time.min, tzinfo=now.tzinfo) - timedelta(days=7)
        return week_ago <= t <= now
    if period == Period.MONTH:
        return t.year == now.year and t.month == now.month
    if period == Period.YEAR:
        return t.year == now.year
    return True


def _matches(trip: TripRecord, criteria: FilterCriteria) -> bool:
    if criteria.department and trip.department != criteria.department:
        return False
    if criteria.driver_id and trip.driver_id != criteria.driver_id:
        return False
    if criteria.vehicle_model and trip.car_model != criteria.vehicle_model:
        return False
    return True


def filter_trips(trips: Iterable[TripRecord], criteria: FilterCriteria,
                 now: Optional[datetime] = None) -> List[TripRecord]:
    now = now or datetime.now().astimezone()
    return [
        t for t in trips
        if in_period(t.recorded_datetime, criteria.period, now) and _matches(t, criteria)
    ]


def aggregate(trips: Iterable[TripRecord], criteria: FilterCriteria,
              now: Optional[datetime] = None, config: Optional[EngineConfig] = None) -> FleetMetrics:
    selected = filter_trips(trips, criteria, now)
    log.debug("Aggregating %d trips for %s", len(selected), criteria)
    return FleetAgent(selected, config).evaluate()


def _unique(values: Iterable[str]) -> List[str]:
    seen: List[str] = []
    for v in values:
        if v not in seen:
            seen.append(v)
    return seen


def available_filter_values(trips: Iterable[TripRecord], criteria: FilterCriteria) -> FilterValues:
    """
    departments: every department in the log.
    driver_ids: drivers of the selected department (all drivers when none is selected).
    vehicle_models: models used within the selected department and by the selected driver.
    """
    trips = list(trips)
    in_dept = [t for t in trips if not criteria.department or t.department == criteria.department]
    in_driver = [t for t in in_dept if not criteria.driver_id or t.driver_id == criteria.driver_id]
    return FilterValues(
        departments=_unique(t.department for t in trips),
        driver_ids=_unique(t.driver_id for t in in_dept),
        vehicle_models=_unique(t.car_model for t in in_driver),
    )


def reconcile_filters(trips: Iterable[TripRecord], criteria: FilterCriteria) -> FilterCriteria:
    """
    Clear selections that an upstream filter made invalid: a driver outside the selected
    department is cleared together with the vehicle model; a vehicle model the remaining
    department/driver never used is cleared.
    """
    trips = list(trips)
    out = criteria.model_copy()

    values = available_filter_values(trips, out)
    if out.driver_id and out.driver_id not in values.driver_ids:
        log.debug("Driver %r not in department %r, clearing driver and vehicle", out.driver_id, out.department)
        out = out.model_copy(update={"driver_id": "", "vehicle_model": ""})
        values = available_filter_values(trips, out)

    if out.vehicle_model and out.vehicle_model not in values.vehicle_models:
        log.debug("Vehicle model %r no longer available, clearing it", out.vehicle_model)
        out = out.model_copy(update={"vehicle_model": ""})
    return out
