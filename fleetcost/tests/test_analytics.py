# fleetcost/tests/test_analytics.py
from datetime import datetime, timedelta, timezone
import pytest

from fleetcost.analytics import (
    aggregate, available_filter_values, filter_trips, in_period, reconcile_filters,
)
from fleetcost.models import FilterCriteria, Period, TripRecord, NO_DATA
from fleetcost.ratings import carbon_footprint_rating, emission_level, fuel_efficiency_rating


def _ids(trips):
    return [(t.driver_id, t.car_model) for t in trips]


# ──────────────────────────────────────────────────────────────────────────────
# Period windows
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("period,expected", [
    (Period.TODAY, [("D001", "Octavia"), ("D005", "Enyaq")]),
    (Period.WEEK, [("D001", "Octavia"), ("D002", "Model 3"), ("D005", "Enyaq")]),
    (Period.MONTH, [("D001", "Octavia"), ("D002", "Model 3"), ("D003", "XC90"), ("D005", "Enyaq")]),
    (Period.YEAR, [("D001", "Octavia"), ("D002", "Model 3"), ("D003", "XC90"), ("D001", "Fabia"), ("D005", "Enyaq")]),
])
def test_period_filter(trips, now, period, expected):
    assert _ids(filter_trips(trips, FilterCriteria(period=period), now)) == expected


def test_week_window_is_inclusive(now):
    start_of_today = now.replace(hour=0, minute=0)
    assert in_period(start_of_today - timedelta(days=7), Period.WEEK, now)
    assert not in_period(start_of_today - timedelta(days=7, seconds=1), Period.WEEK, now)
    assert in_period(now, Period.WEEK, now)
    assert not in_period(now + timedelta(seconds=1), Period.WEEK, now)


def test_unparsable_timestamp_never_matches(now):
    t = TripRecord(userId="X", tripTimestamp="yesterday-ish")
    assert t.recorded_datetime is None
    assert filter_trips([t], FilterCriteria(period=Period.YEAR), now) == []


def test_dimension_filters(trips, now):
    sales = filter_trips(trips, FilterCriteria(period=Period.YEAR, department="Sales"), now)
    assert _ids(sales) == [("D001", "Octavia"), ("D002", "Model 3"), ("D001", "Fabia")]

    d001 = filter_trips(trips, FilterCriteria(period=Period.YEAR, driver_id="D001", vehicle_model="Fabia"), now)
    assert _ids(d001) == [("D001", "Fabia")]


# ──────────────────────────────────────────────────────────────────────────────
# Aggregation
# ──────────────────────────────────────────────────────────────────────────────
def test_aggregate_today(trips, now):
    m = aggregate(trips, FilterCriteria(period=Period.TODAY), now)
    assert m.has_data and m.trip_count == 2
    assert m.total_distance_km == pytest.approx(100.0)
    assert m.total_fuel_liters == pytest.approx(4.5)        # malformed Enyaq trip adds 0 km
    assert m.total_duration_seconds == 5400
    assert m.total_co2_kg == pytest.approx(16.8)
    assert m.total_cost_czk == pytest.approx(145.0)
    assert m.avg_fuel_per_100km == pytest.approx(4.5)
    assert m.avg_co2_per_km == pytest.approx(168.0)
    assert m.avg_speed_kmh == pytest.approx(100.0 / 1.5)
    assert m.cost_per_km == pytest.approx(1.45)
    assert m.trees_to_offset == 1
    assert m.fuel_efficiency_rating == "Good"
    assert m.carbon_footprint_rating == "Low"
    assert m.emission_level == "High"
    assert m.fuel_fallback_trips == 1


def test_aggregate_month_uses_per_trip_consumption(trips, now):
    m = aggregate(trips, FilterCriteria(period=Period.MONTH), now)
    # 100×4.5 + 50×6.5 (kWh label → fallback) + 200×9.5, all /100
    assert m.total_fuel_liters == pytest.approx(4.5 + 3.25 + 19.0)
    assert m.total_cost_czk == pytest.approx(145 + 113 + 20 * 23)
    assert m.avg_fuel_per_100km == pytest.approx(26.75 / 350 * 100)
    assert m.fuel_efficiency_rating == "Moderate"
    assert m.emission_level == "Very High"
    assert m.trees_to_offset == 4
    assert m.fuel_fallback_trips == 2


def test_aggregate_is_idempotent(trips, now):
    crit = FilterCriteria(period=Period.YEAR, department="Sales")
    assert aggregate(trips, crit, now) == aggregate(trips, crit, now)


def test_empty_set_is_no_data(trips, now):
    m = aggregate(trips, FilterCriteria(period=Period.TODAY, department="Nobody"), now)
    assert not m.has_data and m.trip_count == 0
    assert m.total_distance_km == 0 and m.total_co2_kg == 0 and m.trees_to_offset == 0
    assert (m.fuel_efficiency_rating, m.carbon_footprint_rating, m.emission_level) == (NO_DATA,) * 3


def test_zero_totals_are_not_no_data(now):
    walk = TripRecord(userId="W1", userDepartment="Ops", distance="0", duration="",
                      co2Emissions="0kg CO₂", cost="0 CZK", tripTimestamp=now.isoformat())
    m = aggregate([walk], FilterCriteria(period=Period.TODAY), now)
    assert m.has_data and m.trip_count == 1
    assert m.total_distance_km == 0 and m.avg_speed_kmh == 0
    assert m.emission_level == "Excellent"
    assert m.carbon_footprint_rating == "Low"
    assert m.fuel_efficiency_rating == "Good"


# ──────────────────────────────────────────────────────────────────────────────
# Ratings
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("g_per_km,level", [
    (0.0, "Excellent"), (50.0, "Excellent"), (50.1, "Good"), (100.0, "Good"),
    (100.1, "Moderate"), (150.0, "Moderate"), (150.1, "High"), (200.0, "High"), (200.1, "Very High"),
])
def test_emission_level_boundaries(g_per_km, level):
    assert emission_level(g_per_km) == level


@pytest.mark.parametrize("kg,rating", [(99.9, "Low"), (100.0, "Moderate"), (499.9, "Moderate"), (500.0, "High")])
def test_carbon_footprint_boundaries(kg, rating):
    assert carbon_footprint_rating(kg) == rating


@pytest.mark.parametrize("l100,rating", [(6.0, "Good"), (6.01, "Moderate"), (8.0, "Moderate"), (8.01, "Poor")])
def test_fuel_efficiency_boundaries(l100, rating):
    assert fuel_efficiency_rating(l100) == rating


# ──────────────────────────────────────────────────────────────────────────────
# Dropdown values and cross-filter reset
# ──────────────────────────────────────────────────────────────────────────────
def test_available_values_are_scoped(trips):
    v = available_filter_values(trips, FilterCriteria())
    assert v.departments == ["Sales", "Engineering", "Logistics"]
    assert v.driver_ids == ["D001", "D002", "D003", "D004", "D005"]

    v = available_filter_values(trips, FilterCriteria(department="Sales"))
    assert v.driver_ids == ["D001", "D002"]
    assert v.vehicle_models == ["Octavia", "Model 3", "Fabia"]

    v = available_filter_values(trips, FilterCriteria(department="Sales", driver_id="D001"))
    assert v.departments == ["Sales", "Engineering", "Logistics"]
    assert v.vehicle_models == ["Octavia", "Fabia"]


def test_department_change_clears_driver_and_vehicle(trips):
    crit = FilterCriteria(period=Period.MONTH, department="Sales", driver_id="D003", vehicle_model="XC90")
    out = reconcile_filters(trips, crit)
    assert (out.department, out.driver_id, out.vehicle_model) == ("Sales", "", "")
    assert out.period == Period.MONTH


def test_driver_change_clears_unused_vehicle(trips):
    out = reconcile_filters(trips, FilterCriteria(department="Sales", driver_id="D001", vehicle_model="Model 3"))
    assert (out.driver_id, out.vehicle_model) == ("D001", "")


def test_valid_selection_is_kept(trips):
    crit = FilterCriteria(department="Sales", driver_id="D001", vehicle_model="Fabia")
    assert reconcile_filters(trips, crit) == crit


def test_naive_timestamps_use_callers_clock():
    now = datetime(2026, 1, 1, 0, 30)
    t = TripRecord(userId="N", tripTimestamp="2026-01-01T00:10:00")
    assert in_period(t.recorded_datetime, Period.TODAY, now)
    assert not in_period(t.recorded_datetime, Period.TODAY, datetime(2026, 1, 2, tzinfo=timezone.utc))
