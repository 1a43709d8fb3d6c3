# fleetcost/tests/test_store.py
import json
from datetime import datetime
import pytest

from fleetcost.analytics import aggregate
from fleetcost.errors import PersistenceError
from fleetcost.models import FilterCriteria, Period, RouteLeg, TripContext, TripRecord
from fleetcost.store import InMemoryTripLog, JsonTripLog
from fleetcost.synthesize import synthesize_options
from fleetcost.trips import confirm_trip


@pytest.fixture
def walking_option():
    return synthesize_options({"WALKING": RouteLeg(distance_km=2.0, duration_seconds=1500)}, None)[0]


def test_in_memory_append_stamps_timestamp(walking_option):
    log = InMemoryTripLog()
    stored = confirm_trip(walking_option, TripContext(driver_id="D9"), log)
    assert stored.recorded_at.endswith("Z")
    assert stored.recorded_datetime is not None
    assert log.snapshot() == [stored]


def test_snapshot_is_a_copy(trips):
    log = InMemoryTripLog(trips)
    snap = log.snapshot()
    snap.clear()
    assert len(log.snapshot()) == len(trips)


def test_json_log_writes_both_files(tmp_path, walking_option):
    log = JsonTripLog(tmp_path / "data")
    first = confirm_trip(walking_option, TripContext(driver_id="D1", department="Ops"), log)
    second = confirm_trip(walking_option, TripContext(driver_id="D2", department="Ops"), log)

    all_trips = json.loads((tmp_path / "data" / "all-trips.json").read_text(encoding="utf-8"))
    last = json.loads((tmp_path / "data" / "last-trip.json").read_text(encoding="utf-8"))
    assert [t["userId"] for t in all_trips] == ["D1", "D2"]
    assert last["userId"] == "D2"
    assert last["transportType"] == "Walking" and last["cost"] == "0 CZK"
    assert [t.driver_id for t in log.snapshot()] == [first.driver_id, second.driver_id]
    datetime.fromisoformat(second.recorded_at.replace("Z", "+00:00"))


def test_json_log_reads_existing_file(tmp_path, raw_trips):
    (tmp_path / "all-trips.json").write_text(json.dumps(raw_trips), encoding="utf-8")
    trips = JsonTripLog(tmp_path).snapshot()
    assert len(trips) == len(raw_trips)
    assert trips[0].car_model == "Octavia"


def test_corrupt_log_is_a_persistence_failure(tmp_path, walking_option):
    path = tmp_path / "all-trips.json"
    path.write_text("[{not json", encoding="utf-8")
    log = JsonTripLog(tmp_path)
    with pytest.raises(PersistenceError):
        confirm_trip(walking_option, TripContext(driver_id="D1"), log)
    # the damaged file is left untouched for inspection
    assert path.read_text(encoding="utf-8") == "[{not json"


def test_non_object_entries_are_skipped(tmp_path):
    (tmp_path / "all-trips.json").write_text(json.dumps([{"userId": "A"}, "garbage", 7, {"userId": "B"}]),
                                             encoding="utf-8")
    assert [t.driver_id for t in JsonTripLog(tmp_path).snapshot()] == ["A", "B"]


def test_bad_text_fields_keep_the_trip(tmp_path, raw_trips, now):
    good = raw_trips[0]
    nulls = dict(good, startLocation=None, carModel=None)
    numeric_id = dict(good, userId=42)
    (tmp_path / "all-trips.json").write_text(json.dumps([good, nulls, numeric_id]), encoding="utf-8")

    trips = JsonTripLog(tmp_path).snapshot()
    assert len(trips) == 3
    assert (trips[1].origin, trips[1].car_model) == ("", "")
    assert trips[2].driver_id == "42"

    m = aggregate(trips, FilterCriteria(period=Period.TODAY), now)
    assert m.trip_count == 3
    assert m.total_distance_km == pytest.approx(300.0)


def test_last_trip_not_written_when_log_write_fails(tmp_path, walking_option, monkeypatch):
    log = JsonTripLog(tmp_path)
    write = log._write

    def failing_write(path, payload):
        if path == log.all_trips_path:
            raise OSError("no space left on device")
        write(path, payload)

    monkeypatch.setattr(log, "_write", failing_write)
    with pytest.raises(PersistenceError):
        confirm_trip(walking_option, TripContext(driver_id="D1"), log)
    assert not log.last_trip_path.exists()


class _FailingLog(InMemoryTripLog):
    def append(self, record: TripRecord) -> TripRecord:
        raise PersistenceError("disk full")


def test_confirm_propagates_persistence_error(walking_option):
    with pytest.raises(PersistenceError):
        confirm_trip(walking_option, TripContext(), _FailingLog())
