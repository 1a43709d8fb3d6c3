"""
Trip log
========

Append-only store of confirmed trips. `append()` stamps the record with the
server-side `tripTimestamp` (ISO-8601, UTC) and returns the stored copy;
`snapshot()` returns a copy of everything stored so far, in insertion order.

JsonTripLog keeps the existing file layout:
    <data_dir>/all-trips.json   JSON list, one object per trip (camelCase fields)
    <data_dir>/last-trip.json   the most recent trip, overwritten on each append

Failures surface as PersistenceError. A corrupt all-trips.json is reported, never
reset, because rewriting it would silently drop every earlier trip.
"""

from __future__ import annotations
import json
import logging
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError

from .errors import PersistenceError
from .models import TripRecord

log = logging.getLogger(__name__)

ALL_TRIPS_FILE = "all-trips.json"
LAST_TRIP_FILE = "last-trip.json"


def utc_timestamp(now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class TripLog:
    """Interface of the persistence collaborator."""

    def append(self, record: TripRecord) -> TripRecord:
        raise NotImplementedError

    def snapshot(self) -> List[TripRecord]:
        raise NotImplementedError


class InMemoryTripLog(TripLog):
    def __init__(self, trips: Optional[List[TripRecord]] = None):
        self._trips: List[TripRecord] = list(trips or [])
        self._lock = threading.Lock()

    def append(self, record: TripRecord) -> TripRecord:
        stored = record.model_copy(update={"recorded_at": utc_timestamp()})
        with self._lock:
            self._trips.append(stored)
        return stored

    def snapshot(self) -> List[TripRecord]:
        with self._lock:
            return list(self._trips)


class JsonTripLog(TripLog):
    def __init__(self, data_dir: Union[str, Path]):
        self.data_dir = Path(data_dir)
        self.all_trips_path = self.data_dir / ALL_TRIPS_FILE
        self.last_trip_path = self.data_dir / LAST_TRIP_FILE
        self._lock = threading.Lock()

    def _read_raw(self) -> list:
        if not self.all_trips_path.exists():
            return []
        try:
            with self.all_trips_path.open(encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            log.exception("Error reading %s", self.all_trips_path)
            raise PersistenceError(f"Cannot read {self.all_trips_path}: {e}") from e
        if not isinstance(data, list):
            raise PersistenceError(f"{self.all_trips_path} does not hold a JSON list")
        return data

    def _write(self, path: Path, payload) -> None:
        tmp = path.with_suffix(path.suffix + ".tmp")
        with tmp.open("w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
        tmp.replace(path)

    def append(self, record: TripRecord) -> TripRecord:
        stored = record.model_copy(update={"recorded_at": utc_timestamp()})
        wire = stored.to_wire()
        with self._lock:
            trips = self._read_raw()
            trips.append(wire)
            try:
                self.data_dir.mkdir(parents=True, exist_ok=True)
                self._write(self.all_trips_path, trips)
                # Only once the trip is in the log
                self._write(self.last_trip_path, wire)
            except OSError as e:
                log.exception("Error saving trip data")
                raise PersistenceError(f"Failed to save trip data: {e}") from e
        log.info("Saved trip %s for driver %s", stored.recorded_at, stored.driver_id)
        return stored

    def snapshot(self) -> List[TripRecord]:
        with self._lock:
            raw = self._read_raw()
        trips: List[TripRecord] = []
        for i, item in enumerate(raw):
            if not isinstance(item, dict):
                log.warning("Skipping non-object entry #%d in %s", i, self.all_trips_path)
                continue
            try:
                trips.append(TripRecord.model_validate(item))
            except ValidationError:
                # Malformed historical entry: skip it, keep the rest of the log usable
                log.warning("Skipping malformed trip #%d in %s", i, self.all_trips_path)
        return trips
