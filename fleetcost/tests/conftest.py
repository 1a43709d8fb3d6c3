# fleetcost/tests/conftest.py
import json
from datetime import datetime, timezone
from pathlib import Path
import pytest
from fastapi.testclient import TestClient

from fleetcost.app import app, get_catalog, get_trip_log
from fleetcost.catalog import VehicleCatalog
from fleetcost.models import TripRecord
from fleetcost.store import InMemoryTripLog

# Base directories
ROOT = Path(__file__).resolve().parents[2]        # repository root
DATA_DIR = ROOT / "data"


@pytest.fixture(scope="session")
def catalog():
    """Vehicle catalog from data/cars.json."""
    path = DATA_DIR / "cars.json"
    if not path.exists():
        raise FileNotFoundError(f"{path} not found.")
    return VehicleCatalog.from_json(path)


@pytest.fixture(scope="session")
def raw_trips():
    """Trip log entries (camelCase wire format) from data/sample-trips.json."""
    path = DATA_DIR / "sample-trips.json"
    if not path.exists():
        raise FileNotFoundError(f"{path} not found.")
    with path.open(encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def trips(raw_trips):
    return [TripRecord.model_validate(t) for t in raw_trips]


@pytest.fixture
def now():
    # sample-trips.json is laid out around this instant
    return datetime(2026, 10, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def trip_log(trips):
    return InMemoryTripLog(trips)


@pytest.fixture
def client(catalog, trip_log):
    app.dependency_overrides[get_catalog] = lambda: catalog
    app.dependency_overrides[get_trip_log] = lambda: trip_log
    # IMPORTANT: this makes server exceptions come back as HTTP 500
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
