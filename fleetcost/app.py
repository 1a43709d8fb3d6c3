from functools import lru_cache
from typing import Any, Dict, List
import logging

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .models import (
    OptionsRequest, OptionsResponse,
    ConfirmRequest, ConfirmResponse,
    AnalyticsRequest, AnalyticsResponse,
    FiltersRequest, FiltersResponse,
    TripRecord, VehicleProfile,
)
from .analytics import aggregate, available_filter_values, reconcile_filters
from .catalog import VehicleCatalog
from .errors import CatalogLookupError, OptionNotFound, PersistenceError
from .settings import Settings, configure_logging
from .store import JsonTripLog, TripLog
from .synthesize import select_option, synthesize_options
from .trips import confirm_trip

settings = Settings.from_env()
log = logging.getLogger(__name__)

app = FastAPI(title="Fleet Trip Costing & Analytics", version="1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], allow_methods=["*"], allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_catalog() -> VehicleCatalog:
    if not settings.cars_file.exists():
        log.warning("Vehicle catalog %s not found, starting with an empty catalog", settings.cars_file)
        return VehicleCatalog([])
    return VehicleCatalog.from_json(settings.cars_file)


@lru_cache(maxsize=1)
def get_trip_log() -> TripLog:
    return JsonTripLog(settings.data_dir)


def _snapshot(trip_log: TripLog) -> List[TripRecord]:
    try:
        return trip_log.snapshot()
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "healthy"}


@app.get("/vehicles", response_model=List[VehicleProfile])
def endpoint_vehicles(catalog: VehicleCatalog = Depends(get_catalog)) -> List[VehicleProfile]:
    return catalog.vehicles


@app.post("/options", response_model=OptionsResponse)
def endpoint_options(req: OptionsRequest, catalog: VehicleCatalog = Depends(get_catalog)) -> Dict[str, Any]:
    vehicle = req.vehicle
    if vehicle is None and req.vehicle_key:
        try:
            vehicle = catalog.get(req.vehicle_key)
        except CatalogLookupError as e:
            raise HTTPException(status_code=404, detail=str(e))
    options = synthesize_options(req.legs, vehicle, req.config)
    return {"status": "ok", "options": options}


@app.post("/trips", response_model=ConfirmResponse)
def endpoint_confirm(req: ConfirmRequest, trip_log: TripLog = Depends(get_trip_log)) -> Dict[str, Any]:
    option = req.option
    if option is None:
        options = synthesize_options(req.legs, req.context.vehicle, req.config)
        try:
            option = select_option(options, req.mode)
        except OptionNotFound as e:
            raise HTTPException(status_code=404, detail=str(e))
    try:
        stored = confirm_trip(option, req.context, trip_log)
    except PersistenceError:
        # The option is untouched; the client may retry
        raise HTTPException(status_code=500, detail="Failed to save trip data")
    return {"status": "ok", "trip": stored, "trip_id": stored.recorded_at}


@app.get("/trips", response_model=List[TripRecord])
def endpoint_trips(trip_log: TripLog = Depends(get_trip_log)) -> List[TripRecord]:
    return _snapshot(trip_log)


@app.post("/analytics", response_model=AnalyticsResponse)
def endpoint_analytics(req: AnalyticsRequest, trip_log: TripLog = Depends(get_trip_log)) -> Dict[str, Any]:
    trips = _snapshot(trip_log)
    criteria = reconcile_filters(trips, req.criteria)
    metrics = aggregate(trips, criteria, now=req.now, config=req.config)
    return {"status": "ok", "criteria": criteria, "metrics": metrics}


@app.post("/analytics/filters", response_model=FiltersResponse)
def endpoint_filters(req: FiltersRequest, trip_log: TripLog = Depends(get_trip_log)) -> Dict[str, Any]:
    trips = _snapshot(trip_log)
    criteria = reconcile_filters(trips, req.criteria)
    values = available_filter_values(trips, criteria)
    return {"status": "ok", "criteria": criteria, "values": values}


if __name__ == "__main__":
    import uvicorn
    configure_logging(settings.log_level)
    uvicorn.run(app, host="127.0.0.1", port=8000)
