from datetime import datetime
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, model_validator
from .engine import EngineConfig
from .filters import FilterCriteria, FilterValues
from .metrics import FleetMetrics
from .option import TransportOption
from .route import RouteLeg, TravelMode
from .trip import TripContext, TripRecord
from .vehicle import VehicleProfile


class OptionsRequest(BaseModel):
    legs: Dict[str, RouteLeg] = Field(..., description="One provider route per mode name (DRIVING/TRANSIT/WALKING)")
    vehicle: Optional[VehicleProfile] = None
    vehicle_key: Optional[str] = Field(None, description='Catalog key "brand model", used when vehicle is omitted')
    config: EngineConfig = EngineConfig()


class OptionsResponse(BaseModel):
    status: str
    options: List[TransportOption]


class ConfirmRequest(BaseModel):
    option: Optional[TransportOption] = None
    # Alternative to a full option: re-synthesize from legs and pick a mode
    legs: Optional[Dict[str, RouteLeg]] = None
    mode: Optional[TravelMode] = None
    context: TripContext = TripContext()
    config: EngineConfig = EngineConfig()

    @model_validator(mode="after")
    def _check_choice(self):
        if self.option is None and (self.legs is None or self.mode is None):
            raise ValueError("Provide either option, or legs together with mode")
        return self


class ConfirmResponse(BaseModel):
    status: str
    trip: TripRecord
    trip_id: str


class AnalyticsRequest(BaseModel):
    criteria: FilterCriteria = FilterCriteria()
    now: Optional[datetime] = None
    config: EngineConfig = EngineConfig()


class AnalyticsResponse(BaseModel):
    status: str
    criteria: FilterCriteria
    metrics: FleetMetrics


class FiltersRequest(BaseModel):
    criteria: FilterCriteria = FilterCriteria()


class FiltersResponse(BaseModel):
    status: str
    criteria: FilterCriteria           # after the cross-filter reset
    values: FilterValues
