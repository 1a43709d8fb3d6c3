""" The TripRecord model is the persisted, append-only fact written when a driver confirms a trip.

Its field names on the wire are the camelCase names of the existing trip log (userId, carEfficiency, co2Emissions,
tripTimestamp, ...); Python code uses the snake_case attribute names and either form is accepted on input. Numeric facts are kept
as the human-readable labels the log has always stored ("12.4", "1h 2 min", "2.1kg CO₂", "54 CZK"); fleetcost.parsing turns them
back into numbers.

TripContext carries who is driving what, replacing any "currently selected user/car" state. """

from datetime import datetime                          # Timestamp parsing
from typing import Optional                            # Optional vehicle / timestamp
from pydantic import BaseModel, ConfigDict, Field, field_validator
from .vehicle import VehicleProfile


class TripRecord(BaseModel):                           # One confirmed trip, flat string fields
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    driver_id: str = Field("guest", alias="userId")
    department: str = Field("", alias="userDepartment")
    driver_fuel_type: str = Field("", alias="userFuelType")
    driver_market_segment: str = Field("", alias="userMarketSegment")
    car_brand: str = Field("", alias="carBrand")
    car_model: str = Field("", alias="carModel")
    car_fuel_type: str = Field("", alias="carFuelType")
    car_efficiency: str = Field("", alias="carEfficiency")
    distance: str = Field("", alias="distance")        # km, e.g. "12.4"
    duration: str = Field("", alias="duration")        # "21 minutes", "1h 2 min"
    co2: str = Field("", alias="co2Emissions")         # "2.1kg CO₂", "0g CO₂", "N/A"
    transport_type: str = Field("", alias="transportType")  # Option label, e.g. "By car"
    cost: str = Field("", alias="cost")                # "54 CZK", "$5", "N/A"
    origin: str = Field("", alias="startLocation")
    destination: str = Field("", alias="destination")
    scheduled_at: str = Field("", alias="scheduledDateTime")
    recorded_at: str = Field("", alias="tripTimestamp")  # ISO-8601, assigned by the trip log

    @field_validator("*", mode="before")
    @classmethod
    def _stringify(cls, v):                            # Older logs may hold nulls or bare numbers
        if v is None:
            return ""
        if isinstance(v, (int, float)):
            return str(v)
        return v

    @property
    def recorded_datetime(self) -> Optional[datetime]:
        """Parsed tripTimestamp, None when missing or malformed."""
        text = (self.recorded_at or "").strip()
        if not text:
            return None
        if text.endswith("Z"):                         # fromisoformat() before 3.11 rejects "Z"
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            return None

    def to_wire(self) -> dict:                         # camelCase dict, the log's file format
        return self.model_dump(by_alias=True)


class TripContext(BaseModel):                          # Who/what/where of a trip being confirmed
    driver_id: str = "guest"
    department: str = ""
    driver_fuel_type: str = ""                         # Driver's preferred fuel type (profile field)
    driver_market_segment: str = ""                    # Driver's preferred segment (profile field)
    vehicle: Optional[VehicleProfile] = None
    origin: str = ""
    destination: str = ""
    scheduled_at: str = ""
