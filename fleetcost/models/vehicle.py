""" This file defines the VehicleProfile Pydantic model, which represents one car of the corporate fleet catalog.

It ensures:

Fuel types and market segments are normalized to the catalog spelling (aliases such as "BatteryElectric" or "Small" are accepted).
The efficiency label ("6.2L/100km", "18kWh/100km") is kept as written and exposed as a parsed value + unit tag.
Provides a .key property ("brand model", lower-cased) used for catalog lookups.

In short: it validates and standardizes raw catalog entries into immutable reference data for the costing and emission models. """

import re                                              # Regex for the efficiency label
from enum import Enum                                  # String enums for fuel type / segment
from typing import Optional                            # Optional parsed efficiency
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class FuelType(str, Enum):                             # Propulsion / energy category
    PETROL = "Petrol"
    DIESEL = "Diesel"
    HYBRID = "Hybrid"
    PLUG_IN_HYBRID = "Plug-in Hybrid Electric Vehicle"
    BATTERY_ELECTRIC = "Battery Electric Vehicle"

    @property
    def is_eco(self) -> bool:                          # Hybrid or any electric variant
        return self in (FuelType.HYBRID, FuelType.PLUG_IN_HYBRID, FuelType.BATTERY_ELECTRIC)


class MarketSegment(str, Enum):                        # Vehicle size class keying the emission factors
    SMALL = "Small car"
    MEDIUM = "Medium car"
    LARGE = "Large car"
    AVERAGE = "Average car"


_FUEL_ALIASES = {
    "petrol": FuelType.PETROL,
    "gasoline": FuelType.PETROL,
    "diesel": FuelType.DIESEL,
    "hybrid": FuelType.HYBRID,
    "pluginhybrid": FuelType.PLUG_IN_HYBRID,
    "pluginhybridelectricvehicle": FuelType.PLUG_IN_HYBRID,
    "phev": FuelType.PLUG_IN_HYBRID,
    "batteryelectric": FuelType.BATTERY_ELECTRIC,
    "batteryelectricvehicle": FuelType.BATTERY_ELECTRIC,
    "bev": FuelType.BATTERY_ELECTRIC,
    "electric": FuelType.BATTERY_ELECTRIC,
}

_SEGMENT_ALIASES = {
    "small": MarketSegment.SMALL,
    "smallcar": MarketSegment.SMALL,
    "medium": MarketSegment.MEDIUM,
    "mediumcar": MarketSegment.MEDIUM,
    "large": MarketSegment.LARGE,
    "largecar": MarketSegment.LARGE,
    "average": MarketSegment.AVERAGE,
    "averagecar": MarketSegment.AVERAGE,
}

_EFFICIENCY_RE = re.compile(r"(\d+(?:\.\d+)?|\.\d+)\s*(l|kwh)?", re.IGNORECASE)


def _squash(text: str) -> str:                         # "Plug-in Hybrid" -> "pluginhybrid"
    return re.sub(r"[^a-z]", "", text.lower())


def coerce_fuel_type(v) -> Optional[FuelType]:
    """Map a catalog/wire spelling onto FuelType; None when it is not a known fuel."""
    if isinstance(v, FuelType):
        return v
    if not isinstance(v, str):
        return None
    return _FUEL_ALIASES.get(_squash(v))


def coerce_market_segment(v) -> Optional[MarketSegment]:
    if isinstance(v, MarketSegment):
        return v
    if not isinstance(v, str):
        return None
    return _SEGMENT_ALIASES.get(_squash(v))


def parse_efficiency(label: str) -> Optional[float]:
    """Leading number of an efficiency label ("6.2L/100km" -> 6.2); None when absent."""
    m = _EFFICIENCY_RE.search(label or "")
    return float(m.group(1)) if m else None


class VehicleProfile(BaseModel):                       # Vehicle catalog entry
    model_config = ConfigDict(frozen=True)

    brand: str                                         # Manufacturer, e.g. "Volkswagen"
    model: str                                         # Model name, e.g. "Golf GTE"
    fuel_type: FuelType = Field(validation_alias=AliasChoices("fuel_type", "fuelType"))
    market_segment: MarketSegment = Field(MarketSegment.AVERAGE,               # Size class for emission factors
                                          validation_alias=AliasChoices("market_segment", "marketSegment"))
    efficiency: str = ""                               # Consumption label per 100 km (L or kWh)

    @field_validator("fuel_type", mode="before")       # Accept catalog spellings and aliases
    @classmethod
    def _coerce_fuel_type(cls, v):
        ft = coerce_fuel_type(v)
        if ft is None:
            raise ValueError(f"unknown fuel type {v!r}")
        return ft

    @field_validator("market_segment", mode="before")
    @classmethod
    def _coerce_segment(cls, v):
        seg = coerce_market_segment(v)
        if seg is None:
            raise ValueError(f"unknown market segment {v!r}")
        return seg

    @property
    def key(self) -> str:                              # Catalog lookup key: "brand model", lower-cased
        return " ".join(f"{self.brand} {self.model}".split()).lower()

    @property
    def efficiency_value(self) -> Optional[float]:     # Energy per 100 km, None if the label is unparsable
        return parse_efficiency(self.efficiency)

    @property
    def efficiency_unit(self) -> Optional[str]:        # "L" or "kWh" (None when the label carries no unit)
        m = _EFFICIENCY_RE.search(self.efficiency or "")
        if not m or not m.group(2):
            return None
        return "kWh" if m.group(2).lower() == "kwh" else "L"
