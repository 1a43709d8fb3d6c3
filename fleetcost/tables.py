"""Static lookup data shared read-only by every request.

FUEL_PRICES_CZK: latest Czech retail prices per energy unit, keyed by fuel type
    Benzín (Natural 95)   1 l   = 33.71 Kč
    Nafta (Diesel)        1 l   = 32.24 Kč
    Elektřina (charging)  1 kWh = 15.00 Kč
Hybrids are priced as petrol (the combustion engine is what burns fuel).

EMISSION_FACTORS: Scope 1 (tailpipe) kg CO₂e per km by market segment and fuel
type. Battery electric is exactly 0 in every segment; upstream grid emissions
are not accounted for.
"""

from types import MappingProxyType
from typing import Mapping

from .models.vehicle import FuelType, MarketSegment

CURRENCY = "CZK"

FUEL_PRICES_CZK: Mapping[FuelType, float] = MappingProxyType({
    FuelType.PETROL: 33.71,
    FuelType.DIESEL: 32.24,
    FuelType.HYBRID: 33.71,
    FuelType.PLUG_IN_HYBRID: 33.71,
    FuelType.BATTERY_ELECTRIC: 15.0,               # per kWh
})

EMISSION_FACTORS: Mapping[MarketSegment, Mapping[FuelType, float]] = MappingProxyType({
    MarketSegment.SMALL: MappingProxyType({
        FuelType.DIESEL: 0.13994,
        FuelType.PETROL: 0.1437,
        FuelType.HYBRID: 0.11274,
        FuelType.PLUG_IN_HYBRID: 0.03012,
        FuelType.BATTERY_ELECTRIC: 0.0,
    }),
    MarketSegment.MEDIUM: MappingProxyType({
        FuelType.DIESEL: 0.16807,
        FuelType.PETROL: 0.17726,
        FuelType.HYBRID: 0.1149,
        FuelType.PLUG_IN_HYBRID: 0.0812,
        FuelType.BATTERY_ELECTRIC: 0.0,
    }),
    MarketSegment.LARGE: MappingProxyType({
        FuelType.DIESEL: 0.20729,
        FuelType.PETROL: 0.26885,
        FuelType.HYBRID: 0.15486,
        FuelType.PLUG_IN_HYBRID: 0.10306,
        FuelType.BATTERY_ELECTRIC: 0.0,
    }),
    MarketSegment.AVERAGE: MappingProxyType({
        FuelType.DIESEL: 0.16984,
        FuelType.PETROL: 0.1645,
        FuelType.HYBRID: 0.12607,
        FuelType.PLUG_IN_HYBRID: 0.0936,
        FuelType.BATTERY_ELECTRIC: 0.0,
    }),
})

# Public transport fares (CZK).
RAIL_FARE_PER_KM = 1.5
SHORT_FARE_MAX_MINUTES = 30     # strictly below -> SHORT_FARE
MEDIUM_FARE_MAX_MINUTES = 90    # up to and including -> MEDIUM_FARE
SHORT_FARE = 30.0
MEDIUM_FARE = 40.0
LONG_FARE = 120.0
