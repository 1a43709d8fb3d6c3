from .estimate import Estimate, ValueSource
from .vehicle import VehicleProfile, FuelType, MarketSegment
from .route import RouteLeg, TravelMode, TransitKind, MODE_LABELS
from .option import TransportOption
from .trip import TripRecord, TripContext
from .filters import FilterCriteria, FilterValues, Period
from .metrics import FleetMetrics, NO_DATA
from .engine import EngineConfig

from .api_schemas import (
    OptionsRequest, OptionsResponse,
    ConfirmRequest, ConfirmResponse,
    AnalyticsRequest, AnalyticsResponse,
    FiltersRequest, FiltersResponse,
)
