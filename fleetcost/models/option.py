# Defines the TransportOption model: one comparable (time, cost, emissions, eco-flag) record per travel mode.

from typing import List                                # Type hints for transit kinds
from pydantic import BaseModel, ConfigDict, Field      # Pydantic base class and field defaults
from .estimate import Estimate
from .route import TravelMode, TransitKind


class TransportOption(BaseModel):                      # Derived, never persisted
    model_config = ConfigDict(frozen=True)

    mode: TravelMode                                   # DRIVING / TRANSIT / WALKING
    label: str                                         # "By car", "Public transport", "Walking"
    display_type: str                                  # Label incl. transit kinds, e.g. "Public Transport (Bus + Tram)"
    time_label: str                                    # "25 minutes", "1h 2 min", "2 hours"
    cost_label: str                                    # "54 CZK" or "N/A"
    emission_label: str                                # "3.1kg CO₂" or "N/A"
    is_eco_friendly: bool                              # Hybrid/electric car, transit, walking
    cost: Estimate                                     # Numeric cost in CZK
    emissions: Estimate                                # Numeric emissions in kg CO₂
    distance_km: float = 0.0                           # Leg distance the figures were computed from
    duration_seconds: int = 0                          # Leg duration
    transit_kinds: List[TransitKind] = Field(default_factory=list)
    mode_fallback: bool = False                        # Mode came from the silent DRIVING fallback
