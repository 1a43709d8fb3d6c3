""" The RouteLeg model holds what the external mapping provider returns for one travel mode: distance, duration and, for public
transport, which kinds of vehicles the route rides on.

It:

Rejects negative distances/durations.
Normalizes provider vehicle-type names (BUS, RAIL, SUBWAY, TRAM, TROLLEYBUS, ...) to TransitKind; unknown names become Transit.
De-duplicates transit kinds while keeping the order of first appearance (used only for display).

In short: RouteLeg is the immutable input of the option synthesizer, produced once per travel mode per search. """

import logging
import math
from enum import Enum
from typing import List, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator

log = logging.getLogger(__name__)


class TravelMode(str, Enum):                           # Way of completing a trip
    DRIVING = "DRIVING"
    TRANSIT = "TRANSIT"
    WALKING = "WALKING"


class TransitKind(str, Enum):                          # Public transport vehicle kinds
    BUS = "Bus"
    TRAIN = "Train"
    SUBWAY = "Subway"
    TRAM = "Tram"
    TROLLEY = "Trolley"
    TRANSIT = "Transit"                                # Anything the provider does not classify

    @property
    def is_rail(self) -> bool:
        return self == TransitKind.TRAIN


_PROVIDER_KINDS = {
    "bus": TransitKind.BUS,
    "rail": TransitKind.TRAIN,
    "train": TransitKind.TRAIN,
    "heavyrail": TransitKind.TRAIN,
    "commutertrain": TransitKind.TRAIN,
    "highspeedtrain": TransitKind.TRAIN,
    "longdistancetrain": TransitKind.TRAIN,
    "subway": TransitKind.SUBWAY,
    "metrorail": TransitKind.SUBWAY,
    "tram": TransitKind.TRAM,
    "trolley": TransitKind.TROLLEY,
    "trolleybus": TransitKind.TROLLEY,
}

# Display labels of the three options, also stored as the trip's transport type.
MODE_LABELS = {
    TravelMode.DRIVING: "By car",
    TravelMode.TRANSIT: "Public transport",
    TravelMode.WALKING: "Walking",
}


def coerce_transit_kind(v) -> TransitKind:
    if isinstance(v, TransitKind):
        return v
    key = "".join(ch for ch in str(v).lower() if ch.isalpha())
    return _PROVIDER_KINDS.get(key, TransitKind.TRANSIT)


def resolve_travel_mode(raw) -> Tuple[TravelMode, bool]:
    """Resolve a mode name or display label; unknown values fall back to DRIVING with the flag set."""
    if isinstance(raw, TravelMode):
        return raw, False
    text = str(raw or "").strip()
    for mode in TravelMode:
        if text.upper() == mode.value or text.lower() == MODE_LABELS[mode].lower():
            return mode, False
    if text.lower().startswith("public transport"):    # "Public Transport (Bus + Tram)"
        return TravelMode.TRANSIT, False
    log.warning("Unresolved travel mode %r, falling back to DRIVING", raw)
    return TravelMode.DRIVING, True


class RouteLeg(BaseModel):                             # One provider route for one travel mode
    model_config = ConfigDict(frozen=True)

    distance_km: float = Field(..., ge=0)              # Route length in km
    duration_seconds: int = Field(..., ge=0)           # Travel time in seconds
    transit_kinds: List[TransitKind] = Field(default_factory=list)  # Ordered, de-duplicated

    @field_validator("transit_kinds", mode="before")
    @classmethod
    def _coerce_kinds(cls, v):
        if v is None:
            return []
        if isinstance(v, (str, TransitKind)):          # Single kind -> one-element list
            v = [v]
        out: List[TransitKind] = []
        for item in v:
            kind = coerce_transit_kind(item)
            if kind not in out:                        # Keep first appearance only
                out.append(kind)
        return out

    @property
    def duration_minutes(self) -> int:                 # Whole minutes, rounded up
        return math.ceil(self.duration_seconds / 60)
