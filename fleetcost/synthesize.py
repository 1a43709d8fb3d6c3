# Builds the per-mode comparison shown to the driver:
# - synthesize_options: one TransportOption per provider leg (DRIVING, TRANSIT, WALKING order).
# - select_option: pure lookup of the option the driver picked.
# A mode without a leg is left out rather than filled with placeholder figures.

from __future__ import annotations
import logging
from typing import Dict, List, Mapping, Optional, Tuple

from .agents.vehicle_agent import VehicleAgent
from .costing import format_cost, transit_fare, walking_cost
from .emissions import format_emissions, transit_emissions, walking_emissions
from .errors import OptionNotFound
from .models import (
    EngineConfig, Estimate, MODE_LABELS, RouteLeg, TransportOption, TravelMode, VehicleProfile,
)
from .models.route import resolve_travel_mode

log = logging.getLogger(__name__)

MODE_ORDER = (TravelMode.DRIVING, TravelMode.TRANSIT, TravelMode.WALKING)


def format_duration(minutes: int) -> str:
    """45 -> "45 minutes", 120 -> "2 hours", 62 -> "1h 2 min"."""
    if minutes < 60:
        return f"{minutes} minutes"
    hours, rest = divmod(minutes, 60)
    if rest == 0:
        return f"{hours} hour{'s' if hours > 1 else ''}"
    return f"{hours}h {rest} min"


def transit_display_type(leg: RouteLeg) -> str:
    if not leg.transit_kinds:
        return MODE_LABELS[TravelMode.TRANSIT]
    kinds = " + ".join(k.value for k in leg.transit_kinds)
    return f"Public Transport ({kinds})"


def resolve_legs(legs_by_mode: Mapping) -> Dict[TravelMode, Tuple[RouteLeg, bool]]:
    """Key legs by TravelMode; a leg reached through the DRIVING fallback never replaces a real one."""
    resolved: Dict[TravelMode, Tuple[RouteLeg, bool]] = {}
    for raw, leg in legs_by_mode.items():
        mode, fallback = resolve_travel_mode(raw)
        if mode in resolved and fallback and not resolved[mode][1]:
            continue
        if mode in resolved and not fallback and resolved[mode][1]:
            resolved[mode] = (leg, False)
            continue
        if mode in resolved:
            log.warning("Duplicate leg for %s, keeping the first", mode.value)
            continue
        resolved[mode] = (leg, fallback)
    return resolved


def _option(mode: TravelMode, leg: RouteLeg, cost: Estimate, emissions: Estimate,
            eco: bool, display_type: str, fallback: bool) -> TransportOption:
    return TransportOption(
        mode=mode,
        label=MODE_LABELS[mode],
        display_type=display_type,
        time_label=format_duration(leg.duration_minutes),
        cost_label=format_cost(cost),
        emission_label=format_emissions(emissions),
        is_eco_friendly=eco,
        cost=cost,
        emissions=emissions,
        distance_km=leg.distance_km,
        duration_seconds=leg.duration_seconds,
        transit_kinds=list(leg.transit_kinds),
        mode_fallback=fallback,
    )


def build_option(mode: TravelMode, leg: RouteLeg, vehicle: Optional[VehicleProfile],
                 cfg: Optional[EngineConfig] = None, mode_fallback: bool = False) -> TransportOption:
    cfg = cfg or EngineConfig()

    if mode == TravelMode.DRIVING:
        agent = VehicleAgent(vehicle)
        return _option(mode, leg, agent.trip_cost(leg.distance_km), agent.trip_emissions(leg.distance_km),
                       agent.is_eco_friendly, MODE_LABELS[mode], mode_fallback)

    if mode == TravelMode.TRANSIT:
        fare = transit_fare(leg.distance_km, leg.duration_minutes, leg.transit_kinds)
        return _option(mode, leg, Estimate.measured(fare), transit_emissions(cfg.transit_emission_kg),
                       True, transit_display_type(leg), mode_fallback)

    return _option(mode, leg, walking_cost(), walking_emissions(), True, MODE_LABELS[mode], mode_fallback)


def synthesize_options(legs_by_mode: Mapping, vehicle: Optional[VehicleProfile],
                       cfg: Optional[EngineConfig] = None) -> List[TransportOption]:
    resolved = resolve_legs(legs_by_mode)
    options: List[TransportOption] = []
    for mode in MODE_ORDER:
        if mode not in resolved:
            log.debug("No %s leg supplied, skipping option", mode.value)
            continue
        leg, fallback = resolved[mode]
        options.append(build_option(mode, leg, vehicle, cfg, fallback))
    return options


def select_option(options: List[TransportOption], mode) -> TransportOption:
    wanted, fallback = resolve_travel_mode(mode)
    if fallback:
        raise OptionNotFound(f"Unknown travel mode {mode!r}")
    for opt in options:
        if opt.mode == wanted:
            return opt
    raise OptionNotFound(f"No {wanted.value} option available")
