"""
Trip-log field parsers
======================

The trip log stores human-readable labels rather than numbers. These functions
turn them back into base units for aggregation:

    parse_distance("12.4")            -> 12.4    (km)
    parse_duration("1h 2 min")        -> 3720    (seconds)
    parse_co2("850g CO₂")             -> 0.85    (kg)
    parse_cost("$5")                  -> 115.0   (CZK, fixed rate 23)
    parse_fuel_consumption("6.0L/100km")  -> Estimate(6.0, measured)

Every parser is total: malformed input yields 0 (or, for fuel consumption, the
documented fallback constant flagged as such) so one bad record never aborts an
aggregation.
"""

import logging
import re
from typing import Optional

from .models import Estimate

logger = logging.getLogger(__name__)

USD_TO_CZK = 23.0
DEFAULT_FUEL_L_PER_100KM = 6.5

_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?|\.\d+")
_LEADING_FLOAT_RE = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")
_HOURS_RE = re.compile(r"(\d+)\s*h", re.IGNORECASE)
_MINUTES_RE = re.compile(r"(\d+)\s*min", re.IGNORECASE)
_LITRES_RE = re.compile(r"(\d+(?:\.\d+)?|\.\d+)\s*L(?![a-z])")


def _first_number(text) -> Optional[float]:
    if isinstance(text, (int, float)):
        return float(text)
    m = _NUMBER_RE.search(text or "")
    return float(m.group(0)) if m else None


def parse_distance(text) -> float:
    """Leading float of the distance field (km); 0 if unparsable."""
    if isinstance(text, (int, float)):
        return float(text)
    m = _LEADING_FLOAT_RE.match(text or "")
    return float(m.group(1)) if m else 0.0


def parse_duration(text) -> int:
    """
    "1h 2 min" / "2 hours" / "45 minutes" -> seconds.
    Hours and minutes are both optional; a missing group counts as 0.
    """
    if not isinstance(text, str):
        return 0
    h = _HOURS_RE.search(text)
    m = _MINUTES_RE.search(text)
    hours = int(h.group(1)) if h else 0
    minutes = int(m.group(1)) if m else 0
    return (hours * 60 + minutes) * 60


def parse_co2(text) -> float:
    """kg CO₂; labels not mentioning "kg" are grams."""
    value = _first_number(text)
    if value is None:
        return 0.0
    if isinstance(text, (int, float)) or "kg" in text.lower():
        return value
    return value / 1000.0


def parse_cost(text, usd_rate: float = USD_TO_CZK) -> float:
    """CZK; a "$" marks dollars, converted at the fixed rate."""
    value = _first_number(text)
    if value is None:
        return 0.0
    if isinstance(text, str) and "$" in text:
        return value * usd_rate
    return value


def parse_fuel_consumption(efficiency_label, fallback: float = DEFAULT_FUEL_L_PER_100KM) -> Estimate:
    """L/100km read from a label like "6.0L/100km"; labels without a litre value get the fallback."""
    m = _LITRES_RE.search(efficiency_label) if isinstance(efficiency_label, str) else None
    if m:
        return Estimate.measured(float(m.group(1)))
    logger.debug("No litre value in efficiency label %r, using fallback %.1f", efficiency_label, fallback)
    return Estimate.fallback(fallback)
