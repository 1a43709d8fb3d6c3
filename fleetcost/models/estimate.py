# Defines the Estimate model: a numeric result tagged with where it came from (measured, fallback or unavailable).

from enum import Enum                                  # String enum for the value source
from typing import Optional                            # Optional numeric value
from pydantic import BaseModel, ConfigDict, model_validator


class ValueSource(str, Enum):                          # Provenance of an Estimate value
    MEASURED = "measured"                              # Computed from real inputs
    FALLBACK = "fallback"                              # Documented constant used in place of real data
    UNAVAILABLE = "unavailable"                        # Lookup miss: no value at all


class Estimate(BaseModel):                             # Numeric value + provenance
    model_config = ConfigDict(frozen=True)

    value: Optional[float] = None                      # None only when source is UNAVAILABLE
    source: ValueSource = ValueSource.MEASURED

    @model_validator(mode="after")
    def _check_value(self):
        if self.source == ValueSource.UNAVAILABLE and self.value is not None:
            raise ValueError("unavailable estimate cannot carry a value")
        if self.source != ValueSource.UNAVAILABLE and self.value is None:
            raise ValueError(f"{self.source.value} estimate needs a value")
        return self

    @classmethod
    def measured(cls, value: float) -> "Estimate":
        return cls(value=float(value), source=ValueSource.MEASURED)

    @classmethod
    def fallback(cls, value: float) -> "Estimate":
        return cls(value=float(value), source=ValueSource.FALLBACK)

    @classmethod
    def unavailable(cls) -> "Estimate":
        return cls(value=None, source=ValueSource.UNAVAILABLE)

    @property
    def is_available(self) -> bool:
        return self.source != ValueSource.UNAVAILABLE

    @property
    def is_fallback(self) -> bool:
        return self.source == ValueSource.FALLBACK
