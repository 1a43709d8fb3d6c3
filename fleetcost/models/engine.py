# Defines the policy constants of the engine that a caller may override per request.

from pydantic import BaseModel, Field


class EngineConfig(BaseModel):
    usd_to_czk: float = Field(23.0, gt=0)                      # Fixed exchange rate for "$" cost labels
    default_fuel_l_per_100km: float = Field(6.5, ge=0)         # Consumption used when a label has no "L" value
    tree_absorption_kg_per_year: float = Field(21.0, gt=0)     # Policy figure (1 tree ≈ 21 kg CO₂/year), not a physical law
    transit_emission_kg: float = Field(0.3, ge=0)              # Illustrative per-trip transit emissions, not a model
