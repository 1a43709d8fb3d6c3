# Defines the analytics filter models: the period/department/driver/vehicle selection and the dropdown values it offers.

from enum import Enum                                  # String enum for the period
from typing import List                                # Type hints for value lists
from pydantic import BaseModel, Field


class Period(str, Enum):                               # Time window of an analytics session
    TODAY = "Today"
    WEEK = "Week"
    MONTH = "Month"
    YEAR = "Year"


class FilterCriteria(BaseModel):                       # Empty string = no filter on that dimension
    period: Period = Period.TODAY
    department: str = ""
    driver_id: str = ""
    vehicle_model: str = ""


class FilterValues(BaseModel):                         # Values currently selectable, in order of first appearance
    departments: List[str] = Field(default_factory=list)
    driver_ids: List[str] = Field(default_factory=list)
    vehicle_models: List[str] = Field(default_factory=list)
