from __future__ import annotations
from typing import Any, Dict

from pydantic import BaseModel, Field

# raw form values, anything JSON: validation happens in core.validation
# so every bad value gets the {field, error} shape
Raw = Any


class BiometricForm(BaseModel):
    unit: Raw = Field("metric", examples=["metric", "imperial"])
    name: Raw = None
    age: Raw = None
    height_cm: Raw = None
    weight_kg: Raw = None
    height_ft: Raw = None
    height_in: Raw = None
    weight_lbs: Raw = None
    gender: Raw = Field(None, examples=["male", "female"])
    activity_level: Raw = Field(None, examples=[1.2, 1.375, 1.55, 1.725, 1.9])
    goal: Raw = Field(None, examples=["lose", "maintain", "gain"])


class MicronutrientsOut(BaseModel):
    zinc: int
    iron: int
    magnesium: int
    calcium: int


class ProfileOut(BaseModel):
    """Inputs (cm / kg) merged with the derived metrics."""
    name: str
    age: int
    gender: str
    height: float
    weight: float
    activity_level: float
    goal: str
    unit: str
    bmi: float
    bmi_category: str
    bmr: float
    tdee: float
    calories: int
    body_fat: float
    water: float
    micronutrients: MicronutrientsOut


class MetricsResponse(BaseModel):
    profile: ProfileOut
    charts: Dict[str, Any]


class ValidationFailure(BaseModel):
    field: str
    error: str
