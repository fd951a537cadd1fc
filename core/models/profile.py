"""
core/models/profile.py
────────────────────────────────────────────────────────────────────────
Value objects shared by the validator, the metrics engine and every
consumer of the current profile (API, charts, chat context).

All dataclasses are frozen: a profile is replaced wholesale, never
patched field by field.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


class Gender(str, Enum):
    male = "male"
    female = "female"


class Goal(str, Enum):
    lose = "lose"
    maintain = "maintain"
    gain = "gain"


class UnitSystem(str, Enum):
    metric = "metric"
    imperial = "imperial"


class BmiCategory(str, Enum):
    underweight = "Underweight"
    normal = "Normal"
    overweight = "Overweight"
    obese = "Obese"


# activity factor → dashboard label
ACTIVITY_LEVELS: dict[float, str] = {
    1.2: "Sedentary (little or no exercise)",
    1.375: "Light Activity (exercise 1-3 days/week)",
    1.55: "Moderate Activity (exercise 3-5 days/week)",
    1.725: "Very Active (exercise 6-7 days/week)",
    1.9: "Extreme Activity (very hard exercise/physical job)",
}


def activity_label(factor: Any) -> str:
    try:
        return ACTIVITY_LEVELS.get(float(factor), "Unknown")
    except (TypeError, ValueError):
        return "Unknown"


# ──────────────────────────────────────────────────────────────────────
#  Inputs
# ──────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class BiometricInput:
    name: str
    height_cm: float
    weight_kg: float
    age_years: int
    gender: Gender
    activity_factor: float
    goal: Goal
    unit_system: UnitSystem = UnitSystem.metric   # what the user typed in


# ──────────────────────────────────────────────────────────────────────
#  Outputs
# ──────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Micronutrients:
    zinc: int
    iron: int
    magnesium: int
    calcium: int


@dataclass(frozen=True)
class MetricsResult:
    bmi: float
    bmi_category: BmiCategory
    bmr: float
    tdee: float
    calories: int
    body_fat: float
    water: float
    micronutrients: Micronutrients


@dataclass(frozen=True)
class UserProfile:
    """Validated inputs merged with their derived metrics."""

    inputs: BiometricInput
    metrics: MetricsResult

    def as_dict(self) -> dict[str, Any]:
        """Flat JSON-ready view, the shape the chat context expects."""
        inp, met = self.inputs, self.metrics
        return {
            "name": inp.name,
            "age": inp.age_years,
            "gender": inp.gender.value,
            "height": inp.height_cm,
            "weight": inp.weight_kg,
            "activity_level": inp.activity_factor,
            "goal": inp.goal.value,
            "unit": inp.unit_system.value,
            "bmi": met.bmi,
            "bmi_category": met.bmi_category.value,
            "bmr": met.bmr,
            "tdee": met.tdee,
            "calories": met.calories,
            "body_fat": met.body_fat,
            "water": met.water,
            "micronutrients": asdict(met.micronutrients),
        }
