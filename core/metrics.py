"""
core/metrics.py
────────────────────────────────────────────────────────────────────────
Closed-form health metrics for one validated BiometricInput:

1. BMI + category
2. BMR  (Mifflin–St Jeor)
3. TDEE (activity factor multiplier)
4. Goal-adjusted calories (1200 kcal floor)
5. Body fat % (BMI-based estimate, clamped 3–60)
6. Water intake (35 ml / kg)
7. Micronutrient RDAs (zinc, iron, magnesium, calcium)

Everything here is pure. Inputs are expected to have passed
`core.validation`; unknown gender / goal strings fall back silently
(non-male branch, maintain branch) instead of raising.
"""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from core.models.profile import (
    BiometricInput,
    BmiCategory,
    Gender,
    Goal,
    Micronutrients,
    MetricsResult,
)

Logger = logging.getLogger(__name__)

CALORIE_FLOOR = 1200
BODY_FAT_MIN, BODY_FAT_MAX = 3.0, 60.0
WATER_ML_PER_KG = 35


def _tag(value: Enum | str) -> str:
    return value.value if isinstance(value, Enum) else value


def _is_male(gender: Gender | str) -> bool:
    return _tag(gender) == Gender.male.value


def round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def round_fixed(x: float, places: int = 1) -> float:
    """Half-up on the exact float value, like a fixed-point formatter."""
    step = Decimal(1).scaleb(-places)
    return float(Decimal(x).quantize(step, rounding=ROUND_HALF_UP))


def _in(age: int, lo: int, hi: int) -> bool:
    return lo <= age <= hi


# ──────────────────────────────────────────────────────────────────────
#  Engine
# ──────────────────────────────────────────────────────────────────────
class MetricsEngine:
    """Source-of-truth for every number the dashboard shows."""

    _GOAL_ADJUSTMENT = {
        Goal.lose.value: -500,
        Goal.gain.value: 300,
        Goal.maintain.value: 0,
    }

    # --------------- public entrypoint --------------------------------
    def compute(self, u: BiometricInput) -> MetricsResult:
        bmi = self.bmi(u.height_cm, u.weight_kg)
        bmr = self.bmr(u.weight_kg, u.height_cm, u.age_years, u.gender)
        tdee = self.tdee(bmr, u.activity_factor)
        result = MetricsResult(
            bmi=bmi,
            bmi_category=self.bmi_category(bmi),
            bmr=bmr,
            tdee=tdee,
            calories=self.goal_calories(tdee, u.goal),
            body_fat=self.body_fat(bmi, u.age_years, u.gender),
            water=self.water(u.weight_kg),
            micronutrients=self.micronutrients(u.gender, u.age_years),
        )
        Logger.debug("metrics for %s: %s", u.name, result)
        return result

    # --------------- BMI ----------------------------------------------
    def bmi(self, height_cm: float, weight_kg: float) -> float:
        if height_cm <= 0:
            return 0.0
        height_m = height_cm / 100
        return weight_kg / (height_m * height_m)

    def bmi_category(self, bmi: float) -> BmiCategory:
        if bmi < 18.5:
            return BmiCategory.underweight
        if bmi < 25:
            return BmiCategory.normal
        if bmi < 30:
            return BmiCategory.overweight
        return BmiCategory.obese

    # --------------- BMR / TDEE / calories ----------------------------
    def bmr(self, weight_kg: float, height_cm: float, age: int, gender: Gender | str) -> float:
        base = 10 * weight_kg + 6.25 * height_cm - 5 * age
        return base + (5 if _is_male(gender) else -161)

    def tdee(self, bmr: float, activity_factor: float) -> float:
        return bmr * activity_factor

    def goal_calories(self, tdee: float, goal: Goal | str) -> int:
        adjustment = self._GOAL_ADJUSTMENT.get(_tag(goal), 0)
        return max(CALORIE_FLOOR, round_half_up(tdee + adjustment))

    # --------------- body composition / hydration ---------------------
    def body_fat(self, bmi: float, age: int, gender: Gender | str) -> float:
        sex = 1 if _is_male(gender) else 0
        pct = 1.20 * bmi + 0.23 * age - 10.8 * sex - 5.4
        return max(BODY_FAT_MIN, min(BODY_FAT_MAX, pct))

    def water(self, weight_kg: float) -> float:
        """Litres per day, one decimal."""
        return round_fixed(weight_kg * WATER_ML_PER_KG / 1000)

    # --------------- micronutrients (mg/day) --------------------------
    def micronutrients(self, gender: Gender | str, age: int) -> Micronutrients:
        if _is_male(gender):
            zinc = 11
            iron = 8
            magnesium = 400 if _in(age, 19, 30) else 420
        else:
            zinc = 8
            iron = 18 if _in(age, 19, 50) else 8
            magnesium = 310 if _in(age, 19, 30) else 320

        if _in(age, 19, 50):
            calcium = 1000
        elif _in(age, 51, 70):
            calcium = 1000 if _is_male(gender) else 1200
        elif age > 70:
            calcium = 1200
        else:  # under 19
            calcium = 1300

        return Micronutrients(zinc=zinc, iron=iron, magnesium=magnesium, calcium=calcium)
