# tests/test_metrics.py
from __future__ import annotations

import math
import pytest

from core.metrics import MetricsEngine, round_fixed
from core.models.profile import BiometricInput, BmiCategory, Gender, Goal, Micronutrients

engine = MetricsEngine()

MALE_180CM = BiometricInput(
    name="Alex",
    height_cm=180,
    weight_kg=75,
    age_years=30,
    gender=Gender.male,
    activity_factor=1.55,
    goal=Goal.maintain,
)

# ── BMI ──────────────────────────────────────────────────────────────
@pytest.mark.parametrize("height, weight", [(180, 75), (152.4, 48.2), (250, 300)])
def test_bmi_formula(height, weight):
    assert math.isclose(engine.bmi(height, weight), weight / (height / 100) ** 2, rel_tol=1e-12)


def test_bmi_non_positive_height_is_zero():
    assert engine.bmi(0, 70) == 0
    assert engine.bmi(-10, 70) == 0


@pytest.mark.parametrize(
    "bmi, category",
    [
        (18.49, BmiCategory.underweight),
        (18.5, BmiCategory.normal),
        (24.99, BmiCategory.normal),
        (25, BmiCategory.overweight),
        (29.99, BmiCategory.overweight),
        (30, BmiCategory.obese),
        (0, BmiCategory.underweight),
    ],
)
def test_bmi_category_boundaries(bmi, category):
    assert engine.bmi_category(bmi) is category


# ── BMR / TDEE / calories ───────────────────────────────────────────
def test_bmr_mifflin_male():
    expected = 10 * 75 + 6.25 * 180 - 5 * 30 + 5   # 1730.0
    assert engine.bmr(75, 180, 30, Gender.male) == expected


def test_bmr_mifflin_female():
    expected = 10 * 60 + 6.25 * 165 - 5 * 40 - 161
    assert math.isclose(engine.bmr(60, 165, 40, "female"), expected)


def test_bmr_is_not_clamped():
    assert engine.bmr(0, 0, 120, "female") < 0


def test_tdee_activity_multiplier():
    assert math.isclose(engine.tdee(1730, 1.55), 2681.5)


@pytest.mark.parametrize(
    "goal, adjustment",
    [("lose", -500), ("gain", 300), ("maintain", 0), (Goal.lose, -500), ("bulk", 0), ("", 0)],
)
def test_goal_calories_adjustment(goal, adjustment):
    tdee = 2623.375
    assert engine.goal_calories(tdee, goal) == max(1200, math.floor(tdee + adjustment + 0.5))


@pytest.mark.parametrize("tdee", [-50_000.0, -1.0, 0.0, 900.0, 1500.0])
@pytest.mark.parametrize("goal", ["lose", "maintain", "gain", "unknown"])
def test_calorie_floor_always_holds(tdee, goal):
    assert engine.goal_calories(tdee, goal) >= 1200


def test_goal_calories_rounds_half_up():
    assert engine.goal_calories(2000.5, "maintain") == 2001
    assert isinstance(engine.goal_calories(2000.4, "maintain"), int)


# ── body fat / water ────────────────────────────────────────────────
def test_body_fat_formula():
    expected = 1.20 * 23.0 + 0.23 * 40 - 5.4
    assert math.isclose(engine.body_fat(23.0, 40, "female"), expected)


@pytest.mark.parametrize(
    "bmi, age, gender, expected",
    [(5, 10, "male", 3), (60, 90, "female", 60), (60, 90, "male", 60), (0, 10, "female", 3)],
)
def test_body_fat_clamped(bmi, age, gender, expected):
    assert engine.body_fat(bmi, age, gender) == expected


def test_water_intake():
    assert engine.water(70) == 2.5
    assert engine.water(80) == 2.8
    assert engine.water(72.57472) == 2.5


# ── micronutrients ──────────────────────────────────────────────────
def test_micros_scenario_female_55():
    m = engine.micronutrients("female", 55)
    assert m.iron == 8
    assert m.calcium == 1200
    assert m.magnesium == 320
    assert m.zinc == 8


@pytest.mark.parametrize(
    "gender, age, expected",
    [
        ("male", 25, Micronutrients(zinc=11, iron=8, magnesium=400, calcium=1000)),
        ("male", 45, Micronutrients(zinc=11, iron=8, magnesium=420, calcium=1000)),
        ("male", 60, Micronutrients(zinc=11, iron=8, magnesium=420, calcium=1000)),
        ("male", 75, Micronutrients(zinc=11, iron=8, magnesium=420, calcium=1200)),
        ("male", 15, Micronutrients(zinc=11, iron=8, magnesium=420, calcium=1300)),
        ("female", 19, Micronutrients(zinc=8, iron=18, magnesium=310, calcium=1000)),
        ("female", 50, Micronutrients(zinc=8, iron=18, magnesium=320, calcium=1000)),
        ("female", 51, Micronutrients(zinc=8, iron=8, magnesium=320, calcium=1200)),
        ("female", 71, Micronutrients(zinc=8, iron=8, magnesium=320, calcium=1200)),
        ("female", 18, Micronutrients(zinc=8, iron=8, magnesium=320, calcium=1300)),
    ],
)
def test_micronutrient_steps(gender, age, expected):
    assert engine.micronutrients(gender, age) == expected


# ── compute() ───────────────────────────────────────────────────────
def test_compute_scenario_a():
    r = engine.compute(MALE_180CM)
    assert math.isclose(r.bmi, 23.148, abs_tol=1e-3)
    assert r.bmi_category is BmiCategory.normal
    assert r.bmr == 1730
    assert math.isclose(r.tdee, 2681.5)
    assert r.calories == 2682
    assert math.isclose(r.body_fat, 18.478, abs_tol=1e-3)
    assert r.water == 2.6
    assert r.micronutrients == Micronutrients(zinc=11, iron=8, magnesium=400, calcium=1000)


def test_compute_is_idempotent():
    assert engine.compute(MALE_180CM) == engine.compute(MALE_180CM)


@pytest.mark.parametrize(
    "value, places, expected",
    [(0.25, 1, 0.3), (18.25, 1, 18.3), (2.45, 1, 2.5), (2.675, 2, 2.67), (2681.5, 0, 2682.0)],
)
def test_round_fixed_matches_fixed_point_formatting(value, places, expected):
    assert round_fixed(value, places) == expected
