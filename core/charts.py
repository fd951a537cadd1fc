"""
core/charts.py
────────────────────────────────────────────────────────────────────────
Datasets behind the four dashboard charts. The browser only draws them.

  • gauge  – BMI on a 0–40 half doughnut
  • bar    – body fat %
  • pie    – 30/40/30 protein/carbs/fat split of the goal calories
  • line   – BMR → maintenance (TDEE) → goal calories
"""

from __future__ import annotations

from typing import Any, Dict

from core.metrics import BODY_FAT_MAX, round_fixed, round_half_up
from core.models.profile import BmiCategory, MetricsResult

BMI_GAUGE_MAX = 40

_BMI_COLOURS = {
    BmiCategory.underweight: "#3498db",
    BmiCategory.normal: "#2ecc71",
    BmiCategory.overweight: "#f39c12",
    BmiCategory.obese: "#e74c3c",
}

# share of goal calories, kcal per gram
MACRO_SPLIT = {
    "protein": (0.30, 4),
    "carbs": (0.40, 4),
    "fats": (0.30, 9),
}


def bmi_gauge(m: MetricsResult) -> Dict[str, Any]:
    return {
        "data": [m.bmi, max(0.0, BMI_GAUGE_MAX - m.bmi)],
        "colour": _BMI_COLOURS[m.bmi_category],
        "value_text": f"{round_fixed(m.bmi):.1f}",
        "label": m.bmi_category.value,
    }


def body_fat_bar(m: MetricsResult) -> Dict[str, Any]:
    return {
        "label": "Estimated Body Fat",
        "value": round_fixed(m.body_fat),
        "max": BODY_FAT_MAX,
    }


def macro_split(calories: float) -> Dict[str, Dict[str, float]]:
    """kcal and grams per macronutrient for a calorie target."""
    out: Dict[str, Dict[str, float]] = {}
    for name, (share, kcal_per_g) in MACRO_SPLIT.items():
        kcal = calories * share
        out[name] = {"kcal": kcal, "grams": round_half_up(kcal / kcal_per_g), "percent": round(share * 100)}
    return out


def calorie_line(m: MetricsResult) -> Dict[str, Any]:
    return {
        "labels": ["BMR (Est.)", "Maintenance (TDEE Est.)", "Your Goal"],
        "data": [round_half_up(m.bmr), round_half_up(m.tdee), m.calories],
    }


def build_charts(m: MetricsResult) -> Dict[str, Any]:
    return {
        "bmi_gauge": bmi_gauge(m),
        "body_fat": body_fat_bar(m),
        "macros": macro_split(m.calories),
        "calorie_levels": calorie_line(m),
    }
