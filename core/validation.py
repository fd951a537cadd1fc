"""
core/validation.py
────────────────────────────────────────────────────────────────────────
Turn the raw dashboard form (strings or numbers, metric or imperial)
into a canonical BiometricInput.

Rules run in a fixed order and the first failure wins; nothing is
aggregated. Height / weight leave this module in cm / kg whatever the
user typed.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Mapping

from core.models.profile import (
    ACTIVITY_LEVELS,
    BiometricInput,
    Gender,
    Goal,
    UnitSystem,
)

_LOG = logging.getLogger(__name__)

CM_PER_FOOT = 30.48
CM_PER_INCH = 2.54
KG_PER_POUND = 0.453592

DEFAULT_NAME = "User"


class BiometricValidationError(ValueError):
    """User-correctable input problem, tied to one form field."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


# ───────── parsing helpers ──────────────────────────────────────────
def _number(raw: Any) -> float | None:
    """Finite float from a form value, or None if blank / garbage."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
    try:
        val = float(raw)
    except (TypeError, ValueError, OverflowError):
        return None
    return val if math.isfinite(val) else None


def _between(val: float | None, lo: float, hi: float) -> bool:
    return val is not None and lo <= val <= hi


def _choice(raw: Any, enum_cls: type, field: str, message: str):
    tag = str(raw.value if hasattr(raw, "value") else raw or "").strip().lower()
    try:
        return enum_cls(tag)
    except ValueError:
        raise BiometricValidationError(field, message) from None


def _activity(raw: Any) -> float:
    val = _number(raw)
    for factor in ACTIVITY_LEVELS:
        if val is not None and math.isclose(val, factor):
            return factor
    raise BiometricValidationError(
        "activity_level",
        "Please choose an activity level from the list.",
    )


# ───────── public entrypoint ────────────────────────────────────────
def validate_biometrics(
    fields: Mapping[str, Any],
    unit: UnitSystem | str = UnitSystem.metric,
) -> BiometricInput:
    """
    Validate one form submission.

    Raises BiometricValidationError(field, message) on the first rule
    that fails; the caller must not compute metrics in that case.
    """
    try:
        unit = UnitSystem(unit if isinstance(unit, str) else "")
    except ValueError:
        raise BiometricValidationError(
            "unit", "Unit system must be 'metric' or 'imperial'."
        ) from None

    # age
    age_raw = _number(fields.get("age"))
    age = int(age_raw) if age_raw is not None else None
    if not _between(age, 10, 120):
        raise BiometricValidationError("age", "Please enter a valid age (10-120).")

    # height & weight
    if unit is UnitSystem.metric:
        height_cm = _number(fields.get("height_cm"))
        weight_kg = _number(fields.get("weight_kg"))
        if not _between(height_cm, 100, 250):
            raise BiometricValidationError(
                "height_cm", "Please enter a valid height (100-250 cm)."
            )
        if not _between(weight_kg, 30, 300):
            raise BiometricValidationError(
                "weight_kg", "Please enter a valid weight (30-300 kg)."
            )
    else:
        feet = _number(fields.get("height_ft"))
        inches = _number(fields.get("height_in"))
        pounds = _number(fields.get("weight_lbs"))
        if not (_between(feet, 3, 8) and _between(inches, 0, 11.99)):
            raise BiometricValidationError(
                "height_ft", "Please enter a valid height (3-8 ft, 0-11 in)."
            )
        if not _between(pounds, 66, 660):
            raise BiometricValidationError(
                "weight_lbs", "Please enter a valid weight (66-660 lbs)."
            )
        height_cm = feet * CM_PER_FOOT + inches * CM_PER_INCH
        weight_kg = pounds * KG_PER_POUND

    # name
    name = fields.get("name")
    name = (name.strip() if isinstance(name, str) else "") or DEFAULT_NAME

    # closed selectors
    gender = _choice(
        fields.get("gender"), Gender, "gender", "Please choose 'male' or 'female'."
    )
    activity = _activity(fields.get("activity_level"))
    goal = _choice(
        fields.get("goal"), Goal, "goal", "Please choose a goal: lose, maintain or gain."
    )

    _LOG.debug("validated %s input for %s", unit.value, name)
    return BiometricInput(
        name=name,
        height_cm=height_cm,
        weight_kg=weight_kg,
        age_years=age,
        gender=gender,
        activity_factor=activity,
        goal=goal,
        unit_system=unit,
    )
