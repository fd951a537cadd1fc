"""
core/chat_context.py
────────────────────────────────────────────────────────────────────────
Prompt assembly for the health assistant: the fixed system prompt, a
labelled block with the user's inputs + metrics, and the question.

`metrics` is the flat snake_case dict from `UserProfile.as_dict()`; the
browser dashboard's camelCase keys (activityLevel, bmiCategory, bodyFat)
are read too. Missing or zero values print as "N/A".
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from core.metrics import round_fixed
from core.models.profile import activity_label

_LOG = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are HealthStat AI, a professional, friendly, and encouraging health and "
    "fitness assistant integrated into a dashboard. Provide concise, accurate, and "
    "actionable advice about health, nutrition, and fitness. Use markdown formatting "
    "for readability (e.g., **bold**, *italics*, - lists, `inline code`). Keep "
    "responses relatively brief unless the user asks for detailed information. "
    'Address the user directly (e.g., "Based on your goal..."). Do not give medical '
    "advice; always suggest consulting a healthcare professional for medical concerns "
    "or before making significant changes."
)

NO_METRICS_NOTE = (
    "\nThe user has not provided their biometric data yet. You can gently remind "
    "them to fill out the form on the dashboard for personalized advice if their "
    "question seems to require it."
)

CONTEXT_INSTRUCTION = (
    "\n**Instruction:** Base your response *directly* on the user context provided "
    "above whenever the question relates to their health, diet, or fitness plan. "
    "Refer to their specific goals, calorie needs, etc."
)

NA = "N/A"


# the browser dashboard posts camelCase keys
_ALIASES = {
    "activity_level": "activityLevel",
    "bmi_category": "bmiCategory",
    "body_fat": "bodyFat",
}


def _get(metrics: Mapping[str, Any], key: str) -> Any:
    value = metrics.get(key)
    if value is None and key in _ALIASES:
        value = metrics.get(_ALIASES[key])
    return value


def _or_na(value: Any) -> Any:
    return NA if value is None else value


def _fmt(value: Any, places: int, suffix: str = "") -> str:
    """Half-up fixed decimals for truthy numbers, N/A for None / 0 / junk."""
    if not value or isinstance(value, bool):
        return NA
    try:
        return f"{round_fixed(float(value), places):.{places}f}{suffix}"
    except (TypeError, ValueError, ArithmeticError):
        return NA


def format_metrics_for_prompt(metrics: Mapping[str, Any] | None) -> str:
    if not metrics:
        _LOG.info("no metrics supplied for chat context")
        return NO_METRICS_NOTE

    micros = _get(metrics, "micronutrients") or {}
    if not isinstance(micros, Mapping):
        micros = {}
    activity = _get(metrics, "activity_level")

    lines = [
        "\n\n--- IMPORTANT USER CONTEXT (Use this data to personalize your response!) ---",
        f"- Name: {_or_na(_get(metrics, 'name'))}",
        f"- Age: {_or_na(_get(metrics, 'age'))} years",
        f"- Gender: {_or_na(_get(metrics, 'gender'))}",
        f"- Height: {_fmt(_get(metrics, 'height'), 0, ' cm')}",
        f"- Weight: {_fmt(_get(metrics, 'weight'), 1, ' kg')}",
        f"- Activity Level: Factor {_or_na(activity)} ({activity_label(activity)})",
        f"- Stated Goal: {_or_na(_get(metrics, 'goal'))}",
        f"- Calculated BMI: {_fmt(_get(metrics, 'bmi'), 1)} "
        f"({_or_na(_get(metrics, 'bmi_category'))})",
        "- Estimated Daily Calories Needed (for Goal): "
        f"{_fmt(_get(metrics, 'calories'), 0)} kcal",
        f"- Estimated Body Fat: {_fmt(_get(metrics, 'body_fat'), 1, '%')}",
        f"- Estimated Water Intake: {_or_na(_get(metrics, 'water'))} L/day",
        "- Estimated Micronutrient Needs (RDAs):",
        f"    - Zinc: {_or_na(micros.get('zinc'))} mg",
        f"    - Iron: {_or_na(micros.get('iron'))} mg",
        f"    - Magnesium: {_or_na(micros.get('magnesium'))} mg",
        f"    - Calcium: {_or_na(micros.get('calcium'))} mg",
        "--- END USER CONTEXT ---",
    ]
    return "\n".join(lines) + "\n" + CONTEXT_INSTRUCTION


def build_prompt(message: str, metrics: Mapping[str, Any] | None) -> str:
    context = format_metrics_for_prompt(metrics)
    return f"{SYSTEM_PROMPT}{context}\n\n--- User's Question ---\n{message}"
