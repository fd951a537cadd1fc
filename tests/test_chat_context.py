"""
Prompt assembly – pure string building, no model calls.
"""
from core.chat_context import (
    NO_METRICS_NOTE,
    SYSTEM_PROMPT,
    build_prompt,
    format_metrics_for_prompt,
)

PROFILE = {
    "name": "Alex",
    "age": 30,
    "gender": "male",
    "height": 180,
    "weight": 75,
    "activity_level": 1.55,
    "goal": "maintain",
    "bmi": 23.148,
    "bmi_category": "Normal",
    "calories": 2682,
    "body_fat": 18.478,
    "water": 2.6,
    "micronutrients": {"zinc": 11, "iron": 8, "magnesium": 400, "calcium": 1000},
}


def test_no_metrics_reminds_user():
    assert format_metrics_for_prompt(None) == NO_METRICS_NOTE
    assert format_metrics_for_prompt({}) == NO_METRICS_NOTE


def test_context_block_lines():
    ctx = format_metrics_for_prompt(PROFILE)
    for line in (
        "- Name: Alex",
        "- Age: 30 years",
        "- Height: 180 cm",
        "- Weight: 75.0 kg",
        "- Activity Level: Factor 1.55 (Moderate Activity (exercise 3-5 days/week))",
        "- Stated Goal: maintain",
        "- Calculated BMI: 23.1 (Normal)",
        "- Estimated Daily Calories Needed (for Goal): 2682 kcal",
        "- Estimated Body Fat: 18.5%",
        "- Estimated Water Intake: 2.6 L/day",
        "    - Zinc: 11 mg",
        "    - Calcium: 1000 mg",
    ):
        assert line in ctx
    assert ctx.rstrip().endswith("calorie needs, etc.")


def test_missing_values_print_na():
    ctx = format_metrics_for_prompt({"name": "Kim", "activity_level": 2.0})
    assert "- Height: N/A" in ctx
    assert "- Calculated BMI: N/A (N/A)" in ctx
    assert "Factor 2.0 (Unknown)" in ctx
    assert "    - Iron: N/A mg" in ctx


def test_build_prompt_order():
    prompt = build_prompt("How much protein?", PROFILE)
    assert prompt.startswith(SYSTEM_PROMPT)
    assert prompt.index("--- END USER CONTEXT ---") < prompt.index("--- User's Question ---")
    assert prompt.endswith("--- User's Question ---\nHow much protein?")


def test_camel_case_keys_from_dashboard():
    ctx = format_metrics_for_prompt(
        {"activityLevel": 1.725, "bmiCategory": "Overweight", "bmi": 27.0, "bodyFat": 30.0}
    )
    assert "Factor 1.725 (Very Active (exercise 6-7 days/week))" in ctx
    assert "- Calculated BMI: 27.0 (Overweight)" in ctx
    assert "- Estimated Body Fat: 30.0%" in ctx


def test_one_decimal_values_round_ties_half_up():
    ctx = format_metrics_for_prompt({"weight": 70.25, "body_fat": 18.25})
    assert "- Weight: 70.3 kg" in ctx
    assert "- Estimated Body Fat: 18.3%" in ctx
