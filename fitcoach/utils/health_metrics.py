# Role: Pure body-metric formulas used by the onboarding summary and the system prompt.
# No I/O, no state: every function is deterministic in its inputs.

from __future__ import annotations

import math
from dataclasses import dataclass

CALORIE_ADJUSTMENT = 500


def calc_bmi(weight_kg: float, height_cm: float) -> float:
    """
    Body Mass Index, kg / m^2, rounded to one decimal.

    Raises:
        ValueError: if height or weight is not positive.
    """
    if weight_kg is None or height_cm is None or weight_kg <= 0 or height_cm <= 0:
        raise ValueError("weight_kg and height_cm must be > 0")
    height_m = float(height_cm) / 100.0
    return round(float(weight_kg) / (height_m ** 2), 1)


def bmi_category(bmi: float) -> str:
    # Key line: each boundary is the exclusive upper bound of the lower category.
    if bmi < 18.5:
        return "underweight"
    if bmi < 25:
        return "normal weight"
    if bmi < 30:
        return "overweight"
    return "obese"


def _round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; calorie targets round .5 upwards.
    return int(math.floor(value + 0.5))


def calc_maintenance_calories(weight_kg: float, height_cm: float, age: int, is_male: bool) -> int:
    """Mifflin-St Jeor style daily maintenance estimate (kcal)."""
    sex_offset = 5 if is_male else -161
    return _round_half_up(10 * weight_kg + 6.25 * height_cm - 5 * age + sex_offset)


@dataclass(frozen=True)
class CalorieTargets:
    maintenance: int
    loss: int
    gain: int


def calc_calorie_targets(weight_kg: float, height_cm: float, age: int, is_male: bool) -> CalorieTargets:
    maintenance = calc_maintenance_calories(weight_kg, height_cm, age, is_male)
    return CalorieTargets(
        maintenance=maintenance,
        loss=maintenance - CALORIE_ADJUSTMENT,
        gain=maintenance + CALORIE_ADJUSTMENT,
    )
