# Role: Deterministic onboarding questions. Converts the missing profile fields into the single
# next question to ask, always in the fixed order name, gender, age, height, weight.

from __future__ import annotations

from typing import List, Optional

import fitcoach.config as config

ONBOARDING_QUESTIONS = (
    ("name", "What is your name?"),
    ("gender", "What is your gender? (Male/Female/Other)"),
    ("age", "What is your age? (in years)"),
    ("height", "What is your height? (in cm)"),
    ("weight", "What is your weight? (in kg)"),
)


def build_onboarding_question(missing_fields: List[str]) -> Optional[str]:
    # Step 1: log missing fields in debug mode (helps trace onboarding state).
    if config.DEBUG:
        print("ONBOARDING missing_fields:", missing_fields)

    if not missing_fields:
        return None

    # Step 2: walk the fixed order, not the caller's list order.
    missing = set(missing_fields)
    for field, question in ONBOARDING_QUESTIONS:
        if field in missing:
            return question

    return None
