# Role: System instruction for every Gemini call. Defines scope (fitness and nutrition only) and,
# once onboarding is done, the user's profile and calorie targets as source of truth.

from __future__ import annotations

from typing import Optional

from fitcoach.core.profile_summary import ProfileSummary
from fitcoach.models.user_profile import UserProfile

BASE_SYSTEM_PROMPT = """
You are a professional AI fitness and nutrition coach.
You can answer any question related to:

- Exercise & workouts
- Weight loss, gain, or maintenance
- Healthy eating and diets
- Nutritional plans and calorie intake
- Fitness habits, beginner tips, and meal planning

Do not answer any question unrelated to fitness, health, food, or exercise.

If a question is outside your scope (like politics, tech, etc.), respond politely that you only focus on fitness and nutrition.
""".strip()


def build_system_prompt(profile: Optional[UserProfile] = None, summary: Optional[ProfileSummary] = None) -> str:
    if profile is None or not profile.is_complete():
        return BASE_SYSTEM_PROMPT

    lines = [
        BASE_SYSTEM_PROMPT,
        "",
        "USER PROFILE (source of truth, do not ask for these again):",
        f"- Name: {profile.name}",
        f"- Gender: {profile.gender}",
        f"- Age: {profile.age} years",
        f"- Height: {profile.height} cm",
        f"- Weight: {profile.weight} kg",
    ]
    if summary is not None:
        lines.extend(
            [
                f"- BMI: {summary.bmi:.1f} ({summary.weight_status})",
                f"- Maintenance: {summary.targets.maintenance} kcal/day "
                f"(loss {summary.targets.loss}, gain {summary.targets.gain})",
            ]
        )
    return "\n".join(lines)
