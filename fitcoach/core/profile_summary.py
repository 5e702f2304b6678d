# Role: Builds the one-off summary sent when onboarding completes: BMI, weight status,
# calorie targets and beginner tips, all from a fixed template.

from __future__ import annotations

from dataclasses import dataclass

from fitcoach.models.user_profile import UserProfile
from fitcoach.utils.health_metrics import CalorieTargets, bmi_category, calc_bmi, calc_calorie_targets

BEGINNER_TIPS = (
    "Walking 30 mins daily",
    "Bodyweight squats (2 sets of 10)",
    "Light stretching or yoga",
)


@dataclass(frozen=True)
class ProfileSummary:
    name: str
    bmi: float
    weight_status: str
    targets: CalorieTargets

    def render(self) -> str:
        tips = "\n".join(f"- {tip}" for tip in BEGINNER_TIPS)
        return (
            f"Thanks, {self.name}. Your BMI is {self.bmi:.1f}, which is considered {self.weight_status}.\n"
            "Here are your daily calorie targets:\n"
            f"- Maintain weight: {self.targets.maintenance} kcal/day\n"
            f"- Weight loss: {self.targets.loss} kcal/day\n"
            f"- Weight gain: {self.targets.gain} kcal/day\n"
            "\n"
            "Beginner fitness tips:\n"
            f"{tips}"
        )


def build_profile_summary(profile: UserProfile) -> ProfileSummary:
    if not profile.is_complete():
        raise ValueError(f"Profile incomplete, missing: {profile.missing_fields()}")

    bmi = calc_bmi(profile.weight, profile.height)
    return ProfileSummary(
        name=profile.name,
        bmi=bmi,
        weight_status=bmi_category(bmi),
        targets=calc_calorie_targets(profile.weight, profile.height, profile.age, profile.is_male),
    )
