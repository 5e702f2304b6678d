# Role: Onboarding progress gate. Decides whether the session's profile is complete and, if not,
# which single question comes next. ok=True means the relay may talk to Gemini.

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from fitcoach.models.user_profile import UserProfile
from fitcoach.utils.clarification import build_onboarding_question


@dataclass(frozen=True)
class GateResult:
    ok: bool
    missing_fields: List[str]
    next_question: Optional[str]


class ProfileGate:
    def check(self, profile: UserProfile) -> GateResult:
        # 1) Collect missing fields in onboarding order
        # 2) Map the first one to its question
        # 3) ok=True only when nothing is missing
        missing = profile.missing_fields()
        return GateResult(
            ok=not missing,
            missing_fields=missing,
            next_question=build_onboarding_question(missing),
        )
