# Role: Per-session state container. Holds the growing UserProfile and the append-only transcript.

from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, Field

from fitcoach.models.message import Turn
from fitcoach.models.stage import Stage
from fitcoach.models.user_profile import UserProfile


class Session(BaseModel):
    session_id: str
    profile: UserProfile = Field(default_factory=UserProfile)
    history: List[Turn] = Field(default_factory=list)

    turn_count: int = 0

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def stage(self) -> Stage:
        # Key line: stage is derived, never stored, so it cannot drift from the profile.
        if self.profile.is_complete():
            return Stage.ACTIVE
        if self.profile.filled_count() == 0 and not self.history:
            return Stage.NEW
        return Stage.ONBOARDING
