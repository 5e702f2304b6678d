# Role: The five onboarding fields collected before free-form chat. apply_updates() merges extracted
# values but never overwrites a field that is already set (a profile only ever grows).

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel

# Key line: this order is the onboarding question order.
PROFILE_FIELDS = ("name", "gender", "age", "height", "weight")


class UserProfile(BaseModel):
    name: Optional[str] = None
    gender: Optional[str] = None
    age: Optional[int] = None
    height: Optional[int] = None  # cm
    weight: Optional[int] = None  # kg

    def is_set(self, field: str) -> bool:
        value = getattr(self, field)
        if isinstance(value, str):
            return bool(value.strip())
        return value is not None

    def missing_fields(self) -> List[str]:
        return [f for f in PROFILE_FIELDS if not self.is_set(f)]

    def is_complete(self) -> bool:
        return not self.missing_fields()

    def filled_count(self) -> int:
        return len(PROFILE_FIELDS) - len(self.missing_fields())

    def apply_updates(self, updates: Dict[str, Any]) -> List[str]:
        # 1) Ignore empty updates and unknown keys
        # 2) Skip fields that already hold a value
        # 3) Return the names of fields actually filled
        filled: List[str] = []
        if not updates:
            return filled

        for field in PROFILE_FIELDS:
            if self.is_set(field):
                continue
            value = updates.get(field)
            if value is None:
                continue
            if isinstance(value, str):
                value = value.strip()
                if not value:
                    continue
            setattr(self, field, value)
            filled.append(field)

        return filled

    @property
    def is_male(self) -> bool:
        return (self.gender or "").strip().lower() == "male"
