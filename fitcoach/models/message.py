# Role: Single transcript turn. Stored in Session.history and sent to Gemini as {role, parts:[{text}]}.
# Gemini only knows "user" and "model" roles, so the schema allows nothing else.

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, Field

Role = Literal["user", "model"]


class Turn(BaseModel):
    role: Role
    text: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def to_content(self) -> dict:
        # Key line: google-genai accepts plain dicts in place of types.Content.
        return {"role": self.role, "parts": [{"text": self.text}]}
