# Role: Minimal wrapper around the Gemini API. Centralizes model name, temperature, and error handling,
# so the relay calls a single method: generate_reply(system_instruction, turns).

import os
from typing import Optional, Sequence

from google import genai

from fitcoach.core.errors import UpstreamError
from fitcoach.models.message import Turn


class GeminiClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> None:
        # Key lines:
        # - Reads secrets from env (no secrets in code).
        # - Model and temperature are configurable for experiments.
        self.api_key = api_key or os.getenv("GEMINI_API_KEY")
        if not self.api_key:
            raise UpstreamError("Missing GEMINI_API_KEY in environment or .env")

        self.model_name = model or os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
        self.temperature = temperature if temperature is not None else float(os.getenv("GEMINI_TEMPERATURE", "0.7"))

        self.client = genai.Client(api_key=self.api_key)

    def generate_reply(self, system_instruction: str, turns: Sequence[Turn]) -> str:
        # 1) Validate transcript (must end with the new user turn)
        # 2) Call Gemini with system instruction + full transcript
        # 3) Validate non-empty response
        if not turns or turns[-1].role != "user":
            raise ValueError("Transcript must end with a user turn.")

        try:
            resp = self.client.models.generate_content(
                model=self.model_name,
                contents=[t.to_content() for t in turns],
                config={
                    "system_instruction": system_instruction,
                    "temperature": self.temperature,
                },
            )
        except Exception as e:
            raise UpstreamError(f"Gemini API call failed: {e}") from e

        text = getattr(resp, "text", None)
        if not text:
            raise UpstreamError("Gemini returned an empty response.")

        return text.strip()
