# Role: Orchestrator for one chat turn. It glues together:
# session lookup, onboarding extraction, the progress gate, the profile summary, and the Gemini relay.

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import fitcoach.config as config
from fitcoach.core.errors import UpstreamError, ValidationError
from fitcoach.core.profile_gate import ProfileGate
from fitcoach.core.profile_summary import build_profile_summary
from fitcoach.core.session_store import SessionStore
from fitcoach.llm.gemini_client import GeminiClient
from fitcoach.models.session import Session
from fitcoach.models.stage import Stage
from fitcoach.prompts.calorie_prompt import CaloriesHistory, build_user_turn_text
from fitcoach.prompts.system_prompt import build_system_prompt
from fitcoach.utils.extractors import extract_profile_updates
from fitcoach.utils.transcript import normalize_transcript

UPSTREAM_ERROR_MESSAGE = "Failed to get response from Gemini."


@dataclass(frozen=True)
class TurnResponse:
    session_id: str
    reply: str
    stage: Stage


class ChatRelay:
    def __init__(
        self,
        session_store: Optional[SessionStore] = None,
        profile_gate: Optional[ProfileGate] = None,
        client: Optional[GeminiClient] = None,
    ) -> None:
        # Key line: dependencies are injectable for testing/mocking.
        self.session_store = session_store if session_store is not None else SessionStore()
        self.profile_gate = profile_gate if profile_gate is not None else ProfileGate()
        # Key line: lazy-init so onboarding works without GEMINI_API_KEY.
        self._client = client

    def _get_client(self) -> GeminiClient:
        if self._client is None:
            self._client = GeminiClient()
        return self._client

    def handle_turn(
        self,
        session_id: Optional[str],
        message: Optional[str],
        calories_history: Optional[CaloriesHistory] = None,
    ) -> TurnResponse:
        # 1) Reject empty messages before touching any session
        # 2) Load or create the session
        # 3) Onboarding: extract fields, ask the next question or send the summary
        # 4) Active: relay the turn to Gemini with the full transcript
        if message is None or not str(message).strip():
            raise ValidationError("Message is required")

        session_id = session_id or config.DEFAULT_SESSION_ID
        session = self.session_store.get_or_create(session_id)
        self.session_store.increment_turn(session)

        if session.stage != Stage.ACTIVE:
            reply = self._handle_onboarding(session, message)
        else:
            reply = self._relay(session, message, calories_history)

        return TurnResponse(session_id=session_id, reply=reply, stage=session.stage)

    def _handle_onboarding(self, session: Session, message: str) -> str:
        updates = extract_profile_updates(message, session.profile)
        filled = session.profile.apply_updates(updates)
        gate = self.profile_gate.check(session.profile)

        if config.DEBUG:
            print("\n--- ONBOARDING DEBUG ---")
            print("SESSION:", session.session_id)
            print("USER MESSAGE:", message)
            print("FILLED:", filled)
            print("PROFILE:", session.profile.model_dump())
            print("MISSING:", gate.missing_fields)
            print("------------------------\n")

        if gate.ok:
            reply = build_profile_summary(session.profile).render()
        else:
            reply = gate.next_question

        self.session_store.append_turn(session.session_id, role="user", text=message.strip())
        self.session_store.append_turn(session.session_id, role="model", text=reply)
        return reply

    def _relay(self, session: Session, message: str, calories_history: Optional[CaloriesHistory]) -> str:
        # 1) Build the user turn (calorie context + message) and persist it
        # 2) Normalize the transcript and call Gemini
        # 3) Persist the reply; on failure the user turn stays, nothing is rolled back
        user_text = build_user_turn_text(message, calories_history)
        self.session_store.append_turn(session.session_id, role="user", text=user_text)

        system_prompt = build_system_prompt(session.profile, build_profile_summary(session.profile))
        transcript = normalize_transcript(session.history)

        if config.DEBUG:
            print("\n--- RELAY DEBUG ---")
            print("SESSION:", session.session_id)
            print("TURNS SENT:", len(transcript))
            print("USER TURN:", user_text)
            print("-------------------\n")

        try:
            reply = self._get_client().generate_reply(system_prompt, transcript)
        except Exception as e:
            if config.DEBUG:
                print("\n!!! GEMINI ERROR !!!")
                print(repr(e))
                print("!!! END ERROR !!!\n")
            raise UpstreamError(UPSTREAM_ERROR_MESSAGE) from e

        self.session_store.append_turn(session.session_id, role="model", text=reply)
        return reply
