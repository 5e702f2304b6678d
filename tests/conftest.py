"""
Shared test fixtures.

Provides: a fake Gemini client, a relay wired to it, and a TestClient over the real app
with the relay swapped in through dependency_overrides.
"""

from typing import List, Optional, Sequence

import pytest
from fastapi.testclient import TestClient

from fitcoach.core.chat_relay import ChatRelay
from fitcoach.core.session_store import SessionStore
from fitcoach.models.message import Turn

ONBOARDING_MESSAGE = "My name is John, I am Male, 30 years old, 180cm, 75kg"


class FakeGeminiClient:
    """Records every call and answers with a canned reply (or raises)."""

    def __init__(self, reply: str = "Try 3 sets of push-ups.", error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.calls: List[dict] = []

    def generate_reply(self, system_instruction: str, turns: Sequence[Turn]) -> str:
        self.calls.append({"system_instruction": system_instruction, "turns": list(turns)})
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_client() -> FakeGeminiClient:
    return FakeGeminiClient()


@pytest.fixture
def store() -> SessionStore:
    return SessionStore()


@pytest.fixture
def relay(store: SessionStore, fake_client: FakeGeminiClient) -> ChatRelay:
    return ChatRelay(session_store=store, client=fake_client)


@pytest.fixture
def client(relay: ChatRelay):
    from fitcoach.api.deps import get_chat_relay
    from fitcoach.main import app

    app.dependency_overrides[get_chat_relay] = lambda: relay
    yield TestClient(app)
    app.dependency_overrides.clear()
