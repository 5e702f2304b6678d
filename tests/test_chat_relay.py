"""ChatRelay turn handling: onboarding state machine, relay to Gemini, and failures."""

import pytest

from fitcoach.core.chat_relay import UPSTREAM_ERROR_MESSAGE, ChatRelay
from fitcoach.core.errors import UpstreamError, ValidationError
from fitcoach.core.session_store import SessionStore
from fitcoach.models.stage import Stage

from conftest import ONBOARDING_MESSAGE, FakeGeminiClient


def _onboard(relay, session_id="s1"):
    return relay.handle_turn(session_id, ONBOARDING_MESSAGE)


@pytest.mark.parametrize("message", [None, "", "   "])
def test_missing_message_is_rejected_without_creating_session(relay, store, message):
    with pytest.raises(ValidationError):
        relay.handle_turn("s1", message)
    assert "s1" not in store


def test_first_turn_asks_for_name(relay, fake_client):
    result = relay.handle_turn("s1", "hello there")
    assert result.reply == "What is your name?"
    assert result.stage == Stage.ONBOARDING
    assert fake_client.calls == []


def test_questions_follow_fixed_order(relay):
    assert relay.handle_turn("s1", "Sarah").reply == "What is your gender? (Male/Female/Other)"
    assert relay.handle_turn("s1", "female").reply == "What is your age? (in years)"
    assert relay.handle_turn("s1", "28").reply == "What is your height? (in cm)"
    assert relay.handle_turn("s1", "165cm").reply == "What is your weight? (in kg)"

    result = relay.handle_turn("s1", "60kg")
    assert result.stage == Stage.ACTIVE
    assert result.reply.startswith("Thanks, Sarah. Your BMI is 22.0, which is considered normal weight.")


def test_single_message_completes_onboarding(relay, store, fake_client):
    result = _onboard(relay)
    assert result.stage == Stage.ACTIVE
    assert "Your BMI is 23.1, which is considered normal weight." in result.reply
    assert "Maintain weight: 1730 kcal/day" in result.reply
    assert fake_client.calls == []

    session = store.get("s1")
    assert session.profile.model_dump() == {
        "name": "John", "gender": "Male", "age": 30, "height": 180, "weight": 75,
    }
    assert [t.role for t in session.history] == ["user", "model"]


def test_profile_fields_are_not_overwritten(relay, store):
    relay.handle_turn("s1", "My name is John")
    relay.handle_turn("s1", "Actually call me Bob, I am male")
    assert store.get("s1").profile.name == "John"
    assert store.get("s1").profile.gender == "male"


def test_active_turn_goes_to_gemini(relay, store, fake_client):
    _onboard(relay)
    result = relay.handle_turn("s1", "What should I eat for breakfast?")

    assert result.reply == fake_client.reply
    assert len(fake_client.calls) == 1

    call = fake_client.calls[0]
    assert "fitness and nutrition coach" in call["system_instruction"]
    assert "- Name: John" in call["system_instruction"]
    assert [t.role for t in call["turns"]] == ["user", "model", "user"]
    assert call["turns"][-1].text == "What should I eat for breakfast?"

    history = store.get("s1").history
    assert [t.role for t in history] == ["user", "model", "user", "model"]
    assert history[-1].text == fake_client.reply


def test_active_stage_does_not_extract(relay, store):
    _onboard(relay)
    relay.handle_turn("s1", "My friend Mike is 90kg")
    assert store.get("s1").profile.weight == 75


def test_calorie_history_prefixes_user_turn(relay, fake_client):
    _onboard(relay)
    relay.handle_turn("s1", "How am I doing?", {"2024-05-01": 2200})
    sent = fake_client.calls[0]["turns"][-1].text
    assert sent.startswith("Calorie intake history:\n- 2024-05-01: 2200 kcal")
    assert sent.endswith("How am I doing?")


def test_calorie_history_ignored_during_onboarding(relay, store):
    relay.handle_turn("s1", "Sam", "1800")
    assert store.get("s1").history[0].text == "Sam"


def test_upstream_failure_surfaces_generic_error(store):
    relay = ChatRelay(session_store=store, client=FakeGeminiClient(error=RuntimeError("quota")))
    _onboard(relay)

    with pytest.raises(UpstreamError) as exc_info:
        relay.handle_turn("s1", "Plan my week")
    assert exc_info.value.message == UPSTREAM_ERROR_MESSAGE

    # The user turn stays; the next call collapses it with the new one.
    history = store.get("s1").history
    assert [t.role for t in history] == ["user", "model", "user"]


def test_turn_after_failure_sends_alternating_transcript(store):
    failing = FakeGeminiClient(error=RuntimeError("boom"))
    relay = ChatRelay(session_store=store, client=failing)
    _onboard(relay)
    with pytest.raises(UpstreamError):
        relay.handle_turn("s1", "first try")

    failing.error = None
    relay.handle_turn("s1", "second try")

    turns = failing.calls[-1]["turns"]
    assert [t.role for t in turns] == ["user", "model", "user"]
    assert turns[-1].text == "first try\n\nsecond try"


def test_missing_session_id_uses_default(relay, store):
    result = relay.handle_turn(None, "Hi")
    assert result.session_id == "default"
    assert "default" in store


def test_sessions_are_isolated(relay, store):
    _onboard(relay, "a")
    relay.handle_turn("b", "Hello")
    assert store.get("a").stage == Stage.ACTIVE
    assert store.get("b").stage == Stage.ONBOARDING


def test_turn_count_increments(relay, store):
    relay.handle_turn("s1", "Hi")
    relay.handle_turn("s1", "Sam")
    assert store.get("s1").turn_count == 2


def test_empty_injected_store_is_used():
    store = SessionStore()
    relay = ChatRelay(session_store=store, client=FakeGeminiClient())
    assert relay.session_store is store

    relay.handle_turn("s1", "Hi")
    assert store.get("s1").turn_count == 1
