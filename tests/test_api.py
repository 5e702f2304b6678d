"""HTTP surface: /chat status mapping, /state snapshot, health."""

from conftest import ONBOARDING_MESSAGE, FakeGeminiClient


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_missing_message_returns_400(client):
    resp = client.post("/chat", json={})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Message is required"}


def test_blank_message_returns_400(client):
    resp = client.post("/chat", json={"message": "   ", "sessionId": "x"})
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_onboarding_reply(client):
    resp = client.post("/chat", json={"message": "hello", "sessionId": "web"})
    assert resp.status_code == 200
    assert resp.json() == {"reply": "What is your name?"}


def test_summary_then_relay(client, fake_client):
    resp = client.post("/chat", json={"message": ONBOARDING_MESSAGE, "sessionId": "web"})
    assert resp.status_code == 200
    assert "23.1" in resp.json()["reply"]

    resp = client.post(
        "/chat",
        json={"message": "Was that too much?", "sessionId": "web", "caloriesHistory": "2400"},
    )
    assert resp.status_code == 200
    assert resp.json() == {"reply": fake_client.reply}
    assert "- Today: 2400 kcal" in fake_client.calls[0]["turns"][-1].text


def test_calories_history_mapping_accepted(client, fake_client):
    client.post("/chat", json={"message": ONBOARDING_MESSAGE, "sessionId": "web"})
    resp = client.post(
        "/chat",
        json={"message": "Trend?", "sessionId": "web", "caloriesHistory": {"2024-05-01": 1900}},
    )
    assert resp.status_code == 200
    assert "- 2024-05-01: 1900 kcal" in fake_client.calls[0]["turns"][-1].text


def test_upstream_failure_returns_500(client, relay):
    relay._client = FakeGeminiClient(error=RuntimeError("down"))
    client.post("/chat", json={"message": ONBOARDING_MESSAGE, "sessionId": "web"})

    resp = client.post("/chat", json={"message": "Workout ideas?", "sessionId": "web"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to get response from Gemini."}


def test_state_snapshot(client):
    client.post("/chat", json={"message": "My name is Lena", "sessionId": "snap"})

    resp = client.get("/state/snap")
    assert resp.status_code == 200
    body = resp.json()
    assert body["stage"] == "onboarding"
    assert body["profile"]["name"] == "Lena"
    assert body["missing_fields"] == ["gender", "age", "height", "weight"]
    assert body["turn_count"] == 1


def test_state_unknown_session_is_404(client):
    resp = client.get("/state/nope")
    assert resp.status_code == 404
    assert "error" in resp.json()


def test_non_string_message_returns_400(client):
    resp = client.post("/chat", json={"message": 123, "sessionId": "x"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Message is required"}


def test_malformed_json_returns_error_body(client):
    resp = client.post("/chat", content="{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid request body"}


def test_bad_calories_history_returns_error_body(client):
    resp = client.post("/chat", json={"message": "hi", "caloriesHistory": [1800]})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid request body: caloriesHistory"}
