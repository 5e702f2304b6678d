# Role: Streamlit chat UI.
# - Backend is authoritative (chat + snapshot).
# - Sidebar shows ONLY a human-readable profile summary.

from __future__ import annotations

import uuid
from typing import Any, Dict, Optional

import requests
import streamlit as st

BACKEND_URL = "http://127.0.0.1:8000"

_PROFILE_ROWS = (
    ("name", "Name", ""),
    ("gender", "Gender", ""),
    ("age", "Age", " years"),
    ("height", "Height", " cm"),
    ("weight", "Weight", " kg"),
)


# ----------------------------
# Session helpers
# ----------------------------
def ensure_session() -> None:
    if "session_id" not in st.session_state:
        st.session_state["session_id"] = str(uuid.uuid4())
    if "messages" not in st.session_state:
        st.session_state["messages"] = []
    if "busy" not in st.session_state:
        st.session_state["busy"] = False
    if "snapshot" not in st.session_state:
        st.session_state["snapshot"] = None
    if "calories_today" not in st.session_state:
        st.session_state["calories_today"] = 0


# ----------------------------
# Backend calls
# ----------------------------
def send_to_backend(session_id: str, message: str, calories_today: int) -> str:
    payload: Dict[str, Any] = {"sessionId": session_id, "message": message}
    if calories_today:
        payload["caloriesHistory"] = str(calories_today)

    resp = requests.post(f"{BACKEND_URL}/chat", json=payload, timeout=60)
    if resp.status_code >= 400:
        try:
            return f"Error: {resp.json().get('error', resp.text)}"
        except ValueError:
            resp.raise_for_status()
    return resp.json()["reply"]


def fetch_snapshot(session_id: str) -> Optional[Dict[str, Any]]:
    try:
        r = requests.get(f"{BACKEND_URL}/state/{session_id}", timeout=10)
        if r.status_code != 200:
            return None
        return r.json()
    except requests.RequestException:
        return None


# ----------------------------
# Sidebar: profile summary ONLY
# ----------------------------
def render_profile_summary(snapshot: Dict[str, Any]) -> None:
    profile = (snapshot or {}).get("profile") or {}
    stage = (snapshot or {}).get("stage") or "new"

    st.sidebar.caption(f"Stage: {stage}")
    for key, label, unit in _PROFILE_ROWS:
        value = profile.get(key)
        st.sidebar.markdown(f"**{label}:** {value}{unit}" if value else f"**{label}:** —")


def render_sidebar() -> None:
    st.sidebar.title("Your profile")

    if st.sidebar.button("New chat", use_container_width=True, disabled=st.session_state["busy"]):
        st.session_state["session_id"] = str(uuid.uuid4())
        st.session_state["messages"] = []
        st.session_state["snapshot"] = None
        st.rerun()

    st.session_state["calories_today"] = st.sidebar.number_input(
        "Calories eaten today (kcal)", min_value=0, max_value=10000, step=50,
        value=st.session_state["calories_today"],
    )

    st.sidebar.divider()

    snap = st.session_state.get("snapshot")
    if not snap:
        st.sidebar.info("Start chatting to build your profile.")
        return

    render_profile_summary(snap)


# ----------------------------
# Chat
# ----------------------------
def render_chat() -> None:
    for msg in st.session_state["messages"]:
        with st.chat_message(msg["role"]):
            st.write(msg["content"])


# ----------------------------
# Main
# ----------------------------
def main() -> None:
    st.set_page_config(page_title="Fitness Coach", layout="wide")

    st.title("Fitness Coach")
    st.caption("Tell me about yourself, then ask about workouts, diets, and calorie targets.")

    ensure_session()
    render_sidebar()
    render_chat()

    user_input = st.chat_input("Say hi to get started…", disabled=st.session_state["busy"])
    if not user_input:
        return

    # Echo user message immediately
    st.session_state["messages"].append({"role": "user", "content": user_input})
    with st.chat_message("user"):
        st.write(user_input)

    st.session_state["busy"] = True
    try:
        with st.spinner("Thinking..."):
            reply = send_to_backend(
                st.session_state["session_id"], user_input, st.session_state["calories_today"]
            )

        st.session_state["messages"].append({"role": "assistant", "content": reply})
        with st.chat_message("assistant"):
            st.write(reply)

        # Refresh snapshot after each turn
        st.session_state["snapshot"] = fetch_snapshot(st.session_state["session_id"])

    except requests.RequestException:
        msg = "I couldn't reach the backend. Make sure the API is running on http://127.0.0.1:8000."
        st.session_state["messages"].append({"role": "assistant", "content": msg})
        with st.chat_message("assistant"):
            st.error(msg)
    finally:
        st.session_state["busy"] = False


if __name__ == "__main__":
    main()
