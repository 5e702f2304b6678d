# Role: Local developer CLI to interact with ChatRelay without the HTTP server.
# Useful for walking through onboarding and seeing debug output in the terminal.

from __future__ import annotations
import uuid

import fitcoach.config
fitcoach.config.load_env()

from fitcoach.core.chat_relay import ChatRelay
from fitcoach.core.errors import RelayError


def _new_session_id() -> str:
    return str(uuid.uuid4())


def main() -> None:
    # 1) Create ChatRelay
    # 2) Maintain a session_id across turns
    # 3) Route user input -> ChatRelay -> print coach output
    print("Fitness Coach CLI")
    print("Commands: /new (new session), /session (show session_id), /profile, /exit")
    print("-" * 50)

    relay = ChatRelay()
    session_id = _new_session_id()
    print(f"session_id: {session_id}")

    while True:
        try:
            user_message = input("\nYou: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not user_message:
            continue

        cmd = user_message.lower()

        if cmd in {"/exit", "exit", "quit", "/quit"}:
            print("Bye!")
            return

        if cmd in {"/new", "new"}:
            session_id = _new_session_id()
            print(f"New session_id: {session_id}")
            continue

        if cmd in {"/session", "session"}:
            print(f"session_id: {session_id}")
            continue

        if cmd == "/profile":
            session = relay.session_store.get(session_id)
            if session is None:
                print("No profile yet.")
            else:
                print(f"stage: {session.stage.value}")
                print(f"profile: {session.profile.model_dump()}")
            continue

        try:
            result = relay.handle_turn(session_id, user_message)
        except RelayError as e:
            print(f"\nError: {e.message}")
            continue
        print(f"\nCoach: {result.reply}")


if __name__ == "__main__":
    main()
