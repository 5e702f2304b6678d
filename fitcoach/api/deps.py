# Role: Process-wide singletons for the API layer. Routers depend on get_chat_relay() so tests can
# swap the relay via app.dependency_overrides.

from fitcoach.core.chat_relay import ChatRelay

chat_relay = ChatRelay()


def get_chat_relay() -> ChatRelay:
    return chat_relay
