# Role: In-memory session store. Owns lifecycle of Session objects:
# get/create by session_id and append transcript turns. Sessions live for the process lifetime.

from __future__ import annotations

import threading
from datetime import datetime, timezone
from typing import Dict, Optional

from fitcoach.models.message import Role, Turn
from fitcoach.models.session import Session


class SessionStore:
    def __init__(self) -> None:
        self._sessions: Dict[str, Session] = {}
        # Key line: guards creation only; turns on one session are not serialized.
        self._lock = threading.Lock()

    def get(self, session_id: str) -> Optional[Session]:
        return self._sessions.get(session_id)

    def create(self, session_id: str) -> Session:
        with self._lock:
            if session_id in self._sessions:
                raise KeyError(f"Session already exists: {session_id}")
            session = Session(session_id=session_id)
            self._sessions[session_id] = session
            return session

    def get_or_create(self, session_id: str) -> Session:
        # Reuse existing session or initialize a fresh one.
        session = self._sessions.get(session_id)
        if session is not None:
            return session
        with self._lock:
            return self._sessions.setdefault(session_id, Session(session_id=session_id))

    def append_turn(self, session_id: str, role: Role, text: str) -> Session:
        # 1) Append turn (history is append-only)
        # 2) Update last-seen timestamp
        session = self.get_or_create(session_id)
        session.history.append(Turn(role=role, text=text))
        session.updated_at = datetime.now(timezone.utc)
        return session

    def increment_turn(self, session: Session) -> None:
        session.turn_count += 1
        session.updated_at = datetime.now(timezone.utc)

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions
