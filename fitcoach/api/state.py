# Role: Read-only transparency endpoint for the UI.
# Does NOT change any session. Only exposes the current snapshot by session_id.

from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from fitcoach.api.deps import get_chat_relay
from fitcoach.core.chat_relay import ChatRelay

router = APIRouter(tags=["state"])


class StateSnapshot(BaseModel):
    session_id: str
    stage: str
    profile: dict
    missing_fields: List[str]
    turn_count: int


@router.get("/state/{session_id}", response_model=StateSnapshot)
def get_state(session_id: str, relay: ChatRelay = Depends(get_chat_relay)):
    # Key line: lookup only, a snapshot request must never create a session.
    session = relay.session_store.get(session_id)
    if session is None:
        return JSONResponse(status_code=404, content={"error": f"Unknown session: {session_id}"})

    return StateSnapshot(
        session_id=session_id,
        stage=session.stage.value,
        profile=session.profile.model_dump(),
        missing_fields=session.profile.missing_fields(),
        turn_count=session.turn_count,
    )
