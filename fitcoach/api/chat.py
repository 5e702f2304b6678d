# Role: Thin HTTP adapter for the chat endpoint. Validates request/response shapes and delegates the entire
# conversation turn to ChatRelay (business logic lives in core, not in the API layer).

from typing import Dict, Optional, Union

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from fitcoach.api.deps import get_chat_relay
from fitcoach.core.chat_relay import ChatRelay

router = APIRouter(tags=["chat"])


class ChatRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Key line: message is optional here so a missing one maps to 400 {error}, not FastAPI's 422.
    message: Optional[str] = None
    session_id: Optional[str] = Field(default=None, alias="sessionId")
    calories_history: Optional[Union[str, float, Dict[str, float]]] = Field(default=None, alias="caloriesHistory")


class ChatResponse(BaseModel):
    reply: str


@router.post("/chat", response_model=ChatResponse)
def chat(req: ChatRequest, relay: ChatRelay = Depends(get_chat_relay)) -> ChatResponse:
    # 1) Forward (sessionId, message, caloriesHistory) to the relay
    # 2) Return the reply in a stable schema for UI/clients
    result = relay.handle_turn(req.session_id, req.message, req.calories_history)
    return ChatResponse(reply=result.reply)
