# Role: Transcript normalization before every Gemini call. Gemini rejects histories that open with a
# model turn or repeat a role, which happens after an upstream failure (user turn with no reply).
# Contract: first turn is user-authored, no two adjacent turns share a role, no empty turns.
# The stored history is never mutated; a new list is returned.

from __future__ import annotations

from typing import List, Sequence

from fitcoach.models.message import Turn

PLACEHOLDER_USER_TEXT = "Hello"


def normalize_transcript(turns: Sequence[Turn]) -> List[Turn]:
    # 1) Drop empty turns
    # 2) Collapse runs of the same role into one turn
    # 3) Prepend a placeholder user turn if the result starts with the model
    out: List[Turn] = []
    for turn in turns:
        text = (turn.text or "").strip()
        if not text:
            continue

        if out and out[-1].role == turn.role:
            prev = out[-1]
            out[-1] = Turn(role=prev.role, text=f"{prev.text}\n\n{text}", timestamp=prev.timestamp)
            continue

        out.append(Turn(role=turn.role, text=text, timestamp=turn.timestamp))

    if out and out[0].role != "user":
        out.insert(0, Turn(role="user", text=PLACEHOLDER_USER_TEXT))

    return out
