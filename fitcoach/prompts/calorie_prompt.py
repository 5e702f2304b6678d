# Role: Calorie-history context prepended to a user turn. Clients send either a single value
# ("1800" / 1800) or a {date: kcal} mapping; both collapse into one list of (label, kcal) entries.

from __future__ import annotations

from typing import Dict, List, Optional, Tuple, Union

CaloriesHistory = Union[str, int, float, Dict[str, Union[int, float, str]]]


def _fmt_kcal(value: Union[int, float, str]) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def canonical_calorie_entries(calories_history: Optional[CaloriesHistory]) -> List[Tuple[str, str]]:
    # 1) None / blank -> no entries
    # 2) Scalar -> single "Today" entry
    # 3) Mapping -> one entry per date, sorted by date key
    if calories_history is None:
        return []

    if isinstance(calories_history, dict):
        entries: List[Tuple[str, str]] = []
        for day in sorted(calories_history):
            kcal = _fmt_kcal(calories_history[day])
            if kcal:
                entries.append((str(day).strip(), kcal))
        return entries

    kcal = _fmt_kcal(calories_history)
    return [("Today", kcal)] if kcal else []


def build_calorie_context(calories_history: Optional[CaloriesHistory]) -> str:
    entries = canonical_calorie_entries(calories_history)
    if not entries:
        return ""

    lines = ["Calorie intake history:"]
    lines.extend(f"- {label}: {kcal} kcal" for label, kcal in entries)
    return "\n".join(lines)


def build_user_turn_text(message: str, calories_history: Optional[CaloriesHistory] = None) -> str:
    context = build_calorie_context(calories_history)
    message = message.strip()
    if not context:
        return message
    return f"{context}\n\n{message}"
