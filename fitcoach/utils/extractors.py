# Role: Deterministic onboarding field extraction. Each profile field has its own small strategy
# (try_extract(text) -> value or None); extract_profile_updates() runs only the strategies whose
# field is still missing, so re-running on the same text never changes an existing value.

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, Sequence

from fitcoach.models.user_profile import UserProfile

GENDER_TOKENS = {"Male", "Female", "Other"}

# Capitalized words that open sentences far more often than they name anyone.
_NOT_NAMES = {
    "My", "Me", "Mine", "Hi", "Hello", "Hey", "Yes", "No", "Yeah", "Ok", "Okay",
    "The", "This", "That", "It", "Its", "Am", "Im", "Name", "Call", "Thanks", "Thank",
    "Please", "Sure", "Well", "And", "But", "So", "Just", "Years", "Old",
}

# "my name is john" is unambiguous even lowercase; "I am X" only names someone when X is capitalized.
_STRONG_INTRO_RE = re.compile(r"\b(?:my\s+name\s+is|name\s*:|call\s+me)\s+([A-Za-z]+)", re.IGNORECASE)
_WEAK_INTRO_RE = re.compile(r"\b(?:i\s+am|i'm|im|this\s+is)\s+([A-Za-z]+)", re.IGNORECASE)
_WORD_RE = re.compile(r"^[A-Z][a-z]+$")
_GENDER_RE = re.compile(r"\b(male|female|other)\b", re.IGNORECASE)
# Numbers inside dates (2024-05-01, 05/01) or decimals (1.80) are not ages; "30-year-old" still is.
_NUMBER_RE = re.compile(r"(?<![\d/.\-])(\d{1,3})(?![\d/]|-\d|\.\d)(\s*(?:cm|kg))?", re.IGNORECASE)
_HEIGHT_RE = re.compile(r"(?<!\d)(\d{2,3})\s*cm", re.IGNORECASE)
_WEIGHT_RE = re.compile(r"(?<!\d)(\d{2,3})\s*kg", re.IGNORECASE)

AGE_MIN = 5
AGE_MAX = 120


class FieldExtractor(Protocol):
    field: str

    def try_extract(self, text: str) -> Optional[Any]:
        ...


@dataclass(frozen=True)
class NameExtractor:
    field: str = "name"

    def try_extract(self, text: str) -> Optional[str]:
        # 1) Explicit introduction ("my name is John", "call me Ana")
        # 2) Otherwise the first capitalized word that is not a gender token or sentence opener
        for m in _STRONG_INTRO_RE.finditer(text):
            candidate = m.group(1).capitalize()
            if _looks_like_name(candidate):
                return candidate

        for m in _WEAK_INTRO_RE.finditer(text):
            if _looks_like_name(m.group(1)):
                return m.group(1)

        for raw in text.split():
            word = raw.strip(".,!?;:\"()[]")
            if _looks_like_name(word):
                return word
        return None


def _looks_like_name(word: str) -> bool:
    return bool(_WORD_RE.match(word)) and word not in GENDER_TOKENS and word not in _NOT_NAMES


@dataclass(frozen=True)
class GenderExtractor:
    field: str = "gender"

    def try_extract(self, text: str) -> Optional[str]:
        m = _GENDER_RE.search(text)
        return m.group(1) if m else None


@dataclass(frozen=True)
class AgeExtractor:
    field: str = "age"

    def try_extract(self, text: str) -> Optional[int]:
        # Key line: numbers tagged with cm/kg are height/weight, never age.
        for m in _NUMBER_RE.finditer(text):
            if m.group(2):
                continue
            age = int(m.group(1))
            if AGE_MIN <= age <= AGE_MAX:
                return age
        return None


@dataclass(frozen=True)
class UnitExtractor:
    field: str
    pattern: re.Pattern

    def try_extract(self, text: str) -> Optional[int]:
        m = self.pattern.search(text)
        return int(m.group(1)) if m else None


DEFAULT_EXTRACTORS: Sequence[FieldExtractor] = (
    NameExtractor(),
    GenderExtractor(),
    AgeExtractor(),
    UnitExtractor(field="height", pattern=_HEIGHT_RE),
    UnitExtractor(field="weight", pattern=_WEIGHT_RE),
)


def extract_profile_updates(
    text: str,
    profile: UserProfile,
    extractors: Sequence[FieldExtractor] = DEFAULT_EXTRACTORS,
) -> Dict[str, Any]:
    # Role: run every extractor whose field is still missing; each one is independent.
    updates: Dict[str, Any] = {}
    if not text or not text.strip():
        return updates

    for extractor in extractors:
        if profile.is_set(extractor.field):
            continue
        value = extractor.try_extract(text)
        if value is not None:
            updates[extractor.field] = value

    return updates
