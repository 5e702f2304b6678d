# Role: Per-session conversation stage. NEW -> ONBOARDING -> ACTIVE, driven only by profile completeness.

from enum import Enum


class Stage(str, Enum):
    NEW = "new"
    ONBOARDING = "onboarding"
    ACTIVE = "active"
