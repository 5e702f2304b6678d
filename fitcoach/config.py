# Role: Central configuration module. Loads .env into environment variables and computes runtime flags (DEBUG).
# Importers read fitcoach.config.DEBUG to control diagnostic output without threading flags through every call.

from __future__ import annotations

import os
from dotenv import load_dotenv

DEBUG: bool = False

# Key line: requests without a sessionId all share this session.
DEFAULT_SESSION_ID: str = "default"


def load_env() -> None:
    """
    Load .env into os.environ, then recompute DEBUG.
    This makes DEBUG correct even if load_env() is called after import.
    """
    global DEBUG
    load_dotenv()
    DEBUG = os.getenv("DEBUG", "0").lower() in {"1", "true", "yes"}
