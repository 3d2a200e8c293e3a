import os
from typing import Optional

def env(name: str, default: str = "") -> str:
    # Unset and blank both mean "use the default"
    return (os.getenv(name) or "").strip() or default

def env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = env(name, "")
    if raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default

DEFAULT_BASE_URL = "https://api.superstate.com"

SERVICE_NAME = env("SERVICE_NAME", "superstate-client")
SERVICE_VERSION = "0.1.0"

# Env var names only; values are read when a client is built, never at import time.
API_KEY_VAR = "SUPERSTATE_API_KEY"
API_SECRET_VAR = "SUPERSTATE_API_SECRET"
BASE_URL_VAR = "SUPERSTATE_BASE_URL"
TIMEOUT_VAR = "SUPERSTATE_TIMEOUT"
