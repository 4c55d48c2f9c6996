"""Environment variable configuration for lookups.

Settings are loaded in priority order:
  1. Shell environment variables (highest priority)
  2. .env file in current directory
  3. ~/.lookup/.env (persistent config, set via `lookup env set`)

Run `lookup env` to see which settings are configured.
Run `lookup env set KEY value` to save a setting persistently.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv, set_key

LOOKUP_DIR = Path.home() / ".lookup"
PERSISTENT_ENV = LOOKUP_DIR / ".env"

DEFAULT_TIMEOUT = 15.0

# Load in reverse priority order (later loads don't overwrite existing)
# 1. ~/.lookup/.env (lowest priority)
if PERSISTENT_ENV.exists():
    load_dotenv(PERSISTENT_ENV)

# 2. .env in current directory
load_dotenv()

# 3. Shell env vars already set (dotenv won't overwrite)


@dataclass(frozen=True)
class Setting:
    name: str
    description: str
    default: str = ""


SETTINGS = (
    Setting("S2_API_KEY", "Semantic Scholar API key, optional (higher rate limits)"),
    Setting("LOOKUP_TIMEOUT", "Request timeout in seconds", default=f"{DEFAULT_TIMEOUT:g}"),
)

VALID_KEYS = {s.name for s in SETTINGS}


def save_key(name: str, value: str) -> Path:
    """Write ``name=value`` to ~/.lookup/.env and the current process."""
    LOOKUP_DIR.mkdir(parents=True, exist_ok=True)
    set_key(PERSISTENT_ENV, name, value, quote_mode="never")
    os.environ[name] = value
    return PERSISTENT_ENV


def check_env() -> list[tuple[Setting, bool]]:
    """Pair every known setting with whether it is set."""
    return [(s, bool(os.getenv(s.name))) for s in SETTINGS]


def get_s2_key() -> str | None:
    """S2 key is optional, returns None if not set."""
    return os.getenv("S2_API_KEY") or None


def get_timeout() -> float:
    raw = os.getenv("LOOKUP_TIMEOUT", "")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(
            f"LOOKUP_TIMEOUT must be a number of seconds, got {raw!r}. "
            "Run `lookup env set LOOKUP_TIMEOUT <seconds>` to fix it."
        ) from None
    if timeout <= 0:
        raise ValueError(f"LOOKUP_TIMEOUT must be positive, got {raw!r}.")
    return timeout
