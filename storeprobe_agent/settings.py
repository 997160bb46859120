"""
Environment settings loaded from the project .env file.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

_HERE = Path(__file__).resolve()
_PROJECT_ROOT = _HERE.parents[1]
load_dotenv(_PROJECT_ROOT / ".env", override=False)


DEFAULT_TIMEOUT_MS = 10000
# Many storefronts block or serve different markup to default client agents.
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


def _int_env(name: str, default: int, lo: int, hi: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return max(lo, min(hi, value))


def _cors_origins() -> tuple[str, ...]:
    raw = os.getenv("STOREPROBE_CORS_ORIGINS", "").strip()
    if not raw:
        return ("http://localhost:3000",)
    return tuple(o.strip() for o in raw.split(",") if o.strip())


@dataclass(frozen=True)
class Settings:
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    user_agent: str = DEFAULT_USER_AGENT
    cors_origins: tuple[str, ...] = ("http://localhost:3000",)
    log_level: str = "INFO"


def load_settings() -> Settings:
    return Settings(
        timeout_ms=_int_env("STOREPROBE_TIMEOUT_MS", DEFAULT_TIMEOUT_MS, 1000, 60000),
        user_agent=os.getenv("STOREPROBE_USER_AGENT", "").strip() or DEFAULT_USER_AGENT,
        cors_origins=_cors_origins(),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )
