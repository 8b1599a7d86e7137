# config.py

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_PORT = 3000
DEFAULT_TIMEOUT_SECONDS = 15.0


def _env_raw(name: str) -> str:
    return (os.getenv(name) or "").strip()


def env_int(name: str, default: int) -> int:
    raw = _env_raw(name)
    if raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def env_float(name: str, default: float) -> float:
    raw = _env_raw(name)
    if raw == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass(frozen=True)
class Settings:
    server_address: str = ""
    port: int = DEFAULT_PORT
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    log_level: str = "INFO"
    log_file: Optional[str] = None


def load_settings() -> Settings:
    # Read after load_dotenv() so config.env values are visible.
    return Settings(
        server_address=_env_raw("CATALOG_SERVER_ADDRESS"),
        port=env_int("CATALOG_PORT", DEFAULT_PORT),
        timeout_seconds=env_float("CATALOG_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
        log_level=(_env_raw("LOG_LEVEL") or "INFO").upper(),
        log_file=_env_raw("LOG_FILE") or None,
    )
