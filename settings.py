from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal

IdStrategy = Literal["length", "max"]

DEFAULT_DATA_FILE_PATH = "./data/restaurants.json"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    # Storage
    data_file_path: str
    id_strategy: IdStrategy

    # Server
    host: str
    port: int
    frontend_url: str

    # Logging
    log_level: str
    debug_log_requests: bool


def get_settings() -> Settings:
    data_file_path = os.getenv("DATA_FILE_PATH", "").strip() or DEFAULT_DATA_FILE_PATH

    # Anything other than "max" keeps the length-based ids existing documents were written with.
    id_strategy: IdStrategy = "max" if os.getenv("RESTAURANT_ID_STRATEGY", "").strip().lower() == "max" else "length"

    host = os.getenv("HOST", "127.0.0.1")
    port = _env_int("PORT", 5000)
    frontend_url = (os.getenv("FRONTEND_URL", "http://localhost:3000")).rstrip("/")

    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    debug_log_requests = _env_bool("DEBUG_LOG_REQUESTS", False)

    return Settings(
        data_file_path=data_file_path,
        id_strategy=id_strategy,
        host=host,
        port=port,
        frontend_url=frontend_url,
        log_level=log_level,
        debug_log_requests=debug_log_requests,
    )
