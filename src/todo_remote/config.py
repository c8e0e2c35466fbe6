# src/todo_remote/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is read from the network or disk at import time except .env.
- Invalid numbers fall back to defaults instead of crashing startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

DEFAULT_SERVER_URL = "https://ktor-jib-57lqbht3qa-de.a.run.app"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Backend ----
    server_url: str
    service_latency_ms: int

    # ---- HTTP client ----
    http_connect_timeout: float
    http_read_timeout: float
    http_log_bodies: bool

    @property
    def service_latency_seconds(self) -> float:
        return self.service_latency_ms / 1000.0

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo-remote").strip() or "todo-remote"
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo"))

        server_url = _env(_k("SERVER_URL"), DEFAULT_SERVER_URL).strip() or DEFAULT_SERVER_URL
        # Trailing slash would produce "//api/tasks" once paths are joined.
        server_url = server_url.rstrip("/")

        service_latency_ms = max(0, _env_int(_k("SERVICE_LATENCY_MS"), 2000))

        connect_timeout = _env_float(_k("HTTP_CONNECT_TIMEOUT_SECONDS"), 5.0)
        read_timeout = _env_float(_k("HTTP_READ_TIMEOUT_SECONDS"), 25.0)
        log_bodies = _env_bool(_k("HTTP_LOG_BODIES"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            server_url=server_url,
            service_latency_ms=service_latency_ms,
            http_connect_timeout=connect_timeout,
            http_read_timeout=read_timeout,
            http_log_bodies=log_bodies,
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    """Load settings once (after .env) and cache them."""
    global _settings
    if _settings is None:
        load_dotenv(override=False)
        _settings = Settings.from_env()
    return _settings
