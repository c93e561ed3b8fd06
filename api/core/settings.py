"""
Process configuration read from environment variables.

A `.env` file in the working directory (or any parent) is loaded first;
variables already set in the real environment win over the file.

Required values raise `ConfigError` when missing or malformed; optional ones
fall back to their defaults.
"""

from __future__ import annotations

import os

from dotenv import find_dotenv, load_dotenv


class ConfigError(RuntimeError):
    pass


def load_env_file() -> bool:
    return load_dotenv(find_dotenv(usecwd=True))


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise ConfigError("DATABASE_URL must be set.")
    return url


def http_port() -> int:
    raw = os.environ.get("HTTP_PORT", "").strip()
    if not raw:
        raise ConfigError("HTTP_PORT must be set.")
    try:
        port = int(raw)
    except ValueError as exc:
        raise ConfigError(f"HTTP_PORT must be a valid number, got {raw!r}.") from exc
    if not 0 < port < 65536:
        raise ConfigError(f"HTTP_PORT out of range: {port}.")
    return port


def http_host() -> str:
    return os.environ.get("HTTP_HOST", "127.0.0.1").strip() or "127.0.0.1"


def pool_min_size() -> int:
    return max(0, _env_int("DB_POOL_MIN_SIZE", 1))


def pool_max_size() -> int:
    return max(1, pool_min_size(), _env_int("DB_POOL_MAX_SIZE", 10))


def command_timeout() -> float:
    return _env_float("DB_COMMAND_TIMEOUT", 30.0)


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def cors_allow_origins() -> list[str]:
    raw = os.environ.get("CORS_ALLOW_ORIGINS", "*")
    origins = [item.strip() for item in raw.split(",") if item.strip()]
    return origins or ["*"]
