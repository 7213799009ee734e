"""
Environment-driven settings.

Every value has a default so the API starts without any configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw not in {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "postgres"
    db_password: str = "password"
    db_name: str = "dev_tracker"
    pool_min_size: int = 1
    pool_max_size: int = 5
    host: str = "0.0.0.0"
    port: int = 5000
    seed_sample_data: bool = True
    max_body_bytes: int = 1024 * 1024
    log_level: str = "INFO"


def load_settings() -> Settings:
    defaults = Settings()
    pool_min = max(1, _env_int("DB_POOL_MIN_SIZE", defaults.pool_min_size))
    return Settings(
        db_host=_env_str("DB_HOST", defaults.db_host),
        db_port=_env_int("DB_PORT", defaults.db_port),
        db_user=_env_str("DB_USER", defaults.db_user),
        db_password=_env_str("DB_PASSWORD", defaults.db_password),
        db_name=_env_str("DB_NAME", defaults.db_name),
        pool_min_size=pool_min,
        pool_max_size=max(pool_min, _env_int("DB_POOL_MAX_SIZE", defaults.pool_max_size)),
        host=_env_str("HOST", defaults.host),
        port=_env_int("PORT", defaults.port),
        seed_sample_data=_env_bool("SEED_SAMPLE_DATA", defaults.seed_sample_data),
        max_body_bytes=_env_int("MAX_BODY_BYTES", defaults.max_body_bytes),
        log_level=_env_str("LOG_LEVEL", defaults.log_level).upper(),
    )
