from __future__ import annotations

import os
from typing import Optional


def _env(name: str, default: str = "") -> str:
    return (os.getenv(name, default) or "").strip()


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = _env(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def load_config() -> dict:
    """
    Flask config values read from the environment.

    Store selection (STORE_BACKEND, S3_*, LOCAL_STORE_DIR) is read by
    services.storage.store_from_env, not here.
    """
    return {
        "MAX_CONTENT_LENGTH": _env_int("MAX_UPLOAD_BYTES", None),
        "DEBUG_LOG_DIR": _env("DEBUG_LOG_DIR", "storage") or "storage",
    }


def port() -> int:
    return _env_int("PORT", 8080) or 8080
