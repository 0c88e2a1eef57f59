"""CLI configuration helpers: roster endpoint settings and logging."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Mapping

DEFAULT_API_BASE_URL = "https://recruiting.verylongdomaintotestwith.ca/api"
DEFAULT_USER_ID = "charsheet-demo"

API_URL_ENV = "CHARSHEET_API_URL"
USER_ENV = "CHARSHEET_USER"
DEBUG_ENV = "CHARSHEET_DEBUG"


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "CharSheet"
        return Path.home() / "CharSheet"
    return Path.home() / ".config" / "charsheet"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def debug_enabled() -> bool:
    """Return True only when CHARSHEET_DEBUG is explicitly set to '1'."""
    return os.getenv(DEBUG_ENV) == "1"


def _defaults() -> Dict[str, str]:
    return {"api_base_url": DEFAULT_API_BASE_URL, "user_id": DEFAULT_USER_ID}


def _normalize(raw: Mapping[str, object]) -> Dict[str, str]:
    config = _defaults()
    for key in config:
        value = raw.get(key)
        if isinstance(value, str) and value.strip():
            config[key] = value.strip()
    return config


def load_config(path: Path | None = None) -> Dict[str, str]:
    """Load config from disk, fall back to defaults, then apply env overrides."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        raw = {}
    config = _normalize(raw if isinstance(raw, dict) else {})
    env_url = os.environ.get(API_URL_ENV)
    if env_url:
        config["api_base_url"] = env_url
    env_user = os.environ.get(USER_ENV)
    if env_user:
        config["user_id"] = env_user
    return config


def configure_logging() -> None:
    level = logging.DEBUG if debug_enabled() else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
