"""Where Herotype keeps its config and debug log exports."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir

APP_NAME = "herotype"


def _resolve(env_var: str, default: str) -> Path:
    override = os.environ.get(env_var)
    return Path(override).resolve() if override else Path(default)


def get_data_dir() -> Path:
    """Debug log exports. Overridden by ``HEROTYPE_DATA_DIR``."""
    return _resolve("HEROTYPE_DATA_DIR", user_data_dir(APP_NAME))


def get_config_dir() -> Path:
    """``config.toml``. Overridden by ``HEROTYPE_CONFIG_DIR``."""
    return _resolve("HEROTYPE_CONFIG_DIR", user_config_dir(APP_NAME))


def get_config_path() -> Path:
    return get_config_dir() / "config.toml"


def get_debug_log_path() -> Path:
    return get_data_dir() / "debug.log"


def ensure_directories() -> None:
    for directory in (get_data_dir(), get_config_dir()):
        directory.mkdir(parents=True, exist_ok=True)
