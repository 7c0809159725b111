"""Runtime settings and logging setup."""

from __future__ import annotations

import json
import os
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from loguru import logger

SETTINGS_FILENAME: Final[str] = "calculator_settings.json"
LOG_LEVEL_ENV_VAR: Final[str] = "EXP_CALC_LOG_LEVEL"
LOG_LEVELS: Final[tuple[str, ...]] = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

DEFAULT_SETTINGS: Final[dict[str, str]] = {
    "log_level": "INFO",
}


def _normalize_level(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    level = value.strip().upper()
    return level if level in LOG_LEVELS else None


def load_settings(
    path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Load settings from a JSON file, falling back to defaults.

    A missing or unreadable file, invalid JSON, a non-object document, or an
    unknown log level all leave the defaults in place. The
    ``EXP_CALC_LOG_LEVEL`` environment variable wins over the file.
    """

    settings = dict(DEFAULT_SETTINGS)
    if path is not None:
        try:
            raw_data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            raw_data = None
        if isinstance(raw_data, Mapping):
            level = _normalize_level(raw_data.get("log_level"))
            if level:
                settings["log_level"] = level

    env = os.environ if environ is None else environ
    env_level = _normalize_level(env.get(LOG_LEVEL_ENV_VAR))
    if env_level:
        settings["log_level"] = env_level
    return settings


def setup_logging(level: str = "INFO") -> None:
    """Route loguru output to stderr at the given level."""

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="{time:HH:mm:ss} | {level:<7} | {message}",
    )
    logger.info(f"Logging initialized at {level} level")
