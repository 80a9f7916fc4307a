"""Persistent JSON config helpers.

Stores the small-directory threshold, disk geometry used by the deletion
query, and the directory-name matching mode. Malformed or missing config
falls back to defaults.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .fs_tree.queries import DISK_CAPACITY, REQUIRED_FREE_SPACE, SMALL_DIRECTORY_THRESHOLD

APP_NAME = "transcriptfs"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class Settings:
    """Query parameters and parsing mode for one run."""

    small_directory_threshold: int = SMALL_DIRECTORY_THRESHOLD
    disk_capacity: int = DISK_CAPACITY
    required_free_space: int = REQUIRED_FREE_SPACE
    strict_names: bool = True


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so an unwritable config never aborts a run.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _coerce_nonnegative_int(value: object, default: int) -> int:
    """Accept non-negative JSON integers; booleans and other types use ``default``."""
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    if value < 0:
        return default
    return value


def load_settings() -> Settings:
    """Load ``Settings`` from config with strict validation.

    A disk capacity smaller than the required free space is rejected and both
    values fall back to their defaults.
    """
    data = load_config()
    defaults = Settings()
    threshold = _coerce_nonnegative_int(data.get("small_directory_threshold"), defaults.small_directory_threshold)
    disk_capacity = _coerce_nonnegative_int(data.get("disk_capacity"), defaults.disk_capacity)
    required_free_space = _coerce_nonnegative_int(data.get("required_free_space"), defaults.required_free_space)
    if disk_capacity < required_free_space:
        disk_capacity = defaults.disk_capacity
        required_free_space = defaults.required_free_space

    strict_names = data.get("strict_names")
    return Settings(
        small_directory_threshold=threshold,
        disk_capacity=disk_capacity,
        required_free_space=required_free_space,
        strict_names=strict_names if isinstance(strict_names, bool) else defaults.strict_names,
    )


def save_settings(settings: Settings) -> None:
    """Persist ``settings`` while keeping unrelated config keys."""
    config = load_config()
    config["small_directory_threshold"] = max(0, int(settings.small_directory_threshold))
    config["disk_capacity"] = max(0, int(settings.disk_capacity))
    config["required_free_space"] = max(0, int(settings.required_free_space))
    config["strict_names"] = bool(settings.strict_names)
    save_config(config)
