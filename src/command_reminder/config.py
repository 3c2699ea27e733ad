"""Configuration loading from environment variables and command-reminder.toml."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from dataclasses import dataclass, field

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

from command_reminder.errors import ConfigError

APP_DIR_NAME = "command-reminder"
STORE_FILENAME = "reminders"
_CONFIG_FILENAME = "command-reminder.toml"
_FALSE_VALUES = ("0", "false", "no", "off")

# Returns the location of the reminders file.
StorePathProvider = Callable[[], Path]


def config_dir() -> Path:
    """User configuration directory ($XDG_CONFIG_HOME or ~/.config)."""
    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".config"


def default_store_path() -> Path:
    return config_dir() / APP_DIR_NAME / STORE_FILENAME


@dataclass
class ReminderConfig:
    """Top-level command-reminder configuration."""

    store_path: Path = field(default_factory=default_store_path)
    backup: bool = True
    log_level: str = "WARNING"

    def store_path_provider(self) -> StorePathProvider:
        path = self.store_path
        return lambda: path


def _parse_bool(value: str | int | bool) -> bool:
    if isinstance(value, (bool, int)):
        return bool(value)
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_VALUES
    raise ConfigError(f"Invalid value for backup: {value!r}")


def _read_toml(path: Path) -> dict:
    try:
        return tomllib.loads(path.read_text())
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Reading the config file {path} failed") from exc


def load_config(config_path: Path | None = None) -> ReminderConfig:
    """Load configuration from environment variables and optional command-reminder.toml.

    Priority: environment variables > command-reminder.toml > defaults.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = _read_toml(config_path)
    else:
        # Search current dir and the app config dir
        for candidate in [Path.cwd() / _CONFIG_FILENAME, config_dir() / APP_DIR_NAME / _CONFIG_FILENAME]:
            if candidate.exists():
                file_data = _read_toml(candidate)
                break

    store_path = os.getenv("COMMAND_REMINDER_STORE", file_data.get("store_path"))
    log_level = os.getenv("COMMAND_REMINDER_LOG_LEVEL", file_data.get("log_level", "WARNING"))
    for key, value in (("store_path", store_path), ("log_level", log_level)):
        if value is not None and not isinstance(value, str):
            raise ConfigError(f"Invalid value for {key}: {value!r}")

    return ReminderConfig(
        store_path=Path(store_path).expanduser() if store_path else default_store_path(),
        backup=_parse_bool(os.getenv("COMMAND_REMINDER_BACKUP", file_data.get("backup", True))),
        log_level=log_level,
    )
