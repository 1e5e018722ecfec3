"""Configuration management for Quest Log."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from .core.tasks import SortMode

logger = logging.getLogger(__name__)

QUESTLOG_HOME = Path(os.environ.get("QUESTLOG_HOME", Path.home() / ".questlog"))
CONFIG_FILE = QUESTLOG_HOME / "config" / "questlog.conf"
DATA_DIR = QUESTLOG_HOME / "data"

LANGUAGES = ("en", "zh")
_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass
class Config:
    """
    Quest Log configuration.

    Sound, music and notification flags are stored preferences that
    `questlog settings` reports; the CLI itself plays no audio.
    """

    data_file: Path = field(default_factory=lambda: DATA_DIR / "tasks.json")
    language: str = "en"
    sort_mode: SortMode = SortMode.CREATED_TIME
    sound_enabled: bool = True
    music_enabled: bool = True
    # Permission flag only; nothing schedules notifications.
    notifications_enabled: bool = False
    seed_demo_data: bool = True


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from an unquoted value."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def _parse_bool(key: str, value: str, default: bool) -> bool:
    lowered = value.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    logger.warning(f"Ignoring {key.upper()}={value!r}: expected a boolean")
    return default


def load_config(path: Path | None = None) -> Config:
    """Load configuration from questlog.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "data_file":
                config.data_file = Path(value).expanduser()
            case "language":
                if value.lower() in LANGUAGES:
                    config.language = value.lower()
                else:
                    logger.warning(f"Unsupported LANGUAGE {value!r}, using {config.language}")
            case "sort_mode":
                try:
                    config.sort_mode = SortMode.parse(value)
                except ValueError as e:
                    logger.warning(f"Failed to parse SORT_MODE: {e}")
            case "sound_enabled":
                config.sound_enabled = _parse_bool(key, value, config.sound_enabled)
            case "music_enabled":
                config.music_enabled = _parse_bool(key, value, config.music_enabled)
            case "notifications_enabled":
                config.notifications_enabled = _parse_bool(key, value, config.notifications_enabled)
            case "seed_demo_data":
                config.seed_demo_data = _parse_bool(key, value, config.seed_demo_data)

    return config
