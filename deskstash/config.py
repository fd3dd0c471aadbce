"""User settings: the git binary and log level, from the environment or an INI file."""

from __future__ import annotations

import configparser
import os
from pathlib import Path
from typing import Optional

from .errors import InvalidConfigKeyError
from .util import read_text_safe

CONFIG_ENV = "DESKSTASH_CONFIG"
GIT_ENV = "DESKSTASH_GIT"
LOG_LEVEL_ENV = "DESKSTASH_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"


def config_path() -> Path:
    """Settings file: $DESKSTASH_CONFIG, else ~/.config/deskstash/config."""
    override = os.environ.get(CONFIG_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "deskstash" / "config"


def read_config(path: Optional[Path] = None) -> configparser.ConfigParser:
    """Read the settings file. A missing or malformed file reads as empty."""
    cfg = configparser.ConfigParser()
    content = read_text_safe(path or config_path())
    if content:
        try:
            cfg.read_string(content)
        except configparser.Error:
            pass
    return cfg


def get_value(key: str, path: Optional[Path] = None) -> Optional[str]:
    """Value for a section.option key, or None if unset."""
    section, _, option = key.partition(".")
    if not section or not option or "." in option:
        raise InvalidConfigKeyError(f"invalid config key: {key!r} (expected section.option)")
    return read_config(path).get(section, option, fallback=None)


def git_executable() -> Optional[str]:
    """Configured git binary: $DESKSTASH_GIT, then git.executable. None means search PATH."""
    return os.environ.get(GIT_ENV) or get_value("git.executable")


def log_level() -> str:
    """Configured logging level name: $DESKSTASH_LOG_LEVEL, then log.level."""
    level = os.environ.get(LOG_LEVEL_ENV) or get_value("log.level") or DEFAULT_LOG_LEVEL
    return level.upper()
