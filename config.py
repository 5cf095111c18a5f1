"""
Configuration for PassForge.

Defaults live in AppConfig. Any of them can be overridden with a
PASSFORGE_* environment variable, e.g.

    PASSFORGE_DEFAULT_LENGTH=24 PASSFORGE_LOG_LEVEL=DEBUG python main.py
"""

import logging
import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional

ENV_PREFIX = "PASSFORGE_"

APPEARANCE_MODES = ("dark", "light")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """An environment override could not be used."""


@dataclass(frozen=True)
class AppConfig:
    # Generator slider: starting value and range
    default_length: int = 16
    min_length: int = 4
    max_length: int = 64

    # How many generated passwords the History view keeps (memory only)
    history_limit: int = 50

    # Wipe the clipboard this many seconds after a copy. 0 disables.
    clipboard_clear_seconds: int = 15

    appearance_mode: str = "dark"

    log_level: str = "INFO"
    log_file: Optional[str] = None

    def __post_init__(self):
        if not 1 <= self.min_length <= self.default_length <= self.max_length:
            raise ConfigError(
                f"Lengths must satisfy 1 <= min ({self.min_length}) <= "
                f"default ({self.default_length}) <= max ({self.max_length})."
            )
        if self.history_limit < 1:
            raise ConfigError("history_limit must be at least 1.")
        if self.clipboard_clear_seconds < 0:
            raise ConfigError("clipboard_clear_seconds cannot be negative.")
        if self.appearance_mode not in APPEARANCE_MODES:
            raise ConfigError(
                f"appearance_mode must be one of {', '.join(APPEARANCE_MODES)}, "
                f"got {self.appearance_mode!r}."
            )
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}."
            )

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """
        Build a config from PASSFORGE_* variables, falling back to defaults.

        Raises:
            ConfigError: If a variable is malformed or the result is inconsistent
        """
        if environ is None:
            environ = os.environ

        overrides = {}
        for f in fields(cls):
            raw = environ.get(ENV_PREFIX + f.name.upper())
            if raw is None or raw.strip() == "":
                continue
            raw = raw.strip()
            if f.name.endswith(("_length", "_limit", "_seconds")):
                try:
                    overrides[f.name] = int(raw)
                except ValueError:
                    raise ConfigError(f"{ENV_PREFIX}{f.name.upper()} must be an integer, got {raw!r}.")
            elif f.name == "log_level":
                overrides[f.name] = raw.upper()
            elif f.name == "appearance_mode":
                overrides[f.name] = raw.lower()
            else:
                overrides[f.name] = raw

        return cls(**overrides)


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = AppConfig()
