"""Configuration loading for dive-log.

Reads an optional TOML config file from the working directory to control
logging and TUI settings. Environment variables override the file. Nothing
here can change the form's fields.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:  # pragma: no cover - fallback for <3.11
    import tomli as tomllib


CONFIG_FILENAMES = ("dive-log.toml",)
ENV_LOG_LEVEL = "DIVE_LOG_LOG_LEVEL"
ENV_LOG_FILE = "DIVE_LOG_LOG_FILE"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LoggingSettings:
    level: str = "WARNING"
    file: Optional[str] = None

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)


@dataclass
class UiSettings:
    mouse: bool = False


@dataclass
class DiveLogConfig:
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    ui: UiSettings = field(default_factory=UiSettings)
    path: Optional[Path] = None


def load_config(base_dir: Path, environ: Mapping[str, str] | None = None) -> DiveLogConfig:
    """Load config from the first matching file in ``base_dir``, then apply env overrides.

    Raises ValueError for malformed TOML or invalid values.
    """
    environ = os.environ if environ is None else environ
    config = DiveLogConfig()

    for filename in CONFIG_FILENAMES:
        candidate = base_dir / filename
        if not candidate.exists():
            continue
        with candidate.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as exc:
                raise ValueError(f"{candidate}: {exc}") from exc
        config = DiveLogConfig(
            logging=_parse_logging(data.get("logging", {})),
            ui=_parse_ui(data.get("ui", {})),
            path=candidate,
        )
        break

    if environ.get(ENV_LOG_LEVEL):
        config.logging.level = _parse_level(environ[ENV_LOG_LEVEL])
    if environ.get(ENV_LOG_FILE):
        config.logging.file = environ[ENV_LOG_FILE]
    return config


def _parse_level(raw: object) -> str:
    level = str(raw).upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {raw!r}; expected one of {', '.join(LOG_LEVELS)}")
    return level


def _parse_logging(raw: dict) -> LoggingSettings:
    level = raw.get("level")
    log_file = raw.get("file")
    return LoggingSettings(
        level=_parse_level(level) if level is not None else LoggingSettings.level,
        file=str(log_file) if log_file else None,
    )


def _parse_ui(raw: dict) -> UiSettings:
    mouse = raw.get("mouse", False)
    if not isinstance(mouse, bool):
        raise ValueError(f"ui.mouse must be true or false, got {mouse!r}")
    return UiSettings(mouse=mouse)
