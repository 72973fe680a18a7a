from __future__ import annotations

"""
Logging Configuration Models.

Settings for the logging subsystem of an analysis run, built either from
CLI flags at bootstrap or from the persisted application settings once
they are loaded.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

# Library loggers kept at WARNING unless the run is in debug mode
# (werkzeug writes one INFO line per request of the preview server).
NOISY_LOGGERS: Tuple[str, ...] = ("werkzeug",)


def parse_level(level: Optional[str]) -> int:
    """
    Convert a level name to its numeric constant.

    Unknown or empty names fall back to INFO. 'WARN' is accepted.
    """
    if not level:
        return logging.INFO
    name = str(level).strip().upper()
    if name == "WARN":
        name = "WARNING"
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.INFO


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable settings for the logging subsystem.

    Two configs comparing equal produce the same handlers, which is how
    the CLI decides whether persisted settings require a reconfiguration.

    Attributes:
        level: Minimum severity captured by verif's own loggers.
        console: Write records to stderr (stdout carries the analysis output).
        log_file: Optional rotating log file.
        quiet_loggers: Library loggers capped at WARNING outside debug mode.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 3
    quiet_loggers: Tuple[str, ...] = NOISY_LOGGERS

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any], *, console: bool = True) -> "LoggingConfig":
        """
        Build the config from application settings ('log_level', 'log_file').

        An empty log_file disables file logging.
        """
        level = str(settings.get("log_level") or "INFO").strip().upper()
        return cls(level=level, console=console, log_file=settings.get("log_file") or None)

    def library_level(self) -> int:
        """Level applied to the loggers named in quiet_loggers."""
        own = parse_level(self.level)
        return own if own <= logging.DEBUG else max(own, logging.WARNING)
