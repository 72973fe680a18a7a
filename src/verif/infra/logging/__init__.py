from __future__ import annotations

from .config import LoggingConfig, parse_level
from .core import (
    configure_logging,
    get_default_log_path,
    get_logger,
    _CONFIGURED_FLAG_ATTR,
    _QUEUE_LISTENER_ATTR,
)
from .handlers import _HANDLER_TAG_ATTR

__all__ = [
    "LoggingConfig",
    "parse_level",
    "configure_logging",
    "get_logger",
    "get_default_log_path",
]
