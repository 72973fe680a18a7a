from __future__ import annotations

"""
Configuration Validation Service.

Ensures that the configuration dictionary conforms to the expected schema
before a run starts. Handles type coercion, printer format normalization
and default value injection.
"""

import logging
from typing import Any, Dict, List, Tuple

from verif.domain import constants as const
from verif.domain.config import get_default_config

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    string_fields = ["format", "output_dir", "host", "log_level", "log_file"]
    bool_fields = ["serve"]

    for field in string_fields:
        merged[field] = _as_str(
            merged.get(field), defaults.get(field, ""), field, warnings, strict
        )

    for field in bool_fields:
        merged[field] = _as_bool(
            merged.get(field), defaults.get(field, False), field, warnings, strict
        )

    merged["port"] = _as_port(merged.get("port"), defaults["port"], warnings, strict)
    merged["format"] = _normalize_format(merged["format"], defaults["format"], warnings, strict)
    merged["log_level"] = _normalize_log_level(
        merged["log_level"], defaults["log_level"], warnings, strict
    )

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_port(value: Any, fallback: int, warnings: List[str], strict: bool) -> int:
    """Accept integers (or numeric strings) within the TCP port range."""
    if value is None:
        return fallback

    port: Any = value
    if isinstance(value, str) and not strict:
        try:
            port = int(value.strip())
        except ValueError:
            port = None

    if isinstance(port, int) and not isinstance(port, bool) and 0 < port < 65536:
        return port

    msg = f"Invalid field 'port': expected int in 1-65535, received {value!r}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_format(value: str, fallback: str, warnings: List[str], strict: bool) -> str:
    """Map printer format aliases to their canonical identifier."""
    canonical = const.PRINTER_FORMAT_ALIASES.get(value.strip().lower())
    if canonical:
        return canonical

    msg = f"Unknown output format '{value}'."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using '{fallback}'.")
    return fallback


def _normalize_log_level(value: str, fallback: str, warnings: List[str], strict: bool) -> str:
    """Upper-case a level name and reject names logging does not know."""
    level = value.strip().upper()
    if level == "WARN":
        level = "WARNING"
    if level in const.LOG_LEVELS:
        return level

    msg = f"Unknown log level '{value}'."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using '{fallback}'.")
    return fallback
