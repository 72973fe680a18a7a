from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path resolution for persistent application data and output
artifacts, plus the text reading primitive used by the graph loader.
"""

import os
from typing import Optional

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "Verif"
UNIX_APP_DIR_NAME = ".verif"
DEFAULT_OUTPUT_SUBDIR = "graph"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Standards:
    - Windows: %LOCALAPPDATA%/Verif
    - Linux/Mac: ~/.verif

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    return os.path.abspath(path)


def get_default_output_dir() -> str:
    """Directory receiving the visual graph artifacts by default."""
    return os.path.join(get_user_data_dir(), DEFAULT_OUTPUT_SUBDIR)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion and user home shortcuts.
    Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def ensure_dir(path: str) -> str:
    """Create a directory hierarchy if missing and return it."""
    os.makedirs(path, exist_ok=True)
    return path

# -----------------------------------------------------------------------------
# FILE ACCESS API
# -----------------------------------------------------------------------------

def read_text(path: str) -> str:
    """
    Read a UTF-8 source file.

    I/O failures propagate: an unreadable component aborts the traversal.
    """
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def write_text(path: str, content: str) -> None:
    """Write a UTF-8 file, creating parent directories first."""
    ensure_dir(os.path.dirname(os.path.abspath(path)))
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
