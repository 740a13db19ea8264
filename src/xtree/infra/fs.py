from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform resolution of the application data directory and a
failure-tolerant directory enumeration primitive. Acts as an abstraction
over the 'os' module so the analysis layer never handles raw OS errors.
"""

import logging
import os
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "xtree"
UNIX_APP_DIR_NAME = ".xtree"
HOME_ENV_VAR = "XTREE_HOME"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir(create: bool = False) -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Standards:
    - $XTREE_HOME when set
    - Windows: %LOCALAPPDATA%/xtree
    - Linux/Mac: ~/.xtree

    Args:
        create: Whether to create the directory hierarchy if missing.

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = os.environ.get(HOME_ENV_VAR, "").strip()

    # Windows specific resolution
    if not path and os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    if create:
        try:
            os.makedirs(path, exist_ok=True)
        except OSError as e:
            logger.debug(f"Unable to create data directory '{path}': {e}")

    return os.path.abspath(path)

# -----------------------------------------------------------------------------
# DIRECTORY ENUMERATION API
# -----------------------------------------------------------------------------

def list_subdirectories(path: str, sort_entries: bool = True) -> List[Tuple[str, str]]:
    """
    Enumerate the immediate subdirectories of a path.

    Symlinks pointing to directories are reported as directories. Names are
    decoded for display while the full path keeps the raw name for recursion.
    Any entry that cannot be classified is skipped; if the directory itself
    cannot be opened or iterated, whatever was collected so far is returned.

    Args:
        path: Directory to enumerate.
        sort_entries: Sort results by name instead of enumeration order.

    Returns:
        List[Tuple[str, str]]: (display name, full path) pairs of subdirectories.
    """
    found: List[Tuple[str, str]] = []

    try:
        with os.scandir(path) as it:
            for entry in it:
                if _is_directory(entry):
                    found.append((display_name(entry.name), entry.path))
    except OSError as e:
        logger.debug(f"Skipping unreadable directory '{path}': {e}")

    if sort_entries:
        found.sort(key=lambda item: item[0])
    return found


def display_name(name: str) -> str:
    """
    Decode a filesystem name for display, replacing undecodable bytes.

    Names that are not valid UTF-8 arrive surrogate-escaped and cannot be
    written to a UTF-8 stream; they are shown with U+FFFD instead.
    """
    return os.fsencode(name).decode("utf-8", "replace")

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _is_directory(entry: os.DirEntry) -> bool:
    """Classify a directory entry, treating stat failures as non-directories."""
    try:
        return entry.is_dir()
    except OSError as e:
        logger.debug(f"Skipping unreadable entry '{entry.path}': {e}")
        return False


def describe_path(path: Optional[str]) -> str:
    """Render a path for log messages, resolving it when possible."""
    if not path:
        return "<empty>"
    try:
        return os.path.abspath(path)
    except (OSError, ValueError):
        return path
