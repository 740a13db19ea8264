from __future__ import annotations

"""
Logging Configuration Models.

xtree writes the tree to stdout, so diagnostics only ever go to stderr and,
when the user sets the 'log_file' preference, to a small rotating file.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

# Level names accepted in the 'log_level' preference
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging setup for one xtree run.

    Attributes:
        level: Minimum severity shown. WARNING hides the DEBUG notes about
            skipped directories; --debug lowers it.
        console: Write records to stderr. stdout is reserved for the tree.
        log_file: Optional rotating log path taken from the 'log_file' preference.
        max_bytes: Size at which the log file rotates.
        backup_count: Rotated log files kept next to the active one.
        console_fmt: Format of stderr lines.
        file_fmt: Format of log file lines.
        datefmt: Timestamp format used in the log file.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None

    # Scans log little; a 1 MB file with two backups is plenty
    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any], debug: bool = False) -> LoggingConfig:
        """
        Build the logging setup from validated xtree settings.

        Args:
            settings: Effective configuration ('log_level', 'log_file').
            debug: Force DEBUG for this run without touching the settings.
        """
        level = "DEBUG" if debug else (settings.get("log_level") or "WARNING")
        return cls(level=level, console=True, log_file=settings.get("log_file") or None)
