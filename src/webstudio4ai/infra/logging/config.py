from __future__ import annotations

"""
Logging Settings.

The studio only varies the level, the console switch and the optional log
file between runs. Record layouts are fixed module constants.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Attributes:
        level: Name of the minimum level, one of the _LEVEL_MAP keys.
        console: Echo records to stderr.
        log_file: Rotating log destination, or None for console only.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled-over files kept next to the active one.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None
    max_bytes: int = 1024 * 1024
    backup_count: int = 2
