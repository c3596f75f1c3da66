"""Centralized logging setup using loguru."""

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger

CONSOLE_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}"


def setup_logging(
    level: str = "WARNING",
    log_file: Optional[Union[str, Path]] = None,
    file_level: Optional[str] = None,
) -> None:
    """Configure loguru sinks, replacing any configured earlier.

    Args:
        level: Minimum level for the stderr sink (e.g. "DEBUG", "INFO")
        log_file: Optional log file, appended to; rotated at 5 MB, three
            files kept
        file_level: Minimum level for the file sink (defaults to ``level``)
    """
    logger.remove()
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)
    if log_file is None:
        return
    try:
        logger.add(
            str(log_file),
            level=file_level or level,
            format=FILE_FORMAT,
            rotation="5 MB",
            retention=3,
            encoding="utf-8",
        )
    except OSError as e:
        # The application still runs without its log file
        logger.warning(f"Cannot write log file {log_file}: {e}")
