"""Logging configuration for the agentline CLI."""

from __future__ import annotations

import logging
from pathlib import Path

# Pipeline progress lines are meant to be read as-is on the terminal
CONSOLE_FORMAT = "%(message)s"
VERBOSE_CONSOLE_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(
    logger_name: str = "agentline",
    log_file: str | None = None,
    verbose: bool = False,
) -> logging.Logger:
    """
    Configure console logging for a run, plus an optional log file.

    The console shows bare progress messages ("--- Stage: designer ---");
    verbose mode lowers it to DEBUG and prefixes level and module. The log
    file always records DEBUG with timestamps and is truncated per run.

    Args:
        logger_name: Package logger that every module logger propagates to
        log_file: Path to log file (None for no file logging)
        verbose: Enable DEBUG level on console (default INFO)

    Returns:
        Configured logger instance
    """
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(
        logging.Formatter(VERBOSE_CONSOLE_FORMAT if verbose else CONSOLE_FORMAT)
    )
    handlers: list[logging.Handler] = [console_handler]

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handlers.append(file_handler)

    logger = logging.getLogger(logger_name)
    logger.setLevel(logging.DEBUG)
    # Several CLI invocations in one process must not stack handlers
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    for handler in handlers:
        logger.addHandler(handler)

    return logger
