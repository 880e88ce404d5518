"""Run log: mirror siteify log records into a file for the duration of a command."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

LOGGER_NAME = "siteify"


def get_logger() -> logging.Logger:
    """Return the package-level logger that module loggers propagate to."""
    return logging.getLogger(LOGGER_NAME)


@contextmanager
def run_log_context(
    log_file: Path,
    verbose: bool = False,
) -> Generator[logging.Logger, None, None]:
    """
    Attach a file handler to the siteify logger for the duration of the context.
    Log file is UTF-8; format: timestamp [LEVEL] message.
    """
    logger = get_logger()
    previous_level = logger.level
    level = logging.DEBUG if verbose else logging.INFO
    logger.setLevel(level)

    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setLevel(level)
    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    try:
        yield logger
    finally:
        logger.removeHandler(handler)
        handler.close()
        logger.setLevel(previous_level)
