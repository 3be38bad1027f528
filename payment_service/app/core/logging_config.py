"""
Basic logging configuration for the application.

The ``setup_logging`` function configures the root logger with a
console and an optional file handler.  Log format includes the
timestamp, logger name, log level and message.  This module ensures
that logging is set up exactly once per process.

Python's ``logging`` has no level below ``DEBUG``.  The diagnostic
endpoints need one to verify the finest threshold, so a ``TRACE``
level is registered here and accepted by ``setup_logging``.
"""

import logging
from pathlib import Path
from typing import Optional

TRACE = 5

logging.addLevelName(TRACE, "TRACE")


def resolve_level(level: str) -> int:
    """Translate a level name (``"trace"``, ``"INFO"`` ...) into its number.

    Unknown names fall back to ``INFO``.
    """
    name = level.upper()
    if name == "TRACE":
        return TRACE
    numeric_level = logging.getLevelName(name)
    if isinstance(numeric_level, int):
        return numeric_level
    return logging.INFO


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure root logger.

    If no handlers are attached to the root logger, attach a
    console handler and optionally a file handler.  The root
    logger's level is set based on the provided ``level``.

    Parameters
    ----------
    level : str
        Threshold taken from ``LOG_LEVEL``.  ``"TRACE"`` lets every
        line written by ``GET /config/log`` through; higher levels
        filter the finer lines out, which is what that endpoint is
        used to verify.  Case insensitive, unknown names mean INFO.
    logfile : Optional[str]
        Value of ``LOG_FILE``.  When set, the same lines are also
        written to this file, so the log check can be read back on
        hosts without console access.  Relative paths are resolved
        against the working directory.
    """
    logger = logging.getLogger()
    if logger.handlers:
        # Avoid configuring logging multiple times.  This can happen when
        # running tests or when ``create_app`` is called repeatedly.
        return

    logger.setLevel(resolve_level(level))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
