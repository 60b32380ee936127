"""Logging configuration for classforge.

All modules obtain their logger through :func:`get_logger` so that output is
grouped under the ``classforge`` namespace and can be configured in one place.
"""

import logging
from pathlib import Path

from rich.logging import RichHandler

ROOT_LOGGER_NAME = "classforge"

_DEFAULT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger placed under the ``classforge`` hierarchy.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Configured logger instance.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(
    level: int | str = logging.WARNING,
    log_file: str | Path | None = None,
    use_rich: bool = True,
) -> logging.Logger:
    """Configure handlers on the package root logger.

    Args:
        level: Logging level name or number.
        log_file: Optional file receiving a plain-text copy of the log.
        use_rich: Render console output with rich when True.

    Returns:
        The package root logger.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if use_rich:
        console_handler: logging.Handler = RichHandler(
            rich_tracebacks=True, show_path=False
        )
        console_handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
        logger.addHandler(file_handler)

    logger.propagate = False
    logger.debug("Logging configured (level=%s)", logging.getLevelName(level))
    return logger
