"""Logging utilities for privy (thin wrappers).

The library never installs handlers on import. Test suites that want to see
how members are resolved call ``configure_logging(verbose=True)``.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from privy.core.config import get_config

ROOT_LOGGER_NAME = "privy"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _level_value(level: Union[str, int]) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def get_logger(name: str) -> logging.Logger:
    """Get a module logger by name (no prefixing).

    Args:
        name: Logger name (typically ``__name__``).

    Returns:
        Configured logger instance.
    """
    return logging.getLogger(name)


def configure_logging(
    verbose: bool = False, level: Optional[Union[str, int]] = None
) -> logging.Logger:
    """Attach a stream handler to the package logger and set its level.

    Args:
        verbose: Log at DEBUG when True.
        level: Explicit level; overrides ``verbose`` and the configured level.

    Returns:
        The package logger.
    """
    if level is not None:
        level_value = _level_value(level)
    elif verbose:
        level_value = logging.DEBUG
    else:
        level_value = get_config().logging.level_value

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not any(getattr(handler, "_privy_handler", False) for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._privy_handler = True
        logger.addHandler(handler)
    logger.setLevel(level_value)
    return logger


def set_component_level(component: str, level: Union[str, int]) -> None:
    """Set log level for a specific component.

    Accepts either string levels (e.g., "INFO") or numeric constants, and
    either a full logger name or one relative to the package
    (``"core.accessor"``).
    """
    if component != ROOT_LOGGER_NAME and not component.startswith(f"{ROOT_LOGGER_NAME}."):
        component = f"{ROOT_LOGGER_NAME}.{component}"
    logging.getLogger(component).setLevel(_level_value(level))
