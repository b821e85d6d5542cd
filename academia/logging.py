"""Logging configuration for the academia package."""

import logging
from typing import Optional, Union

_LOGGER_NAME = "academia"


def setup_logging(
    level: Union[int, str] = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Configure logging for the academia package.

    By default the package logs through a NullHandler (no output). Call this
    function to see registrations, enrollments and rejected operations.

    Args:
        level: Log level, as a number or a name such as "DEBUG"
        format_string: Custom log format string. If None, a compact default is used
        handler: Custom logging handler. If None, uses StreamHandler (console output)

    Example:
        >>> import academia
        >>> academia.setup_logging(level="DEBUG")
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler()

    if format_string is None:
        format_string = "[%(levelname)s] %(name)s - %(message)s"

    handler.setFormatter(logging.Formatter(format_string))
    logger.addHandler(handler)


_default_logger = logging.getLogger(_LOGGER_NAME)
_default_logger.addHandler(logging.NullHandler())
