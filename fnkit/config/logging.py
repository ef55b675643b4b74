"""Logging configuration and utilities using Loguru.

fnkit is a library, so its log records are disabled on import. An
application opts in by calling ``setup_loguru_logger`` (or
``logger.enable("fnkit")`` with its own sinks).

Public API:
----------
setup_loguru_logger(verbose: bool = False) -> None
    Configure Loguru sinks and enable fnkit's records

get_logger(name: str) -> Logger
    Get a context-aware logger for your module
    Usage: logger = get_logger(__name__)
"""

import sys
from typing import Any

from loguru import logger

from .settings import settings

SERVICE_NAME = "fnkit"

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================


def setup_loguru_logger(verbose: bool = False) -> None:
    """Configure Loguru logger for fnkit.

    Args:
        verbose: Enable debug level and detailed tracebacks on the console

    Note:
        - Removes default logger and sets up a console handler
        - Adds a rotating JSON file handler when ``logging.log_file`` is set
        - Enables the ``fnkit`` namespace, which is disabled on import
    """
    logger.remove()

    logger.configure(extra={"service": SERVICE_NAME, "module": "root"})

    # -------------------------------------------------------------------------
    # Console Handler
    # -------------------------------------------------------------------------
    console_level = "DEBUG" if verbose else settings.logging.console_level
    logger.add(
        sink=sys.stderr,
        level=console_level,
        format=(
            "<green>{time:HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:"
            "<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        colorize=True,
        backtrace=verbose,
        diagnose=verbose,
    )

    # -------------------------------------------------------------------------
    # File Handler
    # -------------------------------------------------------------------------
    log_file = settings.logging.log_file
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            sink=str(log_file),
            level=settings.logging.file_level,
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {extra[service]} | {extra[module]} | {name}:{function}:{line} | {message}",
            rotation="10 MB",
            retention="1 week",
            backtrace=True,
            diagnose=True,
            catch=True,
            serialize=True,
        )

    logger.enable(SERVICE_NAME)


# =============================================================================
# LOGGER FACTORY
# =============================================================================


def get_logger(name: str) -> Any:  # Use Any for Loguru logger type
    """Get a logger bound to the given module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Loguru logger bound with module and service context

    Example:
        ```python
        logger = get_logger(__name__)
        logger.debug("Chain advanced", index=2)
        ```
    """
    return logger.bind(
        module=name,
        service=SERVICE_NAME,
    )
