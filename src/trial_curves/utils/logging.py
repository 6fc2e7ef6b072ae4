"""
Logging utilities for the trial_curves library.

Library modules only call ``get_logger(__name__)``. Scripts and the CLI call
``configure_logging()`` to attach a stderr handler to the ``trial_curves``
logger; the root logger is never touched.

Example Usage
-------------
In library code:
    ```python
    from trial_curves.utils.logging import get_logger
    logger = get_logger(__name__)
    logger.info("curve aggregated")
    ```

In standalone scripts:
    ```python
    from trial_curves.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Union

LOGGER_NAME = "trial_curves"

DEFAULT_FMT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d:%(funcName)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(
    level: Optional[Union[str, int]] = None,
    *,
    fmt: Optional[str] = None,
    datefmt: Optional[str] = None,
    force: bool = False,
) -> None:
    """
    Configure logging for the trial_curves logger only (never root).

    Parameters
    ----------
    level:
        Logging level (e.g. "DEBUG", "INFO"). Defaults to TRIAL_CURVES_LOG_LEVEL
        env var, or "INFO" if unset.
    fmt:
        Log message format. Defaults to a standard format.
    datefmt:
        Date format. Defaults to "%Y-%m-%d %H:%M:%S".
    force:
        If True, remove existing handlers before adding new ones. If False,
        skip if a stderr handler is already present.
    """
    if level is None:
        level = os.environ.get("TRIAL_CURVES_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    formatter = logging.Formatter(fmt=fmt or DEFAULT_FMT, datefmt=datefmt or DEFAULT_DATEFMT)

    if force:
        for h in logger.handlers[:]:
            h.close()
            logger.removeHandler(h)
    else:
        for h in logger.handlers:
            if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr:
                h.setLevel(level)
                return

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(formatter)
    logger.addHandler(console)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger by name.

    If name is None, returns the package logger ("trial_curves").
    """
    return logging.getLogger(name or LOGGER_NAME)


__all__ = ["DEFAULT_DATEFMT", "DEFAULT_FMT", "LOGGER_NAME", "configure_logging", "get_logger"]
