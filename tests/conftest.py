"""Pytest configuration for trial_curves tests."""
from __future__ import annotations

import logging

import pytest

from trial_curves.utils.logging import LOGGER_NAME


@pytest.fixture(autouse=True)
def _reset_package_logger():
    # The CLI attaches a stderr handler bound to the current capture stream.
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
