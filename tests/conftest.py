"""Shared pytest fixtures and configuration for the clidispatch test suite.

Guidelines
----------
* Handlers are small in-test classes recording what was called.
* Tests never terminate the interpreter; ``SystemExit`` is asserted.
* Logging handlers installed by the CLI are removed after each test.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def _reset_clidispatch_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("clidispatch")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
