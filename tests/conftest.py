from __future__ import annotations

import logging
from typing import Generator

import pytest

import buildver.utils.logger as logger_module
from buildver.utils.console import reconfigure_console


@pytest.fixture(autouse=True)
def reset_buildver_output() -> Generator[None, None, None]:
    """Undo logging and console configuration made by CLI invocations.

    ``setup_logging`` stops propagation to the root logger, which would hide
    records from ``caplog`` in later tests.
    """
    yield

    root_logger = logging.getLogger("buildver")
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True
    logger_module._logging_configured = False
    reconfigure_console()
