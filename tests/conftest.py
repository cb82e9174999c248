import io
import logging

import pytest
from rich.console import Console

from intervalset import IntervalSet
from intervalset.logging_config import setup_logging


@pytest.fixture
def empty_set() -> IntervalSet:
    return IntervalSet()


@pytest.fixture
def console_buffer() -> tuple[Console, io.StringIO]:
    """Console that captures plain text output to a string buffer.

    Returns:
        Tuple of (Console, StringIO buffer).
    """
    buf = io.StringIO()
    console = Console(file=buf, width=120, color_system=None)
    return console, buf


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    setup_logging(logging.WARNING, force=True)
