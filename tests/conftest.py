"""
pytest configuration and fixtures.
"""

import logging
from typing import Generator, List
import pytest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from httpstatus import HTTPStatus, StatusEntry, StatusRegistry


@pytest.fixture
def sample_entries() -> List[StatusEntry]:
    """A handful of entries spanning every category."""
    return [
        StatusEntry(100, "Continue"),
        StatusEntry(200, "OK"),
        StatusEntry(302, "Moved Temporarily"),
        StatusEntry(404, "Not Found"),
        StatusEntry(418, "I'm a teapot"),
        StatusEntry(503, "Service Unavailable"),
    ]


@pytest.fixture
def small_registry(sample_entries: List[StatusEntry]) -> StatusRegistry:
    """Registry built from sample_entries."""
    return StatusRegistry(sample_entries)


@pytest.fixture
def full_registry() -> StatusRegistry:
    """A fresh registry built from every HTTPStatus member."""
    return StatusRegistry.from_enum(HTTPStatus)


@pytest.fixture
def clean_package_logger() -> Generator[logging.Logger, None, None]:
    """Restore the httpstatus logger after a test reconfigures it."""
    logger = logging.getLogger("httpstatus")
    level = logger.level
    handlers = list(logger.handlers)

    yield logger

    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)
