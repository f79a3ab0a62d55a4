"""Shared test fixtures for unit tests."""

import logging
from typing import List, Optional, Tuple

import pytest

from lintgroup.core.checker import Checker


class StubChecker(Checker):
    """Checker with a fixed name and outcome that records every call."""

    def __init__(self, name: str, error: Optional[BaseException] = None):
        self._name = name
        self.error = error
        self.calls: List[Tuple[str, ...]] = []

    @property
    def name(self) -> str:
        return self._name

    def check(self, *targets: str) -> None:
        self.calls.append(targets)
        if self.error is not None:
            raise self.error


@pytest.fixture
def stub_checker():
    """Factory fixture: ``stub_checker("name", error=None)``."""
    return StubChecker


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo logger configuration done by setup_logging() between tests."""
    logger = logging.getLogger("lintgroup")
    level = logger.level
    yield
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(level)
