"""Tests for console logging setup."""

import io
import logging

import pytest

from lintgroup.core.group import Group
from lintgroup.errors import CheckError, MultiCheckError
from lintgroup.utils.rich_logging import CheckLogFormatter, setup_logging


def _record(msg: str, level: int = logging.INFO, **extra) -> logging.LogRecord:
    record = logging.LogRecord("lintgroup.test", level, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_includes_checker_context():
    line = CheckLogFormatter(use_colors=False).format(_record("reported 2 error(s)", checker="govet"))
    assert line.endswith("INFO     [govet] reported 2 error(s)")


def test_formatter_without_context():
    line = CheckLogFormatter(use_colors=False).format(_record("hello", logging.WARNING))
    assert line.endswith("WARNING  hello")
    assert "\033[" not in line


def test_formatter_colours_level():
    line = CheckLogFormatter(use_colors=True).format(_record("boom", logging.ERROR))
    assert "\033[31mERROR" in line


def test_setup_logging_replaces_handlers():
    first = io.StringIO()
    second = io.StringIO()

    setup_logging("INFO", stream=first)
    logger = setup_logging("DEBUG", stream=second)

    assert logger.name == "lintgroup"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1

    logging.getLogger("lintgroup.core").debug("after reconfigure")
    assert first.getvalue() == ""
    assert "after reconfigure" in second.getvalue()


def test_group_logs_with_checker_context(stub_checker):
    stream = io.StringIO()
    setup_logging("DEBUG", stream=stream, use_colors=False)

    group = Group(
        stub_checker("vet", MultiCheckError(["a", "b"])),
        stub_checker("lint", CheckError("c")),
    )
    with pytest.raises(MultiCheckError):
        group.check("./...")

    output = stream.getvalue()
    assert "[vet] Running vet on 1 target(s)" in output
    assert "[vet] vet reported 2 error(s)" in output
    assert "[lint] lint reported 1 error" in output
