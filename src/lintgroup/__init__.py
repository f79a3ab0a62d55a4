"""Run static analysis checkers as one composite check.

Checkers are composed with ``Group``; their errors are merged into a single
``MultiCheckError`` with each line prefixed by the checker that produced it.
This lets a test suite stand in for a separate lint build step.
"""

from .core import Checker, Group, LabeledChecker
from .errors import CheckError, MultiCheckError
from .testing import assert_checks_pass

__all__ = [
    "CheckError",
    "Checker",
    "Group",
    "LabeledChecker",
    "MultiCheckError",
    "assert_checks_pass",
]
