"""Helpers for running checkers from a test suite.

Usage:
    def test_lint():
        assert_checks_pass(Group(VetChecker(), StyleChecker()), "./...")
"""

from .core.checker import Checker
from .core.group import Group
from .errors import MultiCheckError


def assert_checks_pass(checker: Checker, *targets: str) -> None:
    """Run ``checker`` on ``targets`` and fail the calling test on any error.

    A checker that is not already a Group is run inside one so every report
    line carries the name of the checker that produced it.

    Raises:
        AssertionError: With one report line per reported error
    """
    if not isinstance(checker, Group):
        checker = Group(checker)
    try:
        checker.check(*targets)
    except MultiCheckError as e:
        report = "\n".join(e.errors())
        raise AssertionError(f"static checks failed:\n{report}") from None
