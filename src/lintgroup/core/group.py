"""Composite checker that runs several checkers and merges their errors."""

import logging
from typing import Iterator, List, Tuple

from ..errors import CheckError, MultiCheckError
from .checker import Checker

logger = logging.getLogger(__name__)


class Group(Checker):
    """Checker that applies each of ``checkers`` in the order provided.

    ``check`` either returns normally or raises ``MultiCheckError`` holding
    the errors reported by each checker, each prefixed with the name of the
    checker that produced it. For example, this error from ``govet.Checker``::

        file.go:23: err is unintentionally shadowed.

    is reported as::

        govet.Checker: file.go:23: err is unintentionally shadowed.

    A checker is not short-circuited by a previous checker failing. Any
    ``MultiCheckError`` is flattened into the final error list; any other
    exception contributes a single line.
    """

    def __init__(self, *checkers: Checker):
        self._checkers: Tuple[Checker, ...] = tuple(checkers)

    @property
    def checkers(self) -> Tuple[Checker, ...]:
        return self._checkers

    def __len__(self) -> int:
        return len(self._checkers)

    def __iter__(self) -> Iterator[Checker]:
        return iter(self._checkers)

    def check(self, *targets: str) -> None:
        errs: List[str] = []
        for checker in self._checkers:
            name = checker.name
            logger.debug(f"Running {name} on {len(targets)} target(s)", extra={"checker": name})
            try:
                checker.check(*targets)
            except MultiCheckError as e:
                cerrs = e.errors()
                if not cerrs:
                    # Indistinguishable from success once merged
                    logger.warning(f"{name} failed without reporting any errors", extra={"checker": name})
                    continue
                logger.info(f"{name} reported {len(cerrs)} error(s)", extra={"checker": name})
                errs.extend(f"{name}: {m}" for m in cerrs)
            except CheckError as e:
                logger.info(f"{name} reported 1 error", extra={"checker": name})
                errs.append(f"{name}: {e}")
            except Exception as e:
                logger.warning(f"{name} raised {type(e).__name__}: {e}", extra={"checker": name})
                errs.append(f"{name}: {e}")

        if not errs:
            return
        raise MultiCheckError(errs)
