"""Base checker interface."""

from abc import ABC, abstractmethod

# Separates a checker name from its message in merged reports
LABEL_SEPARATOR = ": "


class Checker(ABC):
    """Abstract base class for static checks.

    ``check`` performs a static check of everything named by ``targets``,
    which may be fully qualified import paths, relative paths or paths with
    the wildcard suffix ``...``. It returns normally on success and raises
    on failure: ``MultiCheckError`` when there are several independent
    findings, ``CheckError`` (or any other exception) for a single one.
    """

    @property
    def name(self) -> str:
        """Label used to prefix every error this checker reports.

        Defaults to ``<module>.<Class>`` using the last component of the
        defining module, e.g. ``govet.Checker``.
        """
        cls = type(self)
        module = cls.__module__.rsplit(".", 1)[-1]
        qualname = cls.__qualname__.rsplit("<locals>.", 1)[-1]
        return f"{module}.{qualname}"

    @abstractmethod
    def check(self, *targets: str) -> None:
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"


class LabeledChecker(Checker):
    """Wrap a checker to report its errors under an explicit label."""

    def __init__(self, checker: Checker, label: str):
        if not label:
            raise ValueError("label must be a non-empty string")
        if LABEL_SEPARATOR in label:
            raise ValueError(f"label must not contain {LABEL_SEPARATOR!r}, got {label!r}")
        self.checker = checker
        self.label = label

    @property
    def name(self) -> str:
        return self.label

    def check(self, *targets: str) -> None:
        self.checker.check(*targets)
