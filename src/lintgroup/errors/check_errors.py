"""Failure values reported by checkers and by the loading layer."""

from typing import Iterable, List


class CheckError(Exception):
    """A checker failure carrying a single message."""


class MultiCheckError(CheckError):
    """A checker failure carrying several independent messages.

    ``str()`` joins the messages with newlines; ``errors()`` returns them
    individually so an aggregating checker can re-prefix each one.
    """

    def __init__(self, messages: Iterable[str]):
        if isinstance(messages, (str, bytes)):
            raise TypeError(
                f"MultiCheckError expects a sequence of messages, not {type(messages).__name__}; "
                "use CheckError for a single message"
            )
        self.messages = tuple(messages)
        super().__init__("\n".join(self.messages))

    def errors(self) -> List[str]:
        """Return the individual messages in the order they were reported."""
        return list(self.messages)

    def __len__(self) -> int:
        return len(self.messages)


class LintGroupError(Exception):
    """Base class for errors raised while configuring a checker group."""


class ConfigError(LintGroupError):
    """Configuration file could not be read or failed validation."""


class CheckerLoadError(LintGroupError):
    """A configured checker path could not be turned into a Checker."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load checker '{path}': {reason}")
