"""Error types for checkers and checker groups."""

from .check_errors import (
    CheckError,
    CheckerLoadError,
    ConfigError,
    LintGroupError,
    MultiCheckError,
)

__all__ = [
    "CheckError",
    "CheckerLoadError",
    "ConfigError",
    "LintGroupError",
    "MultiCheckError",
]
