"""Console logging with checker context."""

import logging
import sys
from datetime import datetime
from typing import Optional, TextIO


class CheckLogFormatter(logging.Formatter):
    """Formatter that adds the running checker's name when present."""

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")

        checker_context = ""
        if hasattr(record, "checker"):
            checker_context = f"[{record.checker}] "

        if self.use_colors:
            level_colors = {
                "DEBUG": "\033[36m",      # Cyan
                "INFO": "\033[32m",       # Green
                "WARNING": "\033[33m",    # Yellow
                "ERROR": "\033[31m",      # Red
                "CRITICAL": "\033[35m",   # Magenta
            }
            reset = "\033[0m"
            level_color = level_colors.get(record.levelname, "")
        else:
            level_color = ""
            reset = ""

        return (
            f"{timestamp} {level_color}{record.levelname:8s}{reset} "
            f"{checker_context}{record.getMessage()}"
        )


def setup_logging(
    log_level: str = "INFO",
    stream: Optional[TextIO] = None,
    use_colors: Optional[bool] = None,
) -> logging.Logger:
    """
    Configure the ``lintgroup`` logger hierarchy.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        stream: Output stream (default: stderr, keeping stdout for reports)
        use_colors: Force colours on/off; defaults to whether stream is a TTY

    Returns:
        The configured package logger
    """
    stream = stream or sys.stderr
    if use_colors is None:
        use_colors = stream.isatty() if hasattr(stream, "isatty") else False

    logger = logging.getLogger("lintgroup")
    logger.setLevel(getattr(logging, log_level.upper()))

    # Close existing handlers before clearing (repeated CLI invocations in one process)
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(CheckLogFormatter(use_colors=use_colors))
    logger.addHandler(handler)

    return logger
