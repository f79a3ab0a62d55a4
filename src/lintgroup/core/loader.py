"""Resolve configured checker paths into Checker instances."""

import importlib
import logging
from typing import Any

from ..errors import CheckerLoadError
from .checker import Checker, LabeledChecker
from .config import CheckerSpec, GroupConfig
from .group import Group

logger = logging.getLogger(__name__)


def _resolve_attribute(spec: CheckerSpec) -> Any:
    try:
        obj = importlib.import_module(spec.module_name)
    except Exception as e:
        raise CheckerLoadError(spec.path, f"cannot import module '{spec.module_name}': {e}") from e

    for part in spec.attribute.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise CheckerLoadError(spec.path, f"no attribute '{part}'") from e
    return obj


def load_checker(spec: CheckerSpec) -> Checker:
    """Build the checker described by ``spec``.

    The attribute may be a Checker instance (used as-is) or a class/factory
    called with ``spec.options`` as keyword arguments.

    Raises:
        CheckerLoadError: If the path cannot be resolved or does not yield a Checker
    """
    target = _resolve_attribute(spec)

    if isinstance(target, Checker):
        if spec.options:
            raise CheckerLoadError(spec.path, "options given for a checker instance")
        checker = target
    elif callable(target):
        try:
            checker = target(**spec.options)
        except Exception as e:
            raise CheckerLoadError(
                spec.path, f"construction with options {sorted(spec.options)} failed: {type(e).__name__}: {e}"
            ) from e
    else:
        raise CheckerLoadError(spec.path, f"{type(target).__name__} is not a Checker or callable")

    if not isinstance(checker, Checker):
        raise CheckerLoadError(spec.path, f"factory returned {type(checker).__name__}, not a Checker")

    if spec.name:
        checker = LabeledChecker(checker, spec.name)

    logger.debug(f"Loaded checker {checker.name} from {spec.path}")
    return checker


def build_group(config: GroupConfig) -> Group:
    """Load every enabled checker in ``config`` and compose them in order."""
    skipped = len(config.checkers) - len(config.enabled_checkers)
    if skipped:
        logger.info(f"Skipping {skipped} disabled checker(s)")
    return Group(*(load_checker(spec) for spec in config.enabled_checkers))
