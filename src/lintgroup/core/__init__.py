"""Checker interface, composition and configuration."""

from .checker import Checker, LabeledChecker
from .config import CheckerSpec, GroupConfig, load_config
from .group import Group
from .loader import build_group, load_checker

__all__ = [
    "Checker",
    "CheckerSpec",
    "Group",
    "GroupConfig",
    "LabeledChecker",
    "build_group",
    "load_checker",
    "load_config",
]
