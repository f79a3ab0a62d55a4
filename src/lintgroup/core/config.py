"""Configuration loading and validation."""

import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..errors import ConfigError
from .checker import LABEL_SEPARATOR

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("lintgroup.yaml")

_CHECKER_PATH_RE = re.compile(r"^[A-Za-z_][\w.]*:[A-Za-z_][\w.]*$")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class CheckerSpec(BaseModel):
    """One checker entry in the group configuration."""
    path: str  # "package.module:ClassName"
    name: Optional[str] = None  # explicit label, overrides the type-derived name
    options: Dict[str, Any] = Field(default_factory=dict)
    enabled: bool = True

    @field_validator('path')
    @classmethod
    def validate_path(cls, v: str) -> str:
        v = v.strip()
        if not _CHECKER_PATH_RE.match(v):
            raise ValueError(
                f"checker path must look like 'package.module:Attribute', got '{v}'"
            )
        return v

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("checker name must not be blank")
        if v is not None and LABEL_SEPARATOR in v:
            raise ValueError(f"checker name must not contain {LABEL_SEPARATOR!r}, got '{v}'")
        return v

    @property
    def module_name(self) -> str:
        return self.path.split(":", 1)[0]

    @property
    def attribute(self) -> str:
        return self.path.split(":", 1)[1]


class GroupConfig(BaseModel):
    """Top-level configuration for a checker group."""
    targets: List[str] = Field(default_factory=lambda: ["./..."])
    log_level: str = "INFO"
    checkers: List[CheckerSpec] = Field(default_factory=list)

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got '{v}'")
        return level

    @property
    def enabled_checkers(self) -> List[CheckerSpec]:
        return [c for c in self.checkers if c.enabled]


def _expand_env_vars(data: Any, _path: str = "") -> Any:
    """Recursively expand ``${VAR}`` references in config data.

    Args:
        data: Config data to process
        _path: Internal tracking for error messages (e.g., "checkers[0].options")
    """
    if isinstance(data, dict):
        return {k: _expand_env_vars(v, f"{_path}.{k}" if _path else k) for k, v in data.items()}
    elif isinstance(data, list):
        return [_expand_env_vars(item, f"{_path}[{i}]") for i, item in enumerate(data)]
    elif isinstance(data, str) and data.startswith("${") and data.endswith("}"):
        env_var = data[2:-1]
        value = os.environ.get(env_var)
        if value is None:
            logger.warning(
                f"Environment variable '{env_var}' not set (referenced at config path: {_path or 'root'}). "
                f"The literal string '{data}' will be used."
            )
            return data
        return value
    return data


def load_config(config_path: Path = DEFAULT_CONFIG_PATH) -> GroupConfig:
    """Load group configuration from a YAML file.

    A missing file yields the default configuration.

    Raises:
        ConfigError: If the file cannot be read, is not valid YAML or fails validation
    """
    if not config_path.exists():
        logger.warning(f"Config file not found: {config_path}. Using default configuration.")
        return GroupConfig()

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top of {config_path}, got {type(data).__name__}")

    data = _expand_env_vars(data)
    try:
        return GroupConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}:\n{e}") from e
