"""YAML configuration parser for gobuild.

This module provides parsing and validation for gobuild.yaml configuration files.

Example gobuild.yaml:

    output_dir: dist
    command: ["go", "build", "-trimpath", "-o"]
    args: ["./cmd/app"]
    env:
      CGO_ENABLED: "0"
    platforms: Linux-AMD64, Darwin-ARM64
"""

import logging
import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from gobuild.build.orchestrator import DEFAULT_COMMAND, DEFAULT_OUTPUT_DIR
from gobuild.core.exceptions import ConfigError, InvalidPlatformError
from gobuild.cross.selection import parse_platform_list

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "gobuild.yaml"

# Owned by the target selection, never by configuration
_RESERVED_ENV = ("GOOS", "GOARCH")


@dataclass
class GobuildConfig:
    """Complete gobuild configuration."""

    output_dir: str = DEFAULT_OUTPUT_DIR
    command: List[str] = field(default_factory=lambda: list(DEFAULT_COMMAND))
    args: List[str] = field(default_factory=list)
    env: Dict[str, str] = field(default_factory=dict)
    platforms: Optional[str] = None  # comma-separated, validated


def parse_config(config_path: Path) -> GobuildConfig:
    """
    Parse gobuild.yaml configuration file.

    Args:
        config_path: Path to gobuild.yaml

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigError: If configuration is missing or invalid
    """
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    if data is None:
        return GobuildConfig()

    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a mapping")

    return _parse_and_validate(data)


def load_config(
    project_root: Path, config_path: Optional[Path] = None
) -> GobuildConfig:
    """
    Load configuration for a project.

    An explicit config_path must exist. Without one, gobuild.yaml in the
    project root is used when present, otherwise defaults apply.
    """
    if config_path is not None:
        return parse_config(Path(config_path))

    default_path = project_root / DEFAULT_CONFIG_NAME
    if not default_path.exists():
        logger.debug(f"No {DEFAULT_CONFIG_NAME} in {project_root}, using defaults")
        return GobuildConfig()

    return parse_config(default_path)


def _parse_and_validate(data: dict) -> GobuildConfig:
    """Parse and validate configuration data."""
    unknown = set(data) - {"output_dir", "command", "args", "env", "platforms"}
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

    output_dir = data.get("output_dir", DEFAULT_OUTPUT_DIR)
    if not isinstance(output_dir, str) or not output_dir:
        raise ConfigError("output_dir must be a non-empty string")

    return GobuildConfig(
        output_dir=output_dir,
        command=_parse_command(data.get("command", list(DEFAULT_COMMAND))),
        args=_parse_string_list(data.get("args", []), "args"),
        env=_parse_env(data.get("env", {})),
        platforms=_parse_platforms(data.get("platforms")),
    )


def _parse_command(value) -> List[str]:
    """Parse build command, accepting a list or a shell-style string."""
    if isinstance(value, str):
        value = shlex.split(value)
    command = _parse_string_list(value, "command")
    if not command:
        raise ConfigError("command must not be empty")
    return command


def _parse_string_list(value, name: str) -> List[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{name} must be a list of strings")
    return list(value)


def _parse_env(value) -> Dict[str, str]:
    """Parse extra environment variables."""
    if not isinstance(value, dict):
        raise ConfigError("env must be a mapping")

    env = {}
    for key, val in value.items():
        if key in _RESERVED_ENV:
            raise ConfigError(f"env.{key} is set from the selected platform")
        if isinstance(val, bool) or not isinstance(val, (str, int, float)):
            raise ConfigError(f"env.{key} must be a string")
        env[str(key)] = str(val)
    return env


def _parse_platforms(value) -> Optional[str]:
    """Parse default platforms, given as a list or a comma-separated string."""
    if value is None:
        return None

    if isinstance(value, list):
        if not all(isinstance(v, str) for v in value):
            raise ConfigError("platforms must be a list of strings")
        value = ",".join(value)
    elif not isinstance(value, str):
        raise ConfigError("platforms must be a string or a list of strings")

    if not value.strip():
        return None

    try:
        parse_platform_list(value)
    except InvalidPlatformError as e:
        raise ConfigError(f"platforms: {e}")

    return value
