"""
Configuration management for gobuild.
"""

from gobuild.config.parser import (
    DEFAULT_CONFIG_NAME,
    GobuildConfig,
    load_config,
    parse_config,
)

__all__ = [
    "DEFAULT_CONFIG_NAME",
    "GobuildConfig",
    "load_config",
    "parse_config",
]
