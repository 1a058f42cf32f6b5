"""
Core functionality for gobuild.

This package contains the exception hierarchy and host platform detection
that the other components depend on.
"""

from .exceptions import (
    GobuildError,
    PlatformError,
    InvalidPlatformError,
    PlatformAlreadySetError,
    UnsupportedHostError,
    BuildError,
    OutputDirectoryError,
    ConfigError,
)

__all__ = [
    "GobuildError",
    "PlatformError",
    "InvalidPlatformError",
    "PlatformAlreadySetError",
    "UnsupportedHostError",
    "BuildError",
    "OutputDirectoryError",
    "ConfigError",
]
