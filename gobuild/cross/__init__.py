"""
Cross-compilation support for gobuild.

This module provides the static platform catalog and the command-line
platform selection validated against it.
"""

from gobuild.cross.targets import (
    CURRENT_PLATFORM,
    PLATFORMS,
    CrossCompileTarget,
    format_supported_platforms,
    get_supported_platforms,
    is_supported_platform,
    resolve_platform,
)
from gobuild.cross.selection import PlatformSelection, parse_platform_list

__all__ = [
    "CURRENT_PLATFORM",
    "PLATFORMS",
    "CrossCompileTarget",
    "format_supported_platforms",
    "get_supported_platforms",
    "is_supported_platform",
    "resolve_platform",
    "PlatformSelection",
    "parse_platform_list",
]
