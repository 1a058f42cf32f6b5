"""
Cross-compilation target catalog.

This module holds the static table of supported platforms. Each human-readable
platform identifier (e.g. ``Linux-AMD64``) maps to the pair of values the
compiler uses to pick its cross-compilation backend: the target OS (GOOS) and
the target architecture (GOARCH).

The catalog is built once at import time and exposed read-only. Lookups are
case-insensitive. The generic ``Current`` label resolves to the host's own
OS/architecture pair at runtime.
"""

import textwrap
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List

from gobuild.core.exceptions import InvalidPlatformError

CURRENT_PLATFORM = "Current"


@dataclass(frozen=True)
class CrossCompileTarget:
    """
    Cross-compilation target specification.

    Attributes:
        os: Target operating system as the compiler names it (e.g., 'linux', 'windows')
        arch: Target CPU architecture as the compiler names it (e.g., 'amd64', 'arm64')
    """

    os: str
    arch: str

    def platform_string(self) -> str:
        """
        Get canonical platform string used for output directory names.

        Example:
            >>> CrossCompileTarget('linux', 'amd64').platform_string()
            'linux-amd64'
        """
        return f"{self.os}-{self.arch}"

    def environment(self) -> Dict[str, str]:
        """
        Get the environment variables that select this target.

        Example:
            >>> CrossCompileTarget('darwin', 'arm64').environment()
            {'GOOS': 'darwin', 'GOARCH': 'arm64'}
        """
        return {"GOOS": self.os, "GOARCH": self.arch}


_CATALOG = [
    ("Aix-PPC64", "aix", "ppc64"),
    ("Android-386", "android", "386"),
    ("Android-AMD64", "android", "amd64"),
    ("Android-ARM", "android", "arm"),
    ("Android-ARM64", "android", "arm64"),
    ("Darwin-386", "darwin", "386"),
    ("Darwin-AMD64", "darwin", "amd64"),
    ("Darwin-ARM", "darwin", "arm"),
    ("Darwin-ARM64", "darwin", "arm64"),
    ("Dragonfly-AMD64", "dragonfly", "amd64"),
    ("Freebsd-386", "freebsd", "386"),
    ("Freebsd-AMD64", "freebsd", "amd64"),
    ("Freebsd-ARM", "freebsd", "arm"),
    ("Illumos-AMD64", "illumos", "amd64"),
    ("Js-WASM", "js", "wasm"),
    ("Linux-386", "linux", "386"),
    ("Linux-AMD64", "linux", "amd64"),
    ("Linux-ARM", "linux", "arm"),
    ("Linux-ARM64", "linux", "arm64"),
    ("Linux-MIPS", "linux", "mips"),
    ("Linux-MIPS64", "linux", "mips64"),
    ("Linux-MIPS64LE", "linux", "mips64le"),
    ("Linux-MIPSLE", "linux", "mipsle"),
    ("Linux-PPC64", "linux", "ppc64"),
    ("Linux-PPC64LE", "linux", "ppc64le"),
    ("Linux-S390X", "linux", "s390x"),
    ("Nacl-386", "nacl", "386"),
    ("Nacl-AMD64P32", "nacl", "amd64p32"),
    ("Nacl-ARM", "nacl", "arm"),
    ("Netbsd-386", "netbsd", "386"),
    ("Netbsd-AMD64", "netbsd", "amd64"),
    ("Netbsd-ARM", "netbsd", "arm"),
    ("Netbsd-ARM64", "netbsd", "arm64"),
    ("Openbsd-386", "openbsd", "386"),
    ("Openbsd-AMD64", "openbsd", "amd64"),
    ("Openbsd-ARM", "openbsd", "arm"),
    ("Openbsd-ARM64", "openbsd", "arm64"),
    ("Plan9-386", "plan9", "386"),
    ("Plan9-AMD64", "plan9", "amd64"),
    ("Plan9-ARM", "plan9", "arm"),
    ("Solaris-AMD64", "solaris", "amd64"),
    ("Windows-386", "windows", "386"),
    ("Windows-AMD64", "windows", "amd64"),
    ("Windows-ARM", "windows", "arm"),
]

# Identifier -> target, in catalog order. Read-only.
PLATFORMS = MappingProxyType(
    {name: CrossCompileTarget(os=os_name, arch=arch) for name, os_name, arch in _CATALOG}
)

# Lowercased identifier -> canonical identifier, including the host label
_LOOKUP = MappingProxyType(
    {name.lower(): name for name in [*PLATFORMS, CURRENT_PLATFORM]}
)


def is_supported_platform(identifier: str) -> bool:
    """Check whether identifier names a catalog entry (case-insensitive)."""
    return identifier.lower() in _LOOKUP


def resolve_platform(identifier: str) -> CrossCompileTarget:
    """
    Resolve a platform identifier to its target pair.

    Args:
        identifier: Platform identifier in any casing (e.g., 'linux-amd64')

    Returns:
        CrossCompileTarget for the identifier

    Raises:
        InvalidPlatformError: If the identifier is not in the catalog
        UnsupportedHostError: If 'Current' is requested on an unknown host OS

    Example:
        >>> resolve_platform('windows-arm')
        CrossCompileTarget(os='windows', arch='arm')
    """
    name = _LOOKUP.get(identifier.lower())
    if name is None:
        raise InvalidPlatformError(identifier)

    if name == CURRENT_PLATFORM:
        from gobuild.core.platform import detect_host_target

        return detect_host_target()

    return PLATFORMS[name]


def get_supported_platforms() -> List[str]:
    """
    Get all platform identifiers in catalog order.

    The host label ``Current`` comes last.
    """
    return [*PLATFORMS, CURRENT_PLATFORM]


def format_supported_platforms(width: int = 100) -> str:
    """
    Format the supported platform list for usage output.

    Args:
        width: Maximum line width

    Returns:
        Text block starting with 'SUPPORTED PLATFORMS:'
    """
    body = textwrap.fill(
        ", ".join(get_supported_platforms()),
        width=width,
        initial_indent="  ",
        subsequent_indent="  ",
        break_on_hyphens=False,
    )
    return f"SUPPORTED PLATFORMS:\n{body}\n"
