"""
Host platform detection for gobuild.

This module answers one question: which target OS/architecture pair describes
the machine gobuild is running on. It backs the generic ``Current`` entry of
the platform catalog, so that building for ``Current`` produces the same
``<os>-<arch>`` output directory the matching explicit entry would.

Usage:
    from gobuild.core.platform import detect_host_target

    target = detect_host_target()
    print(f"Host platform: {target.platform_string()}")
"""

import functools
import platform
import sys

from gobuild.core.exceptions import UnsupportedHostError
from gobuild.cross.targets import CrossCompileTarget

# sys.platform prefix -> compiler OS name
_OS_PREFIXES = [
    ("android", "android"),
    ("linux", "linux"),
    ("darwin", "darwin"),
    ("win32", "windows"),
    ("cygwin", "windows"),
    ("freebsd", "freebsd"),
    ("netbsd", "netbsd"),
    ("openbsd", "openbsd"),
    ("dragonfly", "dragonfly"),
    ("aix", "aix"),
    ("sunos", "solaris"),
]

# platform.machine() value -> compiler architecture name
_ARCH_NAMES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "x64": "amd64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
    "aarch64": "arm64",
    "arm64": "arm64",
    "ppc64": "ppc64",
    "ppc64le": "ppc64le",
    "s390x": "s390x",
    "mips": "mips",
    "mipsel": "mipsle",
    "mips64": "mips64",
    "mips64el": "mips64le",
    "riscv64": "riscv64",
    "wasm32": "wasm",
}


@functools.lru_cache(maxsize=1)
def detect_host_target() -> CrossCompileTarget:
    """
    Detect the host's target OS/architecture pair.

    This function is cached - it only runs detection once per process.

    Returns:
        CrossCompileTarget describing the host

    Raises:
        UnsupportedHostError: If the host OS has no compiler name

    Example:
        >>> detect_host_target().platform_string()
        'linux-amd64'
    """
    return CrossCompileTarget(os=_detect_os(), arch=_detect_architecture())


def _detect_os() -> str:
    """
    Detect operating system.

    Returns:
        Compiler OS name, e.g. 'linux', 'darwin', 'windows'

    Raises:
        UnsupportedHostError: If the OS is not recognized
    """
    system = sys.platform.lower()

    for prefix, os_name in _OS_PREFIXES:
        if system.startswith(prefix):
            if os_name == "linux" and "android" in platform.platform().lower():
                return "android"
            if os_name == "solaris" and "illumos" in platform.version().lower():
                return "illumos"
            return os_name

    raise UnsupportedHostError(f"Unsupported operating system: {sys.platform}")


def _detect_architecture() -> str:
    """
    Detect CPU architecture.

    Returns:
        Compiler architecture name, e.g. 'amd64', 'arm64', '386'
    """
    machine = platform.machine().lower()

    if machine in _ARCH_NAMES:
        return _ARCH_NAMES[machine]
    elif machine.startswith("arm"):
        return "arm"
    else:
        # Return original for unknown architectures
        return machine


def clear_platform_cache():
    """
    Clear the host detection cache.

    Forces the next call to detect_host_target() to re-detect.
    """
    detect_host_target.cache_clear()


__all__ = [
    "detect_host_target",
    "clear_platform_cache",
]
