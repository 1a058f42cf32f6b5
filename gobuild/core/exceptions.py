"""
Centralized exception hierarchy for gobuild.

Fatal conditions are raised as exceptions and surface as a non-zero exit
code from the CLI. Per-platform build failures are not exceptions; they are
reported through BuildResult values.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class GobuildError(Exception):
    """Base exception for all gobuild errors."""

    pass


# ============================================================================
# Platform Exceptions
# ============================================================================


class PlatformError(GobuildError):
    """Base exception for platform selection errors."""

    pass


class InvalidPlatformError(PlatformError):
    """Raised when a platform identifier is not in the catalog."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"invalid platform: {identifier!r}")


class PlatformAlreadySetError(PlatformError):
    """Raised when the platform selection is set a second time."""

    def __init__(self):
        super().__init__("platform flag already set")


class UnsupportedHostError(GobuildError):
    """Raised when the host OS cannot be mapped to a target OS name."""

    pass


# ============================================================================
# Build Exceptions
# ============================================================================


class BuildError(GobuildError):
    """Base exception for build orchestration errors."""

    pass


class OutputDirectoryError(BuildError):
    """Raised when a platform output directory cannot be created."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"unable to create output folder {path}: {reason}")


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigError(GobuildError):
    """Configuration parsing or validation error."""

    pass
