"""
Build orchestration for gobuild.
"""

from gobuild.build.orchestrator import (
    DEFAULT_COMMAND,
    DEFAULT_OUTPUT_DIR,
    BuildOrchestrator,
    BuildResult,
    build_environment,
)

__all__ = [
    "DEFAULT_COMMAND",
    "DEFAULT_OUTPUT_DIR",
    "BuildOrchestrator",
    "BuildResult",
    "build_environment",
]
