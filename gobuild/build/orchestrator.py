"""
Multi-target build orchestration.

The orchestrator walks the platform selection in order and, for each entry,
creates ``<output root>/<os>-<arch>``, runs the external build command with
GOOS/GOARCH set for the child process, and prints a colored per-platform
result.

Builds run strictly one at a time. The target variables are passed to the
child through an explicit environment mapping; ``os.environ`` is never
modified, so nothing needs to be restored after the loop.

Example:
    >>> from gobuild.cross import PlatformSelection
    >>> selection = PlatformSelection()
    >>> selection.set("Linux-AMD64,Windows-AMD64")
    >>> results = BuildOrchestrator(Path("output")).run(selection)
"""

import logging
import os
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from gobuild.core.console import GREEN, RED, colorize, supports_color
from gobuild.core.filesystem import ensure_directory
from gobuild.core.exceptions import OutputDirectoryError
from gobuild.cross.targets import CrossCompileTarget

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = "output"
DEFAULT_COMMAND = ("go", "build", "-o")


@dataclass
class BuildResult:
    """Outcome of building one platform."""

    platform: str
    target: CrossCompileTarget
    output_dir: Path
    success: bool
    returncode: Optional[int] = None
    error: Optional[str] = None


def build_environment(
    target: CrossCompileTarget,
    base: Optional[Mapping[str, str]] = None,
    extra: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Build the child process environment for a target.

    Args:
        target: Target whose GOOS/GOARCH are exported
        base: Environment to start from (default: os.environ)
        extra: Additional variables; GOOS/GOARCH from the target win

    Returns:
        New environment dictionary
    """
    env = dict(os.environ if base is None else base)
    if extra:
        env.update(extra)
    env.update(target.environment())
    return env


class BuildOrchestrator:
    """Run the build command once per selected platform."""

    def __init__(
        self,
        output_root: Path = Path(DEFAULT_OUTPUT_DIR),
        command: Sequence[str] = DEFAULT_COMMAND,
        extra_args: Sequence[str] = (),
        extra_env: Optional[Mapping[str, str]] = None,
        cwd: Optional[Path] = None,
        stream=None,
        color: Optional[bool] = None,
    ):
        """
        Initialize orchestrator.

        Args:
            output_root: Directory under which per-platform folders are created
            command: Build command; the output directory is appended to it
            extra_args: Arguments placed after the output directory
            extra_env: Additional variables for the child environment
            cwd: Working directory for the build command
            stream: Where progress lines are written (default: stdout)
            color: Force colors on/off (default: detect from stream)
        """
        self.output_root = Path(output_root)
        self.command = list(command)
        self.extra_args = list(extra_args)
        self.extra_env = dict(extra_env or {})
        self.cwd = cwd
        self.stream = stream if stream is not None else sys.stdout
        self.color = supports_color(self.stream) if color is None else color

    def output_dir_for(self, target: CrossCompileTarget) -> Path:
        """Get the output directory for a target, e.g. output/linux-amd64."""
        return self.output_root / target.platform_string()

    def build_command(self, output_dir: Path) -> List[str]:
        """Get the full command line for one platform."""
        return [*self.command, str(output_dir), *self.extra_args]

    def build_platform(self, platform: str, target: CrossCompileTarget) -> BuildResult:
        """
        Build a single platform.

        Args:
            platform: Identifier as given by the user, used for display
            target: Resolved target pair

        Returns:
            BuildResult; a failing build command is not an exception

        Raises:
            OutputDirectoryError: If the output directory cannot be created
        """
        output_dir = self.output_dir_for(target)
        self._write(f"Compiling for {platform} ... ")

        try:
            ensure_directory(output_dir, "output folder")
        except OSError as e:
            self._write("\n")
            cause = e.__cause__ if e.__cause__ is not None else e
            reason = getattr(cause, "strerror", None) or str(cause)
            raise OutputDirectoryError(output_dir, reason) from e

        cmd = self.build_command(output_dir)
        env = build_environment(target, extra=self.extra_env)
        logger.debug(f"Running: {' '.join(cmd)} (GOOS={target.os} GOARCH={target.arch})")

        try:
            result = subprocess.run(
                cmd, env=env, cwd=str(self.cwd) if self.cwd else None
            )
        except OSError as e:
            return self._failed(platform, target, output_dir, None, str(e))

        if result.returncode != 0:
            return self._failed(
                platform,
                target,
                output_dir,
                result.returncode,
                f"exit status {result.returncode}",
            )

        self._write(colorize("success", GREEN, self.color) + "\n")
        return BuildResult(
            platform=platform,
            target=target,
            output_dir=output_dir,
            success=True,
            returncode=0,
        )

    def run(self, selection: Iterable) -> List[BuildResult]:
        """
        Build every selected platform in order.

        Args:
            selection: PlatformSelection, or any iterable of
                (identifier, target) pairs

        Returns:
            One BuildResult per platform attempted

        Raises:
            OutputDirectoryError: Aborts the loop; remaining platforms are skipped
            UnsupportedHostError: If "Current" is selected on an unknown host;
                raised before any platform is built
        """
        # All targets are resolved before the first build starts
        pairs = list(
            selection.targets() if hasattr(selection, "targets") else selection
        )
        results = []
        for platform, target in pairs:
            results.append(self.build_platform(platform, target))

        failed = [r.platform for r in results if not r.success]
        if failed:
            logger.debug(f"Builds failed for: {', '.join(failed)}")
        return results

    def _failed(
        self,
        platform: str,
        target: CrossCompileTarget,
        output_dir: Path,
        returncode: Optional[int],
        error: str,
    ) -> BuildResult:
        self._write(
            colorize(f"fail\nCommand finished with error: {error}", RED, self.color)
            + "\n"
        )
        return BuildResult(
            platform=platform,
            target=target,
            output_dir=output_dir,
            success=False,
            returncode=returncode,
            error=error,
        )

    def _write(self, text: str):
        self.stream.write(text)
        self.stream.flush()
