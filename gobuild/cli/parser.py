"""
gobuild CLI argument parser.

This module implements the command-line interface for gobuild using argparse.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from gobuild import __version__
from gobuild.build.orchestrator import BuildOrchestrator
from gobuild.config.parser import DEFAULT_CONFIG_NAME, load_config
from gobuild.core.exceptions import PlatformError
from gobuild.core.filesystem import resolve_project_root
from gobuild.cross.selection import PlatformSelection
from gobuild.cross.targets import format_supported_platforms

logger = logging.getLogger(__name__)

EXAMPLES = """EXAMPLES:
  gobuild -platform Windows-AMD64,Darwin-AMD64,Linux-AMD64
  gobuild -platform linux-arm64 -o dist -- -ldflags=-s ./cmd/app
"""


class PlatformListAction(argparse.Action):
    """Validate a comma-separated platform list into a PlatformSelection."""

    def __call__(self, parser, namespace, values, option_string=None):
        selection = getattr(namespace, self.dest, None)
        if selection is None:
            selection = PlatformSelection()
            setattr(namespace, self.dest, selection)

        try:
            selection.set(values)
        except PlatformError as e:
            raise argparse.ArgumentError(self, str(e))


class GobuildArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that prints the full help, platform list included, on errors."""

    def error(self, message):
        self.print_help(sys.stderr)
        self.exit(2, f"\n{self.prog}: error: {message}\n")


class CLI:
    """gobuild command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser.

        Returns:
            Configured ArgumentParser instance
        """
        parser = GobuildArgumentParser(
            prog="gobuild",
            description=format_supported_platforms(),
            epilog=EXAMPLES,
            formatter_class=argparse.RawDescriptionHelpFormatter,
            allow_abbrev=False,
        )

        parser.add_argument(
            "-platform",
            "--platform",
            action=PlatformListAction,
            metavar="LIST",
            help="Comma-separated list of platforms to build for",
        )
        parser.add_argument(
            "-o",
            "--output-dir",
            type=Path,
            metavar="DIR",
            help="Root directory for per-platform output (default: output)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help=f"Path to configuration file (default: ./{DEFAULT_CONFIG_NAME})",
        )
        parser.add_argument(
            "--project-root",
            type=Path,
            metavar="PATH",
            default=None,
            help="Project root directory (default: current directory)",
        )
        parser.add_argument(
            "--no-color", action="store_true", help="Disable colored output"
        )
        parser.add_argument(
            "--version", action="version", version=f"gobuild {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )

        return parser

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Arguments after a literal ``--`` are not parsed; they are collected
        into ``build_args`` and passed to the build command.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        if args is None:
            args = sys.argv[1:]

        args = list(args)
        build_args: List[str] = []
        if "--" in args:
            index = args.index("--")
            args, build_args = args[:index], args[index + 1 :]

        parsed = self.parser.parse_args(args)
        parsed.build_args = build_args
        return parsed

    def print_usage(self, file=None):
        """Print full usage, including the platform list, to stderr."""
        self.parser.print_help(file=file if file is not None else sys.stderr)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 once every platform was attempted, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        self._configure_logging(parsed_args)

        try:
            return self._run_build(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except Exception as e:
            logger.error(f"Error: {e}")
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return 1

    def _run_build(self, args) -> int:
        """
        Resolve configuration and selection, then build every platform.

        Args:
            args: Parsed arguments

        Returns:
            Exit code
        """
        project_root = resolve_project_root(args.project_root)
        config = load_config(project_root, args.config)

        selection = args.platform
        if selection is None and config.platforms:
            logger.debug(f"Using platforms from configuration: {config.platforms}")
            selection = PlatformSelection()
            selection.set(config.platforms)

        # Ensure at least one platform is defined
        if not selection:
            self.print_usage()
            return 1

        output_root = Path(args.output_dir or config.output_dir)
        if not output_root.is_absolute():
            output_root = project_root / output_root

        orchestrator = BuildOrchestrator(
            output_root=output_root,
            command=config.command,
            extra_args=[*config.args, *args.build_args],
            extra_env=config.env,
            cwd=project_root,
            color=False if args.no_color else None,
        )
        results = orchestrator.run(selection)

        failed = sum(1 for r in results if not r.success)
        logger.debug(f"Built {len(results) - failed}/{len(results)} platform(s)")
        return 0

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,  # Reconfigure if already configured
        )


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
