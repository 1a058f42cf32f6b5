"""
Terminal output helpers.

Per-platform results are printed in green or red using ANSI escape
sequences. Colors are only emitted to a TTY and never when NO_COLOR is set.
"""

import os
import sys

GREEN = "\033[92m"
RED = "\033[91m"
RESET = "\033[0m"


def supports_color(stream=None) -> bool:
    """Check whether ANSI colors should be written to stream."""
    if stream is None:
        stream = sys.stdout
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def colorize(text: str, color: str, enabled: bool = True) -> str:
    """Wrap text in an ANSI color sequence when enabled."""
    if not enabled:
        return text
    return f"{color}{text}{RESET}"
