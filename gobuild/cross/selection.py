"""
Platform selection parsed from the command line.

The selection is an ordered list of validated platform identifiers. It can be
populated exactly once per invocation, and a list containing any unknown
identifier is rejected as a whole.
"""

import logging
from typing import Iterator, List, Tuple

from gobuild.core.exceptions import InvalidPlatformError, PlatformAlreadySetError
from gobuild.cross.targets import CrossCompileTarget, is_supported_platform, resolve_platform

logger = logging.getLogger(__name__)


def parse_platform_list(value: str) -> List[str]:
    """
    Parse a comma-separated platform list.

    Tokens are stripped of surrounding whitespace and checked against the
    catalog case-insensitively. The original casing is kept.

    Args:
        value: Raw list, e.g. 'Linux-AMD64, darwin-arm64'

    Returns:
        Validated identifiers in input order

    Raises:
        InvalidPlatformError: On the first unknown identifier
    """
    platforms = []
    for token in value.split(","):
        token = token.strip()
        if not is_supported_platform(token):
            raise InvalidPlatformError(token)
        platforms.append(token)
    return platforms


class PlatformSelection:
    """Ordered, set-once list of platforms to build for."""

    def __init__(self):
        self._platforms: List[str] = []
        self._set = False

    def set(self, value: str) -> None:
        """
        Populate the selection from a comma-separated list.

        Raises:
            PlatformAlreadySetError: If the selection was already set
            InvalidPlatformError: If any identifier is unknown; the
                selection is left empty
        """
        if self._set:
            raise PlatformAlreadySetError()

        platforms = parse_platform_list(value)
        self._platforms = platforms
        self._set = True
        logger.debug(f"Selected platforms: {', '.join(platforms)}")

    @property
    def is_set(self) -> bool:
        return self._set

    @property
    def platforms(self) -> Tuple[str, ...]:
        return tuple(self._platforms)

    def targets(self) -> Iterator[Tuple[str, CrossCompileTarget]]:
        """Yield (identifier, target) pairs in selection order."""
        for identifier in self._platforms:
            yield identifier, resolve_platform(identifier)

    def __iter__(self) -> Iterator[str]:
        return iter(self._platforms)

    def __len__(self) -> int:
        return len(self._platforms)

    def __bool__(self) -> bool:
        return bool(self._platforms)

    def __repr__(self) -> str:
        return f"PlatformSelection({list(self._platforms)!r})"
