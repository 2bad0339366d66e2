"""Key path navigation over nested translation dictionaries.

Resolves a dotted key path ("user.profile.title") or a pre-split segment
sequence against a nested mapping. Navigation never raises for missing or
malformed nodes; it returns a structured result instead:

    PathFound    - the parent container and final key of the addressed node
    PathNotFound - the originally requested full path and where it failed

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Literal

from dictl10n.constants import PATH_SEPARATOR

__all__ = [
    "NavigationResult",
    "PathFound",
    "PathNotFound",
    "join_path",
    "navigate",
    "split_path",
]


def split_path(path: str | Sequence[str]) -> tuple[str, ...]:
    """Split a dotted key path into segments.

    Strings are split on the path separator; sequences are taken as already
    split. An empty string yields no segments.

    Example:
        >>> split_path("user.profile.title")
        ('user', 'profile', 'title')
        >>> split_path(["user", "profile"])
        ('user', 'profile')
    """
    if isinstance(path, str):
        if not path:
            return ()
        return tuple(path.split(PATH_SEPARATOR))
    return tuple(path)


def join_path(segments: Sequence[str]) -> str:
    """Join key segments back into a dotted path string."""
    return PATH_SEPARATOR.join(segments)


@dataclass(frozen=True, slots=True)
class PathFound:
    """Successful navigation result.

    Attributes:
        container: Mapping that directly holds the addressed node
        key: Final segment, the addressed node's key within ``container``
        path: Full dotted path that was navigated
    """

    container: Mapping[str, object]
    key: str
    path: str
    found: Literal[True] = True

    @property
    def value(self) -> object:
        """Get the addressed node."""
        return self.container[self.key]


@dataclass(frozen=True, slots=True)
class PathNotFound:
    """Failed navigation result.

    Attributes:
        path: The originally requested full path (not just the failing suffix)
        failed_segment: Segment that could not be resolved (None for empty paths)
        depth: Zero-based index of the failing segment
    """

    path: str
    failed_segment: str | None = None
    depth: int = 0
    found: Literal[False] = False


type NavigationResult = PathFound | PathNotFound


def navigate(root: Mapping[str, object], path: str | Sequence[str]) -> NavigationResult:
    """Walk ``root`` one segment at a time.

    Every intermediate node must be a mapping containing the next segment;
    the final segment must be present in its container. The addressed node
    itself may be of any type.

    Args:
        root: Nested dictionary to navigate
        path: Dotted path string or sequence of segments

    Returns:
        PathFound on success, PathNotFound otherwise

    Example:
        >>> result = navigate({"a": {"b": {"en": "x"}}}, "a.b")
        >>> result.found, result.key
        (True, 'b')
        >>> navigate({"a": {}}, "a.b.c").path
        'a.b.c'
    """
    segments = split_path(path)
    full_path = path if isinstance(path, str) else join_path(segments)

    if not segments:
        return PathNotFound(path=full_path)

    container: object = root
    for depth, segment in enumerate(segments[:-1]):
        if not isinstance(container, Mapping) or segment not in container:
            return PathNotFound(path=full_path, failed_segment=segment, depth=depth)
        container = container[segment]

    last = segments[-1]
    if not isinstance(container, Mapping) or last not in container:
        return PathNotFound(path=full_path, failed_segment=last, depth=len(segments) - 1)

    return PathFound(container=container, key=last, path=full_path)
