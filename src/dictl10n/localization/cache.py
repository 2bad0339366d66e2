"""LRU cache for per-key locale resolutions.

Memoizes the outcome of resolving the current locale against one Locale
Leaf. Keys are (key path segments, locale) so entries stay valid across
set_locale() calls; the engine clears the cache whenever the dictionary
changes.

Architecture:
    - LRU eviction via OrderedDict
    - Immutable cache keys (tuples of strings)
    - Explicit invalidation on dictionary merge
    - Zero overhead when disabled (engine holds None)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections import OrderedDict

from dictl10n.core.resolver import LocaleResolution

__all__ = ["ResolutionCache"]

# Internal type alias for cache keys (prefixed with _ per naming convention)
type _CacheKey = tuple[tuple[str, ...], str]


class ResolutionCache:
    """LRU cache mapping (key path, locale) to a LocaleResolution.

    Transparent to caller - returns None on cache miss. Not synchronized:
    an engine and its cache belong to a single owner.

    Attributes:
        maxsize: Maximum number of cache entries
        hits: Number of cache hits (for metrics)
        misses: Number of cache misses (for metrics)
    """

    __slots__ = ("_cache", "_hits", "_maxsize", "_misses")

    def __init__(self, maxsize: int = 1000) -> None:
        """Initialize resolution cache.

        Args:
            maxsize: Maximum number of entries (default: 1000)
        """
        if maxsize <= 0:
            msg = "maxsize must be positive"
            raise ValueError(msg)

        self._cache: OrderedDict[_CacheKey, LocaleResolution] = OrderedDict()
        self._maxsize = maxsize
        self._hits = 0
        self._misses = 0

    def get(self, segments: tuple[str, ...], locale: str) -> LocaleResolution | None:
        """Get cached resolution if it exists.

        Args:
            segments: Key path segments of the leaf
            locale: Requested locale

        Returns:
            Cached LocaleResolution or None
        """
        key = (segments, locale)
        if key in self._cache:
            # Move to end (mark as recently used)
            self._cache.move_to_end(key)
            self._hits += 1
            return self._cache[key]

        self._misses += 1
        return None

    def put(self, segments: tuple[str, ...], locale: str, resolution: LocaleResolution) -> None:
        """Store a resolution, evicting the LRU entry if the cache is full."""
        key = (segments, locale)
        if key in self._cache:
            self._cache.move_to_end(key)
        elif len(self._cache) >= self._maxsize:
            self._cache.popitem(last=False)  # Remove first (oldest)

        self._cache[key] = resolution

    def clear(self) -> None:
        """Clear all cached entries and reset metrics."""
        self._cache.clear()
        self._hits = 0
        self._misses = 0

    def get_stats(self) -> dict[str, int | float]:
        """Get cache statistics.

        Returns:
            Dict with keys:
            - size (int): Current number of cached entries
            - maxsize (int): Maximum cache capacity
            - hits (int): Number of cache hits
            - misses (int): Number of cache misses
            - hit_rate (float): Hit rate as percentage (0.0-100.0)
        """
        total = self._hits + self._misses
        hit_rate = (self._hits / total * 100) if total > 0 else 0.0

        return {
            "size": len(self._cache),
            "maxsize": self._maxsize,
            "hits": self._hits,
            "misses": self._misses,
            "hit_rate": round(hit_rate, 2),
        }

    def __len__(self) -> int:
        return len(self._cache)

    @property
    def maxsize(self) -> int:
        """Maximum cache size."""
        return self._maxsize

    @property
    def hits(self) -> int:
        """Number of cache hits."""
        return self._hits

    @property
    def misses(self) -> int:
        """Number of cache misses."""
        return self._misses
