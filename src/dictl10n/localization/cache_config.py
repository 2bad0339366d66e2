"""Cache configuration for Localization.

Provides a single frozen dataclass that encapsulates cache-related
parameters, so the engine constructor takes one typed object instead of
loose keyword arguments.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from dictl10n.constants import DEFAULT_CACHE_SIZE

__all__ = ["CacheConfig"]


@dataclass(frozen=True, slots=True)
class CacheConfig:
    """Immutable configuration for per-key locale resolution caching.

    Constructing ``CacheConfig()`` with no arguments produces a usable
    configuration. Pass an instance to ``Localization(cache=CacheConfig(...))``
    to enable caching.

    Attributes:
        size: Maximum cached (key path, locale) resolutions (default: 1000).

    Example:
        >>> l10n = Localization(dictionary, cache=CacheConfig(size=500))
        >>> l10n.cache_enabled
        True
        >>> l10n.cache_config.size
        500
    """

    size: int = DEFAULT_CACHE_SIZE

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If size is not positive.
        """
        if self.size <= 0:
            msg = "size must be positive"
            raise ValueError(msg)
