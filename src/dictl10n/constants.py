"""Shared constants for dictl10n.

This module provides centralized configuration constants used across
the core helpers and the localization engine. Placing constants here
avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Locale defaults: Seed locale and locale code structure
- Key paths: Separator used by dotted translation keys
- Cache limits: Memory bounds for caching subsystems
- Fallback strings: Sentinels returned instead of raising

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE",
    "LOCALE_SEPARATOR",
    # Key paths
    "PATH_SEPARATOR",
    # Cache limits
    "DEFAULT_CACHE_SIZE",
    "MAX_LOCALE_CACHE_SIZE",
    # Fallback strings
    "FALLBACK_MISSING_PATH",
    "FALLBACK_MISSING_TRANSLATION",
    "FALLBACK_INVALID_KEY",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale requested when neither a default locale nor a remembered locale
# is supplied to the engine.
DEFAULT_LOCALE: str = "en"

# Separator between the base language and the region/script subtags.
# Only the first occurrence is significant: "zh-Hant-TW" -> base "zh".
LOCALE_SEPARATOR: str = "-"

# ============================================================================
# KEY PATHS
# ============================================================================

# Dotted key paths ("user.profile.title") are split on this separator.
PATH_SEPARATOR: str = "."

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Default maximum entries for the per-key locale resolution cache.
# One entry per (key path, locale) pair; a typical UI has <500 keys.
DEFAULT_CACHE_SIZE: int = 1000

# Maximum cached Babel Locale instances used by the locale tooling.
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Template patterns for contextual fallbacks (preserve what was requested).
# These are format strings - use .format(path=...).

# Key path does not exist in the dictionary (plain translate surface).
FALLBACK_MISSING_PATH: str = "missing {path}"

# Key path exists but no usable locale could be selected for it.
FALLBACK_MISSING_TRANSLATION: str = "[missing translation: {path}]"

# Accessor chain assembled a path that does not exist in the dictionary.
FALLBACK_INVALID_KEY: str = "[invalid key: {path}]"
