"""Localization engine package.

Provides the engine and everything that hangs off it: the chained accessor,
observer registries, locale memory, shape adapters, coverage audit, and the
per-key resolution cache.

Submodules:
    engine       - Localization (locale state, lookup, change notification)
    accessor     - TranslationAccessor (chained key path lookups)
    observers    - Observers registry, LocaleChange events
    state        - LocaleMemory (caller-owned locale persistence)
    adapters     - from_locale_keyed, project_locale
    audit        - TranslationAudit, MissingTranslation, audit_dictionary
    cache        - ResolutionCache (LRU)
    cache_config - CacheConfig

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from dictl10n.localization.accessor import TranslationAccessor
from dictl10n.localization.adapters import from_locale_keyed, project_locale
from dictl10n.localization.audit import MissingTranslation, TranslationAudit, audit_dictionary
from dictl10n.localization.cache import ResolutionCache
from dictl10n.localization.cache_config import CacheConfig
from dictl10n.localization.engine import Localization
from dictl10n.localization.observers import LocaleChange, Observers
from dictl10n.localization.state import LocaleMemory

__all__ = [
    # Engine
    "Localization",
    "TranslationAccessor",
    # Observability
    "LocaleChange",
    "Observers",
    # Persistence
    "LocaleMemory",
    # Dictionary shapes
    "from_locale_keyed",
    "project_locale",
    # Coverage
    "MissingTranslation",
    "TranslationAudit",
    "audit_dictionary",
    # Caching
    "CacheConfig",
    "ResolutionCache",
]
