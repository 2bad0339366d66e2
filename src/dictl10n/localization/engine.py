"""Localization engine: locale state, translation lookup, change notification.

Owns the merged dictionary and the current locale, and exposes translation
over dotted key paths (translate) or a chained accessor (accessor). Built on
the pure helpers in dictl10n.core.

Key architectural decisions:
- One canonical dictionary shape (per-key Locale Leaves); locale-keyed input
  goes through from_locale_keyed() first
- Locale fallback runs twice: once engine-wide on every set_locale(), and
  again per key on every lookup, since keys have independent coverage
- Nothing raises for data problems: lookups return sentinels and problems
  are reported as Diagnostic objects to listeners and the module logger
- Explicit observer registries replace an event emitter

Initialization Behavior:
    Construction merges the given fragments, resolves the initial locale,
    then audits locale coverage (one INCOMPLETE_TRANSLATION diagnostic per
    incomplete key). An empty dictionary is reported as
    NO_LOCALES_AVAILABLE but still yields a usable engine whose lookups
    return sentinels. Construction does not notify locale listeners.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Self

from dictl10n.constants import (
    DEFAULT_LOCALE,
    FALLBACK_INVALID_KEY,
    FALLBACK_MISSING_PATH,
    FALLBACK_MISSING_TRANSLATION,
)
from dictl10n.core.dictionary import collect_available_locales, is_locale_leaf, leaf_locales
from dictl10n.core.merge import freeze_dictionary, merge_all, merge_dictionaries
from dictl10n.core.navigation import PathNotFound, navigate, split_path
from dictl10n.core.resolver import LocaleResolution, resolve_locale
from dictl10n.core.templates import substitute
from dictl10n.diagnostics import Diagnostic, DiagnosticCode, DiagnosticTemplate
from dictl10n.enums import LookupSurface
from dictl10n.localization.accessor import TranslationAccessor
from dictl10n.localization.adapters import from_locale_keyed, project_locale
from dictl10n.localization.audit import TranslationAudit, audit_dictionary
from dictl10n.localization.cache import ResolutionCache
from dictl10n.localization.cache_config import CacheConfig
from dictl10n.localization.observers import LocaleChange, Observers
from dictl10n.localization.state import LocaleMemory
from dictl10n.types import KeyPath, LocaleCode, TemplateVariables

__all__ = ["Localization"]

logger = logging.getLogger(__name__)

# Emitted on every lookup of a partially translated key, so logged at DEBUG.
# Listeners still receive every one.
_PER_LOOKUP_CODES = frozenset({DiagnosticCode.TRANSLATION_LOCALE_FALLBACK})


class Localization:
    """Dictionary-backed localization with locale fallback.

    Example:
        >>> l10n = Localization({"hello": {"en": "Hello {{name}}", "es": "Hola {{name}}"}})
        >>> l10n.locale
        'en'
        >>> l10n.translate("hello", {"name": "Ana"})
        'Hello Ana'
        >>> l10n.set_locale("es-MX").kind
        <MatchKind.BASE_LANGUAGE: 'base_language'>
        >>> l10n.accessor.hello(name="Ana")
        'Hola Ana'

    Attributes:
        locale: Current resolved locale
        default_locale: Locale set_locale() falls back to when called without one
        dictionary: Read-only view of the merged dictionary
        available_locales: Every locale provided by some key, first-encountered order
    """

    __slots__ = (
        "_audit_enabled",
        "_available_locales",
        "_cache",
        "_cache_config",
        "_default_locale",
        "_diagnostic_observers",
        "_dictionary",
        "_gaps",
        "_locale",
        "_locale_observers",
        "_memory",
        "_resolution",
        "_view",
    )

    def __init__(
        self,
        *dictionaries: Mapping[str, object],
        default_locale: LocaleCode | None = None,
        on_locale_change: Callable[[LocaleChange], object] | None = None,
        on_diagnostic: Callable[[Diagnostic], object] | None = None,
        memory: LocaleMemory | None = None,
        cache: CacheConfig | None = None,
        audit: bool = True,
    ) -> None:
        """Initialize the engine.

        Args:
            *dictionaries: Dictionary fragments merged left to right (later
                fragments win). No fragments means an empty dictionary.
            default_locale: Locale to request initially and on set_locale()
                without arguments (default: "en")
            on_locale_change: Listener registered before construction; called
                on every later set_locale() and merge_dictionary()
            on_diagnostic: Listener registered before construction, so it also
                receives construction-time diagnostics
            memory: Caller-owned slot; a remembered locale takes precedence
                over default_locale for the initial request, and every
                explicit set_locale() request is written back
            cache: Cache configuration for per-key locale resolution.
                ``None`` disables caching (default).
            audit: Report keys lacking some available locales at construction
                and newly introduced gaps on merge_dictionary() (default: True)

        Raises:
            TypeError: If a dictionary fragment is not a mapping
        """
        for fragment in dictionaries:
            self._check_fragment(fragment)

        self._default_locale: LocaleCode = (
            default_locale if default_locale is not None else DEFAULT_LOCALE
        )
        self._memory = memory
        self._cache_config = cache
        self._cache: ResolutionCache | None = (
            ResolutionCache(cache.size) if cache is not None else None
        )
        self._audit_enabled = audit

        self._locale_observers: Observers[LocaleChange] = Observers()
        self._diagnostic_observers: Observers[Diagnostic] = Observers()
        if on_locale_change is not None:
            self._locale_observers.add(on_locale_change)
        if on_diagnostic is not None:
            self._diagnostic_observers.add(on_diagnostic)

        self._dictionary: dict[str, object] = merge_all(*dictionaries)
        self._view: Mapping[str, object] | None = None
        self._available_locales = collect_available_locales(self._dictionary)

        requested = (
            memory.recall(self._default_locale) if memory is not None else self._default_locale
        )
        self._resolution = resolve_locale(requested, self._available_locales)
        self._locale = self._resolution.resolved
        self._report_resolution(self._resolution)

        self._gaps: frozenset[tuple[str, str]] = frozenset()
        if audit:
            self._report_audit()

        logger.debug(
            "Localization created: locale=%s, available=%s",
            self._locale,
            ", ".join(self._available_locales) or "<none>",
        )

    @classmethod
    def from_locale_keyed(cls, data: Mapping[str, object], **kwargs: object) -> Self:
        """Create an engine from a locale-keyed dictionary.

        Example:
            >>> l10n = Localization.from_locale_keyed(
            ...     {"en": {"hello": "Hello"}, "es": {"hello": "Hola"}},
            ...     default_locale="es",
            ... )
            >>> l10n.translate("hello")
            'Hola'
        """
        return cls(from_locale_keyed(data), **kwargs)  # type: ignore[arg-type]

    @staticmethod
    def _check_fragment(fragment: object) -> None:
        if not isinstance(fragment, Mapping):
            msg = f"Dictionary fragments must be mappings, got {type(fragment).__name__}"
            raise TypeError(msg)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def locale(self) -> LocaleCode:
        """Get the current resolved locale."""
        return self._locale

    @property
    def default_locale(self) -> LocaleCode:
        """Get the locale set_locale() resets to when called without arguments."""
        return self._default_locale

    @property
    def dictionary(self) -> Mapping[str, object]:
        """Get a read-only view of the merged dictionary, at every level."""
        if self._view is None:
            self._view = freeze_dictionary(self._dictionary)
        return self._view

    @property
    def available_locales(self) -> tuple[LocaleCode, ...]:
        """Get every locale provided by at least one key, first-encountered order."""
        return self._available_locales

    @property
    def resolution(self) -> LocaleResolution:
        """Get the resolution that produced the current locale."""
        return self._resolution

    @property
    def memory(self) -> LocaleMemory | None:
        """Get the caller-owned locale memory, if any."""
        return self._memory

    @property
    def cache_enabled(self) -> bool:
        """Get whether per-key resolution caching is enabled."""
        return self._cache is not None

    @property
    def cache_config(self) -> CacheConfig | None:
        """Get the cache configuration (None when caching is disabled)."""
        return self._cache_config

    def get_cache_stats(self) -> dict[str, int | float] | None:
        """Get resolution cache statistics, or None when caching is disabled."""
        if self._cache is None:
            return None
        return self._cache.get_stats()

    def clear_cache(self) -> None:
        """Clear the per-key resolution cache."""
        if self._cache is not None:
            self._cache.clear()
            logger.debug("Resolution cache manually cleared")

    # ------------------------------------------------------------------
    # Locale selection
    # ------------------------------------------------------------------

    def set_locale(self, locale: LocaleCode | None = None) -> LocaleResolution:
        """Resolve and activate a locale.

        Without an argument the engine resets toward its default locale,
        not the current one. Locale listeners are notified on every call,
        even when the resolved locale does not change.

        Args:
            locale: Locale to request (default: default_locale)

        Returns:
            LocaleResolution describing how the request was matched
        """
        requested = locale if locale is not None else self._default_locale
        if self._memory is not None:
            self._memory.remember(requested)
        return self._activate(requested)

    def _activate(self, requested: LocaleCode) -> LocaleResolution:
        previous = self._locale
        resolution = resolve_locale(requested, self._available_locales)
        self._resolution = resolution
        self._locale = resolution.resolved

        logger.info(
            "Locale set to '%s' (requested '%s', %s)",
            resolution.resolved,
            requested,
            resolution.kind,
        )
        self._report_resolution(resolution)
        self._locale_observers.notify(
            LocaleChange(
                locale=resolution.resolved,
                previous_locale=previous,
                requested_locale=requested,
                kind=resolution.kind,
            )
        )
        return resolution

    # ------------------------------------------------------------------
    # Dictionary
    # ------------------------------------------------------------------

    def merge_dictionary(self, dictionary: Mapping[str, object]) -> None:
        """Merge a dictionary fragment into the current dictionary.

        The fragment wins on conflicts. Available locales are recomputed,
        the resolution cache is cleared, and the current locale is resolved
        again against the new dictionary; locale listeners are notified.
        The locale memory is not touched.

        Raises:
            TypeError: If dictionary is not a mapping
        """
        self._check_fragment(dictionary)

        self._dictionary = merge_dictionaries(self._dictionary, dictionary)
        self._view = None
        self._available_locales = collect_available_locales(self._dictionary)
        if self._cache is not None:
            self._cache.clear()
        if self._audit_enabled:
            self._report_audit()

        self._activate(self._locale)

    def audit(self) -> TranslationAudit:
        """Get the locale coverage report for the current dictionary."""
        return audit_dictionary(self._dictionary, self._available_locales)

    def view(self, locale: LocaleCode | None = None) -> dict[str, object]:
        """Get the dictionary projected onto one locale.

        Every key resolves with the same per-key fallback as translate().
        Strings are returned without template substitution.

        Args:
            locale: Locale to project (default: current locale)
        """
        return project_locale(self._dictionary, locale if locale is not None else self._locale)

    # ------------------------------------------------------------------
    # Translation
    # ------------------------------------------------------------------

    @property
    def accessor(self) -> TranslationAccessor:
        """Get the root of the chained translation accessor.

        Example:
            >>> l10n.accessor.user.greeting(name="Ana")
            'Hello Ana'
        """
        return TranslationAccessor(self)

    def translate(self, path: KeyPath, variables: TemplateVariables | None = None) -> str:
        """Translate a key path for the current locale.

        Args:
            path: Dotted key path ("user.greeting") or sequence of segments
            variables: Template variables; substitution only runs when given

        Returns:
            - The translation for the current locale, or for the key's best
              fallback locale when the key lacks it
            - "missing <path>" when the path does not exist
            - "[missing translation: <path>]" when the path exists but does
              not address a Locale Leaf
        """
        return self._lookup(path, variables, LookupSurface.PATH)

    def has(self, path: KeyPath) -> bool:
        """Check whether a key path addresses a Locale Leaf."""
        result = navigate(self._dictionary, path)
        if isinstance(result, PathNotFound):
            return False
        return is_locale_leaf(result.value)

    def _lookup(
        self,
        path: KeyPath,
        variables: TemplateVariables | None,
        surface: LookupSurface,
    ) -> str:
        result = navigate(self._dictionary, path)

        if isinstance(result, PathNotFound):
            # Absent keys are routine for partial dictionaries on the plain
            # surface; only the accessor surface reports them.
            if surface is LookupSurface.ACCESSOR:
                self._emit(DiagnosticTemplate.key_not_found(result.path))
                return FALLBACK_INVALID_KEY.format(path=result.path)
            logger.debug("Translation key '%s' not found", result.path)
            return FALLBACK_MISSING_PATH.format(path=result.path)

        node = result.value
        resolution = (
            self._resolve_leaf(split_path(path), node) if is_locale_leaf(node) else None
        )
        if resolution is None or not resolution.is_resolved:
            self._emit(DiagnosticTemplate.translation_unavailable(result.path, self._locale))
            return FALLBACK_MISSING_TRANSLATION.format(path=result.path)

        if resolution.is_fallback:
            self._emit(DiagnosticTemplate.translation_locale_fallback(result.path, resolution))

        text = node[resolution.resolved]  # type: ignore[index]
        if variables is not None:
            return substitute(text, variables)
        return text

    def _resolve_leaf(
        self, segments: tuple[str, ...], leaf: Mapping[str, object]
    ) -> LocaleResolution:
        if self._cache is not None:
            cached = self._cache.get(segments, self._locale)
            if cached is not None:
                return cached

        resolution = resolve_locale(self._locale, leaf_locales(leaf))

        if self._cache is not None:
            self._cache.put(segments, self._locale, resolution)
        return resolution

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def add_locale_listener(self, callback: Callable[[LocaleChange], object]) -> Callable[[], None]:
        """Register a locale change listener.

        Returns:
            Zero-argument function that removes the listener
        """
        return self._locale_observers.add(callback)

    def remove_locale_listener(self, callback: Callable[[LocaleChange], object]) -> bool:
        """Remove a locale change listener.

        Returns:
            True if the listener was registered
        """
        return self._locale_observers.remove(callback)

    def add_diagnostic_listener(self, callback: Callable[[Diagnostic], object]) -> Callable[[], None]:
        """Register a diagnostic listener.

        Returns:
            Zero-argument function that removes the listener
        """
        return self._diagnostic_observers.add(callback)

    def remove_diagnostic_listener(self, callback: Callable[[Diagnostic], object]) -> bool:
        """Remove a diagnostic listener.

        Returns:
            True if the listener was registered
        """
        return self._diagnostic_observers.remove(callback)

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def _emit(self, diagnostic: Diagnostic) -> None:
        if diagnostic.is_error:
            level = logging.ERROR
        elif diagnostic.code in _PER_LOOKUP_CODES:
            level = logging.DEBUG
        else:
            level = logging.WARNING
        logger.log(level, "%s: %s", diagnostic.code.name, diagnostic.message)
        self._diagnostic_observers.notify(diagnostic)

    def _report_resolution(self, resolution: LocaleResolution) -> None:
        diagnostic = DiagnosticTemplate.for_resolution(resolution)
        if diagnostic is not None:
            self._emit(diagnostic)

    def _report_audit(self) -> None:
        """Report coverage gaps not reported before."""
        report = self.audit()
        for entry in report.missing:
            new_missing = tuple(
                locale for locale in entry.missing_locales if (entry.path, locale) not in self._gaps
            )
            if new_missing:
                self._emit(DiagnosticTemplate.incomplete_translation(entry.path, new_missing))
        self._gaps = report.gaps()

    def __repr__(self) -> str:
        """Return a concise description for debugging."""
        return (
            f"Localization(locale={self._locale!r}, "
            f"default_locale={self._default_locale!r}, "
            f"available_locales={self._available_locales!r})"
        )
