"""Locale resolution with a fixed fallback precedence.

Maps a requested locale onto a collection of available locales. The same
algorithm runs at two granularities:

- Globally, to pick the engine's current locale from every locale in the
  dictionary.
- Locally, per lookup, to pick a locale from a single Locale Leaf, since
  partial translations give each key its own coverage.

Resolution order (first match wins):
    1. EXACT          - requested locale is available verbatim
    2. BASE_LANGUAGE  - "en" for a requested "en-GB"
    3. VARIANT        - first available "fr-*" for a requested "fr" or "fr-BE"
    4. ANY_AVAILABLE  - first available locale
    5. UNRESOLVED     - nothing available; requested locale kept verbatim

"First" always means iteration order of the available collection. The
engine feeds this with locales in depth-first dictionary declaration order,
so ties break on the first locale encountered while walking the dictionary.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from dictl10n.constants import LOCALE_SEPARATOR
from dictl10n.enums import MatchKind

__all__ = [
    "LocaleResolution",
    "base_language",
    "resolve_locale",
]


def base_language(locale: str) -> str:
    """Get the leading segment of a locale code.

    Example:
        >>> base_language("zh-Hant-TW")
        'zh'
        >>> base_language("en")
        'en'
    """
    return locale.split(LOCALE_SEPARATOR, 1)[0]


@dataclass(frozen=True, slots=True)
class LocaleResolution:
    """Outcome of resolving one requested locale.

    Attributes:
        requested: Locale code that was asked for
        resolved: Locale code selected (equals requested when UNRESOLVED)
        kind: Strategy that produced the match
    """

    requested: str
    resolved: str
    kind: MatchKind

    @property
    def is_fallback(self) -> bool:
        """True when something other than the exact request was selected."""
        return self.kind not in (MatchKind.EXACT, MatchKind.UNRESOLVED)

    @property
    def is_resolved(self) -> bool:
        """True when the resolved locale is actually available."""
        return self.kind is not MatchKind.UNRESOLVED


def resolve_locale(requested: str, available: Iterable[str]) -> LocaleResolution:
    """Resolve ``requested`` against ``available``.

    Args:
        requested: Locale code to resolve
        available: Available locale codes; iteration order breaks ties

    Returns:
        LocaleResolution describing the selected locale and how it matched

    Example:
        >>> resolve_locale("en-US", ["es", "en"]).resolved
        'en'
        >>> resolve_locale("fr", ["en", "fr-CM"]).kind
        <MatchKind.VARIANT: 'variant'>
    """
    # Ordered set: membership tests without losing iteration order
    candidates = dict.fromkeys(available)

    if requested in candidates:
        return LocaleResolution(requested, requested, MatchKind.EXACT)

    base = base_language(requested)
    if base != requested and base in candidates:
        return LocaleResolution(requested, base, MatchKind.BASE_LANGUAGE)

    prefix = base + LOCALE_SEPARATOR
    for candidate in candidates:
        if candidate.startswith(prefix):
            return LocaleResolution(requested, candidate, MatchKind.VARIANT)

    if candidates:
        first = next(iter(candidates))
        return LocaleResolution(requested, first, MatchKind.ANY_AVAILABLE)

    return LocaleResolution(requested, requested, MatchKind.UNRESOLVED)
