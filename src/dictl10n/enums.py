"""Enumerations for dictl10n type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class MatchKind(StrEnum):
    """How a requested locale was resolved against the available locales.

    Members are listed in resolution precedence order: the resolver tries
    each strategy in turn and reports the first one that matched.

    StrEnum provides automatic string conversion: str(MatchKind.EXACT) == "exact"
    """

    EXACT = "exact"
    """Requested locale is available verbatim: en-US -> en-US"""

    BASE_LANGUAGE = "base_language"
    """Base language of the request is available: en-GB -> en"""

    VARIANT = "variant"
    """Another region/script of the same language is available: fr -> fr-CM"""

    ANY_AVAILABLE = "any_available"
    """Nothing related is available; first available locale used: ja -> en"""

    UNRESOLVED = "unresolved"
    """No locales are available at all; the request is kept verbatim"""


class LookupSurface(StrEnum):
    """Translation surface a lookup was issued from.

    The plain path surface treats absent keys as an expected condition and
    stays silent; the accessor surface reports them as diagnostics.
    """

    PATH = "path"
    """Lookup via Localization.translate("a.b.c")"""

    ACCESSOR = "accessor"
    """Lookup via Localization.accessor.a.b.c()"""


__all__ = [
    "LookupSurface",
    "MatchKind",
]
