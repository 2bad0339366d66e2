"""Locale utilities: code normalization, system detection, CLDR tooling.

The engine treats locale codes as opaque strings and never validates them.
These helpers serve the host application and tooling around it:

- normalize_locale / to_posix_locale convert between BCP-47 (en-US) and
  POSIX (en_US) spellings.
- get_system_locale seeds a default locale from the OS environment.
- get_babel_locale, is_known_locale and get_locale_display_name check codes
  against CLDR and render human-readable names. They require the optional
  Babel dependency (pip install dictl10n[babel]).

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import os
from typing import TYPE_CHECKING

from dictl10n.constants import DEFAULT_LOCALE, LOCALE_SEPARATOR, MAX_LOCALE_CACHE_SIZE
from dictl10n.core.babel_compat import get_unknown_locale_error, require_babel

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_locale_display_name",
    "get_system_locale",
    "is_known_locale",
    "normalize_locale",
    "to_posix_locale",
]

logger = logging.getLogger(__name__)

# POSIX pseudo-locales that carry no language information
_PSEUDO_LOCALES = frozenset({"C", "POSIX", ""})


def normalize_locale(locale_code: str) -> str:
    """Convert a POSIX-style locale code to the BCP-47 spelling used in dictionaries.

    Strips encoding (".UTF-8") and modifier ("@euro") suffixes and replaces
    underscores with hyphens. Case is preserved, since dictionary keys are
    matched case-sensitively.

    Args:
        locale_code: Locale code (e.g., "en_US.UTF-8", "pt_BR", "en-US")

    Returns:
        BCP-47 locale code (e.g., "en-US", "pt-BR")

    Example:
        >>> normalize_locale("de_DE.UTF-8")
        'de-DE'
        >>> normalize_locale("en")
        'en'
    """
    code = locale_code.split(".", 1)[0].split("@", 1)[0]
    return code.replace("_", LOCALE_SEPARATOR)


def to_posix_locale(locale_code: str) -> str:
    """Convert a BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> to_posix_locale("zh-Hant-TW")
        'zh_Hant_TW'
    """
    return locale_code.replace(LOCALE_SEPARATOR, "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> get_babel_locale("en-US").territory
        'US'
    """
    require_babel("get_babel_locale")
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(to_posix_locale(normalize_locale(locale_code)))


def clear_locale_cache() -> None:
    """Clear the cached Babel Locale objects."""
    get_babel_locale.cache_clear()


def is_known_locale(locale_code: str) -> bool:
    """Check whether CLDR knows a locale code.

    Useful for linting dictionaries: the engine happily serves unknown codes,
    but a typo such as "en-UK" usually signals a mistake.

    Raises:
        BabelImportError: If Babel is not installed

    Example:
        >>> is_known_locale("fr-CM")
        True
        >>> is_known_locale("xx-YY")
        False
    """
    unknown_locale_error = get_unknown_locale_error("is_known_locale")
    try:
        get_babel_locale(locale_code)
    except (unknown_locale_error, ValueError):
        return False
    return True


def get_locale_display_name(locale_code: str, display_locale: str | None = None) -> str | None:
    """Get the human-readable name of a locale.

    Args:
        locale_code: Locale to describe (e.g., "es-MX")
        display_locale: Language to render the name in; defaults to the
            locale itself (endonym)

    Returns:
        Display name (e.g., "español (México)"), or None for unknown codes

    Raises:
        BabelImportError: If Babel is not installed
    """
    unknown_locale_error = get_unknown_locale_error("get_locale_display_name")
    try:
        locale = get_babel_locale(locale_code)
        target = get_babel_locale(display_locale) if display_locale else locale
    except (unknown_locale_error, ValueError) as e:
        logger.debug("Cannot describe locale '%s': %s", locale_code, e)
        return None
    return locale.get_display_name(target)


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Filters out "C" and "POSIX" pseudo-locales and normalizes the result to
    BCP-47 so it can be passed straight to Localization(default_locale=...).

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return DEFAULT_LOCALE ("en").

    Returns:
        Detected locale code in BCP-47 format.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.

    Example:
        >>> import os
        >>> os.environ['LANG'] = 'de_DE.UTF-8'
        >>> get_system_locale()
        'de-DE'
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale and system_locale not in _PSEUDO_LOCALES:
            return normalize_locale(system_locale)
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in _PSEUDO_LOCALES:
            code = normalize_locale(value)
            if code not in _PSEUDO_LOCALES:
                return code

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return DEFAULT_LOCALE
