"""dictl10n - Dictionary-backed localization with locale fallback.

Translations live in a nested dictionary whose bottom nodes map locale codes
to template strings. The engine resolves a current locale with a fixed
fallback order (exact, base language, regional variant, any available),
repeats that fallback per key so partially translated dictionaries still
render, and substitutes {{placeholder}} variables.

Public API:
    Localization - Engine: set_locale, translate, accessor, merge_dictionary
    LocaleMemory - Caller-owned slot remembering the last requested locale
    LocaleChange - Event delivered to locale listeners
    LocaleResolution - Outcome of one locale resolution
    MatchKind - How a requested locale was matched
    CacheConfig - Per-key resolution cache settings
    Diagnostic - Structured report of a localization problem
    DiagnosticCode - Diagnostic identifiers
    resolve_locale - Pure locale fallback resolution
    substitute - Pure {{placeholder}} substitution
    from_locale_keyed - Transpose locale-keyed data into the canonical shape

Submodules:
    dictl10n.core - Pure helpers (templates, navigation, merge, resolver)
    dictl10n.diagnostics - Diagnostic codes, templates, formatter
    dictl10n.localization - Engine, accessor, observers, audit, cache
    dictl10n.locale_utils - Locale normalization and optional Babel lookups
"""

from .core import LocaleResolution, resolve_locale, substitute
from .diagnostics import Diagnostic, DiagnosticCode
from .enums import MatchKind
from .localization import (
    CacheConfig,
    LocaleChange,
    LocaleMemory,
    Localization,
    from_locale_keyed,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("dictl10n")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CacheConfig",
    "Diagnostic",
    "DiagnosticCode",
    "LocaleChange",
    "LocaleMemory",
    "LocaleResolution",
    "Localization",
    "MatchKind",
    "__version__",
    "from_locale_keyed",
    "resolve_locale",
    "substitute",
]
