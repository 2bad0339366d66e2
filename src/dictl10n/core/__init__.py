"""Pure helpers behind the localization engine.

Submodules:
    templates   - {{placeholder}} substitution
    navigation  - dotted key path navigation
    dictionary  - Locale Leaf classification and available-locale collection
    merge       - deep dictionary merge (source wins), deep copy and freeze
    resolver    - locale fallback resolution
    babel_compat - optional Babel import guards for locale tooling

Every helper is a pure function over in-memory mappings and never raises
for data-shape problems.

Python 3.13+. Zero external dependencies.
"""

from .dictionary import (
    collect_available_locales,
    is_locale_leaf,
    iter_locale_leaves,
    leaf_locales,
)
from .merge import copy_dictionary, freeze_dictionary, merge_all, merge_dictionaries
from .navigation import (
    NavigationResult,
    PathFound,
    PathNotFound,
    join_path,
    navigate,
    split_path,
)
from .resolver import LocaleResolution, base_language, resolve_locale
from .templates import find_placeholders, has_placeholders, substitute

__all__ = [
    "LocaleResolution",
    "NavigationResult",
    "PathFound",
    "PathNotFound",
    "base_language",
    "collect_available_locales",
    "copy_dictionary",
    "find_placeholders",
    "freeze_dictionary",
    "has_placeholders",
    "is_locale_leaf",
    "iter_locale_leaves",
    "join_path",
    "leaf_locales",
    "merge_all",
    "merge_dictionaries",
    "navigate",
    "resolve_locale",
    "split_path",
    "substitute",
]
