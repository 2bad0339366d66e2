"""Dictionary shape adapters.

The engine works on one canonical shape: per-key Locale Leaves.

    {"hello": {"en": "Hello", "es": "Hola"}}

Translation data often arrives locale-keyed instead:

    {"en": {"hello": "Hello"}, "es": {"hello": "Hola"}}

from_locale_keyed() transposes the latter into the former before any core
logic runs. project_locale() goes the other way for a single locale,
resolving every leaf with per-key fallback.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping

from dictl10n.core.dictionary import is_locale_leaf, leaf_locales
from dictl10n.core.resolver import resolve_locale

__all__ = [
    "from_locale_keyed",
    "project_locale",
]


def from_locale_keyed(data: Mapping[str, object]) -> dict[str, object]:
    """Transpose a locale-keyed dictionary into per-key Locale Leaves.

    Top-level keys are locale codes; below each one is a nested mapping of
    translation keys to strings. Values that are neither strings nor
    mappings are skipped. A key holding a string in one locale and a nested
    mapping in another produces an ambiguous node; callers must avoid that.

    Args:
        data: Mapping of locale code to nested translations

    Returns:
        Canonical dictionary with locale codes at the leaves

    Example:
        >>> from_locale_keyed({"en": {"hello": "Hello"}, "es": {"hello": "Hola"}})
        {'hello': {'en': 'Hello', 'es': 'Hola'}}
    """
    canonical: dict[str, object] = {}
    for locale, tree in data.items():
        if isinstance(tree, Mapping):
            _transpose_into(canonical, tree, locale)
    return canonical


def _transpose_into(target: dict[str, object], tree: Mapping[str, object], locale: str) -> None:
    for key, value in tree.items():
        if isinstance(value, str):
            leaf = target.setdefault(key, {})
            if isinstance(leaf, dict):
                leaf[locale] = value
        elif isinstance(value, Mapping):
            branch = target.setdefault(key, {})
            if isinstance(branch, dict):
                _transpose_into(branch, value, locale)


def project_locale(dictionary: Mapping[str, object], locale: str) -> dict[str, object]:
    """Build the per-locale view of a canonical dictionary.

    Every Locale Leaf is replaced by its best translation for ``locale``,
    chosen with the same fallback order as translate(). Leaves with no
    usable locale are omitted; nested mappings are kept.

    Args:
        dictionary: Canonical dictionary
        locale: Locale to project

    Returns:
        Nested mapping of translation keys to strings

    Example:
        >>> project_locale({"hello": {"en": "Hello", "es": "Hola"}}, "es-MX")
        {'hello': 'Hola'}
    """
    view: dict[str, object] = {}
    for key, value in dictionary.items():
        if is_locale_leaf(value):
            resolution = resolve_locale(locale, leaf_locales(value))
            if resolution.is_resolved:
                view[key] = value[resolution.resolved]
        elif isinstance(value, Mapping):
            view[key] = project_locale(value, locale)
    return view
