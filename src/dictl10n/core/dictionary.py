"""Translation dictionary model helpers.

A dictionary is a nested mapping whose bottom nodes are Locale Leaves:
mappings from locale code to translated string. Leaves carry no structural
tag; a mapping is classified as a leaf when at least one of its immediate
values is a string. Nodes mixing strings with nested mappings are left to
the caller to avoid.

Traversal is depth-first in key declaration order, which makes the
"first encountered" locale deterministic for fallback tie-breaking.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TypeIs

from dictl10n.constants import PATH_SEPARATOR

__all__ = [
    "collect_available_locales",
    "is_locale_leaf",
    "iter_locale_leaves",
    "leaf_locales",
]


def is_locale_leaf(node: object) -> TypeIs[Mapping[str, object]]:
    """Check whether a node is a Locale Leaf.

    Args:
        node: Any dictionary node

    Returns:
        True if node is a mapping with at least one string value
    """
    if not isinstance(node, Mapping):
        return False
    return any(isinstance(value, str) for value in node.values())


def leaf_locales(leaf: Mapping[str, object]) -> tuple[str, ...]:
    """Get the locales a leaf provides, in declaration order.

    Only keys holding string values count as locales.
    """
    return tuple(locale for locale, value in leaf.items() if isinstance(value, str))


def iter_locale_leaves(
    dictionary: Mapping[str, object],
    prefix: str = "",
) -> Iterator[tuple[str, Mapping[str, object]]]:
    """Yield (dotted path, leaf) pairs depth-first in declaration order.

    Non-mapping values outside of leaves are skipped.

    Example:
        >>> list(iter_locale_leaves({"a": {"b": {"en": "x"}}, "c": {"en": "y"}}))
        [('a.b', {'en': 'x'}), ('c', {'en': 'y'})]
    """
    for key, value in dictionary.items():
        path = f"{prefix}{PATH_SEPARATOR}{key}" if prefix else key
        if is_locale_leaf(value):
            yield path, value
        elif isinstance(value, Mapping):
            yield from iter_locale_leaves(value, path)


def collect_available_locales(dictionary: Mapping[str, object]) -> tuple[str, ...]:
    """Collect every locale code used by any leaf.

    Returns:
        Locale codes in first-encountered order (depth-first, declaration
        order), without duplicates

    Example:
        >>> collect_available_locales({"a": {"es": "x", "en": "y"}, "b": {"fr": "z"}})
        ('es', 'en', 'fr')
    """
    # dict.fromkeys() removes duplicates while maintaining insertion order
    ordered: dict[str, None] = {}
    for _path, leaf in iter_locale_leaves(dictionary):
        ordered.update(dict.fromkeys(leaf_locales(leaf)))
    return tuple(ordered)
