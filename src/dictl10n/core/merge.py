"""Deep merge for translation dictionaries.

Source values win on conflict. When both sides hold a mapping at the same
key the merge recurses, so two Locale Leaves for the same translation key
union their locale coverage. Everything else (strings, lists, numbers) is
replaced wholesale.

Inputs are never mutated, and the result shares no mapping node with
either input: later edits to a fragment cannot reach a merged dictionary.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

__all__ = [
    "copy_dictionary",
    "freeze_dictionary",
    "merge_all",
    "merge_dictionaries",
]


def _copy_node(value: object) -> object:
    if isinstance(value, Mapping):
        return copy_dictionary(value)
    return value


def copy_dictionary(dictionary: Mapping[str, object]) -> dict[str, object]:
    """Copy every mapping level of a dictionary into new dicts.

    Non-mapping values (strings, numbers, lists) are carried over as-is.
    """
    return {key: _copy_node(value) for key, value in dictionary.items()}


def freeze_dictionary(dictionary: Mapping[str, object]) -> Mapping[str, object]:
    """Wrap every mapping level in a read-only MappingProxyType.

    Example:
        >>> frozen = freeze_dictionary({"hello": {"en": "Hi"}})
        >>> frozen["hello"]["es"] = "Hola"
        Traceback (most recent call last):
        TypeError: 'mappingproxy' object does not support item assignment
    """
    return MappingProxyType(
        {
            key: freeze_dictionary(value) if isinstance(value, Mapping) else value
            for key, value in dictionary.items()
        }
    )


def merge_dictionaries(
    target: Mapping[str, object],
    source: Mapping[str, object],
) -> dict[str, object]:
    """Deep-merge ``source`` over ``target``.

    Args:
        target: Base dictionary
        source: Dictionary whose values override ``target``

    Returns:
        New dictionary; keys keep target order, new source keys are appended

    Example:
        >>> merge_dictionaries({"hello": {"en": "Hi"}}, {"hello": {"es": "Hola"}})
        {'hello': {'en': 'Hi', 'es': 'Hola'}}
    """
    output = copy_dictionary(target)

    for key, source_value in source.items():
        target_value = output.get(key)
        if isinstance(source_value, Mapping) and isinstance(target_value, Mapping):
            output[key] = merge_dictionaries(target_value, source_value)
        else:
            output[key] = _copy_node(source_value)

    return output


def merge_all(*dictionaries: Mapping[str, object]) -> dict[str, object]:
    """Merge dictionaries left to right; later fragments win.

    Returns:
        Merged dictionary (empty dict when no fragments are given)
    """
    merged: dict[str, object] = {}
    for dictionary in dictionaries:
        merged = merge_dictionaries(merged, dictionary)
    return merged
