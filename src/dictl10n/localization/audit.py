"""Translation coverage audit.

Reports which keys lack which locales. A locale counts as available when
any leaf in the dictionary provides it; every leaf missing an available
locale is incomplete and will rely on per-key fallback for that locale.

Components:
    MissingTranslation - One incomplete key and the locales it lacks
    TranslationAudit   - Immutable coverage report for a whole dictionary
    audit_dictionary   - Builds a TranslationAudit

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from dictl10n.core.dictionary import collect_available_locales, iter_locale_leaves, leaf_locales

__all__ = [
    "MissingTranslation",
    "TranslationAudit",
    "audit_dictionary",
]


@dataclass(frozen=True, slots=True)
class MissingTranslation:
    """A key lacking some available locales.

    Attributes:
        path: Dotted key path of the leaf
        missing_locales: Available locales the leaf does not provide,
            in available-locale order
    """

    path: str
    missing_locales: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class TranslationAudit:
    """Coverage report for a dictionary.

    Attributes:
        available_locales: Locales provided by at least one leaf
        leaf_count: Number of Locale Leaves audited
        missing: Incomplete keys in depth-first declaration order

    Example:
        >>> audit = audit_dictionary({"a": {"en": "A", "es": "A"}, "b": {"en": "B"}})
        >>> audit.is_complete
        False
        >>> audit.missing[0]
        MissingTranslation(path='b', missing_locales=('es',))
        >>> audit.coverage("es")
        0.5
    """

    available_locales: tuple[str, ...]
    leaf_count: int
    missing: tuple[MissingTranslation, ...]

    @property
    def is_complete(self) -> bool:
        """True when every leaf provides every available locale."""
        return not self.missing

    def gaps(self) -> frozenset[tuple[str, str]]:
        """Get every (key path, missing locale) pair."""
        return frozenset(
            (entry.path, locale)
            for entry in self.missing
            for locale in entry.missing_locales
        )

    def coverage(self, locale: str) -> float:
        """Fraction of leaves that provide ``locale`` (0.0-1.0).

        Returns 0.0 for an empty dictionary or an unavailable locale.
        """
        if self.leaf_count == 0 or locale not in self.available_locales:
            return 0.0
        lacking = sum(1 for entry in self.missing if locale in entry.missing_locales)
        return (self.leaf_count - lacking) / self.leaf_count


def audit_dictionary(
    dictionary: Mapping[str, object],
    available: Iterable[str] | None = None,
) -> TranslationAudit:
    """Audit locale coverage of every leaf.

    Args:
        dictionary: Canonical dictionary
        available: Locales every leaf should provide; defaults to the
            locales collected from the dictionary itself

    Returns:
        TranslationAudit
    """
    expected = tuple(available) if available is not None else collect_available_locales(dictionary)

    leaf_count = 0
    missing: list[MissingTranslation] = []
    for path, leaf in iter_locale_leaves(dictionary):
        leaf_count += 1
        provided = set(leaf_locales(leaf))
        lacking = tuple(locale for locale in expected if locale not in provided)
        if lacking:
            missing.append(MissingTranslation(path=path, missing_locales=lacking))

    return TranslationAudit(
        available_locales=expected,
        leaf_count=leaf_count,
        missing=tuple(missing),
    )
