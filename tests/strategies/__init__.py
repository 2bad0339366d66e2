"""Hypothesis strategies for dictl10n property-based testing.

Strategies are organized by domain:

- dictionaries: locale codes, locale sets, key segments, canonical dictionaries

Usage:
    from tests.strategies import dictionaries, locale_sets
    from tests.strategies.dictionaries import LOCALE_POOL, key_segments

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - locale_codes, locale_sets, dictionaries
"""

from .dictionaries import (
    BASE_LANGUAGES,
    LOCALE_POOL,
    REGIONS,
    dictionaries,
    key_segments,
    locale_codes,
    locale_leaves,
    locale_sets,
    translation_texts,
)

__all__ = [
    "BASE_LANGUAGES",
    "LOCALE_POOL",
    "REGIONS",
    "dictionaries",
    "key_segments",
    "locale_codes",
    "locale_leaves",
    "locale_sets",
    "translation_texts",
]
