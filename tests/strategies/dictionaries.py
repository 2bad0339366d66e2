"""Hypothesis strategies for translation dictionaries.

Provides reusable strategies for generating localization test data:
- Locale codes drawn from a pool of base languages and regional variants
- Locale sets (unique, ordered) for resolver tests
- Key path segments usable as attribute names
- Canonical dictionaries with Locale Leaves at bounded depth

Event-Emitting Strategies (HypoFuzz-Optimized):
- locale_codes: Emits l10n_locale_shape=base|regional|script
- locale_sets: Emits l10n_locale_set_size=N
- dictionaries: Emits l10n_dict_leaves=few|some|many

Python 3.13+.
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st

from dictl10n.core.dictionary import iter_locale_leaves

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn, SearchStrategy

# BCP-47 spellings as they appear in dictionaries (hyphen separated).
LOCALE_POOL = (
    "en", "en-US", "en-GB",
    "es", "es-ES", "es-MX",
    "fr", "fr-FR", "fr-CM",
    "de", "de-AT",
    "pt-BR", "pt-PT",
    "zh-Hant-TW", "zh-Hans-CN",
    "lv", "ja",
)

BASE_LANGUAGES = ("en", "es", "fr", "de", "pt", "zh", "lv", "ja")

REGIONS = ("US", "GB", "MX", "CM", "BR", "TW", "AT", "CA")

# Key segments start with a letter so they are valid accessor attributes.
_SEGMENT_FIRST_CHARS = string.ascii_lowercase
_SEGMENT_REST_CHARS = string.ascii_lowercase + string.digits + "_"

# Translation text without braces, so substitution never applies by accident.
_TEXT_CHARS = string.ascii_letters + string.digits + " ,.!?"


@st.composite
def locale_codes(draw: DrawFn) -> str:
    """Generate a locale code from the pool.

    Events emitted:
    - l10n_locale_shape=base|regional|script
    """
    code = draw(st.sampled_from(LOCALE_POOL))
    parts = code.count("-")
    shape = "base" if parts == 0 else "regional" if parts == 1 else "script"
    event(f"l10n_locale_shape={shape}")
    return code


@st.composite
def locale_sets(draw: DrawFn, min_size: int = 1, max_size: int = 5) -> list[str]:
    """Generate unique, ordered locale codes.

    Events emitted:
    - l10n_locale_set_size=N
    """
    locales = draw(
        st.lists(
            st.sampled_from(LOCALE_POOL),
            min_size=min_size,
            max_size=max_size,
            unique=True,
        )
    )
    event(f"l10n_locale_set_size={len(locales)}")
    return locales


def key_segments() -> SearchStrategy[str]:
    """Generate a single key path segment (identifier-like, no dots)."""
    return st.builds(
        lambda first, rest: first + rest,
        st.sampled_from(_SEGMENT_FIRST_CHARS),
        st.text(alphabet=_SEGMENT_REST_CHARS, max_size=8),
    )


def translation_texts() -> SearchStrategy[str]:
    """Generate plain translation text without placeholders."""
    return st.text(alphabet=_TEXT_CHARS, max_size=20)


def locale_leaves(locales: list[str] | tuple[str, ...]) -> SearchStrategy[dict[str, str]]:
    """Generate a Locale Leaf drawing locale codes from ``locales``."""
    return st.dictionaries(
        st.sampled_from(locales),
        translation_texts(),
        min_size=1,
    )


def _branches(locales: list[str], depth: int) -> SearchStrategy[dict[str, object]]:
    leaf = locale_leaves(locales)
    children = leaf if depth <= 1 else st.one_of(leaf, _branches(locales, depth - 1))
    return st.dictionaries(key_segments(), children, min_size=1, max_size=4)


@st.composite
def dictionaries(
    draw: DrawFn,
    max_depth: int = 3,
    locales: list[str] | None = None,
) -> dict[str, object]:
    """Generate a canonical dictionary (branches of Locale Leaves).

    Branch nodes only hold mappings and leaves only hold strings, so no
    generated node is ambiguous.

    Args:
        max_depth: Maximum nesting depth of branches above the leaves
        locales: Locale pool for leaves; drawn with locale_sets() if None

    Events emitted:
    - l10n_dict_leaves=few|some|many
    """
    pool = locales if locales is not None else draw(locale_sets())
    tree = draw(_branches(pool, max_depth))
    leaf_count = sum(1 for _ in iter_locale_leaves(tree))
    size_class = "few" if leaf_count <= 2 else "some" if leaf_count <= 8 else "many"
    event(f"l10n_dict_leaves={size_class}")
    return tree
