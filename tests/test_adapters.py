"""Tests for dictionary shape adapters.

Python 3.13+.
"""

from hypothesis import given

from dictl10n.core.dictionary import iter_locale_leaves, leaf_locales
from dictl10n.core.navigation import PathFound, navigate
from dictl10n.localization.adapters import from_locale_keyed, project_locale
from tests.strategies import dictionaries


class TestFromLocaleKeyed:
    """Test from_locale_keyed transposition."""

    def test_flat(self) -> None:
        """Top-level locales become leaf keys."""
        data = {"en": {"hello": "Hello"}, "es": {"hello": "Hola"}}
        assert from_locale_keyed(data) == {"hello": {"en": "Hello", "es": "Hola"}}

    def test_nested(self) -> None:
        """Nested keys are preserved."""
        data = {
            "en": {"nav": {"home": "Home", "about": "About"}},
            "es": {"nav": {"home": "Inicio"}},
        }
        assert from_locale_keyed(data) == {
            "nav": {"home": {"en": "Home", "es": "Inicio"}, "about": {"en": "About"}},
        }

    def test_non_string_values_skipped(self) -> None:
        """Numbers and lists are not translations."""
        data = {"en": {"hello": "Hello", "count": 3, "tags": ["a"]}}
        assert from_locale_keyed(data) == {"hello": {"en": "Hello"}}

    def test_non_mapping_locale_tree_skipped(self) -> None:
        """A locale whose value is not a mapping contributes nothing."""
        assert from_locale_keyed({"en": "Hello", "es": {"hello": "Hola"}}) == {
            "hello": {"es": "Hola"},
        }

    def test_empty(self) -> None:
        """Empty input yields an empty dictionary."""
        assert from_locale_keyed({}) == {}


class TestProjectLocale:
    """Test project_locale."""

    def test_exact(self) -> None:
        """Every leaf takes the requested locale."""
        dictionary = {"hello": {"en": "Hello", "es": "Hola"}, "nav": {"home": {"es": "Inicio"}}}
        assert project_locale(dictionary, "es") == {"hello": "Hola", "nav": {"home": "Inicio"}}

    def test_per_key_fallback(self) -> None:
        """Leaves lacking the locale fall back individually."""
        dictionary = {"hello": {"en": "Hello", "es": "Hola"}, "bye": {"en": "Bye"}}
        assert project_locale(dictionary, "es") == {"hello": "Hola", "bye": "Bye"}

    def test_scalars_dropped(self) -> None:
        """Values that are neither leaves nor branches are omitted."""
        assert project_locale({"version": 2, "hello": {"en": "Hi"}}, "en") == {"hello": "Hi"}

    @given(tree=dictionaries())
    def test_round_trip_through_locale_keyed(self, tree: dict[str, object]) -> None:
        """PROPERTY: projecting each locale and transposing back recovers leaf coverage."""
        locales = {locale for _path, leaf in iter_locale_leaves(tree) for locale in leaf_locales(leaf)}
        rebuilt = from_locale_keyed({locale: project_locale(tree, locale) for locale in locales})

        for path, _leaf in iter_locale_leaves(tree):
            result = navigate(rebuilt, path)
            assert isinstance(result, PathFound)
