"""Tests for {{placeholder}} substitution.

Python 3.13+.
"""

from hypothesis import event, given
from hypothesis import strategies as st

from dictl10n.core.templates import find_placeholders, has_placeholders, substitute


class TestSubstitute:
    """Test substitute function."""

    def test_single_placeholder(self) -> None:
        """Known placeholder replaced with its value."""
        assert substitute("Hello {{name}}", {"name": "Ana"}) == "Hello Ana"

    def test_repeated_placeholder(self) -> None:
        """Every occurrence of a placeholder is replaced."""
        assert substitute("{{x}} and {{x}}", {"x": "y"}) == "y and y"

    def test_multiple_placeholders(self) -> None:
        """Different placeholders replaced independently."""
        result = substitute("{{greeting}}, {{name}}!", {"greeting": "Hi", "name": "Bo"})
        assert result == "Hi, Bo!"

    def test_missing_variable_left_verbatim(self) -> None:
        """Placeholder without a variable stays in the output."""
        assert substitute("Hello {{name}}", {}) == "Hello {{name}}"

    def test_partial_variables(self) -> None:
        """Only known placeholders are replaced."""
        result = substitute("{{a}} {{b}}", {"a": "1"})
        assert result == "1 {{b}}"

    def test_inner_whitespace_allowed(self) -> None:
        """Spaces inside the braces are tolerated."""
        assert substitute("Hello {{ name }}", {"name": "Ana"}) == "Hello Ana"

    def test_non_string_values_stringified(self) -> None:
        """Numbers and booleans are converted with str()."""
        assert substitute("{{n}} items, {{ok}}", {"n": 3, "ok": True}) == "3 items, True"

    def test_single_pass(self) -> None:
        """Substituted values are not expanded again."""
        result = substitute("{{a}}", {"a": "{{b}}", "b": "nested"})
        assert result == "{{b}}"

    def test_single_braces_untouched(self) -> None:
        """Single-brace text is not a placeholder."""
        assert substitute("{name}", {"name": "Ana"}) == "{name}"

    def test_empty_template(self) -> None:
        """Empty template returns empty string."""
        assert substitute("", {"a": "b"}) == ""

    @given(
        template=st.text().filter(lambda s: "{{" not in s),
        variables=st.dictionaries(st.text(min_size=1), st.text()),
    )
    def test_template_without_placeholders_unchanged(
        self, template: str, variables: dict[str, str]
    ) -> None:
        """PROPERTY: templates without {{ are returned unchanged."""
        event(f"template_empty={not template}")
        assert substitute(template, variables) == template

    @given(name=st.from_regex(r"[a-z][a-z0-9_]{0,10}", fullmatch=True), value=st.text())
    def test_placeholder_replaced_with_value(self, name: str, value: str) -> None:
        """PROPERTY: a lone placeholder is replaced by exactly its value."""
        assert substitute("{{" + name + "}}", {name: value}) == value


class TestFindPlaceholders:
    """Test find_placeholders and has_placeholders."""

    def test_order_of_first_appearance(self) -> None:
        """Names are listed once, in order of first appearance."""
        assert find_placeholders("{{b}} {{a}} {{b}}") == ("b", "a")

    def test_no_placeholders(self) -> None:
        """Plain text has no placeholders."""
        assert find_placeholders("plain") == ()
        assert not has_placeholders("plain")

    def test_has_placeholders(self) -> None:
        """Detects a spaced placeholder."""
        assert has_placeholders("x {{ y }}")
