"""Tests for the optional Babel guards used by the CLDR locale helpers.

Python 3.13+.
"""

from unittest.mock import patch

import pytest
from babel.core import UnknownLocaleError

from dictl10n.core.babel_compat import BabelImportError, get_unknown_locale_error, require_babel
from dictl10n.locale_utils import get_locale_display_name, is_known_locale

BABEL_CHECK = "dictl10n.core.babel_compat._babel_installed"


class TestBabelInstalled:
    """Test behavior with Babel installed."""

    def test_require_babel_passes(self) -> None:
        """require_babel returns quietly."""
        require_babel("is_known_locale")

    def test_get_unknown_locale_error(self) -> None:
        """Returns babel.core.UnknownLocaleError."""
        assert get_unknown_locale_error("is_known_locale") is UnknownLocaleError


class TestBabelMissing:
    """Test behavior when Babel cannot be imported."""

    def test_require_babel_names_feature(self) -> None:
        """The error names the helper and the install command."""
        with (
            patch(BABEL_CHECK, return_value=False),
            pytest.raises(BabelImportError, match=r"is_known_locale requires Babel") as exc_info,
        ):
            require_babel("is_known_locale")

        assert exc_info.value.feature == "is_known_locale"
        assert "pip install dictl10n[babel]" in str(exc_info.value)

    def test_is_import_error(self) -> None:
        """BabelImportError is an ImportError."""
        assert issubclass(BabelImportError, ImportError)

    @pytest.mark.parametrize(
        ("helper", "name"),
        [
            (is_known_locale, "is_known_locale"),
            (get_locale_display_name, "get_locale_display_name"),
        ],
    )
    def test_locale_helpers_report_their_name(self, helper: object, name: str) -> None:
        """Each CLDR helper fails with an error naming itself."""
        with patch(BABEL_CHECK, return_value=False), pytest.raises(BabelImportError) as exc_info:
            helper("en")  # type: ignore[operator]

        assert exc_info.value.feature == name
