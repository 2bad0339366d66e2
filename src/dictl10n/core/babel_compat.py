"""Optional Babel support for the CLDR-backed locale tooling.

Translation, resolution and merging never touch Babel. Only the CLDR helpers
in dictl10n.locale_utils need it, and they call require_babel() before their
first Babel import so a missing extra surfaces as one clear error naming the
helper and the install command (pip install dictl10n[babel]).

Python 3.13+.
"""

from __future__ import annotations

from functools import cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel.core import UnknownLocaleError

__all__ = [
    "BabelImportError",
    "get_unknown_locale_error",
    "require_babel",
]


@cache
def _babel_installed() -> bool:
    try:
        import babel  # noqa: F401, PLC0415
    except ImportError:
        return False
    return True


class BabelImportError(ImportError):
    """A CLDR locale helper was called without Babel installed.

    Attributes:
        feature: Name of the helper that needed Babel
    """

    def __init__(self, feature: str) -> None:
        super().__init__(
            f"{feature} requires Babel for CLDR locale data. "
            "Install with: pip install dictl10n[babel]"
        )
        self.feature = feature


def require_babel(feature: str) -> None:
    """Raise BabelImportError naming ``feature`` unless Babel is installed."""
    if not _babel_installed():
        raise BabelImportError(feature)


def get_unknown_locale_error(feature: str) -> type[UnknownLocaleError]:
    """Get Babel's UnknownLocaleError so callers can catch it.

    Args:
        feature: Name of the calling helper, used in the error when Babel
            is missing

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel(feature)
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    return UnknownLocaleError
