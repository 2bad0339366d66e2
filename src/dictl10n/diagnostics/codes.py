"""Diagnostic codes and data structures.

Defines diagnostic codes and the immutable diagnostic record delivered to
observers. Diagnostics describe configuration and coverage problems; they
are reported, never raised.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "Severity",
]

type Severity = Literal["error", "warning"]


class DiagnosticCode(Enum):
    """Diagnostic codes with unique identifiers.

    Organized by category:
        1000-1999: Locale resolution (engine-wide current locale)
        2000-2999: Translation lookup (per key)
        3000-3999: Dictionary coverage (audit)
    """

    # Locale resolution (1000-1999)
    LOCALE_BASE_FALLBACK = 1001
    LOCALE_VARIANT_FALLBACK = 1002
    LOCALE_ANY_FALLBACK = 1003
    NO_LOCALES_AVAILABLE = 1004

    # Translation lookup (2000-2999)
    KEY_NOT_FOUND = 2001
    TRANSLATION_LOCALE_FALLBACK = 2002
    TRANSLATION_UNAVAILABLE = 2003

    # Dictionary coverage (3000-3999)
    INCOMPLETE_TRANSLATION = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique diagnostic code
        message: Human-readable description
        severity: "error" for unusable configuration, "warning" for degraded results
        path: Dotted key path involved (None for engine-wide diagnostics)
        requested_locale: Locale that was asked for
        resolved_locale: Locale that was actually selected
        missing_locales: Locales a key lacks (coverage diagnostics)
        hint: Suggestion for fixing the problem
    """

    code: DiagnosticCode
    message: str
    severity: Severity = "warning"
    path: str | None = None
    requested_locale: str | None = None
    resolved_locale: str | None = None
    missing_locales: tuple[str, ...] = ()
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable description."""
        return self.message

    @property
    def is_error(self) -> bool:
        """True for error-severity diagnostics."""
        return self.severity == "error"

    def format_error(self) -> str:
        """Format diagnostic like a compiler message.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            warning[LOCALE_BASE_FALLBACK]: Locale "en-GB" not found, falling back ...
              = requested: en-GB
              = resolved: en
              = help: Add "en-GB" translations or request "en" directly
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
