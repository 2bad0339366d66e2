"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Formats Diagnostic objects into human-readable or machine-readable
    output. Control characters in messages are escaped so translation keys
    or locale codes taken from untrusted input cannot forge log lines.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate long messages
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum message length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = DiagnosticTemplate.key_not_found("user.name")
        >>> print(formatter.format(diagnostic))
        warning[KEY_NOT_FOUND]: Translation key "user.name" not found in dictionary
          --> user.name
          = help: Check the key path against the dictionary structure

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        KEY_NOT_FOUND: Translation key "user.name" not found in dictionary
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            warning[LOCALE_BASE_FALLBACK]: Locale "en-GB" not found, falling back ...
              = requested: en-GB
              = resolved: en
              = help: Add "en-GB" translations or request "en" directly
        """
        severity = diagnostic.severity

        if self.color:
            if severity == "error":
                severity_str = f"\033[1;31m{severity}\033[0m"  # Bold red
            else:
                severity_str = f"\033[1;33m{severity}\033[0m"  # Bold yellow
        else:
            severity_str = severity

        message = self._clean(diagnostic.message)
        parts = [f"{severity_str}[{diagnostic.code.name}]: {message}"]

        if diagnostic.path:
            parts.append(f"  --> {self._clean(diagnostic.path)}")

        if diagnostic.requested_locale:
            parts.append(f"  = requested: {self._clean(diagnostic.requested_locale)}")

        if diagnostic.resolved_locale and diagnostic.resolved_locale != diagnostic.requested_locale:
            parts.append(f"  = resolved: {self._clean(diagnostic.resolved_locale)}")

        if diagnostic.missing_locales:
            missing = ", ".join(diagnostic.missing_locales)
            parts.append(f"  = missing: {self._clean(missing)}")

        if diagnostic.hint:
            parts.append(f"  = help: {self._clean(diagnostic.hint)}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            KEY_NOT_FOUND: Translation key "user.name" not found in dictionary
        """
        return f"{diagnostic.code.name}: {self._clean(diagnostic.message)}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "KEY_NOT_FOUND", "code_value": 2001, "message": "...", ...}
        """
        import json  # noqa: PLC0415

        data: dict[str, str | int | list[str]] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.path:
            data["path"] = diagnostic.path

        if diagnostic.requested_locale:
            data["requested_locale"] = diagnostic.requested_locale

        if diagnostic.resolved_locale:
            data["resolved_locale"] = diagnostic.resolved_locale

        if diagnostic.missing_locales:
            data["missing_locales"] = list(diagnostic.missing_locales)

        if diagnostic.hint:
            data["hint"] = self._maybe_sanitize(diagnostic.hint)

        return json.dumps(data, ensure_ascii=False)

    def _clean(self, text: str) -> str:
        """Escape control characters, then apply optional truncation."""
        escaped = "".join(
            ch if ch.isprintable() else ch.encode("unicode_escape").decode("ascii")
            for ch in text
        )
        return self._maybe_sanitize(escaped)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled.

        Args:
            text: Text to possibly truncate

        Returns:
            Original or truncated text
        """
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
