"""Diagnostic system for localization problems.

Provides structured diagnostics with codes, severities, affected key paths
and locales, and hints. Diagnostics are delivered to observers and logged;
they are never raised.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, Severity
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import DiagnosticTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DiagnosticTemplate",
    "OutputFormat",
    "Severity",
]
